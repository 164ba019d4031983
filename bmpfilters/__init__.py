"""Read, edit and write 8-bit palette and 24-bit colour BMP images."""

__version__ = "0.1.0"