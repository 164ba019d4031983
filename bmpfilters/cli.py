"""Interactive menu for applying filters to 8-bit and 24-bit BMP images."""

from __future__ import annotations

import argparse
import builtins
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple

from bmpfilters.color24 import Bitmap24
from bmpfilters.gray8 import Bitmap8, BmpFormatError

GRAY_OUTPUT = "image8bitsmodifie.bmp"
COLOR_OUTPUT = "resulta_24bits.bmp"

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], object]
Matrix = Tuple[Tuple[float, float, float], ...]


class Kernel(Enum):
    """The 3x3 convolution kernels offered by the menu, in menu order."""

    BOX_BLUR = (
        "Box Blur",
        ((1 / 9, 1 / 9, 1 / 9), (1 / 9, 1 / 9, 1 / 9), (1 / 9, 1 / 9, 1 / 9)),
    )
    GAUSSIAN_BLUR = (
        "Gaussian Blur",
        ((1 / 16, 2 / 16, 1 / 16), (2 / 16, 4 / 16, 2 / 16), (1 / 16, 2 / 16, 1 / 16)),
    )
    OUTLINE = ("Outline", ((-1, -1, -1), (-1, 8, -1), (-1, -1, -1)))
    EMBOSS = ("Emboss", ((-2, -1, 0), (-1, 1, 1), (0, 1, 2)))
    SHARPEN = ("Sharpen", ((0, -1, 0), (-1, 5, -1), (0, -1, 0)))

    def __init__(self, label: str, matrix: Matrix) -> None:
        self.label = label
        self.matrix = matrix


def _read_int(input_func: InputFunc, prompt: str) -> Optional[int]:
    tokens = input_func(prompt).split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def _choose_kernel(input_func: InputFunc, output_func: OutputFunc) -> Optional[Kernel]:
    output_func("\nChoisissez un filtre :")
    kernels = list(Kernel)
    for number, kernel in enumerate(kernels, start=1):
        output_func(f"{number}. {kernel.label}")
    choice = _read_int(input_func, "Votre choix : ")
    if choice is None or not 1 <= choice <= len(kernels):
        return None
    return kernels[choice - 1]


def _process_gray(input_func: InputFunc, output_func: OutputFunc) -> int:
    path = input_func("Chemin de l'image 8 bits : ").strip()
    try:
        image = Bitmap8.load(path)
    except OSError:
        output_func(f"Erreur : impossible d'ouvrir {path}")
        return 1
    except BmpFormatError as error:
        output_func(f"Erreur : {error}")
        return 1
    output_func(f"Image {path} chargée avec succès.")
    output_func(image.info())

    output_func("\nQue voulez-vous faire ?")
    output_func("1. Appliquer un négatif")
    output_func("2. Modifier la luminosité")
    output_func("3. Appliquer un seuillage (threshold)")
    output_func("4. Appliquer un filtre (Box Blur, etc.)")
    action = _read_int(input_func, "Votre choix : ")

    if action == 1:
        image.negative()
    elif action == 2:
        value = _read_int(input_func, "Entrez la valeur de luminosité (-255 à 255) : ")
        image.brightness(value or 0)
    elif action == 3:
        level = _read_int(input_func, "Entrez la valeur du seuil (0 à 255) : ")
        image.threshold(level or 0)
    elif action == 4:
        kernel = _choose_kernel(input_func, output_func)
        if kernel is None:
            output_func("Choix invalide.")
        else:
            image.apply_filter(kernel.matrix)
    else:
        output_func("Choix invalide.")

    image.save(GRAY_OUTPUT)
    output_func(f"Image sauvegardée sous {GRAY_OUTPUT}")
    return 0


def _process_color(input_func: InputFunc, output_func: OutputFunc) -> int:
    path = input_func("Chemin de l'image 24 bits : ").strip()
    try:
        image = Bitmap24.load(path)
    except OSError:
        output_func(f"Erreur : impossible d'ouvrir {path}")
        return 1
    except BmpFormatError as error:
        output_func(f"Erreur : {error}")
        return 1

    output_func("\nQue voulez-vous faire ?")
    output_func("1. Appliquer un négatif")
    output_func("2. Passer en niveaux de gris")
    output_func("3. Modifier la luminosité")
    action = _read_int(input_func, "Votre choix : ")

    if action == 1:
        image.negative()
    elif action == 2:
        image.grayscale()
    elif action == 3:
        value = _read_int(input_func, "Entrez la valeur de luminosité (-255 à 255) : ")
        image.brightness(value or 0)
    else:
        output_func("Choix invalide.")

    image.save(COLOR_OUTPUT)
    return 0


def run(input_func: InputFunc, output_func: OutputFunc) -> int:
    """Run the menu once, reading answers with input_func; return the exit status."""
    output_func("Menu Principal:")
    output_func("1. Ouvrir une image 8 bits (niveaux de gris)")
    output_func("2. Ouvrir une image 24 bits (couleur)")
    output_func("3. Quitter")
    choice = _read_int(input_func, "> Votre choix : ")

    if choice == 1:
        return _process_gray(input_func, output_func)
    if choice == 2:
        return _process_color(input_func, output_func)
    output_func("Au revoir !")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive menu on the terminal."""
    parser = argparse.ArgumentParser(
        prog="bmpfilters",
        description="Apply filters to 8-bit and 24-bit BMP images interactively.",
    )
    parser.parse_args(argv)
    try:
        return run(builtins.input, print)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1


if __name__ == "__main__":
    raise SystemExit(main())