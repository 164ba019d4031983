import struct

import pytest

from bmpfilters.gray8 import BmpFormatError, Bitmap8

OUTLINE = [[-1, -1, -1], [-1, 8, -1], [-1, -1, -1]]
SHARPEN = [[0, -1, 0], [-1, 5, -1], [0, -1, 0]]
GAUSSIAN = [[1 / 16, 2 / 16, 1 / 16], [2 / 16, 4 / 16, 2 / 16], [1 / 16, 2 / 16, 1 / 16]]
IDENTITY = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]


def _image(width, height, values=None):
    if values is None:
        values = [(i * 37) % 256 for i in range(width * height)]
    return Bitmap8(width, height, bytearray(values))


def test_round_trip(tmp_path):
    image = _image(3, 2)
    path = tmp_path / "img.bmp"
    image.save(path)
    loaded = Bitmap8.load(path)
    assert loaded.width == 3
    assert loaded.height == 2
    assert loaded.data == image.data
    assert loaded.color_table == image.color_table
    assert loaded.color_depth == 8


def test_saved_header_matches_file(tmp_path):
    image = _image(5, 3)
    path = tmp_path / "img.bmp"
    image.save(path)
    raw = path.read_bytes()
    (file_size,) = struct.unpack_from("<I", raw, 2)
    assert file_size == len(raw)
    (data_size,) = struct.unpack_from("<I", raw, 34)
    assert data_size == len(raw) - 54 - 1024
    assert Bitmap8.load(path).data_size == data_size


def test_rows_are_padded_with_zeros(tmp_path):
    image = _image(3, 2, [9, 9, 9, 7, 7, 7])
    path = tmp_path / "img.bmp"
    image.save(path)
    pixels = path.read_bytes()[54 + 1024 :]
    assert pixels == bytes([9, 9, 9, 0, 7, 7, 7, 0])


def test_load_rejects_other_depth(tmp_path):
    image = _image(4, 1)
    path = tmp_path / "img.bmp"
    image.save(path)
    raw = bytearray(path.read_bytes())
    struct.pack_into("<H", raw, 28, 24)
    path.write_bytes(bytes(raw))
    with pytest.raises(BmpFormatError):
        Bitmap8.load(path)


def test_load_rejects_truncated_file(tmp_path):
    image = _image(4, 4)
    path = tmp_path / "img.bmp"
    image.save(path)
    path.write_bytes(path.read_bytes()[:-5])
    with pytest.raises(BmpFormatError):
        Bitmap8.load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Bitmap8.load(tmp_path / "absent.bmp")


def test_data_length_must_match():
    with pytest.raises(ValueError):
        Bitmap8(3, 3, bytearray(4))


def test_info_reports_dimensions():
    image = _image(3, 2)
    text = image.info()
    assert "3 x 2" in text
    assert "8 bits" in text


def test_negative_complements():
    original = [0, 255, 100, 17]
    image = _image(2, 2, original)
    image.negative()
    assert all(a + b == 255 for a, b in zip(original, image.data))
    image.negative()
    assert list(image.data) == original


def test_brightness_clamps():
    image = _image(2, 2, [0, 100, 200, 255])
    image.brightness(300)
    assert set(image.data) == {255}
    image.brightness(-300)
    assert set(image.data) == {0}


def test_brightness_shifts_midrange():
    image = _image(2, 1, [50, 60])
    image.brightness(5)
    assert list(image.data) == [55, 65]


def test_threshold():
    original = [10, 127, 128, 200]
    image = _image(2, 2, original)
    image.threshold(128)
    assert all((v == 255) == (o >= 128) for v, o in zip(image.data, original))
    assert set(image.data) <= {0, 255}


def test_identity_filter_keeps_image():
    image = _image(5, 4)
    before = bytes(image.data)
    image.apply_filter(IDENTITY)
    assert bytes(image.data) == before


@pytest.mark.parametrize("kernel", [SHARPEN, GAUSSIAN])
def test_uniform_image_is_stable(kernel):
    image = _image(4, 4, [64] * 16)
    image.apply_filter(kernel)
    assert set(image.data) == {64}


def test_outline_clears_interior_and_keeps_border():
    image = _image(4, 4, [77] * 16)
    image.apply_filter(OUTLINE)
    interior = [image.data[y * 4 + x] for y in (1, 2) for x in (1, 2)]
    assert interior == [0, 0, 0, 0]
    border = [image.data[y * 4 + x] for y in range(4) for x in range(4) if y in (0, 3) or x in (0, 3)]
    assert set(border) == {77}


def test_filter_rejects_wrong_kernel_size():
    image = _image(3, 3)
    with pytest.raises(ValueError):
        image.apply_filter([[1, 0], [0, 1]])