import pytest

from minigfx.image import ImageType, new_image

SAMPLE = bytes.fromhex("11223344")


def test_new_image_is_zeroed_ximage():
    image = new_image(42, 42)
    assert image.type == ImageType.XIMAGE
    assert len(image.data) == (42 + 32) * 42 * 4
    assert not any(image.data)


@pytest.mark.parametrize("bpp", [8, 16, 24, 32])
def test_size_line_holds_row_and_is_padded(bpp):
    image = new_image(13, 5, bpp)
    assert image.size_line >= 13 * bpp // 8
    assert image.size_line % 4 == 0
    assert image.size_line * image.height <= len(image.data)


def test_data_address_reports_layout():
    image = new_image(242, 242, 32, 1)
    data, bpp, size_line, endian = image.data_address()
    assert data is image.data
    assert (bpp, size_line, endian) == (image.bits_per_pixel, image.size_line, 1)


@pytest.mark.parametrize("byte_order", [0, 1])
@pytest.mark.parametrize("color", [0, 0xFF99FF, 0x00FFFF, 0x11223344])
def test_pixel_round_trip(byte_order, color):
    image = new_image(10, 10, 32, byte_order)
    image.set_pixel(3, 7, color)
    assert image.get_pixel(3, 7) == color
    assert image.get_pixel(2, 7) == 0


def test_big_endian_layout():
    image = new_image(4, 4, 32, 1)
    image.set_pixel(1, 2, int.from_bytes(SAMPLE, "big"))
    offset = 2 * image.size_line + 4
    assert bytes(image.data[offset:offset + 4]) == SAMPLE


def test_little_endian_layout():
    image = new_image(4, 4, 32, 0)
    image.set_pixel(0, 0, int.from_bytes(SAMPLE, "big"))
    assert bytes(image.data[:4]) == SAMPLE[::-1]


def test_narrow_pixels_keep_low_bytes():
    image = new_image(4, 4, 16, 0)
    image.set_pixel(1, 1, 0xABCDEF)
    assert image.get_pixel(1, 1) == 0xABCDEF & 0xFFFF


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_bounds_pixel(x, y):
    image = new_image(4, 4)
    with pytest.raises(IndexError):
        image.set_pixel(x, y, 1)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize(
    "args", [(0, 5), (5, 0), (-1, 5), (5, 5, 12), (5, 5, 32, 2)]
)
def test_invalid_image_rejected(args):
    with pytest.raises(ValueError):
        new_image(*args)