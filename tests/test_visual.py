import pytest

from minigfx.visual import Visual, good_color, rgb_shifts

RGB565 = Visual(red_mask=0xF800, green_mask=0x07E0, blue_mask=0x001F, depth=16)


def test_shifts_for_24_bit_visual():
    assert rgb_shifts(Visual()) == (16, 8, 8, 8, 0, 8)


def test_shifts_for_rgb565():
    assert rgb_shifts(RGB565) == (11, 5, 5, 6, 0, 5)


def test_shifts_rebuild_masks():
    shifts = rgb_shifts(RGB565)
    masks = (RGB565.red_mask, RGB565.green_mask, RGB565.blue_mask)
    for index, mask in enumerate(masks):
        shift, width = shifts[2 * index], shifts[2 * index + 1]
        assert ((1 << width) - 1) << shift == mask


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        rgb_shifts(Visual(red_mask=0))


def test_non_truecolor_rejected():
    with pytest.raises(ValueError):
        rgb_shifts(Visual(true_color=False))


@pytest.mark.parametrize("color", [0, 0xFF99FF, 0x00FFFF, 0x123456])
def test_deep_visual_keeps_color(color):
    assert good_color(color, 24, rgb_shifts(Visual())) == color
    assert good_color(color, 32, rgb_shifts(Visual())) == color


def test_white_fills_all_masks_on_16_bit():
    shifts = rgb_shifts(RGB565)
    expected = RGB565.red_mask | RGB565.green_mask | RGB565.blue_mask
    assert good_color(0xFFFFFF, 16, shifts) == expected


def test_black_is_zero_on_16_bit():
    assert good_color(0, 16, rgb_shifts(RGB565)) == 0


@pytest.mark.parametrize(
    "color, mask_name",
    [(0xFF0000, "red_mask"), (0x00FF00, "green_mask"), (0x0000FF, "blue_mask")],
)
def test_primary_fills_its_channel(color, mask_name):
    assert good_color(color, 16, rgb_shifts(RGB565)) == getattr(RGB565, mask_name)