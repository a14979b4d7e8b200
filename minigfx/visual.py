"""Visual description and conversion of 0xRRGGBB colours to pixel values."""

from __future__ import annotations

from dataclasses import dataclass

NO_TRUECOLOR = "No TrueColor Visual available."


@dataclass(frozen=True)
class Visual:
    """A display visual: its channel masks, depth and colour class."""

    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF
    depth: int = 24
    true_color: bool = True


def _mask_shift_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive bit field, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    width = (run ^ (run + 1)).bit_length() - 1
    return shift, width


def rgb_shifts(visual: Visual) -> tuple[int, int, int, int, int, int]:
    """Return (red shift, red bits, green shift, green bits, blue shift, blue bits).

    Raises ValueError for a visual that is not TrueColor or has an empty mask.
    """
    if not visual.true_color:
        raise ValueError(NO_TRUECOLOR)
    shifts: list[int] = []
    for mask in (visual.red_mask, visual.green_mask, visual.blue_mask):
        shifts.extend(_mask_shift_width(mask))
    return tuple(shifts)  # type: ignore[return-value]


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for the given depth."""
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )