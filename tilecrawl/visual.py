"""Pixel values for a TrueColor visual: channel masks and colour conversion."""

from __future__ import annotations

ChannelShifts = tuple[int, int, int, int, int, int]


def _shift_and_width(mask: int) -> tuple[int, int]:
    """Return the position of the lowest set bit of ``mask`` and the run of ones there."""
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    width = (run ^ (run + 1)).bit_length() - 1
    return shift, width


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> ChannelShifts:
    """Describe a visual's channel masks as (shift, bits) pairs.

    The result is ``(red_shift, red_bits, green_shift, green_bits,
    blue_shift, blue_bits)``, the form that :func:`convert_color` takes.
    """
    red = _shift_and_width(red_mask)
    green = _shift_and_width(green_mask)
    blue = _shift_and_width(blue_mask)
    return (*red, *green, *blue)


def convert_color(color: int, depth: int, shifts: ChannelShifts) -> int:
    """Turn a 0xRRGGBB colour into a pixel value for a visual.

    Visuals of depth 24 or more take the colour as it is. Shallower
    visuals get each channel's top bits placed where ``shifts`` says.
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )