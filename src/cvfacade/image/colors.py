"""
Color adapter between display colors and OpenCV value shapes.

OpenCV primitives take colors in two shapes:
- an input array (e.g. per-channel bounds for range masking)
- a pixel scalar in native BGR(A) channel order (paint/fill values)

Both conversions are pure and total: every DisplayColor maps to a value.
"""

from typing import Tuple

import numpy as np

from cvfacade.common.base import ColorLike, DisplayColor, ScalarLike


def to_input_array(color: DisplayColor) -> np.ndarray:
    """
    Convert a display color to a 1x3 integer input array.

    Channels keep display order: ``[[r, g, b]]``. Alpha is not included.

    Args:
        color: Display color

    Returns:
        int32 array of shape (1, 3)
    """
    return np.array([[color.r, color.g, color.b]], dtype=np.int32)


def to_pixel_scalar(color: DisplayColor) -> Tuple[int, ...]:
    """
    Convert a display color to an OpenCV pixel scalar.

    Channels are reordered to OpenCV's native order: ``(b, g, r)``, or
    ``(b, g, r, a)`` when the color carries alpha.

    Args:
        color: Display color

    Returns:
        Tuple of 3 or 4 channel values
    """
    if color.has_alpha:
        return (color.b, color.g, color.r, color.a)
    return (color.b, color.g, color.r)


def resolve_color(color: ColorLike) -> ScalarLike:
    """
    Resolve a color argument to the pixel scalar OpenCV expects.

    Display colors are converted with to_pixel_scalar; raw scalars are
    returned unchanged.
    """
    if isinstance(color, DisplayColor):
        return to_pixel_scalar(color)
    return color
