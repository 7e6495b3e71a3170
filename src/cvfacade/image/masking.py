"""
Range masking.

Produces binary masks of pixels whose channels all fall within inclusive
lower/upper bounds.
"""

import logging
from typing import Union

import cv2
import numpy as np

from cvfacade.common.base import DisplayColor, ScalarLike
from cvfacade.image.colors import to_input_array

logger = logging.getLogger(__name__)

Bound = Union[np.ndarray, ScalarLike, DisplayColor]


def _resolve_bound(bound: Bound) -> Union[np.ndarray, ScalarLike]:
    if isinstance(bound, DisplayColor):
        return to_input_array(bound)
    return bound


def in_range(src: np.ndarray, lower: Bound, upper: Bound) -> np.ndarray:
    """
    Check every element of src against inclusive lower/upper bounds.

    A mask pixel is 255 when every channel satisfies
    ``lower[c] <= src[c] <= upper[c]`` and 0 otherwise.

    Bounds are either arrays of the same size and type as src, per-channel
    scalars, or display colors. Display colors are converted with
    to_input_array and compare in display order: red against channel 0,
    green against channel 1, blue against channel 2.

    Args:
        src: Source image
        lower: Lower bound
        upper: Upper bound

    Returns:
        New single-channel uint8 mask with the size of src
    """
    try:
        return cv2.inRange(src, _resolve_bound(lower), _resolve_bound(upper))
    except cv2.error as e:
        logger.error(f"Range check failed for source of shape {src.shape}: {e}")
        raise
