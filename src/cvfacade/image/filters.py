"""
Image filtering operations.

Handles neighborhood filters using OpenCV:
- Structuring elements
- Dilation and erosion
- Gaussian blur

Every operation returns a newly allocated image; the source is never modified.
"""

import logging
from typing import Optional, Tuple

import cv2
import numpy as np

from cvfacade.common.base import ColorLike, PointLike, ScalarLike, SizeLike
from cvfacade.common.constants import FilterConstants
from cvfacade.common.enums import BorderType, MorphShape
from cvfacade.image.colors import resolve_color
from cvfacade.utils.enum_converter import OptionLike, to_cv_flag

logger = logging.getLogger(__name__)


def get_structuring_element(
    shape: OptionLike = MorphShape.RECT,
    ksize: SizeLike = FilterConstants.DEFAULT_STRUCTURING_ELEMENT_SIZE,
    anchor: Optional[PointLike] = None,
) -> np.ndarray:
    """
    Build a structuring element for morphological operations.

    Args:
        shape: Element shape (rect, cross, ellipse)
        ksize: Element size as (width, height)
        anchor: Anchor position; None places it at the center (only
            affects the cross shape)

    Returns:
        uint8 element of shape (height, width)
    """
    if anchor is None:
        anchor = FilterConstants.DEFAULT_ANCHOR
    return cv2.getStructuringElement(to_cv_flag(shape, MorphShape), tuple(ksize), anchor=anchor)


def _resolve_morphology_defaults(
    anchor: Optional[PointLike], border_value: Optional[ColorLike]
) -> Tuple[PointLike, ScalarLike]:
    """Fill in anchor and border value defaults shared by dilate and erode."""
    if anchor is None:
        anchor = FilterConstants.DEFAULT_ANCHOR
    if border_value is None:
        border_value = FilterConstants.MORPHOLOGY_DEFAULT_BORDER_VALUE
    else:
        border_value = resolve_color(border_value)
    return anchor, border_value


def dilate(
    src: np.ndarray,
    element: Optional[np.ndarray] = None,
    anchor: Optional[PointLike] = None,
    iterations: int = FilterConstants.DEFAULT_ITERATIONS,
    border_type: OptionLike = BorderType.CONSTANT,
    border_value: Optional[ColorLike] = None,
) -> np.ndarray:
    """
    Dilate image with a structuring element (local maximum).

    Dilation is applied ``iterations`` times. Each channel of a color image
    is processed independently.

    Args:
        src: Input image; any channel count, depth 8U, 16U, 16S, 32F or 64F
        element: Structuring element; None uses a 3x3 rectangle
        anchor: Anchor within the element; None means the element center
        iterations: Number of times dilation is applied
        border_type: Pixel extrapolation method
        border_value: Border value for a constant border; None uses the
            morphology default (border pixels never win the maximum)

    Returns:
        New image of the same size and type as src
    """
    anchor, border_value = _resolve_morphology_defaults(anchor, border_value)
    flag = to_cv_flag(border_type, BorderType)
    try:
        return cv2.dilate(
            src,
            element,
            anchor=anchor,
            iterations=iterations,
            borderType=flag,
            borderValue=border_value,
        )
    except cv2.error as e:
        logger.error(f"Morphology (dilate) failed for image of shape {src.shape}: {e}")
        raise


def erode(
    src: np.ndarray,
    element: Optional[np.ndarray] = None,
    anchor: Optional[PointLike] = None,
    iterations: int = FilterConstants.DEFAULT_ITERATIONS,
    border_type: OptionLike = BorderType.CONSTANT,
    border_value: Optional[ColorLike] = None,
) -> np.ndarray:
    """
    Erode image with a structuring element (local minimum).

    Same parameters and default rules as dilate.

    Returns:
        New image of the same size and type as src
    """
    anchor, border_value = _resolve_morphology_defaults(anchor, border_value)
    flag = to_cv_flag(border_type, BorderType)
    try:
        return cv2.erode(
            src,
            element,
            anchor=anchor,
            iterations=iterations,
            borderType=flag,
            borderValue=border_value,
        )
    except cv2.error as e:
        logger.error(f"Morphology (erode) failed for image of shape {src.shape}: {e}")
        raise


def gaussian_blur(
    src: np.ndarray,
    ksize: SizeLike,
    sigma_x: float,
    sigma_y: float = FilterConstants.AUTO_SIGMA,
    border_type: OptionLike = BorderType.REFLECT_101,
) -> np.ndarray:
    """
    Blur image with a Gaussian filter.

    Args:
        src: Input image; channels are processed independently
        ksize: Kernel size (width, height); each positive and odd, or zero
            to derive it from the sigmas
        sigma_x: Kernel standard deviation in X
        sigma_y: Kernel standard deviation in Y; 0 means equal to sigma_x,
            and both 0 derives them from ksize
        border_type: Pixel extrapolation method

    Returns:
        New image of the same size and type as src
    """
    flag = to_cv_flag(border_type, BorderType)
    try:
        return cv2.GaussianBlur(src, tuple(ksize), sigma_x, sigmaY=sigma_y, borderType=flag)
    except cv2.error as e:
        logger.error(f"Gaussian blur with kernel {ksize} failed: {e}")
        raise
