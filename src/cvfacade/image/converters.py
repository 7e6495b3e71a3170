"""
Color-space conversion utilities.

Handles conversions between color spaces using OpenCV:
- Generic conversion by COLOR_* code
- Grayscale/BGR normalization
"""

import logging
from typing import Union

import cv2
import numpy as np

from cvfacade.common.constants import ConversionConstants
from cvfacade.utils.enum_converter import color_conversion_code

logger = logging.getLogger(__name__)


def cvt_color(
    src: np.ndarray,
    code: Union[int, str],
    dst_cn: int = ConversionConstants.AUTO_CHANNELS,
) -> np.ndarray:
    """
    Convert image from one color space to another.

    The source color space must be stated correctly by ``code``, including
    channel order (BGR means B0 G0 R0 B1 G1 R1 ... layout).

    Args:
        src: 8-bit, 16-bit or 32-bit float image
        code: OpenCV COLOR_* code, or its name (e.g. "BGR2GRAY")
        dst_cn: Output channel count; 0 derives it from src and code

    Returns:
        New image with the same depth as src; channel count may differ
    """
    flag = color_conversion_code(code)
    try:
        return cv2.cvtColor(src, flag, dstCn=dst_cn)
    except cv2.error as e:
        logger.error(f"Color conversion {code!r} failed: {e}")
        raise


def ensure_bgr(image: np.ndarray) -> np.ndarray:
    """
    Ensure image is in BGR format (convert from grayscale if needed).

    Args:
        image: Input image (grayscale or BGR)

    Returns:
        Image in BGR format
    """
    if image.ndim == 2:
        return cvt_color(image, cv2.COLOR_GRAY2BGR)
    return image.copy()


def ensure_grayscale(image: np.ndarray) -> np.ndarray:
    """
    Ensure image is grayscale (convert from BGR if needed).

    Args:
        image: Input image (grayscale or BGR)

    Returns:
        Grayscale image
    """
    if image.ndim == 3:
        return cvt_color(image, cv2.COLOR_BGR2GRAY)
    return image.copy()
