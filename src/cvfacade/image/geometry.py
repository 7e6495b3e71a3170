"""
Contour extraction and shape measurement.

Handles geometric operations:
- Contour extraction from binary images
- Area, perimeter and bounding box
- Minimal enclosing circle
- Moments and centroids
"""

import logging
from typing import Dict, List, Optional, Tuple

import cv2
import numpy as np

from cvfacade.common.enums import ContourApproximation, RetrievalMode
from cvfacade.utils.enum_converter import OptionLike, to_cv_flag

logger = logging.getLogger(__name__)

Circle = Tuple[Tuple[float, float], float]


def find_contours(
    image: np.ndarray,
    mode: OptionLike = RetrievalMode.LIST,
    method: OptionLike = ContourApproximation.SIMPLE,
) -> List[np.ndarray]:
    """
    Extract contours from a binary image.

    Non-zero pixels are treated as 1. The hierarchy is discarded. Extraction
    runs on a copy, so the caller's image is left untouched.

    Args:
        image: 8-bit single-channel image (32-bit signed for ccomp/floodfill)
        mode: Contour retrieval mode
        method: Contour approximation method

    Returns:
        List of contours, each an array of shape (N, 1, 2)
    """
    try:
        result = cv2.findContours(
            image.copy(),
            to_cv_flag(mode, RetrievalMode),
            to_cv_flag(method, ContourApproximation),
        )
    except cv2.error as e:
        logger.error(f"Contour extraction failed for image of shape {image.shape}: {e}")
        raise

    # OpenCV 3 returns (image, contours, hierarchy), OpenCV 4 (contours, hierarchy)
    contours = result[-2]
    logger.debug(f"Found {len(contours)} contours")
    return list(contours)


def contour_area(contour: np.ndarray, oriented: bool = False) -> float:
    """
    Calculate contour area.

    Args:
        contour: Point sequence (int32 or float32)
        oriented: If True, return a signed area whose sign depends on the
            traversal direction

    Returns:
        Area (absolute unless oriented)
    """
    return float(cv2.contourArea(contour, oriented))


def arc_length(curve: np.ndarray, closed: bool = True) -> float:
    """Calculate contour perimeter or curve length."""
    return float(cv2.arcLength(curve, closed))


def bounding_rect(points: np.ndarray) -> Tuple[int, int, int, int]:
    """Calculate upright bounding rectangle as (x, y, width, height)."""
    x, y, w, h = cv2.boundingRect(points)
    return x, y, w, h


def min_enclosing_circle(points: np.ndarray) -> Circle:
    """
    Find the minimal-area circle enclosing a point set.

    Args:
        points: Point sequence (int32 or float32)

    Returns:
        ((center_x, center_y), radius)
    """
    center, radius = cv2.minEnclosingCircle(points)
    return (float(center[0]), float(center[1])), float(radius)


def moments(array: np.ndarray, binary_image: bool = False) -> Dict[str, float]:
    """
    Calculate moments up to the third order of a polygon or raster shape.

    Args:
        array: Single-channel raster image or point sequence
        binary_image: If True, all non-zero image pixels are treated as 1
            (raster input only)

    Returns:
        Dictionary of spatial (m..), central (mu..) and normalized
        central (nu..) moments
    """
    return cv2.moments(array, binaryImage=binary_image)


def centroid(moment_set: Dict[str, float]) -> Optional[Tuple[float, float]]:
    """
    Calculate centroid from a moment set.

    Returns:
        (x, y) centroid, or None if the shape has zero area
    """
    m00 = moment_set["m00"]
    if m00 == 0:
        return None
    return moment_set["m10"] / m00, moment_set["m01"] / m00


def contour_properties(contour: np.ndarray) -> dict:
    """
    Calculate standard geometric properties for a contour.

    Args:
        contour: OpenCV contour (NumPy array)

    Returns:
        Dictionary with contour properties:
            - area: Contour area
            - perimeter: Contour perimeter
            - center: Centroid as (x, y) tuple, None for zero-area contours
            - bounding_box: Bounding rectangle as (x, y, w, h) tuple
            - enclosing_circle: ((center_x, center_y), radius)
    """
    return {
        "area": contour_area(contour),
        "perimeter": arc_length(contour, True),
        "center": centroid(moments(contour)),
        "bounding_box": bounding_rect(contour),
        "enclosing_circle": min_enclosing_circle(contour),
    }
