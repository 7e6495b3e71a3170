"""
Drawing primitives.

All functions paint onto the caller's image in place and return None.
Colors are raw pixel scalars in the image's channel order or DisplayColor
values, which are converted to BGR(A) scalars first. Shapes are clipped to
the image bounds by OpenCV.
"""

import logging
from typing import Sequence, Tuple

import cv2
import numpy as np

from cvfacade.common.base import ColorLike, PointLike, SizeLike
from cvfacade.common.constants import DrawingConstants
from cvfacade.common.enums import FontFace, LineType
from cvfacade.image.colors import resolve_color
from cvfacade.utils.enum_converter import OptionLike, to_cv_flag

logger = logging.getLogger(__name__)

# Default rendering parameters
DEFAULT_THICKNESS = DrawingConstants.DEFAULT_THICKNESS
DEFAULT_LINE_TYPE = LineType.LINE_8
DEFAULT_SHIFT = DrawingConstants.DEFAULT_SHIFT


def draw_circle(
    image: np.ndarray,
    center: PointLike,
    radius: int,
    color: ColorLike,
    thickness: int = DEFAULT_THICKNESS,
    line_type: OptionLike = DEFAULT_LINE_TYPE,
    shift: int = DEFAULT_SHIFT,
) -> None:
    """
    Draw a circle on the image.

    Args:
        image: Target image, modified in place
        center: Circle center
        radius: Circle radius
        color: Pixel scalar or DisplayColor
        thickness: Outline thickness; negative (FILLED) fills the circle
        line_type: Line connectivity (4, 8 or antialiased)
        shift: Number of fractional bits in center and radius
    """
    cv2.circle(
        image,
        center,
        radius,
        resolve_color(color),
        thickness,
        to_cv_flag(line_type, LineType),
        shift,
    )


def draw_line(
    image: np.ndarray,
    pt1: PointLike,
    pt2: PointLike,
    color: ColorLike,
    thickness: int = DEFAULT_THICKNESS,
    line_type: OptionLike = DEFAULT_LINE_TYPE,
    shift: int = DEFAULT_SHIFT,
) -> None:
    """
    Draw a line segment between two points.

    Non-antialiased lines use Bresenham rasterization; antialiased lines
    are Gaussian-filtered.

    Args:
        image: Target image, modified in place
        pt1: First endpoint
        pt2: Second endpoint
        color: Pixel scalar or DisplayColor
        thickness: Line thickness
        line_type: Line connectivity (4, 8 or antialiased)
        shift: Number of fractional bits in point coordinates
    """
    cv2.line(
        image,
        pt1,
        pt2,
        resolve_color(color),
        thickness,
        to_cv_flag(line_type, LineType),
        shift,
    )


def draw_rectangle(
    image: np.ndarray,
    pt1: PointLike,
    pt2: PointLike,
    color: ColorLike,
    thickness: int = DEFAULT_THICKNESS,
    line_type: OptionLike = DEFAULT_LINE_TYPE,
    shift: int = DEFAULT_SHIFT,
) -> None:
    """Draw an upright rectangle given two opposite corners."""
    cv2.rectangle(
        image,
        pt1,
        pt2,
        resolve_color(color),
        thickness,
        to_cv_flag(line_type, LineType),
        shift,
    )


def draw_contours(
    image: np.ndarray,
    contours: Sequence[np.ndarray],
    color: ColorLike,
    contour_index: int = DrawingConstants.ALL_CONTOURS,
    thickness: int = DEFAULT_THICKNESS,
    line_type: OptionLike = DEFAULT_LINE_TYPE,
) -> None:
    """
    Draw contour outlines or filled contours.

    Args:
        image: Target image, modified in place
        contours: Contours as returned by find_contours
        color: Pixel scalar or DisplayColor
        contour_index: Index of the contour to draw; -1 draws all
        thickness: Outline thickness; negative fills the contour interiors
        line_type: Line connectivity (4, 8 or antialiased)
    """
    contours = list(contours)
    try:
        cv2.drawContours(
            image,
            contours,
            contour_index,
            resolve_color(color),
            thickness,
            to_cv_flag(line_type, LineType),
        )
    except cv2.error as e:
        logger.error(f"Drawing contour {contour_index} of {len(contours)} failed: {e}")
        raise


def draw_text(
    image: np.ndarray,
    text: str,
    origin: PointLike,
    font_face: OptionLike,
    font_scale: float,
    color: ColorLike,
    thickness: int = DEFAULT_THICKNESS,
    line_type: OptionLike = DEFAULT_LINE_TYPE,
    bottom_left_origin: bool = False,
) -> None:
    """
    Render a text string.

    Characters the Hershey fonts cannot render are drawn as '?'.

    Args:
        image: Target image, modified in place
        text: String to draw
        origin: Bottom-left corner of the text
        font_face: Hershey font face
        font_scale: Factor multiplied by the font's base size
        color: Pixel scalar or DisplayColor
        thickness: Stroke thickness
        line_type: Line connectivity (4, 8 or antialiased)
        bottom_left_origin: If True, the image data origin is at the
            bottom-left corner instead of the top-left
    """
    cv2.putText(
        image,
        text,
        origin,
        to_cv_flag(font_face, FontFace),
        font_scale,
        resolve_color(color),
        thickness,
        to_cv_flag(line_type, LineType),
        bottom_left_origin,
    )


def get_text_size(
    text: str,
    font_face: OptionLike,
    font_scale: float,
    thickness: int = DEFAULT_THICKNESS,
) -> Tuple[SizeLike, int]:
    """
    Calculate the extent of a text string.

    Returns:
        ((width, height), baseline) in pixels
    """
    (width, height), baseline = cv2.getTextSize(
        text, to_cv_flag(font_face, FontFace), font_scale, thickness
    )
    return (width, height), baseline
