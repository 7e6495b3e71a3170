"""
cvfacade - a friendlier call surface over OpenCV image operations.

Stateless functions wrap single OpenCV primitives with resolved defaults,
readable option names and DisplayColor overloads for color arguments.
"""

from cvfacade.common import (
    BorderType,
    Colors,
    ContourApproximation,
    DisplayColor,
    FontFace,
    LineType,
    MorphShape,
    RetrievalMode,
)
from cvfacade.config import Settings, configure_logging, get_settings, reload_settings
from cvfacade.exceptions import FacadeError, UnsupportedOptionError
from cvfacade.image import (
    arc_length,
    bounding_rect,
    centroid,
    contour_area,
    contour_properties,
    cvt_color,
    dilate,
    draw_circle,
    draw_contours,
    draw_line,
    draw_rectangle,
    draw_text,
    ensure_bgr,
    ensure_grayscale,
    erode,
    find_contours,
    gaussian_blur,
    get_structuring_element,
    get_text_size,
    in_range,
    min_enclosing_circle,
    moments,
    resolve_color,
    to_input_array,
    to_pixel_scalar,
)

__version__ = "1.0.0"

__all__ = [
    # Types
    "DisplayColor",
    "Colors",
    # Enums
    "BorderType",
    "ContourApproximation",
    "FontFace",
    "LineType",
    "MorphShape",
    "RetrievalMode",
    # Errors
    "FacadeError",
    "UnsupportedOptionError",
    # Configuration
    "Settings",
    "configure_logging",
    "get_settings",
    "reload_settings",
    # Color adapter
    "to_input_array",
    "to_pixel_scalar",
    "resolve_color",
    # Operations
    "cvt_color",
    "ensure_bgr",
    "ensure_grayscale",
    "get_structuring_element",
    "dilate",
    "erode",
    "gaussian_blur",
    "in_range",
    "find_contours",
    "contour_area",
    "arc_length",
    "bounding_rect",
    "min_enclosing_circle",
    "moments",
    "centroid",
    "contour_properties",
    "draw_circle",
    "draw_line",
    "draw_rectangle",
    "draw_contours",
    "draw_text",
    "get_text_size",
]
