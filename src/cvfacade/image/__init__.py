"""
Image operations - functional architecture.

This package wraps OpenCV primitives as pure functions with resolved defaults:
- colors: Display color adapter (input arrays, pixel scalars)
- converters: Color-space conversions
- filters: Structuring elements, dilation, erosion, Gaussian blur
- masking: Range masks
- geometry: Contours, areas, enclosing circles, moments
- drawing: In-place circle, line, rectangle, contour and text drawing

All utilities are re-exported from this module for convenient access.
"""

# Color adapter
from cvfacade.image.colors import resolve_color, to_input_array, to_pixel_scalar

# Converter functions
from cvfacade.image.converters import cvt_color, ensure_bgr, ensure_grayscale

# Drawing functions
from cvfacade.image.drawing import (
    draw_circle,
    draw_contours,
    draw_line,
    draw_rectangle,
    draw_text,
    get_text_size,
)

# Filter functions
from cvfacade.image.filters import dilate, erode, gaussian_blur, get_structuring_element

# Geometry functions
from cvfacade.image.geometry import (
    arc_length,
    bounding_rect,
    centroid,
    contour_area,
    contour_properties,
    find_contours,
    min_enclosing_circle,
    moments,
)

# Masking functions
from cvfacade.image.masking import in_range

__all__ = [
    # Color adapter
    "to_input_array",
    "to_pixel_scalar",
    "resolve_color",
    # Converter functions
    "cvt_color",
    "ensure_bgr",
    "ensure_grayscale",
    # Filter functions
    "get_structuring_element",
    "dilate",
    "erode",
    "gaussian_blur",
    # Masking functions
    "in_range",
    # Geometry functions
    "find_contours",
    "contour_area",
    "arc_length",
    "bounding_rect",
    "min_enclosing_circle",
    "moments",
    "centroid",
    "contour_properties",
    # Drawing functions
    "draw_circle",
    "draw_line",
    "draw_rectangle",
    "draw_contours",
    "draw_text",
    "get_text_size",
]
