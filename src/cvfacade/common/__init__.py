"""
Common package - fundamental types without external project dependencies.

This package contains basic types that are used throughout the facade:
- Enums (BorderType, LineType, etc.)
- Constants (FilterConstants, DrawingConstants, Colors, etc.)
- Base models (DisplayColor) and type aliases

IMPORTANT: This package must NOT import from image, utils or config
to avoid circular dependencies.
"""

# Export base models
from cvfacade.common.base import (
    ColorLike,
    DisplayColor,
    PointLike,
    ScalarLike,
    SizeLike,
)

# Export all constants
from cvfacade.common.constants import (
    Colors,
    ConversionConstants,
    DrawingConstants,
    FilterConstants,
    SystemConstants,
)

# Export all enums
from cvfacade.common.enums import (
    BorderType,
    ContourApproximation,
    FontFace,
    LineType,
    MorphShape,
    RetrievalMode,
)

__all__ = [
    # Enums
    "BorderType",
    "ContourApproximation",
    "FontFace",
    "LineType",
    "MorphShape",
    "RetrievalMode",
    # Constants
    "Colors",
    "ConversionConstants",
    "DrawingConstants",
    "FilterConstants",
    "SystemConstants",
    # Base models
    "ColorLike",
    "DisplayColor",
    "PointLike",
    "ScalarLike",
    "SizeLike",
]
