"""
Utility modules - functional architecture.

Modules:
- enum_converter: Option parsing and OpenCV flag resolution
"""

from .enum_converter import color_conversion_code, parse_enum, to_cv_flag

__all__ = [
    "color_conversion_code",
    "parse_enum",
    "to_cv_flag",
]
