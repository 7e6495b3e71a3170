"""
Enum conversion utilities.

Provides standardized methods for turning facade option values into the
integer flags OpenCV expects. Every option parameter accepts:
- an enum member (e.g. ``BorderType.CONSTANT``)
- its string value, case-insensitive (e.g. ``"constant"``)
- a raw OpenCV integer flag (e.g. ``cv2.BORDER_CONSTANT``), passed through
"""

import logging
import numbers
from enum import Enum
from typing import Any, Dict, Type, TypeVar, Union

import cv2

from cvfacade.common.constants import ConversionConstants
from cvfacade.common.enums import (
    BorderType,
    ContourApproximation,
    FontFace,
    LineType,
    MorphShape,
    RetrievalMode,
)
from cvfacade.exceptions import UnsupportedOptionError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Enum)

OptionLike = Union[Enum, str, int]

CV_FLAGS: Dict[Type[Enum], Dict[Enum, int]] = {
    BorderType: {
        BorderType.CONSTANT: cv2.BORDER_CONSTANT,
        BorderType.REPLICATE: cv2.BORDER_REPLICATE,
        BorderType.REFLECT: cv2.BORDER_REFLECT,
        BorderType.WRAP: cv2.BORDER_WRAP,
        BorderType.REFLECT_101: cv2.BORDER_REFLECT_101,
        BorderType.TRANSPARENT: cv2.BORDER_TRANSPARENT,
        BorderType.ISOLATED: cv2.BORDER_ISOLATED,
    },
    MorphShape: {
        MorphShape.RECT: cv2.MORPH_RECT,
        MorphShape.CROSS: cv2.MORPH_CROSS,
        MorphShape.ELLIPSE: cv2.MORPH_ELLIPSE,
    },
    RetrievalMode: {
        RetrievalMode.EXTERNAL: cv2.RETR_EXTERNAL,
        RetrievalMode.LIST: cv2.RETR_LIST,
        RetrievalMode.CCOMP: cv2.RETR_CCOMP,
        RetrievalMode.TREE: cv2.RETR_TREE,
        RetrievalMode.FLOODFILL: cv2.RETR_FLOODFILL,
    },
    ContourApproximation: {
        ContourApproximation.NONE: cv2.CHAIN_APPROX_NONE,
        ContourApproximation.SIMPLE: cv2.CHAIN_APPROX_SIMPLE,
        ContourApproximation.TC89_L1: cv2.CHAIN_APPROX_TC89_L1,
        ContourApproximation.TC89_KCOS: cv2.CHAIN_APPROX_TC89_KCOS,
    },
    LineType: {
        LineType.FILLED: cv2.FILLED,
        LineType.LINE_4: cv2.LINE_4,
        LineType.LINE_8: cv2.LINE_8,
        LineType.LINE_AA: cv2.LINE_AA,
    },
    FontFace: {
        FontFace.SIMPLEX: cv2.FONT_HERSHEY_SIMPLEX,
        FontFace.PLAIN: cv2.FONT_HERSHEY_PLAIN,
        FontFace.DUPLEX: cv2.FONT_HERSHEY_DUPLEX,
        FontFace.COMPLEX: cv2.FONT_HERSHEY_COMPLEX,
        FontFace.TRIPLEX: cv2.FONT_HERSHEY_TRIPLEX,
        FontFace.COMPLEX_SMALL: cv2.FONT_HERSHEY_COMPLEX_SMALL,
        FontFace.SCRIPT_SIMPLEX: cv2.FONT_HERSHEY_SCRIPT_SIMPLEX,
        FontFace.SCRIPT_COMPLEX: cv2.FONT_HERSHEY_SCRIPT_COMPLEX,
    },
}


def _is_raw_flag(value: Any) -> bool:
    # bool is an int subclass but never a meaningful flag
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, Enum))


def parse_enum(value: Any, enum_class: Type[T]) -> T:
    """
    Parse value to enum member, matching string values case-insensitively.

    Args:
        value: Value to parse (enum member or string)
        enum_class: Enum class to parse to

    Returns:
        Parsed enum member

    Raises:
        UnsupportedOptionError: If value names no member of enum_class

    Example:
        >>> parse_enum("Reflect_101", BorderType)
        <BorderType.REFLECT_101: 'reflect_101'>
    """
    # Already an enum instance
    if isinstance(value, enum_class):
        return value

    try:
        return enum_class(value.lower())
    except (ValueError, AttributeError):
        raise UnsupportedOptionError(
            enum_class.__name__, value, [member.value for member in enum_class]
        ) from None


def to_cv_flag(value: OptionLike, enum_class: Type[Enum]) -> int:
    """
    Resolve an option value to its OpenCV integer flag.

    Integers, including NumPy integer scalars, are returned as plain ints
    without validation so that OpenCV itself checks them.

    Args:
        value: Enum member, string value or raw OpenCV flag
        enum_class: Option family the value belongs to

    Returns:
        OpenCV integer flag
    """
    if _is_raw_flag(value):
        return int(value)

    member = parse_enum(value, enum_class)
    flag = CV_FLAGS[enum_class][member]
    logger.debug(f"Resolved {enum_class.__name__} {member.value!r} -> {flag}")
    return flag


def color_conversion_code(code: Union[int, str]) -> int:
    """
    Resolve a color conversion code.

    Args:
        code: OpenCV ``COLOR_*`` integer, or its name with or without the
            ``COLOR_`` prefix (case-insensitive), e.g. ``"BGR2GRAY"``

    Returns:
        OpenCV conversion code

    Raises:
        UnsupportedOptionError: If the name is not a cv2 conversion code
    """
    if _is_raw_flag(code):
        return int(code)

    if not isinstance(code, str):
        raise UnsupportedOptionError("color conversion", code)

    name = code.strip().upper()
    prefix = ConversionConstants.CODE_PREFIX
    if not name.startswith(prefix):
        name = prefix + name

    flag = getattr(cv2, name, None)
    if not isinstance(flag, int):
        raise UnsupportedOptionError("color conversion", code)
    return flag

