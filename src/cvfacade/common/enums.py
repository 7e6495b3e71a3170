"""
Centralized enums for facade options.

Each enum names an OpenCV option family by a readable string value. The
mapping from member to OpenCV integer flag lives in
``cvfacade.utils.enum_converter`` so this module stays free of cv2 imports.
"""

from enum import Enum


# Filtering enums
class BorderType(str, Enum):
    """Pixel extrapolation methods used by filters."""

    CONSTANT = "constant"
    REPLICATE = "replicate"
    REFLECT = "reflect"
    WRAP = "wrap"
    REFLECT_101 = "reflect_101"
    TRANSPARENT = "transparent"
    ISOLATED = "isolated"


class MorphShape(str, Enum):
    """Structuring element shapes."""

    RECT = "rect"
    CROSS = "cross"
    ELLIPSE = "ellipse"


# Contour enums
class RetrievalMode(str, Enum):
    """Contour retrieval modes."""

    EXTERNAL = "external"  # Outermost contours only
    LIST = "list"  # All contours, no hierarchy
    CCOMP = "ccomp"  # Two-level hierarchy
    TREE = "tree"  # Full hierarchy
    FLOODFILL = "floodfill"


class ContourApproximation(str, Enum):
    """Contour approximation methods."""

    NONE = "none"
    SIMPLE = "simple"
    TC89_L1 = "tc89_l1"
    TC89_KCOS = "tc89_kcos"


# Drawing enums
class LineType(str, Enum):
    """Line connectivity used by drawing operations."""

    FILLED = "filled"
    LINE_4 = "4"
    LINE_8 = "8"
    LINE_AA = "aa"  # Antialiased


class FontFace(str, Enum):
    """Hershey font faces available to text drawing."""

    SIMPLEX = "simplex"
    PLAIN = "plain"
    DUPLEX = "duplex"
    COMPLEX = "complex"
    TRIPLEX = "triplex"
    COMPLEX_SMALL = "complex_small"
    SCRIPT_SIMPLEX = "script_simplex"
    SCRIPT_COMPLEX = "script_complex"
