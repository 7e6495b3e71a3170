"""
Constants for the cvfacade package.
Centralizes default parameter values and magic numbers.
"""

import sys

from cvfacade.common.base import DisplayColor


# Filtering Constants
class FilterConstants:
    """Default values resolved at the call boundary of filtering operations."""

    # (-1, -1) places the anchor at the structuring element center
    DEFAULT_ANCHOR = (-1, -1)
    DEFAULT_ITERATIONS = 1

    # Same value OpenCV's morphologyDefaultBorderValue() returns; OpenCV
    # recognises it and pads with the neutral value for erode/dilate
    MORPHOLOGY_DEFAULT_BORDER_VALUE = (sys.float_info.max,) * 4

    DEFAULT_STRUCTURING_ELEMENT_SIZE = (3, 3)

    # 0 derives sigma from kernel size (or kernel size from sigma)
    AUTO_SIGMA = 0.0


# Color Conversion Constants
class ConversionConstants:
    """Constants for color-space conversion."""

    # 0 lets OpenCV infer the output channel count from source and code
    AUTO_CHANNELS = 0
    CODE_PREFIX = "COLOR_"


# Drawing Constants
class DrawingConstants:
    """Default values for drawing operations."""

    FILLED = -1  # Thickness value for filled shapes
    DEFAULT_THICKNESS = 1
    DEFAULT_SHIFT = 0
    ALL_CONTOURS = -1


# System Constants
class SystemConstants:
    """Constants for logging and configuration."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
    LOG_FILE_BACKUP_COUNT = 5
    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    # Environments
    ENVIRONMENT_DEFAULT = "production"
    VALID_ENVIRONMENTS = ["development", "staging", "production", "test"]

    CONFIG_FILE_ENV = "CVF_CONFIG_FILE"


# Color Constants (display RGB order)
class Colors:
    """Standard display colors for drawing and masking."""

    BLACK = DisplayColor(r=0, g=0, b=0)
    WHITE = DisplayColor(r=255, g=255, b=255)
    RED = DisplayColor(r=255, g=0, b=0)
    GREEN = DisplayColor(r=0, g=255, b=0)
    BLUE = DisplayColor(r=0, g=0, b=255)
    YELLOW = DisplayColor(r=255, g=255, b=0)
    CYAN = DisplayColor(r=0, g=255, b=255)
    MAGENTA = DisplayColor(r=255, g=0, b=255)
    ORANGE = DisplayColor(r=255, g=165, b=0)
    PURPLE = DisplayColor(r=128, g=0, b=128)
    GRAY = DisplayColor(r=128, g=128, b=128)

    # Semantic colors
    SUCCESS = GREEN
    ERROR = RED
    WARNING = YELLOW
    INFO = CYAN
