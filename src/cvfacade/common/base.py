"""
Base data models - fundamental types without dependencies.

This module contains the value types shared by the facade:
- DisplayColor: 8-bit RGB(A) color in display channel order
- Type aliases for points, sizes and pixel scalars

IMPORTANT: This module must NOT import from image, utils or config
to avoid circular dependencies.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# Geometry and scalars are passed straight through to OpenCV
PointLike = Tuple[int, int]
SizeLike = Tuple[int, int]
ScalarLike = Union[float, Sequence[float]]


class DisplayColor(BaseModel):
    """
    Display color with 8-bit red, green, blue and optional alpha channels.

    Channels are stored in display order (RGB). Instances are immutable and
    always hold values in [0, 255]; out-of-range input is rejected at
    construction.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(..., ge=0, le=255, description="Red channel")
    g: int = Field(..., ge=0, le=255, description="Green channel")
    b: int = Field(..., ge=0, le=255, description="Blue channel")
    a: Optional[int] = Field(default=None, ge=0, le=255, description="Alpha channel")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, a: Optional[int] = None) -> "DisplayColor":
        """Create color from positional channel values."""
        return cls(r=r, g=g, b=b, a=a)

    @classmethod
    def from_hex(cls, value: str) -> "DisplayColor":
        """
        Create color from a hex string.

        Args:
            value: "#RRGGBB" or "#RRGGBBAA" (leading '#' optional)

        Returns:
            Parsed DisplayColor

        Raises:
            ValueError: If the string is not 6 or 8 hex digits
        """
        digits = value.strip().lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value!r}. Expected #RRGGBB or #RRGGBBAA")
        try:
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {value!r}") from None

        alpha = channels[3] if len(channels) == 4 else None
        return cls(r=channels[0], g=channels[1], b=channels[2], a=alpha)

    @property
    def has_alpha(self) -> bool:
        """Whether the color carries an alpha channel."""
        return self.a is not None

    def to_hex(self) -> str:
        """Format as "#RRGGBB" (or "#RRGGBBAA" with alpha)."""
        text = f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        if self.a is not None:
            text += f"{self.a:02X}"
        return text


ColorLike = Union[ScalarLike, DisplayColor]
