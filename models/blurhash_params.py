"""Encode and decode parameters."""

from dataclasses import dataclass
from typing import Optional

from engines.errors import RangeError
from utils.constants import MAX_COMPONENTS, MIN_COMPONENTS


@dataclass
class EncodeParams:
    """Number of cosine components along each axis."""

    components_x: int = 4
    components_y: int = 3

    def __post_init__(self):
        if not (MIN_COMPONENTS <= self.components_x <= MAX_COMPONENTS
                and MIN_COMPONENTS <= self.components_y <= MAX_COMPONENTS):
            raise RangeError(self.components_x, self.components_y)


@dataclass
class DecodeParams:
    """Output size and contrast of a decoded placeholder."""

    width: int = 32
    height: int = 32
    punch: Optional[float] = 1.0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Output size must be non-negative, got {self.width}x{self.height}")
        if self.punch is not None and self.punch < 0:
            raise ValueError(f"Punch must be non-negative, got {self.punch}")
