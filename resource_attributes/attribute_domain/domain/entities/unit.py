"""Unit value object and the base units it scales."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BaseUnit(Enum):
    """Family of mutually comparable units. All units sharing a base unit can be compared."""

    SCALAR = "scalar"
    BYTE = "byte"
    BYTE_RATE = "byte_rate"
    HERTZ = "hertz"
    WATT = "watt"


@dataclass(frozen=True)  # Value objects are immutable
class Unit:
    """A named unit and its multiplier over the base unit (KiB has multiplier 1024)."""

    name: str
    base: BaseUnit
    multiplier: int
    # Conversion to base is value / multiplier instead of value * multiplier (mW is W / 1000).
    inverse_multiplier: bool = False

    def __post_init__(self) -> None:
        if self.multiplier <= 0:
            raise ValueError(f"Unit {self.name!r} must have a positive multiplier, got {self.multiplier}.")

    def comparable(self, other: Optional["Unit"]) -> bool:
        """Returns whether values in this unit can be compared with values in `other`."""
        if other is None:
            return False
        return self.base == other.base
