"""Registry of the known units, indexed by name."""

import logging
from typing import Iterable, Iterator, Optional

from resource_attributes.attribute_domain.domain.entities.unit import BaseUnit, Unit

logger = logging.getLogger(__name__)

# Byte prefixes shared by the byte and byte rate families.
_DECIMAL_BYTE_PREFIXES = [
    ("k", 1000),
    ("K", 1000),
    ("M", 1000**2),
    ("G", 1000**3),
    ("T", 1000**4),
    ("P", 1000**5),
    ("E", 1000**6),
]
_BINARY_BYTE_PREFIXES = [
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("Pi", 1024**5),
    ("Ei", 1024**6),
]


def _byte_units(suffix: str, base: BaseUnit) -> list[Unit]:
    units = [Unit(f"B{suffix}", base, 1)]
    for prefix, multiplier in _DECIMAL_BYTE_PREFIXES + _BINARY_BYTE_PREFIXES:
        units.append(Unit(f"{prefix}B{suffix}", base, multiplier))
    return units


DEFAULT_UNITS: tuple[Unit, ...] = (
    *_byte_units("", BaseUnit.BYTE),
    *_byte_units("/s", BaseUnit.BYTE_RATE),
    Unit("Hz", BaseUnit.HERTZ, 1),
    Unit("kHz", BaseUnit.HERTZ, 1000),
    Unit("MHz", BaseUnit.HERTZ, 1000**2),
    Unit("GHz", BaseUnit.HERTZ, 1000**3),
    Unit("mW", BaseUnit.WATT, 1000, inverse_multiplier=True),
    Unit("W", BaseUnit.WATT, 1),
    Unit("kW", BaseUnit.WATT, 1000),
    Unit("MW", BaseUnit.WATT, 1000**2),
    Unit("GW", BaseUnit.WATT, 1000**3),
)


class UnitRegistry:
    """Read-only index of units by name.

    The index and the longest-name-first ordering used for suffix matching are
    both built once in the constructor; nothing mutates them afterwards.
    """

    def __init__(self, units: Iterable[Unit]) -> None:
        self._by_name: dict[str, Unit] = {}
        for unit in units:
            if unit.name in self._by_name:
                raise ValueError(f"Duplicate unit name {unit.name!r} in registry.")
            self._by_name[unit.name] = unit
        # Longest first, ties broken lexically.
        self._length_sorted_names = tuple(sorted(self._by_name, key=lambda name: (-len(name), name)))

    def lookup(self, name: str) -> Optional[Unit]:
        """Get unit by name, or None if the name is not registered."""
        return self._by_name.get(name)

    def dimensions_comparable(self, name_a: str, name_b: str) -> bool:
        """Returns whether both names are registered and share a base unit."""
        unit_a = self.lookup(name_a)
        if unit_a is None:
            return False
        return unit_a.comparable(self.lookup(name_b))

    @property
    def length_sorted_names(self) -> tuple[str, ...]:
        return self._length_sorted_names

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)


# Built at import time; the import lock guarantees a single initialization.
UNIT_REGISTRY = UnitRegistry(DEFAULT_UNITS)
logger.debug(f"Unit registry initialized with {len(UNIT_REGISTRY)} units")


def get_unit_registry() -> UnitRegistry:
    """Returns the process-wide unit registry."""
    return UNIT_REGISTRY
