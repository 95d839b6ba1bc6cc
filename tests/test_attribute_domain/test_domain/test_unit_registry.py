"""Tests for units and the unit registry."""

import pytest

from resource_attributes.attribute_domain.domain.entities.unit import BaseUnit, Unit
from resource_attributes.attribute_domain.domain.services.unit_registry import (
    UNIT_REGISTRY,
    UnitRegistry,
    get_unit_registry,
)


def test_unit_rejects_non_positive_multiplier() -> None:
    with pytest.raises(ValueError):
        Unit("bogus", BaseUnit.BYTE, 0)
    with pytest.raises(ValueError):
        Unit("bogus", BaseUnit.BYTE, -1024)


def test_unit_comparable_only_within_base() -> None:
    mib = Unit("MiB", BaseUnit.BYTE, 1024**2)
    gb = Unit("GB", BaseUnit.BYTE, 1000**3)
    mhz = Unit("MHz", BaseUnit.HERTZ, 1000**2)

    assert mib.comparable(gb)
    assert gb.comparable(mib)
    assert not mib.comparable(mhz)
    assert not mib.comparable(None)


def test_lookup_known_and_unknown(unit_registry: UnitRegistry) -> None:
    gib = unit_registry.lookup("GiB")
    assert gib is not None
    assert gib.base is BaseUnit.BYTE
    assert gib.multiplier == 2**30
    assert not gib.inverse_multiplier

    assert unit_registry.lookup("gib") is None  # case-sensitive
    assert unit_registry.lookup("") is None
    assert unit_registry.lookup("parsecs") is None


@pytest.mark.parametrize(
    "name, base, multiplier, inverse",
    [
        ("B", BaseUnit.BYTE, 1, False),
        ("KB", BaseUnit.BYTE, 1000, False),
        ("kB", BaseUnit.BYTE, 1000, False),
        ("KiB", BaseUnit.BYTE, 1024, False),
        ("GB", BaseUnit.BYTE, 10**9, False),
        ("EiB", BaseUnit.BYTE, 2**60, False),
        ("MB/s", BaseUnit.BYTE_RATE, 10**6, False),
        ("GiB/s", BaseUnit.BYTE_RATE, 2**30, False),
        ("MHz", BaseUnit.HERTZ, 10**6, False),
        ("GHz", BaseUnit.HERTZ, 10**9, False),
        ("W", BaseUnit.WATT, 1, False),
        ("mW", BaseUnit.WATT, 1000, True),
        ("kW", BaseUnit.WATT, 1000, False),
    ],
)
def test_default_table_entries(unit_registry: UnitRegistry, name: str, base: BaseUnit, multiplier: int, inverse: bool) -> None:
    unit = unit_registry.lookup(name)
    assert unit == Unit(name, base, multiplier, inverse)


def test_length_sorted_names_longest_first(unit_registry: UnitRegistry) -> None:
    names = unit_registry.length_sorted_names
    lengths = [len(name) for name in names]

    assert lengths == sorted(lengths, reverse=True)
    assert set(names) == {unit.name for unit in unit_registry}
    # Equal lengths are ordered lexically
    three_letter = [name for name in names if len(name) == 3]
    assert three_letter == sorted(three_letter)


def test_length_sorted_names_computed_once(unit_registry: UnitRegistry) -> None:
    assert unit_registry.length_sorted_names is unit_registry.length_sorted_names


def test_dimensions_comparable(unit_registry: UnitRegistry) -> None:
    assert unit_registry.dimensions_comparable("GiB", "MB")
    assert unit_registry.dimensions_comparable("mW", "GW")
    assert not unit_registry.dimensions_comparable("MB", "MB/s")
    assert not unit_registry.dimensions_comparable("MHz", "W")
    assert not unit_registry.dimensions_comparable("GiB", "unknown")
    assert not unit_registry.dimensions_comparable("unknown", "GiB")


def test_registry_rejects_duplicate_names() -> None:
    with pytest.raises(ValueError):
        UnitRegistry([Unit("B", BaseUnit.BYTE, 1), Unit("B", BaseUnit.BYTE_RATE, 1)])


def test_registry_container_protocol(small_registry: UnitRegistry) -> None:
    assert len(small_registry) == 4
    assert "KiB" in small_registry
    assert "GiB" not in small_registry
    assert [unit.name for unit in small_registry] == ["B", "KiB", "mW", "W"]


def test_process_wide_registry_is_shared() -> None:
    assert get_unit_registry() is UNIT_REGISTRY
    assert get_unit_registry() is get_unit_registry()
