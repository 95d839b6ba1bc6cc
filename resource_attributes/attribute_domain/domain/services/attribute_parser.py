"""Parsing of raw attribute strings into typed attributes."""

import logging
import math
import re
from typing import Optional

from resource_attributes.attribute_domain.domain.entities.attribute import INT64_MAX, INT64_MIN, Attribute
from resource_attributes.attribute_domain.domain.services.unit_registry import UnitRegistry, get_unit_registry

logger = logging.getLogger(__name__)

_BOOL_LITERALS = {
    "1": True,
    "t": True,
    "T": True,
    "TRUE": True,
    "true": True,
    "True": True,
    "0": False,
    "f": False,
    "F": False,
    "FALSE": False,
    "false": False,
    "False": False,
}

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _parse_bool(text: str) -> Optional[bool]:
    return _BOOL_LITERALS.get(text)


def _parse_int(text: str) -> Optional[int]:
    """Base-10 signed integer within the 64-bit range, or None."""
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def _parse_float(text: str) -> Optional[float]:
    """Decimal float literal (or inf/nan), or None. Finite literals that overflow are rejected."""
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if math.isinf(value) and "inf" not in text.lower():
        return None
    return value


def _match_unit_suffix(raw: str, registry: UnitRegistry) -> Optional[str]:
    # Plain suffix test: no boundary is required between the number and the unit.
    for name in registry.length_sorted_names:
        if raw.endswith(name):
            return name
    return None


def parse_attribute(raw: str, registry: Optional[UnitRegistry] = None) -> Attribute:
    """
    Parses a raw attribute string, pulling out a unit when it is a suffix on a number.

    Never fails: anything that is not a bool, a number, or a number with a known
    unit suffix comes back as a string attribute. Integers win over floats, so
    "10" is an int and "10.0" a float.

    Args:
        raw: The raw attribute value.
        registry: Unit registry to match suffixes against. Defaults to the process-wide one.

    Returns:
        The typed attribute.
    """
    if not raw:
        return Attribute.from_string(raw)

    bool_value = _parse_bool(raw)
    if bool_value is not None:
        return Attribute.from_bool(bool_value)

    if raw[-1].isalpha():
        registry = registry or get_unit_registry()
        unit = _match_unit_suffix(raw, registry)

        # Unknown unit: this can only be a string
        if unit is None:
            return Attribute.from_string(raw)

        numeric = raw[: -len(unit)].strip()

        int_value = _parse_int(numeric)
        if int_value is not None:
            return Attribute.from_int(int_value, unit)

        float_value = _parse_float(numeric)
        if float_value is not None:
            return Attribute.from_float(float_value, unit)

        logger.debug(f"Unit suffix {unit!r} on {raw!r} is not preceded by a number, ignoring it")

    int_value = _parse_int(raw)
    if int_value is not None:
        return Attribute.from_int(int_value)

    float_value = _parse_float(raw)
    if float_value is not None:
        return Attribute.from_float(float_value)

    return Attribute.from_string(raw)
