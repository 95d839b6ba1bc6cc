"""Ordering of attributes across kinds and units."""

import math
from decimal import Decimal, localcontext
from typing import Optional

from resource_attributes.attribute_domain.domain.entities.attribute import Attribute, AttributeKind
from resource_attributes.attribute_domain.domain.entities.unit import Unit
from resource_attributes.attribute_domain.domain.services.unit_registry import UnitRegistry, get_unit_registry

# Precision of the mixed int/float path. Set high to give a high chance of
# correctly returning equality after scaling by very different multipliers.
FLOAT_PRECISION_BITS = 256
DECIMAL_PRECISION_DIGITS = math.ceil(FLOAT_PRECISION_BITS * math.log10(2)) + 1

# Returned for unequal booleans, which have no order.
BOOL_UNEQUAL = 1


def _sign(a, b) -> int:
    return (a > b) - (a < b)


def _unit_of(attribute: Attribute, registry: UnitRegistry) -> Optional[Unit]:
    return registry.lookup(attribute.unit) if attribute.unit else None


def comparable(
    a: Optional[Attribute], b: Optional[Attribute], registry: Optional[UnitRegistry] = None
) -> bool:
    """
    Returns whether two attributes can be ordered.

    Units decide first: a unit on only one side is never comparable, and two
    units must share a base unit, as decided by
    UnitRegistry.dimensions_comparable. Then kinds: strings only compare with
    strings, bools with bools, and ints and floats with each other.
    """
    if a is None or b is None:
        return False
    registry = registry or get_unit_registry()

    has_unit_a = _unit_of(a, registry) is not None
    has_unit_b = _unit_of(b, registry) is not None
    if has_unit_a and has_unit_b:
        if not registry.dimensions_comparable(a.unit, b.unit):
            return False
    elif has_unit_a or has_unit_b:
        return False

    if a.is_numeric and b.is_numeric:
        return True
    return a.kind == b.kind


def _base_int(attribute: Attribute, unit: Optional[Unit]) -> int:
    value = attribute.value
    if unit is None:
        return value
    if unit.inverse_multiplier:
        # Truncate toward zero.
        quotient = abs(value) // unit.multiplier
        return quotient if value >= 0 else -quotient
    return value * unit.multiplier


def _base_decimal(attribute: Attribute, unit: Optional[Unit]) -> Decimal:
    """Converts to the base unit; must run inside the high precision context."""
    value = Decimal(attribute.value)
    if unit is None:
        return +value
    if unit.inverse_multiplier:
        return value / Decimal(unit.multiplier)
    return value * Decimal(unit.multiplier)


def _is_nan(attribute: Attribute) -> bool:
    return isinstance(attribute.value, float) and math.isnan(attribute.value)


def _compare_numbers(a: Attribute, b: Attribute, registry: UnitRegistry) -> tuple[int, bool]:
    unit_a = _unit_of(a, registry)
    unit_b = _unit_of(b, registry)

    # Both integers: exact comparison, no float detour
    if a.kind is AttributeKind.INT and b.kind is AttributeKind.INT:
        return _sign(_base_int(a, unit_a), _base_int(b, unit_b)), True

    if _is_nan(a) or _is_nan(b):
        return 0, False

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION_DIGITS
        a_base = _base_decimal(a, unit_a)
        b_base = _base_decimal(b, unit_b)
        return int(a_base.compare(b_base)), True


def compare(
    a: Optional[Attribute], b: Optional[Attribute], registry: Optional[UnitRegistry] = None
) -> tuple[int, bool]:
    """
    Compares two attributes.

    Returns:
        (ordering, comparable). When comparable is False the values are of
        incompatible kinds or units and the ordering must be ignored. Otherwise
        the ordering is -1 if a < b, 0 if a == b and +1 if a > b, except for
        bools, where it is 0 if equal and BOOL_UNEQUAL if not.
    """
    registry = registry or get_unit_registry()
    if not comparable(a, b, registry):
        return 0, False

    if a.kind is AttributeKind.BOOL:
        return (0 if a.value == b.value else BOOL_UNEQUAL), True
    if a.kind is AttributeKind.STRING:
        return _sign(a.value, b.value), True
    return _compare_numbers(a, b, registry)
