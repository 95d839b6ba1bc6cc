"""Validation of attribute values at the boundary where they enter the system."""

import logging
from typing import Optional, Union

from resource_attributes.attribute_domain.domain.entities.attribute import (
    INT64_MAX,
    INT64_MIN,
    Attribute,
    AttributeKind,
)
from resource_attributes.attribute_domain.domain.services.unit_registry import UnitRegistry, get_unit_registry
from resource_attributes.common.dtos.attribute_dtos import AttributeDTO
from resource_attributes.common.exceptions.custom_exceptions import AttributeValidationError

logger = logging.getLogger(__name__)


def _payload_matches_kind(attribute: Attribute) -> bool:
    value = attribute.value
    # bool is an int subclass and must never pass as a number.
    if attribute.kind is AttributeKind.BOOL:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if attribute.kind is AttributeKind.INT:
        return isinstance(value, int) and INT64_MIN <= value <= INT64_MAX
    if attribute.kind is AttributeKind.FLOAT:
        if isinstance(value, float):
            return True
        if not isinstance(value, int):
            return False
        # Ints in the float slot must fit a double.
        try:
            float(value)
        except OverflowError:
            return False
        return True
    return isinstance(value, str)


def _check_unit(unit: str, carries_unitless_payload: bool, registry: UnitRegistry) -> None:
    if not unit:
        return
    if unit not in registry:
        raise AttributeValidationError(
            f"unrecognized unit {unit!r}", reason=AttributeValidationError.UNRECOGNIZED_UNIT
        )
    if carries_unitless_payload:
        raise AttributeValidationError(
            "unit can not be specified on a boolean or string attribute",
            reason=AttributeValidationError.UNIT_NOT_ALLOWED,
        )


def _check_set_count(set_count: int) -> None:
    if set_count == 0:
        raise AttributeValidationError("no attribute value set", reason=AttributeValidationError.NO_VALUE)
    if set_count > 1:
        raise AttributeValidationError(
            "only one attribute value may be set", reason=AttributeValidationError.MULTIPLE_VALUES
        )


def validate(value: Union[Attribute, AttributeDTO], registry: Optional[UnitRegistry] = None) -> None:
    """
    Checks an attribute against the value model invariants.

    Args:
        value: A typed attribute or the four-slot DTO form.
        registry: Unit registry to resolve unit names against. Defaults to the process-wide one.

    Raises:
        AttributeValidationError: With the first broken invariant, checked in order:
            unknown unit, unit on a string/bool, then the number of payloads set.
    """
    registry = registry or get_unit_registry()

    if isinstance(value, AttributeDTO):
        _check_unit(value.unit, value.string_val is not None or value.bool_val is not None, registry)
        _check_set_count(value.set_count())
        return

    _check_unit(value.unit, value.kind in (AttributeKind.STRING, AttributeKind.BOOL), registry)
    if value.value is None:
        _check_set_count(0)
    if not _payload_matches_kind(value):
        raise AttributeValidationError(
            f"attribute value does not match kind {value.kind.value}",
            reason=AttributeValidationError.KIND_MISMATCH,
        )


def attribute_from_dto(dto: AttributeDTO, registry: Optional[UnitRegistry] = None) -> Attribute:
    """Validates a DTO and converts it to the typed attribute."""
    validate(dto, registry)

    if dto.float_val is not None:
        attribute = Attribute(AttributeKind.FLOAT, dto.float_val, dto.unit)
    elif dto.int_val is not None:
        attribute = Attribute(AttributeKind.INT, dto.int_val, dto.unit)
    elif dto.string_val is not None:
        attribute = Attribute(AttributeKind.STRING, dto.string_val)
    else:
        attribute = Attribute(AttributeKind.BOOL, dto.bool_val)

    # Slots filled from deserialized data may hold the wrong Python type.
    validate(attribute, registry)
    if attribute.kind is AttributeKind.FLOAT:
        attribute = Attribute.from_float(attribute.value, attribute.unit)
    logger.debug(f"Accepted attribute {attribute}")
    return attribute
