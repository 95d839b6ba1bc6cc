"""Attribute value object."""

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from resource_attributes.common.dtos.attribute_dtos import AttributeDTO

NIL_ATTRIBUTE = "nil attribute"

# Range of INT payloads.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

AttributePayload = Union[float, int, str, bool]


class AttributeKind(Enum):
    """Which payload an attribute carries."""

    FLOAT = "float"
    INT = "int"
    STRING = "string"
    BOOL = "bool"


@dataclass(frozen=True)  # Value objects are immutable
class Attribute:
    """
    A typed attribute value with an optional unit.

    Exactly one payload exists by construction: `kind` says how to read `value`.
    `unit` is a registry unit name, or "" for no unit, and is only meaningful on
    numeric payloads. Use the `from_*` constructors rather than building the
    dataclass by hand.
    """

    kind: AttributeKind
    value: AttributePayload
    unit: str = ""

    @classmethod
    def from_float(cls, value: float, unit: str = "") -> "Attribute":
        return cls(AttributeKind.FLOAT, float(value), unit)

    @classmethod
    def from_int(cls, value: int, unit: str = "") -> "Attribute":
        return cls(AttributeKind.INT, int(value), unit)

    @classmethod
    def from_string(cls, value: str) -> "Attribute":
        return cls(AttributeKind.STRING, value)

    @classmethod
    def from_bool(cls, value: bool) -> "Attribute":
        return cls(AttributeKind.BOOL, bool(value))

    @property
    def is_numeric(self) -> bool:
        return self.kind in (AttributeKind.INT, AttributeKind.FLOAT)

    @property
    def float_value(self) -> Optional[float]:
        return self.value if self.kind is AttributeKind.FLOAT else None

    @property
    def int_value(self) -> Optional[int]:
        return self.value if self.kind is AttributeKind.INT else None

    @property
    def string_value(self) -> Optional[str]:
        return self.value if self.kind is AttributeKind.STRING else None

    @property
    def bool_value(self) -> Optional[bool]:
        return self.value if self.kind is AttributeKind.BOOL else None

    def copy(self) -> "Attribute":
        """Returns an independent attribute with the same kind, payload and unit."""
        return dataclasses.replace(self)

    def to_dto(self) -> AttributeDTO:
        """Converts to the four-slot form handed to collaborators."""
        return AttributeDTO(
            float_val=self.float_value,
            int_val=self.int_value,
            string_val=self.string_value,
            bool_val=self.bool_value,
            unit=self.unit,
        )

    def __str__(self) -> str:
        return render_attribute(self)


def _format_payload(attribute: Attribute) -> str:
    value = attribute.value
    if attribute.kind is AttributeKind.BOOL:
        return "true" if value else "false"
    if attribute.kind is AttributeKind.FLOAT:
        if isinstance(value, int):
            return str(value)
        if math.isfinite(value) and float(value).is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(float(value))
    return str(value)


def render_attribute(attribute: Optional[Attribute]) -> str:
    """Debug rendering: the payload followed by the unit with no separator.

    The output is not meant to round-trip through the parser.
    """
    if attribute is None:
        return NIL_ATTRIBUTE
    return f"{_format_payload(attribute)}{attribute.unit}"
