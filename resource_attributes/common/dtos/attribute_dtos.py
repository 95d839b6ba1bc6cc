"""Data Transfer Objects for attribute values."""

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

# Keys used by the plain dict form of an attribute.
FLOAT_KEY = "float"
INT_KEY = "int"
STRING_KEY = "string"
BOOL_KEY = "bool"
UNIT_KEY = "unit"


@dataclass
class AttributeDTO:
    """DTO for an attribute value as assembled by a collaborator: four optional payload slots and a unit."""

    float_val: Optional[float] = None
    int_val: Optional[int] = None
    string_val: Optional[str] = None
    bool_val: Optional[bool] = None
    unit: str = ""

    def set_count(self) -> int:
        """Number of populated payload slots."""
        return sum(
            slot is not None for slot in (self.float_val, self.int_val, self.string_val, self.bool_val)
        )

    def copy(self) -> "AttributeDTO":
        return dataclasses.replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Returns the populated slots keyed by payload name."""
        data: dict[str, Any] = {}
        if self.float_val is not None:
            data[FLOAT_KEY] = self.float_val
        if self.int_val is not None:
            data[INT_KEY] = self.int_val
        if self.string_val is not None:
            data[STRING_KEY] = self.string_val
        if self.bool_val is not None:
            data[BOOL_KEY] = self.bool_val
        if self.unit:
            data[UNIT_KEY] = self.unit
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AttributeDTO":
        """Builds a DTO from deserialized data. Unknown keys are ignored; nothing is validated here."""
        return cls(
            float_val=data.get(FLOAT_KEY),
            int_val=data.get(INT_KEY),
            string_val=data.get(STRING_KEY),
            bool_val=data.get(BOOL_KEY),
            unit=data.get(UNIT_KEY) or "",
        )
