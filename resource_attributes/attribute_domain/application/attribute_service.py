# attribute_domain/application/attribute_service.py
"""Application service for accepting, parsing and comparing resource attributes."""

import logging
from typing import Optional

from resource_attributes.attribute_domain.domain.entities.attribute import Attribute
from resource_attributes.attribute_domain.domain.services import attribute_comparator
from resource_attributes.attribute_domain.domain.services.attribute_parser import parse_attribute
from resource_attributes.attribute_domain.domain.services.attribute_validator import attribute_from_dto
from resource_attributes.attribute_domain.domain.services.unit_registry import UnitRegistry, get_unit_registry
from resource_attributes.common.dtos.attribute_dtos import AttributeDTO
from resource_attributes.common.exceptions.custom_exceptions import AttributeValidationError

logger = logging.getLogger(__name__)


class AttributeApplicationService:
    """Entry point for collaborators that discover attributes or evaluate constraints on them."""

    def __init__(self, registry: Optional[UnitRegistry] = None) -> None:
        self.registry = registry or get_unit_registry()

    def accept(self, dto: AttributeDTO) -> Attribute:
        """Validates an externally assembled attribute and returns its typed form.

        Raises:
            AttributeValidationError: If the DTO breaks an invariant.
        """
        try:
            return attribute_from_dto(dto, self.registry)
        except AttributeValidationError as e:
            logger.error(f"Rejected attribute {dto}: {e}")
            raise

    def accept_many(self, dtos: dict[str, AttributeDTO], strict: bool = False) -> dict[str, Attribute]:
        """
        Validates a named set of attributes.

        Args:
            dtos: Attributes keyed by attribute name.
            strict: Raise on the first invalid attribute instead of skipping it.

        Returns:
            The accepted attributes keyed by name. Rejected ones are left out.
        """
        accepted: dict[str, Attribute] = {}
        for name, dto in dtos.items():
            try:
                accepted[name] = attribute_from_dto(dto, self.registry)
            except AttributeValidationError as e:
                if strict:
                    raise AttributeValidationError(
                        f"Invalid attribute {name!r}: {e.message}", reason=e.reason, original_exception=e
                    )
                logger.warning(f"Skipping invalid attribute {name!r}: {e}")
                continue

        logger.info(f"Accepted {len(accepted)} of {len(dtos)} attributes.")
        return accepted

    def parse(self, raw: str) -> Attribute:
        """Parses a raw attribute string."""
        return parse_attribute(raw, self.registry)

    def parse_many(self, raw_attributes: dict[str, str]) -> dict[str, Attribute]:
        """Parses raw attribute strings keyed by attribute name."""
        return {name: parse_attribute(raw, self.registry) for name, raw in raw_attributes.items()}

    def compare(self, observed: Attribute, required: Attribute) -> tuple[int, bool]:
        """Compares an observed attribute with a required one. See attribute_comparator.compare."""
        ordering, is_comparable = attribute_comparator.compare(observed, required, self.registry)
        if not is_comparable:
            logger.debug(f"Attributes {observed} and {required} are not comparable")
        return ordering, is_comparable
