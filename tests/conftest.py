# tests/conftest.py
import pytest

from resource_attributes.attribute_domain.application.attribute_service import AttributeApplicationService
from resource_attributes.attribute_domain.domain.entities.attribute import Attribute
from resource_attributes.attribute_domain.domain.entities.unit import BaseUnit, Unit
from resource_attributes.attribute_domain.domain.services.unit_registry import UnitRegistry, get_unit_registry
from resource_attributes.common.config.settings import settings
from resource_attributes.common.dtos.attribute_dtos import AttributeDTO


@pytest.fixture(autouse=True)
def mock_settings_log_level(mocker) -> None:
    """Pins the log level in settings for consistent testing."""
    mocker.patch.object(settings, "LOG_LEVEL", "DEBUG")


@pytest.fixture
def unit_registry() -> UnitRegistry:
    """The process-wide unit registry."""
    return get_unit_registry()


@pytest.fixture
def small_registry() -> UnitRegistry:
    """A registry with a handful of units, for tests that need a controlled table."""
    return UnitRegistry(
        [
            Unit("B", BaseUnit.BYTE, 1),
            Unit("KiB", BaseUnit.BYTE, 1024),
            Unit("mW", BaseUnit.WATT, 1000, inverse_multiplier=True),
            Unit("W", BaseUnit.WATT, 1),
        ]
    )


@pytest.fixture
def attribute_service() -> AttributeApplicationService:
    """Instance of AttributeApplicationService over the default registry."""
    return AttributeApplicationService()


@pytest.fixture
def sample_attribute_dtos() -> dict[str, AttributeDTO]:
    """Attributes as a discovery collaborator would assemble them, one of them invalid."""
    return {
        "cpu.frequency": AttributeDTO(int_val=2400, unit="MHz"),
        "memory.total": AttributeDTO(float_val=15.5, unit="GiB"),
        "kernel.name": AttributeDTO(string_val="linux"),
        "driver.enabled": AttributeDTO(bool_val=True, unit="W"),
    }


@pytest.fixture
def sample_gib_attribute() -> Attribute:
    """One GiB as an integer attribute."""
    return Attribute.from_int(1, "GiB")
