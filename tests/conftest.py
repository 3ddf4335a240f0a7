from dataclasses import dataclass

import pytest

from lengthguard.domain.context import ValidationContext


@dataclass
class Limits:
    """Instance carrying its own length limits."""

    a: int
    b: int


@pytest.fixture(name="limits")
def limits_fixture() -> Limits:
    return Limits(a=1, b=3)


@pytest.fixture(name="context")
def context_fixture(limits: Limits) -> ValidationContext:
    """Fresh validation context over the limits instance."""
    return ValidationContext(instance_to_validate=limits, property_name="name")
