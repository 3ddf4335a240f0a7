"""Length validation use case for the application layer.

Runs a length rule against one property value of an instance and turns a
negative result into a ``ValidationFailure`` with a rendered message.
"""

from dataclasses import dataclass, field
from typing import Any

from ..domain.constants import MAX_LENGTH_ARG, MIN_LENGTH_ARG, TOTAL_LENGTH_ARG
from ..domain.context import ValidationContext
from ..domain.rules import LengthRule
from ..config import settings
from ..logging_config import get_logger
from ..metrics import record_length_validation

logger = get_logger(__name__)


@dataclass
class ValidationFailure:
    """A failed length check, ready for display."""

    property_name: str
    error_message: str
    attempted_value: str | None
    error_code: str
    placeholder_values: dict[str, Any] = field(default_factory=dict)


def validate_length(
    rule: LengthRule,
    instance: Any,
    value: str | None,
    property_name: str,
    message_template: str | None = None,
) -> ValidationFailure | None:
    """Validate one property value with logging and metrics.

    Args:
        rule: The length rule to apply
        instance: Object the value was read from, passed to bound functions
        value: The property value
        property_name: Name used in the rendered message
        message_template: Overrides the rule's default template

    Returns:
        None if the value is valid, otherwise the failure
    """
    context = ValidationContext(
        instance_to_validate=instance, property_name=property_name
    )
    valid = rule.is_valid(context, value)
    record_length_validation(rule.name, valid, rule.policy)

    if valid:
        return None

    formatter = context.message_formatter.append_property_name(property_name)
    template = message_template or rule.default_message_template(
        language=settings.language
    )
    failure = ValidationFailure(
        property_name=property_name,
        error_message=formatter.build_message(template),
        attempted_value=value,
        error_code=rule.name,
        placeholder_values=formatter.placeholder_values,
    )

    logger.warning(
        f"{property_name} failed {rule.name}",
        property_name=property_name,
        min_length=failure.placeholder_values[MIN_LENGTH_ARG],
        max_length=failure.placeholder_values[MAX_LENGTH_ARG],
        total_length=failure.placeholder_values[TOTAL_LENGTH_ARG],
    )
    return failure
