"""Validation metrics for lengthguard."""

from opentelemetry import metrics

from .constants import METER_NAME
from .domain.constants import CountingPolicy

# Get meter for creating instruments
meter = metrics.get_meter(METER_NAME)

length_validations_total = meter.create_counter(
    name="length_validations_total",
    description="Total number of length rule evaluations",
)

length_validation_failures_total = meter.create_counter(
    name="length_validation_failures_total",
    description="Total number of length rule evaluations that failed",
)

text_element_measurements_total = meter.create_counter(
    name="text_element_measurements_total",
    description="Total number of lengths measured in text elements",
)


def record_length_validation(rule_name: str, valid: bool, policy: CountingPolicy):
    """Record the outcome of one length rule evaluation."""
    labels = {"rule": rule_name}

    length_validations_total.add(1, labels)
    if not valid:
        length_validation_failures_total.add(1, labels)
    if policy is CountingPolicy.TEXT_ELEMENTS:
        text_element_measurements_total.add(1, labels)
