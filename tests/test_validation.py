"""Tests for the length validation use case."""

import pytest
from structlog.testing import capture_logs

from lengthguard import metrics
from lengthguard.application import validation
from lengthguard.application.validation import ValidationFailure, validate_length
from lengthguard.config import settings
from lengthguard.domain.constants import CountingPolicy
from lengthguard.domain.rules import (
    exact_length_rule,
    length_rule,
    maximum_length_rule,
    minimum_length_rule,
    use_text_elements,
)

from conftest import Limits


def test_valid_value_returns_none(limits: Limits):
    assert validate_length(length_rule(2, 5), limits, "abcd", "Name") is None


def test_none_value_returns_none(limits: Limits):
    assert validate_length(minimum_length_rule(3), limits, None, "Name") is None


def test_failure_carries_rendered_message(limits: Limits):
    failure = validate_length(length_rule(2, 5), limits, "a", "Name")

    assert isinstance(failure, ValidationFailure)
    assert failure.property_name == "Name"
    assert failure.attempted_value == "a"
    assert failure.error_code == "LengthValidator"
    assert failure.error_message == (
        "'Name' must be between 2 and 5 characters. You entered 1 characters."
    )
    assert failure.placeholder_values == {
        "MinLength": 2,
        "MaxLength": 5,
        "TotalLength": 1,
        "PropertyName": "Name",
    }


@pytest.mark.parametrize(
    "rule,value,message",
    [
        (
            exact_length_rule(3),
            "ab",
            "'Code' must be 3 characters in length. You entered 2 characters.",
        ),
        (
            maximum_length_rule(4),
            "abcde",
            "The length of 'Code' must be 4 characters or fewer. "
            "You entered 5 characters.",
        ),
        (
            minimum_length_rule(3),
            "ab",
            "The length of 'Code' must be at least 3 characters. "
            "You entered 2 characters.",
        ),
    ],
)
def test_preset_messages(rule, value: str, message: str, limits: Limits):
    failure = validate_length(rule, limits, value, "Code")

    assert failure is not None
    assert failure.error_message == message
    assert failure.error_code == rule.name


def test_custom_message_template(limits: Limits):
    failure = validate_length(
        maximum_length_rule(2),
        limits,
        "abc",
        "Title",
        message_template="{PropertyName} is {TotalLength} long, limit {MaxLength}",
    )

    assert failure is not None
    assert failure.error_message == "Title is 3 long, limit 2"


def test_dynamic_bounds_in_message(limits: Limits):
    rule = length_rule(lambda o: o.a, lambda o: o.b)
    failure = validate_length(rule, limits, "abcdef", "Name")

    assert failure is not None
    assert failure.placeholder_values["MinLength"] == limits.a
    assert failure.placeholder_values["MaxLength"] == limits.b
    assert failure.placeholder_values["TotalLength"] == 6


def test_failure_is_logged(limits: Limits):
    with capture_logs() as logs:
        validate_length(exact_length_rule(3), limits, "ab", "Code")

    warnings = [entry for entry in logs if entry["log_level"] == "warning"]
    assert len(warnings) == 1
    assert warnings[0]["property_name"] == "Code"
    assert warnings[0]["min_length"] == 3
    assert warnings[0]["max_length"] == 3
    assert warnings[0]["total_length"] == 2


def test_success_is_not_logged_as_warning(limits: Limits):
    with capture_logs() as logs:
        validate_length(exact_length_rule(3), limits, "abc", "Code")

    assert not [entry for entry in logs if entry["log_level"] == "warning"]


def test_outcomes_are_recorded(monkeypatch: pytest.MonkeyPatch, limits: Limits):
    recorded = []
    monkeypatch.setattr(
        validation,
        "record_length_validation",
        lambda *args: recorded.append(args),
    )

    validate_length(exact_length_rule(3), limits, "abc", "Code")
    validate_length(exact_length_rule(3), limits, "ab", "Code")

    assert recorded == [
        ("ExactLengthValidator", True, CountingPolicy.RAW),
        ("ExactLengthValidator", False, CountingPolicy.RAW),
    ]


def test_bound_function_errors_are_not_wrapped(limits: Limits):
    rule = length_rule(lambda o: o.missing, lambda o: o.b)
    with pytest.raises(AttributeError):
        validate_length(rule, limits, "abc", "Name")


class _Counter:
    def __init__(self):
        self.calls = []

    def add(self, amount, attributes):
        self.calls.append((amount, attributes))


def test_counters_by_policy(monkeypatch: pytest.MonkeyPatch, limits: Limits):
    totals, failures, text_elements = _Counter(), _Counter(), _Counter()
    monkeypatch.setattr(metrics, "length_validations_total", totals)
    monkeypatch.setattr(metrics, "length_validation_failures_total", failures)
    monkeypatch.setattr(metrics, "text_element_measurements_total", text_elements)

    validate_length(maximum_length_rule(1), limits, "ab", "Code")
    text_rule = maximum_length_rule(1, use_text_elements)
    validate_length(text_rule, limits, "e\u0301", "Code")

    labels = {"rule": "MaximumLengthValidator"}
    assert totals.calls == [(1, labels), (1, labels)]
    assert failures.calls == [(1, labels)]
    assert text_elements.calls == [(1, labels)]


def test_message_language_comes_from_settings(
    monkeypatch: pytest.MonkeyPatch, limits: Limits
):
    """Unknown languages fall back to the English templates."""
    monkeypatch.setattr(settings, "language", "xx")
    failure = validate_length(minimum_length_rule(3), limits, "ab", "Code")

    assert failure is not None
    assert failure.error_message == (
        "The length of 'Code' must be at least 3 characters. "
        "You entered 2 characters."
    )
