"""String length rules.

One rule type, ``LengthRule``, decides whether a string's length lies between
a minimum and a maximum. The presets below only bind bounds:

- ``length_rule(min, max)``: both bounds given
- ``exact_length_rule(n)``: min and max both n
- ``maximum_length_rule(max)``: min fixed at 0
- ``minimum_length_rule(min)``: max fixed at UNBOUNDED

Each preset accepts either integers or functions of the instance being
validated. Integers are checked when the rule is built; functions are called
on every evaluation and are never checked against each other.
"""

from collections.abc import Callable
from typing import cast

from .bounds import (
    BoundFunc,
    Bounds,
    DynamicBounds,
    FixedBounds,
    resolve_bounds,
    within_bounds,
)
from .constants import (
    DEFAULT_LANGUAGE,
    MAX_LENGTH_ARG,
    MIN_LENGTH_ARG,
    TOTAL_LENGTH_ARG,
    UNBOUNDED,
    CountingPolicy,
    RuleKind,
)
from .context import ValidationContext
from .counting import LengthOptions, build_policy, measure
from .exceptions import InvalidConfigurationError
from .messages import localized

Configure = Callable[[LengthOptions], None]


class LengthRule:
    """Checks that a string's length lies within [min, max].

    ``max == UNBOUNDED`` means there is no upper limit. ``None`` values are
    always valid; requiring a value is another rule's job.
    """

    def __init__(
        self,
        bounds: Bounds,
        configure: Configure | None = None,
        *,
        kind: RuleKind = RuleKind.LENGTH,
    ):
        self.kind = kind
        self._fixed = bounds if isinstance(bounds, FixedBounds) else None
        self._dynamic = bounds if isinstance(bounds, DynamicBounds) else None
        self.policy = build_policy(configure)

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def min(self) -> int | None:
        """Statically configured minimum, None for instance-derived bounds."""
        return self._fixed.min if self._fixed is not None else None

    @property
    def max(self) -> int | None:
        """Statically configured maximum, None for instance-derived bounds."""
        return self._fixed.max if self._fixed is not None else None

    @property
    def dynamic_bounds(self) -> DynamicBounds | None:
        return self._dynamic

    @dynamic_bounds.setter
    def dynamic_bounds(self, value: DynamicBounds | None) -> None:
        if value is None and self._fixed is None:
            raise InvalidConfigurationError(
                "dynamic_bounds", "a rule without fixed bounds needs bound functions."
            )
        self._dynamic = value

    @property
    def bounds(self) -> Bounds:
        """Bounds used by the next evaluation."""
        if self._dynamic is not None:
            return self._dynamic
        return cast(FixedBounds, self._fixed)

    def is_valid(self, context: ValidationContext, value: str | None) -> bool:
        """Check value and report measurements on the context when it fails.

        Args:
            context: Validation pass carrying the instance and message formatter
            value: Candidate string

        Returns:
            True if value is None or its length is within bounds
        """
        if value is None:
            return True

        min_length, max_length = resolve_bounds(
            self.bounds, context.instance_to_validate
        )
        length = measure(value, self.policy)

        if within_bounds(length, min_length, max_length):
            return True

        (
            context.message_formatter.append_argument(MIN_LENGTH_ARG, min_length)
            .append_argument(MAX_LENGTH_ARG, max_length)
            .append_argument(TOTAL_LENGTH_ARG, length)
        )
        return False

    def default_message_template(
        self, error_code: str | None = None, language: str = DEFAULT_LANGUAGE
    ) -> str:
        return localized(error_code or self.name, self.name, language)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.name}, bounds={self.bounds!r}, "
            f"policy={self.policy.value})"
        )


def _bounds(min_length: int | BoundFunc, max_length: int | BoundFunc) -> Bounds:
    if callable(min_length) and callable(max_length):
        return DynamicBounds(min_length, max_length)
    if callable(min_length) or callable(max_length):
        raise InvalidConfigurationError(
            "min" if callable(min_length) else "max",
            "min and max must both be integers or both be functions.",
        )
    return FixedBounds(min_length, max_length)


def length_rule(
    min_length: int | BoundFunc,
    max_length: int | BoundFunc,
    configure: Configure | None = None,
) -> LengthRule:
    """Build a rule accepting lengths between min_length and max_length."""
    return LengthRule(_bounds(min_length, max_length), configure)


def exact_length_rule(
    length: int | BoundFunc, configure: Configure | None = None
) -> LengthRule:
    """Build a rule accepting exactly one length."""
    return LengthRule(_bounds(length, length), configure, kind=RuleKind.EXACT)


def maximum_length_rule(
    max_length: int | BoundFunc, configure: Configure | None = None
) -> LengthRule:
    """Build a rule accepting lengths up to max_length."""
    min_length: int | BoundFunc = (lambda _: 0) if callable(max_length) else 0
    return LengthRule(
        _bounds(min_length, max_length), configure, kind=RuleKind.MAXIMUM
    )


def minimum_length_rule(
    min_length: int | BoundFunc, configure: Configure | None = None
) -> LengthRule:
    """Build a rule accepting lengths of at least min_length."""
    max_length: int | BoundFunc = (
        (lambda _: UNBOUNDED) if callable(min_length) else UNBOUNDED
    )
    return LengthRule(
        _bounds(min_length, max_length), configure, kind=RuleKind.MINIMUM
    )


def use_text_elements(options: LengthOptions) -> None:
    """Configure callback that counts user-perceived characters."""
    options.policy = CountingPolicy.TEXT_ELEMENTS
