"""Default message templates for length rules."""

from typing import Final

from .constants import DEFAULT_LANGUAGE, RuleKind

GENERIC_TEMPLATE: Final = "'{PropertyName}' is not valid."

ENGLISH_TEMPLATES: Final[dict[str, str]] = {
    RuleKind.LENGTH: (
        "'{PropertyName}' must be between {MinLength} and {MaxLength} characters. "
        "You entered {TotalLength} characters."
    ),
    RuleKind.EXACT: (
        "'{PropertyName}' must be {MaxLength} characters in length. "
        "You entered {TotalLength} characters."
    ),
    RuleKind.MAXIMUM: (
        "The length of '{PropertyName}' must be {MaxLength} characters or fewer. "
        "You entered {TotalLength} characters."
    ),
    RuleKind.MINIMUM: (
        "The length of '{PropertyName}' must be at least {MinLength} characters. "
        "You entered {TotalLength} characters."
    ),
}

TEMPLATES: Final[dict[str, dict[str, str]]] = {DEFAULT_LANGUAGE: ENGLISH_TEMPLATES}


def localized(
    error_code: str, rule_name: str, language: str = DEFAULT_LANGUAGE
) -> str:
    """Look up the message template for an error code.

    Args:
        error_code: Key to look up, usually the rule name
        rule_name: Fallback key when error_code has no template
        language: Language code; unknown languages fall back to English

    Returns:
        The message template with {Name} placeholders
    """
    templates = TEMPLATES.get(language, ENGLISH_TEMPLATES)
    if error_code in templates:
        return templates[error_code]
    return templates.get(rule_name, GENERIC_TEMPLATE)
