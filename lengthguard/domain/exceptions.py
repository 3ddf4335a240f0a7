"""Domain-specific exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class InvalidConfigurationError(DomainError, ValueError):
    """Raised when a rule is constructed with inconsistent arguments."""

    def __init__(self, param_name: str, message: str):
        super().__init__(f"{message} (Parameter '{param_name}')")
        self.param_name = param_name
        self.message = message
