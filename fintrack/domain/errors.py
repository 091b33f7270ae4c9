"""Domain error types."""


class DomainError(ValueError):
    """Base class for domain-level errors."""


class ValidationError(DomainError):
    """Entry input failed validation.

    Attributes:
        errors: Mapping of field name to a user-facing message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        message = "; ".join(
            f"{field}: {text}" for field, text in self.errors.items()
        )
        super().__init__(message or "Invalid input")


class AuthenticationRequiredError(DomainError):
    """A write was attempted without an authenticated user."""


class ExchangeRateError(DomainError):
    """Exchange rates could not be fetched or parsed."""


__all__ = [
    "DomainError",
    "ValidationError",
    "AuthenticationRequiredError",
    "ExchangeRateError",
]
