"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


def negative_amount(amount) -> str:
    """Return message for an item created with a negative amount."""
    return f"Amount must be non-negative, got {amount}"


def unknown_choice(kind: str, value: str, choices) -> str:
    """Return message for an unrecognized enum value."""
    return f"Unknown {kind} '{value}'. Expected one of: {', '.join(choices)}"


def missing_columns(columns) -> str:
    """Return message when a CSV file lacks required columns."""
    return f"CSV file missing required columns: {', '.join(sorted(columns))}"
