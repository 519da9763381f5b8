"""Domain exception hierarchy for type-safe error handling.

Exceptions carry a machine-readable error code and optional structured
context. Seedwork primitives raise them and never catch them: recovery is
the caller's concern.

Example:
    >>> from codeflix.foundation.domain.exceptions import ValidationError
    >>> raise ValidationError("The name is required.", field="name", rule="required")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "DomainError",
    "InvalidIdentifierError",
    "ValidationError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information (entity IDs, field names).

    Example:
        >>> raise DomainError("Operation failed", context={"entity_id": "123"})
        DomainError: Operation failed (entity_id=123)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class InvalidIdentifierError(DomainError):
    """Raised when an entity identifier is not a well-formed UUID.

    Non-retryable: the caller must supply a different identifier.

    Attributes:
        error_code: "INVALID_IDENTIFIER" (class constant).

    Example:
        >>> raise InvalidIdentifierError()
        InvalidIdentifierError: ID must be a valid UUID
    """

    error_code: str = "INVALID_IDENTIFIER"

    def __init__(self, message: str = "ID must be a valid UUID") -> None:
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when a value fails a domain validation rule.

    The message is the complete, human-readable rule violation. Field and rule
    names are kept as attributes rather than context so that ``str(error)``
    is exactly the message.

    Attributes:
        error_code: "VALIDATION_ERROR" (class constant).
        field: Name of the property that failed validation.
        rule: Name of the violated rule (e.g. "required", "max_length").

    Example:
        >>> raise ValidationError("The name must be a string.", field="name", rule="string")
        ValidationError: The name must be a string.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        rule: str | None = None,
        **extra_context: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            message: Human-readable validation failure message.
            field: Property name that failed validation.
            rule: Name of the rule that failed.
            **extra_context: Additional debugging context.
        """
        self.field = field
        self.rule = rule
        super().__init__(message, extra_context)
