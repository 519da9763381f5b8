"""Fluent validation rules for single property values.

Each rule either returns the validator, so further rules can be chained, or
raises :class:`ValidationError` for the first violation. Rules run in the
order they are called; later rules in a chain never run once one fails.

Only ``None`` skips the type and length rules. Other falsy values such as
``0``, ``False`` or ``""`` are checked like any other value.

Example:
    >>> from codeflix.foundation.domain.validators import ValidatorRules
    >>> rules = ValidatorRules.values("Movie", "name").required().string().max_length(255)
    >>> ValidatorRules.values(None, "name").required().string()
    Traceback (most recent call last):
    ...
    ValidationError: The name is required.
"""

from __future__ import annotations

import logging
from collections.abc import Sized
from typing import Any, NoReturn, Self

from codeflix.foundation.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


class ValidatorRules:
    """Validation rules bound to one (value, property) pair.

    Create one instance per value with :meth:`values` and discard it once the
    chain completes.

    Attributes:
        value: The value under test.
        property: Property name used in error messages.
    """

    def __init__(self, value: Any, property: str) -> None:  # noqa: A002
        self.value = value
        self.property = property

    @classmethod
    def values(cls, value: Any, property: str) -> Self:  # noqa: A002
        """Bind a value and its property name. Performs no validation."""
        return cls(value, property)

    def required(self) -> Self:
        """Fail if the value is ``None`` or an empty string.

        Raises:
            ValidationError: "The {property} is required."
        """
        if self.value is None or (isinstance(self.value, str) and self.value == ""):
            self._fail("required", f"The {self.property} is required.")
        return self

    def string(self) -> Self:
        """Fail if the value is present and not a ``str``.

        Raises:
            ValidationError: "The {property} must be a string."
        """
        if self.value is not None and not isinstance(self.value, str):
            self._fail("string", f"The {self.property} must be a string.")
        return self

    def max_length(self, max_length: int) -> Self:
        """Fail if the value is present and longer than ``max_length``.

        Values without a length (numbers, booleans) have nothing to measure
        and pass.

        Args:
            max_length: Maximum allowed length, inclusive.

        Raises:
            ValidationError: "The {property} length must be less or equal than
                {max_length} characters."
        """
        if (
            self.value is not None
            and isinstance(self.value, Sized)
            and len(self.value) > max_length
        ):
            self._fail(
                "max_length",
                f"The {self.property} length must be less or equal than "
                f"{max_length} characters.",
            )
        return self

    def boolean(self) -> Self:
        """Fail if the value is present and not a ``bool``.

        No coercion: ``"true"``, ``"false"``, ``1`` and ``0`` all fail.

        Raises:
            ValidationError: "The {property} must be a boolean."
        """
        if self.value is not None and not isinstance(self.value, bool):
            self._fail("boolean", f"The {self.property} must be a boolean.")
        return self

    def _fail(self, rule: str, message: str) -> NoReturn:
        logger.debug(
            "Validation rule %s failed for %s: %s",
            rule,
            self.property,
            message,
        )
        raise ValidationError(message, field=self.property, rule=rule)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r}, property={self.property!r})"
