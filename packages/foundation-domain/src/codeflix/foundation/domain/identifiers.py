"""Identifier value objects for entity identity.

Example:
    >>> from codeflix.foundation.domain import UniqueEntityId
    >>> UniqueEntityId("b0da610e-726a-4e1a-aa9a-a1baa8e1d876")
    UniqueEntityId(value='b0da610e-726a-4e1a-aa9a-a1baa8e1d876')
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from typing import ClassVar

from codeflix.foundation.domain.exceptions import InvalidIdentifierError


def _generate_uuid() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class UniqueEntityId:
    """Entity identifier wrapping a canonical UUID string.

    Generates a random UUID4 when no value is given. Any value, generated or
    supplied, is validated once on construction.

    Attributes:
        value: 36-character UUID string in 8-4-4-4-12 hex form.

    Raises:
        InvalidIdentifierError: If value is not a well-formed UUID string.

    Example:
        >>> UniqueEntityId("fake-id")
        Traceback (most recent call last):
        ...
        InvalidIdentifierError: ID must be a valid UUID
    """

    value: str = field(default_factory=_generate_uuid)

    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
        re.IGNORECASE,
    )

    def __post_init__(self) -> None:
        """Validate identifier format on construction."""
        if self.value is None:
            object.__setattr__(self, "value", _generate_uuid())
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.value, str) or not self._PATTERN.fullmatch(self.value):
            raise InvalidIdentifierError()

    def __str__(self) -> str:
        """Return UUID string for serialization."""
        return self.value
