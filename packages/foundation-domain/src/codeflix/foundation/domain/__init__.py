"""Codeflix Foundation Domain -- pure Python domain primitives.

This package provides the seedwork shared by all bounded contexts:
identifiers, the entity base class, fluent validation rules, the exception
hierarchy, and immutability helpers.
"""

from codeflix.foundation.domain.entities import ID_KEY, Entity
from codeflix.foundation.domain.exceptions import (
    DomainError,
    InvalidIdentifierError,
    ValidationError,
)
from codeflix.foundation.domain.identifiers import UniqueEntityId
from codeflix.foundation.domain.immutability import deep_freeze
from codeflix.foundation.domain.validators import ValidatorRules

__all__ = [
    "ID_KEY",
    "DomainError",
    "Entity",
    "InvalidIdentifierError",
    "UniqueEntityId",
    "ValidationError",
    "ValidatorRules",
    "deep_freeze",
]
