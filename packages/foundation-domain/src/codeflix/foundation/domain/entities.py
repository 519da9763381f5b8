"""Base entity class pairing an identity with a properties mapping.

Concrete entities subclass :class:`Entity` with a ``TypedDict`` describing
their properties, add typed accessors, and validate field values in their own
command methods.

Example:
    >>> from typing import TypedDict
    >>> from codeflix.foundation.domain.entities import Entity
    >>>
    >>> class GenreProperties(TypedDict):
    ...     name: str
    ...
    >>> class Genre(Entity[GenreProperties]):
    ...     @property
    ...     def name(self) -> str:
    ...         return self.props["name"]
    ...
    >>> genre = Genre({"name": "Drama"})
    >>> genre.to_object()["name"]
    'Drama'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from codeflix.foundation.domain.identifiers import UniqueEntityId

PropsT = TypeVar("PropsT", bound=Mapping[str, Any])

#: Key under which :meth:`Entity.to_object` places the identity string.
ID_KEY = "id"


class Entity(Generic[PropsT]):
    """Base class for all domain entities.

    The identity is set once on construction and never reassigned. The
    properties mapping is stored by reference; subclasses mutate it in place
    through their own command methods.

    Attributes:
        identity: The entity's UniqueEntityId (generated if not supplied).
        props: The live properties mapping.

    Raises:
        ValueError: If the properties contain the reserved ``"id"`` key.
    """

    def __init__(self, props: PropsT, entity_id: UniqueEntityId | None = None) -> None:
        if ID_KEY in props:
            msg = f"Property name {ID_KEY!r} is reserved for the entity identity"
            raise ValueError(msg)
        self._identity = entity_id if entity_id is not None else UniqueEntityId()
        self._props = props

    @property
    def id(self) -> str:
        """Identity string of this entity."""
        return self._identity.value

    @property
    def identity(self) -> UniqueEntityId:
        return self._identity

    @property
    def props(self) -> PropsT:
        """Current properties (live reference, never a stale copy)."""
        return self._props

    def to_object(self) -> dict[str, Any]:
        """Project the entity onto a new plain dict.

        Returns:
            ``{"id": <identity string>, **props}``, built fresh on every call.
        """
        return {ID_KEY: self.id, **self._props}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r}, props={self._props!r})"
