"""Category entity for the video catalog.

Public command methods validate new values with ``ValidatorRules`` before
committing them; a failed validation leaves the category unchanged.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import NotRequired, TypedDict

from codeflix.foundation.domain.entities import Entity
from codeflix.foundation.domain.identifiers import UniqueEntityId
from codeflix.foundation.domain.validators import ValidatorRules

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 255


class CategoryProperties(TypedDict):
    """Properties of a Category.

    Only ``name`` is required on construction; the rest are defaulted.
    """

    name: str
    description: NotRequired[str | None]
    is_active: NotRequired[bool]
    created_at: NotRequired[datetime]


class Category(Entity[CategoryProperties]):
    """A catalog category (e.g. "Movie", "Documentary").

    Attributes:
        name: Category name (required, max 255 characters).
        description: Optional free-text description.
        is_active: Whether the category is visible. Defaults to True.
        created_at: Creation timestamp (UTC). Defaults to now.

    Raises:
        ValidationError: If any property fails validation on construction.

    Example:
        >>> category = Category({"name": "Movie"})
        >>> category.is_active
        True
        >>> category.deactivate()
        >>> category.is_active
        False
    """

    def __init__(
        self,
        props: CategoryProperties,
        entity_id: UniqueEntityId | None = None,
    ) -> None:
        self.validate(props)
        super().__init__(props, entity_id)
        self._set_description(props.get("description"))
        self._set_is_active(props.get("is_active"))
        self._props["created_at"] = props.get("created_at") or datetime.now(UTC)

    @staticmethod
    def validate(props: CategoryProperties) -> None:
        """Validate category properties.

        Raises:
            ValidationError: On the first invalid property.
        """
        ValidatorRules.values(props.get("name"), "name").required().string().max_length(
            NAME_MAX_LENGTH
        )
        ValidatorRules.values(props.get("description"), "description").string()
        ValidatorRules.values(props.get("is_active"), "is_active").boolean()

    # -- Accessors --

    @property
    def name(self) -> str:
        return self._props["name"]

    @property
    def description(self) -> str | None:
        return self._props["description"]

    @property
    def is_active(self) -> bool:
        return self._props["is_active"]

    @property
    def created_at(self) -> datetime:
        return self._props["created_at"]

    # -- Public command methods --

    def update(self, name: str, description: str | None) -> None:
        """Rename the category and replace its description.

        Both values are validated before either is applied.

        Args:
            name: New name (required, max 255 characters).
            description: New description, or None to clear it.

        Raises:
            ValidationError: If name or description is invalid.
        """
        self.validate({"name": name, "description": description})
        self._set_name(name)
        self._set_description(description)
        logger.debug("Category %s updated", self.id)

    def activate(self) -> None:
        self._set_is_active(True)
        logger.debug("Category %s activated", self.id)

    def deactivate(self) -> None:
        self._set_is_active(False)
        logger.debug("Category %s deactivated", self.id)

    # -- Private mutators --

    def _set_name(self, value: str) -> None:
        self._props["name"] = value

    def _set_description(self, value: str | None) -> None:
        self._props["description"] = value

    def _set_is_active(self, value: bool | None) -> None:
        self._props["is_active"] = True if value is None else value
