"""Codeflix Domain Catalog -- catalog entities built on the foundation seedwork."""

from codeflix.domain.catalog.category import Category, CategoryProperties

__all__ = [
    "Category",
    "CategoryProperties",
]
