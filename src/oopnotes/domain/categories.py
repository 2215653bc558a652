"""Topic categories and their display order."""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    OOP = "oop"
    SOLID = "solid"
    CREATIONAL = "creational"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def rank(self) -> int:
        return CATEGORY_ORDER.index(self)


_LABELS: dict[Category, str] = {
    Category.OOP: "Object-Oriented Principles",
    Category.SOLID: "SOLID Principles",
    Category.CREATIONAL: "Creational Patterns",
}

CATEGORY_ORDER: tuple[Category, ...] = (Category.OOP, Category.SOLID, Category.CREATIONAL)


def parse_category(value: str) -> Category:
    """Case-insensitive lookup. Raises ValueError listing the valid names."""
    try:
        return Category(value.strip().lower())
    except ValueError:
        choices = ", ".join(c.value for c in CATEGORY_ORDER)
        raise ValueError(f"Unknown category {value!r}; expected one of: {choices}") from None
