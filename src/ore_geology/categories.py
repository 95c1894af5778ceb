"""The fixed set of observational categories."""

from __future__ import annotations

import enum


class Category(str, enum.Enum):
    """Observational domain. Member order is the canonical order."""

    FIELD = "field"
    HAND_SPECIMEN = "handSpecimen"
    MICROSCOPY = "microscopy"
    GEOCHEMISTRY = "geochemistry"
    REMOTE_SENSING = "remoteSensing"


CATEGORY_ORDER: tuple[Category, ...] = tuple(Category)

# Short names accepted at the command surface
CATEGORY_ALIASES = {
    "field": Category.FIELD,
    "outcrop": Category.FIELD,
    "hand": Category.HAND_SPECIMEN,
    "handspecimen": Category.HAND_SPECIMEN,
    "hand-specimen": Category.HAND_SPECIMEN,
    "specimen": Category.HAND_SPECIMEN,
    "microscopy": Category.MICROSCOPY,
    "micro": Category.MICROSCOPY,
    "thin-section": Category.MICROSCOPY,
    "geochemistry": Category.GEOCHEMISTRY,
    "geochem": Category.GEOCHEMISTRY,
    "remote": Category.REMOTE_SENSING,
    "remotesensing": Category.REMOTE_SENSING,
    "remote-sensing": Category.REMOTE_SENSING,
    "satellite": Category.REMOTE_SENSING,
}


def resolve_category(name: str) -> Category | None:
    """Resolve a user-typed category name or alias."""
    return CATEGORY_ALIASES.get(name.strip().lower())
