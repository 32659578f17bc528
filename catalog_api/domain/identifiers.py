"""Identifier helpers for product lookups."""

import re

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_uuid(term: str) -> bool:
    """Check whether a term is a UUID in canonical hyphenated form.

    Braced, URN and bare-hex forms are rejected so that a short slug made
    of hex digits is never mistaken for a primary key.

    Args:
        term: Lookup term.

    Returns:
        True if the term can be used as a product id.
    """
    return bool(_UUID_PATTERN.fullmatch(term))


def normalize_slug(value: str) -> str:
    """Turn a title or raw slug into the stored slug form.

    Example:
        >>> normalize_slug("Men's Chill Crew Neck")
        'mens_chill_crew_neck'
    """
    return value.strip().lower().replace(" ", "_").replace("'", "")


def normalize_tags(tags: list[str]) -> list[str]:
    """Lower-case and strip tags, dropping empty ones."""
    return [tag.strip().lower() for tag in tags if tag.strip()]
