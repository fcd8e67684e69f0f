"""Text helpers for URL slugs and name ordering."""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def strip_diacritics(value: str) -> str:
    """Remove combining marks after NFD decomposition.

    Args:
        value: Input text.

    Returns:
        Text without accents ("Escritório" -> "Escritorio").
    """
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def generate_slug(name: str) -> str:
    """Build a URL-safe slug from a display name.

    Lower-cases, strips diacritics, collapses every run of characters
    outside ``[a-z0-9]`` into one hyphen and trims hyphens at both ends.

    Example:
        >>> generate_slug("Sala & Estar!!")
        'sala-estar'

    Args:
        name: Display name.

    Returns:
        Slug containing only ``[a-z0-9-]``.
    """
    slug = strip_diacritics(name.lower())
    slug = _NON_ALNUM.sub("-", slug)
    return slug.strip("-")


def collation_key(name: str) -> str:
    """Sort key approximating locale-aware name comparison.

    Accents and case are ignored, so "Évora" sorts between "Ana" and "Fado".
    Names differing only in accents or case compare equal and keep their
    order under a stable sort.
    """
    return strip_diacritics(name).casefold()
