"""Text normalization helpers (case/accent folding, key comparison)."""

import unicodedata


def strip_accents(value: str) -> str:
    """Remove combining marks (NFD decomposition), e.g. 'Número' -> 'Numero'."""
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold(value: str | None) -> str:
    """Trim, lower-case and strip accents. None -> ''."""
    if not value:
        return ""
    return strip_accents(value.strip().lower())


def name_key(value: str | None) -> str:
    """Uniqueness key for names and emails: trimmed and lower-cased."""
    return (value or "").strip().lower()
