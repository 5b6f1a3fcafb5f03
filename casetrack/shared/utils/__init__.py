"""Shared utilities: datetime, generators, text normalization."""

from casetrack.shared.utils.datetime import (
    local_today,
    parse_calendar_date,
    utc_now,
    utc_now_iso,
)
from casetrack.shared.utils.generators import display_id_for, generate_cuid
from casetrack.shared.utils.text import fold, name_key, strip_accents

__all__ = [
    "display_id_for",
    "fold",
    "generate_cuid",
    "local_today",
    "name_key",
    "parse_calendar_date",
    "strip_accents",
    "utc_now",
    "utc_now_iso",
]
