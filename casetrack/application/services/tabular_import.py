"""Mapping of spreadsheet-style rows to case drafts.

Two sources feed the import: rows already parsed from a workbook (a list of
header -> value mappings) and text pasted from a spreadsheet (tab-separated,
first line holds the headers). Headers are matched after trimming,
lower-casing and stripping accents; unknown columns are ignored. Malformed
cells degrade to defaults instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import Any

from casetrack.domain.entities import CaseDetails
from casetrack.domain.enums import Priority
from casetrack.domain.exceptions import ValidationException
from casetrack.shared.utils.datetime import parse_calendar_date
from casetrack.shared.utils.text import fold

# Fallback assignee column ("Responsável"); not a CaseDetails field.
RESPONSIBLE = "responsible"

HEADER_FIELD_MAP: dict[str, str] = {
    # Headers of the firm's case spreadsheet
    "TRIBUNAL": "tribunal",
    "PROCESSO NÚMERO": "process_number",
    "AUTOR": "author",
    "RÉU": "defendant",
    "TRIB": "court",
    "VARA/COMARCA": "venue",
    "MATÉRIA": "subject_matter",
    "Natureza Ação": "action_nature",
    "Valor da Ação": "claim_value",
    "Segredo de Justiça": "secret_of_justice",
    "Data Nomeação": "appointment_date",
    "Data Inicial": "start_date",
    "PRAZO DETERMINADO": "assigned_deadline",
    "Data Designada": "scheduled_date",
    "DATA FINAL": "final_deadline",
    "DATA FINAL CORRIDOS": "final_deadline_calendar",
    "Data Atribuída": "assigned_date",
    "Start Hour": "start_hour",
    "Finish Hour": "finish_hour",
    "DIAS ÚTEIS": "business_days",
    "Prioridade": "priority",
    "Fases": "phase",
    "Fase": "phase",
    "Status": "status",
    "Atribuído a": "assignee_name",
    "Responsável": RESPONSIBLE,
    "E-mail": "assignee_email",
    "Co-responsável": "co_responsible_name",
    # English aliases
    "Process Number": "process_number",
    "Author": "author",
    "Defendant": "defendant",
    "Court": "court",
    "Venue": "venue",
    "Subject Matter": "subject_matter",
    "Action Nature": "action_nature",
    "Claim Value": "claim_value",
    "Secret of Justice": "secret_of_justice",
    "Appointment Date": "appointment_date",
    "Start Date": "start_date",
    "Assigned Deadline": "assigned_deadline",
    "Scheduled Date": "scheduled_date",
    "Final Deadline": "final_deadline",
    "Final Deadline (Calendar Days)": "final_deadline_calendar",
    "Assigned Date": "assigned_date",
    "Business Days": "business_days",
    "Priority": "priority",
    "Phase": "phase",
    "Assigned To": "assignee_name",
    "Assignee": "assignee_name",
    "Responsible": RESPONSIBLE,
    "Email": "assignee_email",
    "Co-responsible": "co_responsible_name",
}

_TRUTHY = {"sim", "s", "yes", "y", "true", "1"}

DATE_FIELDS = frozenset(
    {
        "appointment_date",
        "start_date",
        "assigned_deadline",
        "scheduled_date",
        "final_deadline",
        "final_deadline_calendar",
        "assigned_date",
    }
)

# Day zero of spreadsheet serial dates (1900 date system).
SERIAL_DATE_EPOCH = date(1899, 12, 30)
_MAX_SERIAL_DATE = 2958465  # 9999-12-31


def normalize_header(header: Any) -> str:
    """Header comparison key: trimmed, lower-case, accent-free."""
    return fold(str(header)) if header is not None else ""


FIELD_BY_HEADER: dict[str, str] = {
    normalize_header(header): field_name for header, field_name in HEADER_FIELD_MAP.items()
}


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _date_text(raw: Any, text: str) -> str:
    """ISO date for a date cell: serial numbers and DD/MM/YYYY are converted.

    Text that is not a recognisable date is kept as typed.
    """
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        if 0 < raw <= _MAX_SERIAL_DATE:
            return (SERIAL_DATE_EPOCH + timedelta(days=int(raw))).isoformat()
        return text
    parsed = parse_calendar_date(text)
    return parsed.isoformat() if parsed else text


def _to_int(text: str) -> int:
    try:
        return int(float(text.replace(",", ".")))
    except ValueError:
        return 0


def draft_from_row(row: Mapping[str, Any]) -> CaseDetails | None:
    """Build a draft from one header -> value mapping.

    Returns None when no cell maps to a known column.
    """
    values: dict[str, str] = {}
    for header, raw in row.items():
        field_name = FIELD_BY_HEADER.get(normalize_header(header))
        text = _cell_text(raw)
        if field_name in DATE_FIELDS and text:
            text = _date_text(raw, text)
        if field_name and text:
            values[field_name] = text
    if not values:
        return None

    responsible = values.pop(RESPONSIBLE, "")
    draft = CaseDetails()
    for field_name, text in values.items():
        if field_name == "business_days":
            draft.business_days = _to_int(text)
        elif field_name == "priority":
            draft.priority = Priority.parse(text)
        elif field_name == "secret_of_justice":
            draft.secret_of_justice = fold(text) in _TRUTHY
        else:
            setattr(draft, field_name, text)
    if not draft.assignee_name:
        draft.assignee_name = responsible
    return draft


def drafts_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[CaseDetails]:
    """Map parsed rows to drafts, dropping rows with no recognised column."""
    drafts = []
    for row in rows:
        draft = draft_from_row(row)
        if draft is not None:
            drafts.append(draft)
    return drafts


def rows_from_paste(text: str) -> list[dict[str, str]]:
    """Split pasted spreadsheet text into header -> value rows.

    Raises:
        ValidationException: the text is blank (no header row).
    """
    lines = [line for line in text.strip().splitlines() if line.strip()]
    if not lines:
        raise ValidationException("Pasted text must start with a header row", field="text")
    headers = lines[0].split("\t")
    rows = []
    for line in lines[1:]:
        cells = line.split("\t")
        rows.append(
            {header: cells[i] for i, header in enumerate(headers) if i < len(cells)}
        )
    return rows
