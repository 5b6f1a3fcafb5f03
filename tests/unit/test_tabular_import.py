"""Tests for spreadsheet row and pasted-text mapping."""

from datetime import datetime

import pytest

from casetrack.application.services.tabular_import import (
    draft_from_row,
    drafts_from_rows,
    normalize_header,
    rows_from_paste,
)
from casetrack.domain.enums import Priority
from casetrack.domain.exceptions import ValidationException


def test_headers_match_ignoring_case_and_accents() -> None:
    assert normalize_header("  PROCESSO NÚMERO ") == "processo numero"
    draft = draft_from_row({"processo numero": "123", "reu": "Empresa X", "MATERIA": "Tributário"})
    assert draft.process_number == "123"
    assert draft.defendant == "Empresa X"
    assert draft.subject_matter == "Tributário"


def test_typed_cells_are_converted() -> None:
    draft = draft_from_row(
        {
            "PROCESSO NÚMERO": 1234.0,
            "DIAS ÚTEIS": "15",
            "Prioridade": "Alta",
            "Segredo de Justiça": "Sim",
            "DATA FINAL": datetime(2024, 6, 1, 0, 0),
        }
    )
    assert draft.process_number == "1234"
    assert draft.business_days == 15
    assert draft.priority == Priority.HIGH
    assert draft.secret_of_justice is True
    assert draft.final_deadline == "2024-06-01"


def test_date_cells_become_iso_dates() -> None:
    draft = draft_from_row(
        {
            "Process Number": "1",
            "DATA FINAL": 45000.0,
            "PRAZO DETERMINADO": "01/06/2024",
            "Data Designada": "15-07-2024",
            "Data Inicial": "a combinar",
        }
    )
    assert draft.final_deadline == "2023-03-15"
    assert draft.assigned_deadline == "2024-06-01"
    assert draft.scheduled_date == "2024-07-15"
    assert draft.start_date == "a combinar"


def test_numbers_outside_date_columns_are_left_alone() -> None:
    draft = draft_from_row({"Process Number": 45000.0, "Valor da Ação": 45000})
    assert draft.process_number == "45000"
    assert draft.claim_value == "45000"


def test_malformed_cells_fall_back_to_defaults() -> None:
    draft = draft_from_row({"Process Number": "9", "Business Days": "many", "Priority": "urgent"})
    assert draft.business_days == 0
    assert draft.priority == Priority.LOW


def test_responsible_is_fallback_assignee() -> None:
    assert draft_from_row({"Process Number": "1", "Responsável": "Bruno"}).assignee_name == "Bruno"
    both = draft_from_row({"Process Number": "1", "Responsável": "Bruno", "Atribuído a": "Carla"})
    assert both.assignee_name == "Carla"


def test_rows_without_known_columns_are_dropped() -> None:
    assert draft_from_row({"Whatever": "x"}) is None
    drafts = drafts_from_rows([{"Whatever": "x"}, {"Process Number": "1"}, {"Process Number": ""}])
    assert len(drafts) == 1


def test_paste_splits_tabs_and_skips_blank_lines() -> None:
    text = "PROCESSO NÚMERO\tAUTOR\n0001\tJoão\n\n0002\n"
    rows = rows_from_paste(text)
    assert rows == [
        {"PROCESSO NÚMERO": "0001", "AUTOR": "João"},
        {"PROCESSO NÚMERO": "0002"},
    ]


def test_blank_paste_is_rejected() -> None:
    with pytest.raises(ValidationException):
        rows_from_paste("  \n  ")
