"""Import reconciler: duplicate-aware merge of incoming case rows.

Pure with respect to the store: it only reads the set of existing process
numbers and returns new entities; the caller appends them in one batch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from casetrack.application.dtos.imports import ImportReport
from casetrack.application.services.directory import UserDirectory
from casetrack.domain.entities import CaseDetails, CaseEntity, TramitationEntry
from casetrack.shared.utils.datetime import utc_now_iso
from casetrack.shared.utils.generators import display_id_for

logger = logging.getLogger(__name__)

IMPORT_ACTOR_NAME = "Import process"


def reconcile(
    incoming_rows: Iterable[CaseDetails],
    existing_process_numbers: set[str],
    next_id: int,
    users: UserDirectory,
    owner_name: str,
    actor_name: str = IMPORT_ACTOR_NAME,
    clock: Callable[[], str] = utc_now_iso,
) -> ImportReport:
    """Split incoming rows into accepted cases and rejected duplicates.

    Rows are visited in input order. A row with an empty process number is
    skipped; a number already stored is a system duplicate; a number seen
    earlier in the same batch is an in-file duplicate (the first occurrence
    wins). Accepted rows get consecutive ids starting at next_id and one
    synthetic tramitation entry from actor_name to the assignee.

    Args:
        incoming_rows: Drafts built from spreadsheet or pasted rows.
        existing_process_numbers: Trimmed numbers already in the store.
        next_id: First id to hand out.
        users: Directory used to resolve assignee names case-insensitively.
        owner_name: Firm name stamped on each accepted case.
        actor_name: from_user of the synthetic entry.
        clock: Timestamp source.

    Returns:
        ImportReport with accepted entities and rejected process numbers.
    """
    seen: set[str] = set()
    accepted: list[CaseEntity] = []
    in_system: list[str] = []
    in_file: list[str] = []
    skipped = 0

    for row in incoming_rows:
        key = row.process_key
        if not key:
            skipped += 1
            continue
        if key in existing_process_numbers:
            in_system.append(key)
            continue
        if key in seen:
            in_file.append(key)
            continue
        seen.add(key)

        case_id = next_id + len(accepted)
        user = users.find_by_name_loose(row.assignee_name)
        assignee = user.name if user else row.assignee_name.strip()
        case = CaseEntity(
            **vars(row.details()),
            id=case_id,
            display_id=display_id_for(case_id),
            owner_name=owner_name,
        )
        case.process_number = key
        case.assignee_name = assignee
        case.assignee_email = user.email if user else ""
        case.co_responsible_name = assignee
        case.record_tramitation(
            TramitationEntry(
                from_user=actor_name,
                to_user=assignee,
                timestamp=clock(),
                deadline=row.assigned_deadline or "",
            )
        )
        accepted.append(case)

    if in_system or in_file:
        logger.info(
            "Import rejected %d system and %d in-file duplicate(s)",
            len(in_system),
            len(in_file),
        )
    return ImportReport(
        accepted=accepted,
        rejected_duplicate_in_system=in_system,
        rejected_duplicate_in_file=in_file,
        skipped_without_number=skipped,
    )
