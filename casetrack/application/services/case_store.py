"""Case store: the single owner of all case records.

Commands validate first and mutate last, so a rejected command leaves the
collection untouched. Every change of assignee (single update, bulk update,
tramitation) appends exactly one tramitation entry. Logs and attachments
of stored cases are never rewritten by updates.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Mapping

from casetrack.application.services.directory import UserDirectory
from casetrack.domain.entities import (
    Attachment,
    CaseDetails,
    CaseEntity,
    TramitationEntry,
)
from casetrack.domain.exceptions import (
    DuplicateProcessNumberException,
    ResourceNotFoundException,
    UserNotFoundException,
    ValidationException,
)
from casetrack.shared.utils.datetime import utc_now_iso
from casetrack.shared.utils.generators import display_id_for

logger = logging.getLogger(__name__)


def _require_process_number(details: CaseDetails) -> str:
    key = details.process_key
    if not key:
        raise ValidationException("Process number is required", field="process_number")
    return key


class CaseStore:
    """In-memory case collection with command methods.

    Ordering is most-recent-first for cases created one by one; imported
    batches are appended at the tail.
    """

    def __init__(
        self,
        directory: UserDirectory,
        owner_name: str,
        cases: Iterable[CaseEntity] = (),
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self._directory = directory
        self._owner_name = owner_name
        self._cases: list[CaseEntity] = list(cases)
        self._last_id = max((c.id for c in self._cases), default=0)
        self._clock = clock

    def __len__(self) -> int:
        return len(self._cases)

    @property
    def owner_name(self) -> str:
        return self._owner_name

    def list_cases(self) -> list[CaseEntity]:
        return list(self._cases)

    def get_case(self, case_id: int) -> CaseEntity:
        """Return case by id; raise ResourceNotFoundException if missing."""
        for case in self._cases:
            if case.id == case_id:
                return case
        raise ResourceNotFoundException("case", case_id)

    def process_numbers(self) -> set[str]:
        """Trimmed process numbers of all stored cases."""
        return {c.process_key for c in self._cases}

    def next_id(self) -> int:
        """Id the next created case will get (ids are never reused)."""
        return self._last_id + 1

    def allocate_id(self) -> int:
        """Reserve the next case id."""
        self._last_id += 1
        return self._last_id

    def _ensure_unique(self, process_key: str, exclude_id: int | None = None) -> None:
        for case in self._cases:
            if case.id != exclude_id and case.process_key == process_key:
                raise DuplicateProcessNumberException(process_key)

    def _replace(self, updated: CaseEntity) -> None:
        self._cases = [updated if c.id == updated.id else c for c in self._cases]

    def add_case(self, draft: CaseDetails, acting_user: str) -> CaseEntity:
        """Create a case from a draft and log its initial assignment.

        Raises:
            ValidationException: process number is empty.
            DuplicateProcessNumberException: process number already stored.
        """
        key = _require_process_number(draft)
        self._ensure_unique(key)

        case_id = self.allocate_id()
        case = CaseEntity(
            **vars(draft.details()),
            id=case_id,
            display_id=display_id_for(case_id),
            owner_name=self._owner_name,
        )
        case.assignee_email = (
            self._directory.email_for(draft.assignee_name) or draft.assignee_email
        )
        case.co_responsible_name = draft.assignee_name
        case.record_tramitation(
            TramitationEntry(
                from_user=acting_user,
                to_user=draft.assignee_name,
                timestamp=self._clock(),
                deadline=draft.assigned_deadline or "",
            )
        )
        self._cases.insert(0, case)
        logger.info("Case %s created (%s)", case.display_id, key)
        return case

    def _apply_update(
        self, stored: CaseEntity, details: CaseDetails, acting_user: str
    ) -> CaseEntity:
        """Merge details into a copy of stored, logging an assignee change."""
        updated = stored.with_details(details)
        if stored.assignee_name == details.assignee_name:
            return updated
        updated.assignee_email = self._directory.email_for(details.assignee_name)
        updated.co_responsible_name = (
            details.co_responsible_name
            or stored.co_responsible_name
            or details.assignee_name
        )
        updated.record_tramitation(
            TramitationEntry(
                from_user=acting_user,
                to_user=details.assignee_name,
                timestamp=self._clock(),
                deadline=details.assigned_deadline or "",
            )
        )
        return updated

    def update_case(
        self, case_id: int, details: CaseDetails, acting_user: str
    ) -> CaseEntity:
        """Replace a case's editable attributes.

        If the assignee changes, one tramitation entry is appended and the
        email follows the new assignee's profile; otherwise the update is
        applied verbatim with no log change.

        Raises:
            ResourceNotFoundException: no case with case_id.
            DuplicateProcessNumberException: number belongs to another case.
        """
        stored = self.get_case(case_id)
        key = _require_process_number(details)
        self._ensure_unique(key, exclude_id=case_id)
        updated = self._apply_update(stored, details, acting_user)
        self._replace(updated)
        return updated

    def update_multiple(
        self, updates: Mapping[int, CaseDetails], acting_user: str
    ) -> list[CaseEntity]:
        """Apply several updates at once, all or nothing.

        Ids that are not stored are skipped. Process numbers are checked
        against the collection as it will look after the whole batch.
        """
        batch = {cid: d for cid, d in updates.items() if any(c.id == cid for c in self._cases)}
        for details in batch.values():
            _require_process_number(details)

        final_keys = {
            c.id: (batch[c.id].process_key if c.id in batch else c.process_key)
            for c in self._cases
        }
        counts = Counter(final_keys.values())
        for case_id in batch:
            if counts[final_keys[case_id]] > 1:
                raise DuplicateProcessNumberException(final_keys[case_id])

        results = [
            self._apply_update(self.get_case(cid), details, acting_user)
            for cid, details in batch.items()
        ]
        for updated in results:
            self._replace(updated)
        return results

    def delete_case(self, case_id: int) -> None:
        self.get_case(case_id)
        self._cases = [c for c in self._cases if c.id != case_id]
        logger.info("Case %s deleted", case_id)

    def delete_multiple(self, case_ids: Iterable[int]) -> int:
        """Remove every listed case that exists; return how many were removed."""
        doomed = set(case_ids)
        before = len(self._cases)
        self._cases = [c for c in self._cases if c.id not in doomed]
        return before - len(self._cases)

    def tramitate(
        self,
        case_id: int,
        to_user_name: str,
        deadline: str,
        acting_user: str,
        attachment: Attachment | None = None,
    ) -> CaseEntity:
        """Hand a case to another registered user.

        The attachment, if any, must already be encoded: nothing is
        mutated unless the case and the target user both exist.

        Raises:
            ResourceNotFoundException: no case with case_id.
            UserNotFoundException: no user named to_user_name.
        """
        stored = self.get_case(case_id)
        target = self._directory.find_by_name(to_user_name)
        if target is None:
            raise UserNotFoundException(to_user_name)

        updated = stored.with_details(stored.details())
        updated.assignee_name = target.name
        updated.assignee_email = target.email
        updated.co_responsible_name = stored.co_responsible_name or target.name
        updated.record_tramitation(
            TramitationEntry(
                from_user=acting_user,
                to_user=target.name,
                timestamp=self._clock(),
                deadline=deadline or "",
            )
        )
        if attachment is not None:
            updated.add_attachment(attachment)
        self._replace(updated)
        logger.info("Case %s handed to %s", updated.display_id, target.name)
        return updated

    def add_attachment(self, case_id: int, attachment: Attachment) -> CaseEntity:
        stored = self.get_case(case_id)
        updated = stored.with_details(stored.details())
        updated.add_attachment(attachment)
        self._replace(updated)
        return updated

    def append_imported(self, cases: Iterable[CaseEntity]) -> None:
        """Append reconciled cases in one batch (ids already assigned)."""
        batch = list(cases)
        self._cases.extend(batch)
        self._last_id = max([self._last_id, *(c.id for c in batch)])
        logger.info("Imported %d case(s)", len(batch))
