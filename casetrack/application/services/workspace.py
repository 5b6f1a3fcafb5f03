"""Workspace: the single owner of all application state and its persistence.

Holds the case store, user directory and lookup catalogs. Every mutation
runs under one asyncio.Lock as validate -> mutate in memory -> save the
complete snapshot. A rejected command raises before anything is saved.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable, Iterable, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from casetrack.application.dtos.imports import ImportReport
from casetrack.application.dtos.snapshot import WorkspaceState
from casetrack.application.dtos.views import UNASSIGNED_COLUMN
from casetrack.application.interfaces.storage import ISnapshotCodec, ISnapshotGateway
from casetrack.application.services.case_store import CaseStore
from casetrack.application.services.directory import LookupCatalog, UserDirectory
from casetrack.application.services.import_reconciler import IMPORT_ACTOR_NAME, reconcile
from casetrack.domain.entities import (
    Attachment,
    CaseDetails,
    CaseEntity,
    LookupEntity,
    UserEntity,
)
from casetrack.domain.enums import BoardGrouping, Permission
from casetrack.domain.exceptions import InvalidSnapshotException, ValidationException

logger = logging.getLogger(__name__)

LOOKUP_KINDS = ("tribunal", "phase", "status")


@dataclass(frozen=True)
class WorkspacePolicy:
    """Firm-specific names the workspace stamps on records."""

    owner_name: str
    archived_status_name: str = "Arquivado"
    import_actor_name: str = IMPORT_ACTOR_NAME


class Workspace:
    """Single-session state holder with serialized, persisted mutations."""

    def __init__(
        self,
        gateway: ISnapshotGateway,
        codec: ISnapshotCodec,
        policy: WorkspacePolicy,
        password_hasher: Callable[[str], str],
        state: WorkspaceState | None = None,
    ) -> None:
        self._gateway = gateway
        self._codec = codec
        self.policy = policy
        self._hash = password_hasher
        self._lock = asyncio.Lock()
        self._extra: dict[str, Any] = {}
        self._load(state or WorkspaceState())

    @classmethod
    async def open(
        cls,
        gateway: ISnapshotGateway,
        codec: ISnapshotCodec,
        policy: WorkspacePolicy,
        password_hasher: Callable[[str], str],
    ) -> Workspace:
        """Load the stored snapshot; an unusable document starts an empty workspace.

        Repeated keys in a stored document are logged and the records are
        kept as loaded.
        """
        document = await gateway.load_all()
        try:
            state = codec.decode(document, check_unique=False)
        except InvalidSnapshotException as e:
            logger.error("Stored snapshot is invalid, starting empty: %s", e.details)
            state = WorkspaceState()
        for conflict in state.conflicts():
            logger.error("Stored snapshot has a %s", conflict)
        workspace = cls(gateway, codec, policy, password_hasher, state)
        logger.info(
            "Workspace loaded: %d case(s), %d user(s)",
            len(workspace.cases),
            len(workspace.directory),
        )
        return workspace

    def _load(self, state: WorkspaceState) -> None:
        self.directory = UserDirectory(state.users, password_hasher=self._hash)
        self.cases = CaseStore(self.directory, self.policy.owner_name, state.cases)
        self.catalogs = {
            "tribunal": LookupCatalog("tribunal", state.tribunals),
            "phase": LookupCatalog("phase", state.phases),
            "status": LookupCatalog("status", state.statuses),
        }
        self._extra = dict(state.extra)

    def catalog(self, kind: str) -> LookupCatalog:
        if kind not in LOOKUP_KINDS:
            raise ValidationException(f"Unknown lookup kind '{kind}'", field="kind")
        return self.catalogs[kind]

    def state(self) -> WorkspaceState:
        return WorkspaceState(
            users=self.directory.list_users(),
            cases=self.cases.list_cases(),
            tribunals=self.catalogs["tribunal"].list_items(),
            phases=self.catalogs["phase"].list_items(),
            statuses=self.catalogs["status"].list_items(),
            extra=dict(self._extra),
        )

    def snapshot(self) -> dict[str, Any]:
        """Current state as a snapshot document."""
        return self._codec.encode(self.state())

    @asynccontextmanager
    async def mutation(self) -> AsyncIterator[None]:
        """Serialize a mutation and save the snapshot when it completes.

        If the body raises, nothing is saved. If the save fails, the
        in-memory change stays and the storage error propagates.
        """
        async with self._lock:
            yield
            await self._gateway.save_all(self.snapshot())

    async def stored_document(self) -> dict[str, Any]:
        """The document as currently stored, unmodified."""
        return await self._gateway.load_all()

    async def replace_document(self, document: dict[str, Any]) -> None:
        """Replace the workspace with a client-supplied document.

        The document is decoded and written back in stored form: unknown keys
        are kept, plaintext passwords are replaced by their hash.

        Raises:
            InvalidSnapshotException: document is not a valid snapshot or repeats
                a unique key; nothing is written.
        """
        state = self._codec.decode(document)
        async with self._lock:
            await self._gateway.save_all(self._codec.encode(state))
            self._load(state)
        logger.info("Workspace replaced from submitted snapshot")

    # ---- Cases ----

    def active_cases(self) -> list[CaseEntity]:
        name = self.policy.archived_status_name
        return [c for c in self.cases.list_cases() if not c.is_archived(name)]

    async def add_case(self, draft: CaseDetails, actor: UserEntity) -> CaseEntity:
        async with self.mutation():
            return self.cases.add_case(draft, actor.name)

    async def update_case(
        self, case_id: int, details: CaseDetails, actor: UserEntity
    ) -> CaseEntity:
        async with self.mutation():
            return self.cases.update_case(case_id, details, actor.name)

    async def update_cases(
        self, updates: Mapping[int, CaseDetails], actor: UserEntity
    ) -> list[CaseEntity]:
        async with self.mutation():
            return self.cases.update_multiple(updates, actor.name)

    async def delete_case(self, case_id: int) -> None:
        async with self.mutation():
            self.cases.delete_case(case_id)

    async def delete_cases(self, case_ids: Iterable[int]) -> int:
        async with self.mutation():
            return self.cases.delete_multiple(case_ids)

    async def tramitate(
        self,
        case_id: int,
        to_user_name: str,
        deadline: str,
        actor: UserEntity,
        attachment: Attachment | None = None,
    ) -> CaseEntity:
        async with self.mutation():
            return self.cases.tramitate(
                case_id, to_user_name, deadline, actor.name, attachment
            )

    async def add_attachment(self, case_id: int, attachment: Attachment) -> CaseEntity:
        async with self.mutation():
            return self.cases.add_attachment(case_id, attachment)

    async def move_case(
        self,
        case_id: int,
        grouping: BoardGrouping,
        column: str,
        actor: UserEntity,
    ) -> CaseEntity:
        """Drop a case into a board column, updating the grouped field.

        Dropping on the unassigned column hands an assignee board case back
        to the firm and clears the field on other boards. Dropping a case
        on the column it already sits in changes nothing.
        """
        unassigned = column == UNASSIGNED_COLUMN
        async with self.mutation():
            case = self.cases.get_case(case_id)
            details = case.details()
            if grouping == BoardGrouping.ASSIGNEE:
                if unassigned and case.is_unassigned(self.policy.owner_name):
                    return case
                details.assignee_name = self.policy.owner_name if unassigned else column
            else:
                attr = {
                    BoardGrouping.STATUS: "status",
                    BoardGrouping.PHASE: "phase",
                    BoardGrouping.TRIBUNAL: "tribunal",
                    BoardGrouping.CO_RESPONSIBLE: "co_responsible_name",
                }[grouping]
                setattr(details, attr, "" if unassigned else column)
            if details == case.details():
                return case
            return self.cases.update_case(case_id, details, actor.name)

    async def import_cases(self, drafts: Iterable[CaseDetails]) -> ImportReport:
        """Reconcile drafts against the store and append the accepted ones."""
        async with self.mutation():
            report = reconcile(
                drafts,
                self.cases.process_numbers(),
                self.cases.next_id(),
                self.directory,
                self.policy.owner_name,
                actor_name=self.policy.import_actor_name,
            )
            self.cases.append_imported(report.accepted)
        return report

    # ---- Users and lookups ----

    async def add_user(
        self,
        name: str,
        email: str,
        permission: Permission,
        password: str | None = None,
    ) -> UserEntity:
        async with self.mutation():
            return self.directory.add_user(name, email, permission, password)

    async def update_user(
        self,
        user_id: int,
        name: str,
        email: str,
        permission: Permission,
        password: str | None = None,
    ) -> UserEntity:
        async with self.mutation():
            return self.directory.update_user(user_id, name, email, permission, password)

    async def delete_user(self, user_id: int) -> None:
        async with self.mutation():
            self.directory.delete_user(user_id)

    async def add_lookup(self, kind: str, name: str) -> LookupEntity:
        catalog = self.catalog(kind)
        async with self.mutation():
            return catalog.add(name)

    async def rename_lookup(self, kind: str, item_id: int, name: str) -> LookupEntity:
        catalog = self.catalog(kind)
        async with self.mutation():
            return catalog.rename(item_id, name)

    async def delete_lookup(self, kind: str, item_id: int) -> None:
        catalog = self.catalog(kind)
        async with self.mutation():
            catalog.delete(item_id)
