"""Snapshot persistence ports."""

from typing import Any, Protocol

from casetrack.application.dtos.snapshot import WorkspaceState


class ISnapshotGateway(Protocol):
    """Protocol for whole-document persistence (DIP).

    The document is a plain mapping with the keys users, cases,
    tribunals, phases and statuses.
    """

    async def load_all(self) -> dict[str, Any]:
        """Return the stored snapshot, or the default snapshot if none is usable."""
        ...

    async def save_all(self, snapshot: dict[str, Any]) -> None:
        """Overwrite the stored snapshot with the complete document."""
        ...


class ISnapshotCodec(Protocol):
    """Protocol for converting between snapshot documents and entities."""

    def decode(self, document: dict[str, Any], check_unique: bool = True) -> WorkspaceState:
        """Build entities from a document. Raises if the document is not a valid snapshot.

        With check_unique, repeated ids, process numbers, emails or names also raise.
        """
        ...

    def encode(self, state: WorkspaceState) -> dict[str, Any]:
        """Serialize entities back to a document."""
        ...
