"""Infrastructure exceptions for snapshot storage.

Storage errors extend CaseTrackException so presentation can map them
to HTTP responses consistently.
"""

from casetrack.domain.exceptions import CaseTrackException


class StorageException(CaseTrackException):
    """Base exception for snapshot storage operations."""


class SnapshotReadError(StorageException):
    """The snapshot file exists but could not be read from disk."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to read snapshot: {file_path}",
            "SNAPSHOT_READ_ERROR",
            {"file_path": file_path, "reason": reason},
        )


class SnapshotWriteError(StorageException):
    """Writing the snapshot to disk failed; in-memory state is unchanged."""

    def __init__(self, file_path: str, reason: str) -> None:
        super().__init__(
            f"Failed to save snapshot: {file_path}",
            "SNAPSHOT_WRITE_ERROR",
            {"file_path": file_path, "reason": reason},
        )

