"""Snapshot persistence: JSON file gateway and document codec."""

from casetrack.infrastructure.persistence.documents import SnapshotCodec
from casetrack.infrastructure.persistence.json_snapshot_store import (
    JsonSnapshotStore,
    default_snapshot,
)

__all__ = ["JsonSnapshotStore", "SnapshotCodec", "default_snapshot"]
