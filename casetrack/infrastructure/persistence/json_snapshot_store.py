"""Whole-document JSON persistence with atomic writes."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os

from casetrack.infrastructure.exceptions import SnapshotReadError, SnapshotWriteError

logger = logging.getLogger(__name__)

SNAPSHOT_KEYS = ("users", "cases", "tribunals", "phases", "statuses")


def default_snapshot() -> dict[str, Any]:
    """Fresh empty snapshot."""
    return {key: [] for key in SNAPSHOT_KEYS}


class JsonSnapshotStore:
    """Persists the application snapshot as one JSON file.

    A missing file is created with the default snapshot. An empty or
    corrupt file is reported and replaced in memory by the default
    snapshot; the file itself is only overwritten by the next save.
    Writes go to a temp file in the same directory and are renamed over
    the target, so a failed write never truncates the previous document.
    """

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path).resolve()

    async def load_all(self) -> dict[str, Any]:
        """Return the stored document verbatim, or the default snapshot.

        Raises:
            SnapshotReadError: the file exists but cannot be read.
        """
        if not await aiofiles.os.path.exists(self.file_path):
            logger.info("No snapshot at %s, creating a new one", self.file_path)
            snapshot = default_snapshot()
            try:
                await self.save_all(snapshot)
            except SnapshotWriteError:
                logger.exception("Could not create snapshot file %s", self.file_path)
            return snapshot

        try:
            async with aiofiles.open(self.file_path, encoding="utf-8") as f:
                content = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SnapshotReadError(str(self.file_path), str(e)) from e

        if not content.strip():
            logger.warning("Snapshot file %s is empty, using defaults", self.file_path)
            return default_snapshot()
        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("Snapshot file %s is corrupt, using defaults: %s", self.file_path, e)
            return default_snapshot()
        if not isinstance(document, dict):
            logger.error("Snapshot file %s does not hold an object, using defaults", self.file_path)
            return default_snapshot()
        return document

    async def save_all(self, snapshot: dict[str, Any]) -> None:
        """Overwrite the file with the complete document (2-space indent).

        Raises:
            SnapshotWriteError: the document could not be serialized or written.
        """
        try:
            payload = json.dumps(snapshot, indent=2, ensure_ascii=False)
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.file_path.parent, prefix=".tmp_", suffix=".json"
            )
            os.close(temp_fd)
            try:
                async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                    await f.write(payload)
                await aiofiles.os.replace(temp_path, self.file_path)
            finally:
                if await aiofiles.os.path.exists(temp_path):
                    await aiofiles.os.remove(temp_path)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write snapshot %s: %s", self.file_path, e)
            raise SnapshotWriteError(str(self.file_path), str(e)) from e
