"""
JSON directory slot storage - Implements SlotStorage protocol.

Each slot is stored as ``<directory>/<slot>.json``. Writes go to a
temporary file in the same directory which then replaces the slot file,
so a reader never observes a half-written payload.

No file locking: concurrent writers to the same slot are last-write-wins.
"""

import logging
import os
import tempfile
from pathlib import Path

from .base import WatchedSlots, check_slot_name

logger = logging.getLogger(__name__)


class JsonDirectorySlotStorage(WatchedSlots):
    """Durable slots backed by one JSON file per slot."""

    def __init__(self, directory: str | Path) -> None:
        super().__init__()
        self.directory = Path(directory)

    def path_for(self, slot: str) -> Path:
        return self.directory / f"{check_slot_name(slot)}.json"

    def read(self, slot: str) -> str | None:
        path = self.path_for(slot)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, slot: str, payload: str) -> None:
        """
        Atomically replace the slot file.

        Raises:
            OSError: If the directory or file cannot be written
            UnicodeEncodeError: If the payload is not valid UTF-8 text
        """
        path = self.path_for(slot)
        self.directory.mkdir(parents=True, exist_ok=True)

        fd, temp_path = tempfile.mkstemp(dir=self.directory, prefix=".tmp_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, path)
        except Exception:
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

        logger.debug("Wrote slot %s (%d bytes)", slot, len(payload))
        self._notify(slot)
