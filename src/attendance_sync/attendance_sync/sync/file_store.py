from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Optional

from ..core.constants import TMP_SUFFIX
from ..core.exceptions import StoreReadError
from .repository import FallbackStore

logger = logging.getLogger(__name__)


class JsonFileStore(FallbackStore):
    """Single JSON document on disk.

    Writes go to `<path>.tmp` and are renamed over the canonical file, so the
    canonical file is always a complete version. Concurrent writers are not
    serialized across processes; the later rename wins.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._write_lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tmp_path(self) -> Path:
        return self._path.with_name(self._path.name + TMP_SUFFIX)

    def read(self) -> Optional[dict]:
        """Return the stored document, or None when the file does not exist yet."""
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StoreReadError(f"Cannot read {self._path}: {e}") from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except ValueError as e:  # UnicodeDecodeError included
            raise StoreReadError(f"Corrupt JSON in {self._path}") from e
        if not isinstance(data, dict):
            raise StoreReadError(f"Unexpected document type in {self._path}: {type(data).__name__}")
        return data

    def write(self, doc: dict) -> None:
        content = json.dumps(doc, indent=2)
        tmp = self.tmp_path
        with self._write_lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
        logger.debug("Wrote %s (%d bytes)", self._path, len(content))
