# src/taskpad/storage/local_storage.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from ..core.errors import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    File-backed key-value slots, one JSON object per file: {"key": "value", ...}.

    Values are opaque strings; callers serialize their own payloads.
    Writes go through a temp file + os.replace so a crash never leaves a
    half-written file behind.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"cannot read {self._path}: {e}") from e

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageReadError(f"corrupt storage file {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageReadError(f"storage file {self._path} is not a JSON object")

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(".tmp")
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageWriteError(f"cannot write {self._path}: {e}") from e

        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)

    # ---- public API ----

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageReadError:
            # An unreadable file is replaced rather than blocking every later save.
            logger.warning("Overwriting unreadable storage file %s", self._path)
            data = {}
        data[key] = value
        self._write_all(data)
        logger.debug("Stored key=%s bytes=%d path=%s", key, len(value), self._path)
