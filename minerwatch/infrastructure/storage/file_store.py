"""Key/value store backed by a single JSON file on local disk."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

import structlog

from minerwatch.domain.entities.errors import StorageError

logger = structlog.get_logger(__name__)


class FileKeyValueStore:
    """
    String values kept in one JSON object file.

    The whole file is rewritten through a temporary file and ``os.replace``
    so a crash mid-write never leaves a truncated document behind. A file
    that cannot be parsed is treated as empty and overwritten on the next
    write. Only one process may write the file.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def close(self) -> None:
        pass

    def _read(self) -> Dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StorageError(
                f"Unable to read {self._path}: {exc}", {"path": str(self._path)}
            ) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning(
                "storage.file.corrupt", path=str(self._path), error=str(exc)
            )
            return {}

        if not isinstance(data, dict):
            logger.warning("storage.file.unexpected_document", path=str(self._path))
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(data, handle)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(
                f"Unable to write {self._path}: {exc}", {"path": str(self._path)}
            ) from exc
