from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

import orjson

logger = logging.getLogger(__name__)


class KeyValueBackend(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryBackend:
    """Process-local backend, used by tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileBackend:
    """Key-value pairs kept as one JSON object on disk.

    Writes go to a temporary file in the same directory which then replaces
    the target, so readers see either the old or the new document.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_document(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        raw = self._path.read_bytes()
        if not raw.strip():
            return {}
        try:
            document = orjson.loads(raw)
        except orjson.JSONDecodeError:
            logger.warning("Backend file %s is not valid JSON; starting from an empty document", self._path)
            return {}
        if not isinstance(document, dict):
            logger.warning("Backend file %s does not hold a JSON object; starting from an empty document", self._path)
            return {}
        return document

    def get(self, key: str) -> Optional[str]:
        value = self._read_document().get(key)
        if value is None or isinstance(value, str):
            return value
        # Hand-edited files may hold the list itself rather than its text form.
        return orjson.dumps(value).decode("utf-8")

    def set(self, key: str, value: str) -> None:
        document = self._read_document()
        document[key] = value
        payload = orjson.dumps(document, option=orjson.OPT_INDENT_2) + b"\n"
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
