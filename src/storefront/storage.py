"""File-backed key/value store for the storefront's local state.

Holds the same keys a browser client keeps in local storage: ``token``,
``cart``, ``address`` and ``orders``. Every write rewrites the whole file
through a temporary file, so a crash never leaves half-written JSON behind.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

TOKEN = "token"
CART = "cart"
ADDRESS = "address"
ORDERS = "orders"


class LocalStore:
    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._data = self._read()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable local store", path=str(self.path))
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        """Persist ``data``, leaving the file untouched if serialization or the write fails."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = {**self._data, key: value}
        self._write(data)
        self._data = data

    def remove(self, key: str) -> None:
        if key in self._data:
            data = {k: v for k, v in self._data.items() if k != key}
            self._write(data)
            self._data = data

    def reload(self) -> None:
        """Re-read the file, discarding in-memory state."""
        self._data = self._read()

    def snapshot(self) -> dict[str, Any]:
        """A copy of the persisted file's contents."""
        return self._read()
