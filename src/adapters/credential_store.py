"""Credential store adapters.

- `FileCredentialStore`: JSON file in the user config dir, so a login
  survives process restarts. Every write replaces the file atomically.
- `MemoryCredentialStore`: process-local, for tests and throwaway sessions.

Security note: the token is stored in clear text, readable by the owner
only (mode 0600). Never log values, only keys.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Mapping

logger = logging.getLogger("vault_client.credentials")


class MemoryCredentialStore:
    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set_many(self, values: Mapping[str, str]) -> None:
        self._data.update(values)

    def delete_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._data.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)


class FileCredentialStore:
    """Credential store persisted to a single JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Credentials file %s is corrupt; treating it as empty", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Credentials file %s is not a JSON object; treating it as empty", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".credentials-", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, sort_keys=True)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set_many(self, values: Mapping[str, str]) -> None:
        data = self._read()
        data.update(values)
        self._write(data)
        logger.debug("Stored credential keys: %s", sorted(values))

    def delete_many(self, keys: Iterable[str]) -> None:
        data = self._read()
        removed = [key for key in keys if data.pop(key, None) is not None]
        if not removed:
            return
        if data:
            self._write(data)
        else:
            self._path.unlink(missing_ok=True)
        logger.debug("Removed credential keys: %s", sorted(removed))
