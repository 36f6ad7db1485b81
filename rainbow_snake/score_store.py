"""High score persistence."""

import json
import logging
import os
import tempfile
from collections.abc import MutableMapping
from typing import Iterator

from .constants import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class JsonFileStorage(MutableMapping):
    """String key-value store kept in a single JSON file.

    Every write rewrites the whole file through a temp file and ``os.replace``.
    A missing, unreadable or malformed file reads as an empty store.
    """

    def __init__(self, path: str):
        self.path = path
        self._data: dict[str, str] = self._read()

    def _read(self) -> dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store %s: expected a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, data: dict[str, str]):
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".store-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str):
        data = dict(self._data)
        data[key] = value
        self._write(data)
        self._data = data

    def __delitem__(self, key: str):
        data = dict(self._data)
        del data[key]
        self._write(data)
        self._data = data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


class ScoreStore:
    def __init__(self, storage: MutableMapping, key: str = HIGH_SCORE_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> int:
        raw = self.storage.get(self.key)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            return 0
        return max(value, 0)

    def save(self, score: int) -> bool:
        """Persist ``score`` if it beats the stored value. Returns True when written."""
        if score > self.load():
            self.storage[self.key] = str(score)
            return True
        return False
