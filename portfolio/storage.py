import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class LocalStore:
    """
    String key-value store persisted as one JSON object on disk.
    Mirrors the browser localStorage contract: values are strings,
    every write rewrites the whole file, nothing is ever evicted.

    Writes go to a temp file that replaces the store atomically, so a
    reader never sees a half-written file.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.warning("Store file %s is corrupt, starting empty", self.path)
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def _save(self, data: Dict[str, str]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def set_item(self, key: str, value: str):
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)

    def remove_item(self, key: str):
        with self._lock:
            data = self._load()
            if key in data:
                del data[key]
                self._save(data)

    def clear(self):
        with self._lock:
            self._save({})
