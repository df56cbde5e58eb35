from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileBackend:
    """One `<key>.json` file per collection inside `data_dir`.

    Writes land in a temporary file first and are swapped in with `os.replace`,
    so a failed write leaves the previous file untouched.
    """

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise PersistenceError(f"Cannot read {path}: {e}") from e

    def write(self, key: str, payload: str) -> None:
        path = self._path(key)
        tmp_name = None
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._dir)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(f"Cannot write {path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_name)
        logger.debug("Wrote %s (%d bytes)", path, len(payload))

    def close(self) -> None:
        return None
