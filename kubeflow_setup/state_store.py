from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

# Marker value meaning "no step has completed yet".
SENTINEL = "start"


class MarkerStore(Protocol):
    """Loads and saves the single progress token."""

    def load(self) -> Optional[str]:
        ...

    def save(self, value: str) -> None:
        ...


class FileMarkerStore:
    """Progress marker kept as one token in a text file.

    Every save is a full overwrite through a temp file + rename, so a reader
    only ever sees the previous or the new token.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Optional[str]:
        if not self.path.exists():
            return None
        value = self.path.read_text(encoding="utf-8").strip()
        return value or None

    def save(self, value: str) -> None:
        if not value or any(c.isspace() for c in value):
            raise ValueError(f"Marker must be a single non-empty token, got {value!r}")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value + "\n")
            os.replace(tmp, self.path)
        except Exception:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def reset(self) -> bool:
        """Delete the marker file. Returns False if there was nothing to delete."""
        if not self.path.exists():
            return False
        self.path.unlink()
        logger.info("Removed progress file %s", self.path)
        return True

    def __repr__(self) -> str:
        return f"FileMarkerStore({str(self.path)!r})"


class MemoryMarkerStore:
    """In-process marker store, used for dry runs and tests."""

    def __init__(self, value: Optional[str] = None):
        self.value = value
        self.history: list[str] = []

    def load(self) -> Optional[str]:
        return self.value

    def save(self, value: str) -> None:
        self.value = value
        self.history.append(value)
