from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StoredFile:
    """
    A stored upload, reconstructed from the filesystem on every lookup.
    ext/mime are sniffed from content; nothing besides the file itself is persisted.
    """
    file_id: str
    ext: str
    mime: str
    size: int
    path: Path

    def copy_to(self, destination: str | Path) -> Path:
        """Synchronous copy of the stored bytes; the original is left untouched."""
        target = Path(destination)
        shutil.copyfile(self.path, target)
        return target
