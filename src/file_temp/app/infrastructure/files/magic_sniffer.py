from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

import magic

from file_temp.app.domain.files.value_objects import FileType

logger = logging.getLogger(__name__)

# libmagic answers these when it cannot tell what the bytes are
_UNKNOWN_MIMES = {"", "application/x-empty", "inode/x-empty"}


def _extension_for(mime: str) -> str:
    ext = mimetypes.guess_extension(mime, strict=False) or ""
    return ext.lstrip(".")


class MagicFileTypeSniffer:
    """
    Magic-byte sniffer backed by libmagic (python-magic).
    Only the leading bytes are inspected, so large files are cheap to sniff.
    """

    def __init__(self, header_size: int = 8192) -> None:
        self._header_size = header_size

    def sniff(self, content: bytes) -> FileType | None:
        try:
            mime = magic.from_buffer(content[: self._header_size], mime=True)
        except magic.MagicException as e:
            logger.warning("libmagic failed to sniff buffer: %s", e)
            return None
        return self._to_file_type(mime)

    def sniff_file(self, path: Path) -> FileType | None:
        with open(path, "rb") as f:
            header = f.read(self._header_size)
        return self.sniff(header)

    @staticmethod
    def _to_file_type(mime: str | None) -> FileType | None:
        mime = (mime or "").strip().lower()
        if mime in _UNKNOWN_MIMES:
            return None
        return FileType(ext=_extension_for(mime), mime=mime)
