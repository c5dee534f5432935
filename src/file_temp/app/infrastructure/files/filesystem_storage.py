from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import AsyncIterator

import anyio
from anyio import AsyncFile

from file_temp.app.domain.files.errors import InvalidIdentifier
from file_temp.app.domain.files.value_objects import IdentifierPolicy

DEFAULT_CHUNK_SIZE = 64 * 1024


class FilesystemFileStorage:
    """
    Flat folder of files named exactly by their identifier.
    """

    def __init__(
        self,
        folder: Path,
        identifier_policy: IdentifierPolicy,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self.folder = Path(folder)
        self._policy = identifier_policy
        self._chunk_size = chunk_size

    def resolve(self, file_id: str) -> Path:
        # must run before any filesystem call with a caller supplied id
        if not self._policy.is_valid(file_id):
            raise InvalidIdentifier(file_id)
        return Path(os.path.abspath(self.folder / file_id))

    async def create(self, file_id: str) -> AsyncFile[bytes]:
        path = self.resolve(file_id)
        # "x": never reopen an existing file for writing
        return await anyio.open_file(path, "xb")

    async def stat(self, file_id: str) -> os.stat_result | None:
        path = self.resolve(file_id)
        try:
            st = await anyio.Path(path).stat()
        except OSError:
            return None
        if not stat.S_ISREG(st.st_mode):
            return None
        return st

    async def iter_chunks(self, path: Path) -> AsyncIterator[bytes]:
        async with await anyio.open_file(path, "rb") as f:
            while chunk := await f.read(self._chunk_size):
                yield chunk

    async def delete(self, file_id: str) -> None:
        path = self.resolve(file_id)
        await anyio.Path(path).unlink(missing_ok=True)
