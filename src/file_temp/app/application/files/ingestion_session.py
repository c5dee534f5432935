from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path

from file_temp.app.domain.files.errors import TooLarge
from file_temp.app.domain.files.interfaces import FileStorage, WritableFile

logger = logging.getLogger(__name__)


class IngestionState(StrEnum):
    VALIDATING = "validating"
    STREAMING = "streaming"
    FINALIZING = "finalizing"
    DONE = "done"
    FAILED = "failed"


_TRANSITIONS: dict[IngestionState, frozenset[IngestionState]] = {
    IngestionState.VALIDATING: frozenset({IngestionState.STREAMING, IngestionState.FAILED}),
    IngestionState.STREAMING: frozenset({IngestionState.FINALIZING, IngestionState.FAILED}),
    IngestionState.FINALIZING: frozenset({IngestionState.DONE, IngestionState.FAILED}),
    IngestionState.DONE: frozenset(),
    IngestionState.FAILED: frozenset(),
}


class IngestionSession:
    """
    Per-request upload state. Owns the open handle and the file it created;
    never shared between requests.

    VALIDATING -> STREAMING -> FINALIZING -> DONE, and any non-terminal state -> FAILED.
    """

    def __init__(self, *, storage: FileStorage, max_size: int, declared_type: str | None) -> None:
        self._storage = storage
        self._max_size = max_size
        self.declared_type = declared_type
        self.state = IngestionState.VALIDATING
        self.file_id: str | None = None
        self.path: Path | None = None
        self.bytes_written = 0
        self._handle: WritableFile | None = None

    def _transition(self, target: IngestionState) -> None:
        if target not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"Illegal ingestion transition {self.state} -> {target}")
        self.state = target

    async def open(self, file_id: str) -> None:
        if self.state is not IngestionState.VALIDATING:
            raise RuntimeError(f"Cannot open a session in state {self.state}")
        self.path = self._storage.resolve(file_id)
        self._handle = await self._storage.create(file_id)
        self.file_id = file_id
        self._transition(IngestionState.STREAMING)

    async def write(self, chunk: bytes) -> None:
        if self.state is not IngestionState.STREAMING or self._handle is None:
            raise RuntimeError(f"Cannot write in state {self.state}")
        if not chunk:
            return

        self.bytes_written += len(chunk)
        if self.bytes_written > self._max_size:
            logger.warning(
                "Upload %s exceeded %d bytes while streaming, aborting",
                self.file_id,
                self._max_size,
            )
            await self.abort()
            raise TooLarge(self._max_size)

        await self._handle.write(chunk)

    async def finish(self) -> None:
        await self._close()
        self._transition(IngestionState.FINALIZING)

    def complete(self) -> None:
        self._transition(IngestionState.DONE)

    async def abort(self) -> None:
        """
        Best-effort close + delete. Safe to call more than once; cleanup
        errors are logged because the request has already failed.
        """
        if self.state in (IngestionState.FAILED, IngestionState.DONE):
            return
        self._transition(IngestionState.FAILED)

        try:
            await self._close()
        except OSError:
            logger.exception("Failed to close upload %s", self.file_id)

        if self.file_id is not None:
            try:
                await self._storage.delete(self.file_id)
            except OSError:
                logger.exception("Failed to remove rejected upload %s", self.file_id)

    async def _close(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            await handle.aclose()
