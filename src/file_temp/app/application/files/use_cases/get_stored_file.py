from __future__ import annotations

import logging

import anyio

from file_temp.app.application.files.dto import GetStoredFileInputDTO
from file_temp.app.domain.files.entities import StoredFile
from file_temp.app.domain.files.errors import InvalidIdentifier, StoredFileNotFound
from file_temp.app.domain.files.interfaces import FileStorage, FileTypeSniffer

logger = logging.getLogger(__name__)

FALLBACK_MIME = "application/octet-stream"


class GetStoredFileUseCase:
    def __init__(self, storage: FileStorage, sniffer: FileTypeSniffer) -> None:
        self._storage = storage
        self._sniffer = sniffer

    async def execute(self, dto: GetStoredFileInputDTO) -> StoredFile:
        # 1) Reject bad ids before touching the filesystem
        try:
            path = self._storage.resolve(dto.file_id)
        except InvalidIdentifier:
            logger.info("Rejected invalid file id %r", dto.file_id)
            raise StoredFileNotFound(dto.file_id)

        # 2) Must exist and be a regular file
        st = await self._storage.stat(dto.file_id)
        if st is None:
            raise StoredFileNotFound(dto.file_id)

        # 3) Type is re-sniffed on every lookup
        file_type = await anyio.to_thread.run_sync(self._sniffer.sniff_file, path)
        if file_type is None:
            logger.warning("Could not sniff type of %s, serving as %s", dto.file_id, FALLBACK_MIME)
            ext, mime = "", FALLBACK_MIME
        else:
            ext, mime = file_type.ext, file_type.mime

        return StoredFile(
            file_id=dto.file_id,
            ext=ext,
            mime=mime,
            size=st.st_size,
            path=path,
        )
