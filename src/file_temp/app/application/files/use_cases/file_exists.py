from __future__ import annotations

from file_temp.app.application.files.dto import GetStoredFileInputDTO
from file_temp.app.domain.files.errors import InvalidIdentifier
from file_temp.app.domain.files.interfaces import FileStorage


class FileExistsUseCase:
    def __init__(self, storage: FileStorage) -> None:
        self._storage = storage

    async def execute(self, dto: GetStoredFileInputDTO) -> bool:
        try:
            return await self._storage.stat(dto.file_id) is not None
        except InvalidIdentifier:
            return False
