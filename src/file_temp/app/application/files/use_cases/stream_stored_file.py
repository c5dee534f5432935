from __future__ import annotations

from file_temp.app.application.files.dto import GetStoredFileInputDTO, StoredFileStreamDTO
from file_temp.app.application.files.use_cases.get_stored_file import GetStoredFileUseCase
from file_temp.app.domain.files.interfaces import FileStorage


class StreamStoredFileUseCase:
    def __init__(self, storage: FileStorage, get_file_uc: GetStoredFileUseCase) -> None:
        self._storage = storage
        self._get_file_uc = get_file_uc

    async def execute(self, dto: GetStoredFileInputDTO) -> StoredFileStreamDTO:
        stored = await self._get_file_uc.execute(dto)
        return StoredFileStreamDTO(
            file=stored,
            chunks=self._storage.iter_chunks(stored.path),
        )
