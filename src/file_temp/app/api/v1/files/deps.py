from typing import Annotated

from fastapi import Depends

from file_temp.app.application.files.use_cases import (
    FileExistsUseCase,
    GetStoredFileUseCase,
    IngestFileUseCase,
    StreamStoredFileUseCase,
)
from file_temp.app.core.deps import (
    get_file_storage,
    get_file_type_sniffer,
    get_identifier_generator,
    get_upload_policy,
)
from file_temp.app.domain.files.interfaces import FileStorage, FileTypeSniffer, IdentifierGenerator
from file_temp.app.domain.files.value_objects import UploadPolicy


async def get_ingest_file_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)],
        sniffer: Annotated[FileTypeSniffer, Depends(get_file_type_sniffer)],
        id_generator: Annotated[IdentifierGenerator, Depends(get_identifier_generator)],
        policy: Annotated[UploadPolicy, Depends(get_upload_policy)],
) -> IngestFileUseCase:
    return IngestFileUseCase(storage, sniffer, id_generator, policy)


async def get_get_stored_file_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)],
        sniffer: Annotated[FileTypeSniffer, Depends(get_file_type_sniffer)],
) -> GetStoredFileUseCase:
    return GetStoredFileUseCase(storage, sniffer)


async def get_stream_stored_file_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)],
        get_file_uc: Annotated[GetStoredFileUseCase, Depends(get_get_stored_file_use_case)],
) -> StreamStoredFileUseCase:
    return StreamStoredFileUseCase(storage, get_file_uc)


async def get_file_exists_use_case(
        storage: Annotated[FileStorage, Depends(get_file_storage)],
) -> FileExistsUseCase:
    return FileExistsUseCase(storage)
