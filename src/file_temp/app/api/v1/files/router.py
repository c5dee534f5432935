from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse, StreamingResponse

from file_temp.app.api.v1.files.deps import (
    get_file_exists_use_case,
    get_get_stored_file_use_case,
    get_ingest_file_use_case,
    get_stream_stored_file_use_case,
)
from file_temp.app.api.v1.files.mappers import (
    get_ingest_file_input_dto,
    get_requested_file_id,
    get_stored_file_input_dto,
    stored_file_to_info_response,
)
from file_temp.app.api.v1.files.schemas import FileExistsResponse, StoredFileInfoResponse
from file_temp.app.application.files.use_cases import (
    FileExistsUseCase,
    GetStoredFileUseCase,
    IngestFileUseCase,
    StreamStoredFileUseCase,
)
from file_temp.app.domain.files.errors import MissingFileIdentifier

router = APIRouter(prefix="/files", tags=["files"])

ingest_file_dep = Annotated[IngestFileUseCase, Depends(get_ingest_file_use_case)]
get_stored_file_dep = Annotated[GetStoredFileUseCase, Depends(get_get_stored_file_use_case)]
stream_stored_file_dep = Annotated[StreamStoredFileUseCase, Depends(get_stream_stored_file_use_case)]
file_exists_dep = Annotated[FileExistsUseCase, Depends(get_file_exists_use_case)]


def requested_file_id(request: Request) -> str:
    file_id = get_requested_file_id(request)
    if not file_id:
        raise MissingFileIdentifier()
    return file_id


file_id_dep = Annotated[str, Depends(requested_file_id)]


@router.post("", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
async def upload_file(
        request: Request,
        use_case: ingest_file_dep,
) -> PlainTextResponse:
    dto = get_ingest_file_input_dto(request)
    out = await use_case.execute(dto)
    return PlainTextResponse(out.file_id)


async def _stream_file(file_id: str, use_case: StreamStoredFileUseCase) -> StreamingResponse:
    out = await use_case.execute(get_stored_file_input_dto(file_id))
    return StreamingResponse(
        out.chunks,
        media_type=out.file.mime,
        headers={"Content-Length": str(out.file.size)},
    )


@router.get("", response_class=StreamingResponse)
async def download_file_by_query(
        file_id: file_id_dep,
        use_case: stream_stored_file_dep,
) -> StreamingResponse:
    return await _stream_file(file_id, use_case)


@router.get("/{fid}/info", response_model=StoredFileInfoResponse)
async def get_file_info(
        file_id: file_id_dep,
        use_case: get_stored_file_dep,
) -> StoredFileInfoResponse:
    stored = await use_case.execute(get_stored_file_input_dto(file_id))
    return stored_file_to_info_response(stored)


@router.get("/{fid}/exists", response_model=FileExistsResponse)
async def check_file_exists(
        file_id: file_id_dep,
        use_case: file_exists_dep,
) -> FileExistsResponse:
    exists = await use_case.execute(get_stored_file_input_dto(file_id))
    return FileExistsResponse(id=file_id, exists=exists)


@router.get("/{fid}", response_class=StreamingResponse)
async def download_file(
        file_id: file_id_dep,
        use_case: stream_stored_file_dep,
) -> StreamingResponse:
    return await _stream_file(file_id, use_case)
