from fastapi import Request

from file_temp.app.application.files.dto import GetStoredFileInputDTO, IngestFileInputDTO
from file_temp.app.domain.files.entities import StoredFile
from file_temp.app.api.v1.files.schemas import StoredFileInfoResponse

# priority order: path param first, then query string, per key
FILE_ID_KEYS = ("fid", "id")


def get_ingest_file_input_dto(request: Request) -> IngestFileInputDTO:
    return IngestFileInputDTO(
        content_type=request.headers.get("content-type"),
        content_length=request.headers.get("content-length"),
        body=request.stream(),
    )


def get_requested_file_id(request: Request) -> str | None:
    for key in FILE_ID_KEYS:
        for source in (request.path_params, request.query_params):
            value = source.get(key)
            if value:
                return value
    return None


def get_stored_file_input_dto(file_id: str) -> GetStoredFileInputDTO:
    return GetStoredFileInputDTO(file_id=file_id)


def stored_file_to_info_response(stored: StoredFile) -> StoredFileInfoResponse:
    return StoredFileInfoResponse(
        id=stored.file_id,
        ext=stored.ext,
        mime=stored.mime,
        size=stored.size,
    )
