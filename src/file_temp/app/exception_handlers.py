import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from file_temp.app.domain.files.errors import (
    FailedToSaveFile,
    MissingContentLength,
    MissingContentType,
    MissingFileIdentifier,
    StoredFileNotFound,
    TooLarge,
    UnsupportedType,
)

logger = logging.getLogger(__name__)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MissingContentType)
    async def missing_content_type(_: Request, exc: MissingContentType):
        return JSONResponse(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            content={"detail": str(exc)},
        )

    @app.exception_handler(MissingContentLength)
    async def missing_content_length(_: Request, exc: MissingContentLength):
        return JSONResponse(
            status_code=status.HTTP_411_LENGTH_REQUIRED,
            content={"detail": str(exc)},
        )

    @app.exception_handler(UnsupportedType)
    async def unsupported_type(_: Request, exc: UnsupportedType):
        return JSONResponse(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            content={"detail": str(exc)},
        )

    @app.exception_handler(TooLarge)
    async def too_large(_: Request, exc: TooLarge):
        return JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content={"detail": str(exc)},
        )

    @app.exception_handler(MissingFileIdentifier)
    async def missing_file_identifier(_: Request, exc: MissingFileIdentifier):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    @app.exception_handler(StoredFileNotFound)
    async def stored_file_not_found(_: Request, __: StoredFileNotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Not found"},
        )

    @app.exception_handler(FailedToSaveFile)
    async def failed_to_save_file(_: Request, exc: FailedToSaveFile):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc) or "Failed to save file"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error"
            },
        )
