# file_temp/app/application/files/use_cases/__init__.py
from .ingest_file import IngestFileUseCase
from .get_stored_file import GetStoredFileUseCase
from .stream_stored_file import StreamStoredFileUseCase
from .file_exists import FileExistsUseCase

__all__ = [
    "IngestFileUseCase",
    "GetStoredFileUseCase",
    "StreamStoredFileUseCase",
    "FileExistsUseCase",
]
