import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from file_temp.app.core.config import settings
from file_temp.app.domain.files.interfaces import FileStorage, FileTypeSniffer, IdentifierGenerator
from file_temp.app.domain.files.value_objects import IdentifierPolicy, UploadPolicy
from file_temp.app.infrastructure.files.filesystem_storage import FilesystemFileStorage
from file_temp.app.infrastructure.files.identifier_generator import SecretsIdentifierGenerator
from file_temp.app.infrastructure.files.magic_sniffer import MagicFileTypeSniffer


@lru_cache
def get_upload_policy() -> UploadPolicy:
    """
    Built once from settings; immutable for the life of the process.
    """
    folder = settings.FILE_TEMP_FOLDER or Path(tempfile.gettempdir())
    folder.mkdir(parents=True, exist_ok=True)
    return UploadPolicy(
        folder=folder,
        max_size=settings.FILE_TEMP_MAX_SIZE,
        accepted_types=frozenset(settings.FILE_TEMP_TYPES),
        identifier=IdentifierPolicy(
            charset=settings.FILE_TEMP_ID_CHARSET,
            length=settings.FILE_TEMP_ID_LENGTH,
        ),
    )


def get_file_storage(
        policy: Annotated[UploadPolicy, Depends(get_upload_policy)],
) -> FileStorage:
    return FilesystemFileStorage(
        policy.folder,
        policy.identifier,
        chunk_size=settings.FILE_TEMP_CHUNK_SIZE,
    )


@lru_cache
def get_file_type_sniffer() -> FileTypeSniffer:
    return MagicFileTypeSniffer()


@lru_cache
def get_identifier_generator() -> IdentifierGenerator:
    return SecretsIdentifierGenerator()
