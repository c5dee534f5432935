from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterator, Optional

from file_temp.app.domain.files.entities import StoredFile


@dataclass(frozen=True)
class IngestFileInputDTO:
    content_type: Optional[str]
    content_length: Optional[str]
    body: AsyncIterator[bytes]


@dataclass(frozen=True)
class GetStoredFileInputDTO:
    file_id: str


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class IngestFileOutputDTO:
    file_id: str
    size: int
    mime: str


@dataclass(frozen=True)
class StoredFileStreamDTO:
    file: StoredFile
    chunks: AsyncIterator[bytes]
