from __future__ import annotations

from pydantic import BaseModel


class StoredFileInfoResponse(BaseModel):
    id: str
    ext: str
    mime: str
    size: int


class FileExistsResponse(BaseModel):
    id: str
    exists: bool
