from os import stat_result
from pathlib import Path
from typing import AsyncIterator, Protocol, runtime_checkable

from file_temp.app.domain.files.value_objects import FileType, IdentifierPolicy


class IdentifierGenerator(Protocol):
    def generate(self, policy: IdentifierPolicy) -> str:
        ...


class FileTypeSniffer(Protocol):
    def sniff(self, content: bytes) -> FileType | None:
        ...

    def sniff_file(self, path: Path) -> FileType | None:
        """None when the type cannot be determined."""
        ...


class WritableFile(Protocol):
    async def write(self, data: bytes) -> int:
        ...

    async def aclose(self) -> None:
        ...


@runtime_checkable
class FileStorage(Protocol):
    folder: Path

    def resolve(self, file_id: str) -> Path:
        """
        file_id MUST pass the identifier policy; raises InvalidIdentifier otherwise.
        """
        ...

    async def create(self, file_id: str) -> WritableFile:
        """Creates a new file exclusively; raises FileExistsError if the name is taken."""
        ...

    async def stat(self, file_id: str) -> stat_result | None:
        ...

    def iter_chunks(self, path: Path) -> AsyncIterator[bytes]:
        ...

    async def delete(self, file_id: str) -> None:
        ...
