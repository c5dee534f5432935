from __future__ import annotations

import logging

import anyio

from file_temp.app.application.files.dto import IngestFileInputDTO, IngestFileOutputDTO
from file_temp.app.application.files.ingestion_session import IngestionSession
from file_temp.app.domain.files.errors import (
    FailedToSaveFile,
    MissingContentLength,
    MissingContentType,
    TooLarge,
    UnsupportedType,
)
from file_temp.app.domain.files.interfaces import FileStorage, FileTypeSniffer, IdentifierGenerator
from file_temp.app.domain.files.value_objects import UploadPolicy, normalize_media_type

logger = logging.getLogger(__name__)

MAX_CREATE_ATTEMPTS = 5


def _parse_content_length(raw: str | None) -> int:
    if raw is None or not raw.strip().isdigit():
        raise MissingContentLength()
    return int(raw)


class IngestFileUseCase:
    def __init__(
        self,
        storage: FileStorage,
        sniffer: FileTypeSniffer,
        id_generator: IdentifierGenerator,
        policy: UploadPolicy,
    ) -> None:
        self._storage = storage
        self._sniffer = sniffer
        self._id_generator = id_generator
        self._policy = policy

    async def execute(self, dto: IngestFileInputDTO) -> IngestFileOutputDTO:
        session = IngestionSession(
            storage=self._storage,
            max_size=self._policy.max_size,
            declared_type=dto.content_type,
        )
        try:
            # 1) Cheap header checks, nothing touches the disk yet
            self._check_headers(dto)

            # 2) Fresh, exclusively created file
            await self._open(session)

            # 3) Stream in order; session aborts and raises TooLarge past the limit
            async for chunk in dto.body:
                await session.write(chunk)
            await session.finish()

            # 4) The bytes decide, not the header
            file_type = await anyio.to_thread.run_sync(self._sniffer.sniff_file, session.path)
            if file_type is None or not self._policy.accepts(file_type.mime):
                logger.info(
                    "Upload %s sniffed as %s, declared %s; rejecting",
                    session.file_id,
                    file_type.mime if file_type else "unknown",
                    dto.content_type,
                )
                raise UnsupportedType(file_type.mime if file_type else None)

            session.complete()
        except OSError as e:
            with anyio.CancelScope(shield=True):
                await session.abort()
            logger.exception("I/O failure while storing upload %s", session.file_id)
            raise FailedToSaveFile("Could not save uploaded file") from e
        except BaseException:
            with anyio.CancelScope(shield=True):
                await session.abort()
            raise

        logger.info("Stored upload %s (%d bytes, %s)", session.file_id, session.bytes_written, file_type.mime)
        return IngestFileOutputDTO(
            file_id=session.file_id,
            size=session.bytes_written,
            mime=file_type.mime,
        )

    def _check_headers(self, dto: IngestFileInputDTO) -> None:
        if not dto.content_type:
            raise MissingContentType()

        content_length = _parse_content_length(dto.content_length)

        if not self._policy.accepts(dto.content_type):
            logger.info("Rejecting declared content type %s", dto.content_type)
            raise UnsupportedType(normalize_media_type(dto.content_type))

        if content_length > self._policy.max_size:
            logger.info("Rejecting declared length %d > %d", content_length, self._policy.max_size)
            raise TooLarge(self._policy.max_size)

    async def _open(self, session: IngestionSession) -> None:
        for _ in range(MAX_CREATE_ATTEMPTS):
            file_id = self._id_generator.generate(self._policy.identifier)
            try:
                await session.open(file_id)
                return
            except FileExistsError:
                logger.warning("Identifier collision on %s, regenerating", file_id)
        raise FailedToSaveFile("Could not allocate a unique file identifier")
