from __future__ import annotations

import pytest

from file_temp.app.application.files.dto import IngestFileInputDTO
from file_temp.app.application.files.use_cases import IngestFileUseCase
from file_temp.app.domain.files.errors import (
    FailedToSaveFile,
    MissingContentLength,
    MissingContentType,
    TooLarge,
    UnsupportedType,
)
from tests.unit.fakes.body import RecordingBody
from tests.unit.fakes.identifier_generator import FixedIdentifierGenerator
from tests.unit.fakes.sniffer import JPEG_SIGNATURE, PNG_SIGNATURE
from tests.unit.fakes.storage import DiskFullFileStorage


pytestmark = pytest.mark.asyncio


def png(size: int) -> bytes:
    return PNG_SIGNATURE + b"\x00" * (size - len(PNG_SIGNATURE))


def chunked(data: bytes, size: int = 10) -> list[bytes]:
    return [data[i:i + size] for i in range(0, len(data), size)]


def make_dto(body: RecordingBody, *, content_type="image/png", content_length: str | None = "auto"):
    if content_length == "auto":
        content_length = str(sum(len(c) for c in body._chunks))
    return IngestFileInputDTO(content_type=content_type, content_length=content_length, body=body)


@pytest.fixture
def use_case(storage, sniffer, id_generator, policy) -> IngestFileUseCase:
    return IngestFileUseCase(storage, sniffer, id_generator, policy)


class TestHeaderChecks:
    async def test_missing_content_type(self, use_case, upload_dir):
        body = RecordingBody(chunked(png(50)))

        with pytest.raises(MissingContentType):
            await use_case.execute(make_dto(body, content_type=None))

        assert body.consumed == 0
        assert list(upload_dir.iterdir()) == []

    @pytest.mark.parametrize("content_length", [None, "", "abc", "-1"])
    async def test_missing_or_bad_content_length_reads_nothing(self, use_case, upload_dir, content_length):
        body = RecordingBody(chunked(png(50)))

        with pytest.raises(MissingContentLength):
            await use_case.execute(make_dto(body, content_length=content_length))

        assert body.consumed == 0
        assert list(upload_dir.iterdir()) == []

    async def test_declared_type_outside_policy_writes_nothing(self, use_case, storage, upload_dir):
        body = RecordingBody(chunked(png(50)))

        with pytest.raises(UnsupportedType):
            await use_case.execute(make_dto(body, content_type="image/jpeg"))

        assert body.consumed == 0
        assert storage.created == []
        assert list(upload_dir.iterdir()) == []

    async def test_declared_type_parameters_are_ignored(self, use_case):
        body = RecordingBody(chunked(png(50)))

        out = await use_case.execute(make_dto(body, content_type="IMAGE/PNG; charset=binary"))

        assert out.mime == "image/png"

    async def test_declared_length_over_max_is_rejected_without_reading(self, use_case, upload_dir):
        body = RecordingBody(chunked(png(50)))

        with pytest.raises(TooLarge):
            await use_case.execute(make_dto(body, content_length="101"))

        assert body.consumed == 0
        assert list(upload_dir.iterdir()) == []


class TestStreaming:
    async def test_stores_upload_and_returns_identifier(self, use_case, upload_dir, sniffer):
        data = png(50)

        out = await use_case.execute(make_dto(RecordingBody(chunked(data))))

        assert out.file_id == "id1"
        assert out.size == 50
        assert out.mime == "image/png"
        assert (upload_dir / "id1").read_bytes() == data
        assert sniffer.sniffed_paths == [upload_dir.absolute() / "id1"]

    @pytest.mark.parametrize("size", [99, 100])
    async def test_sizes_up_to_max_are_accepted(self, use_case, upload_dir, size):
        data = png(size)

        out = await use_case.execute(make_dto(RecordingBody(chunked(data))))

        assert (upload_dir / out.file_id).read_bytes() == data

    async def test_one_byte_over_max_is_rejected(self, use_case, upload_dir):
        with pytest.raises(TooLarge):
            await use_case.execute(make_dto(RecordingBody(chunked(png(101)))))

        assert list(upload_dir.iterdir()) == []

    async def test_lying_content_length_is_caught_while_streaming(self, use_case, storage, upload_dir):
        body = RecordingBody(chunked(png(250), size=30))

        with pytest.raises(TooLarge):
            await use_case.execute(make_dto(body, content_length="10"))

        # 4th chunk pushes past 100 bytes; nothing after it is read
        assert body.consumed == 4
        assert body.consumed < body.total
        assert storage.deleted == ["id1"]
        assert list(upload_dir.iterdir()) == []

    async def test_repeated_oversize_uploads_leave_no_residue(self, use_case, upload_dir):
        for _ in range(3):
            with pytest.raises(TooLarge):
                await use_case.execute(make_dto(RecordingBody(chunked(png(250))), content_length="50"))

        assert list(upload_dir.iterdir()) == []

    async def test_sniffed_type_outside_policy_is_removed(self, use_case, storage, upload_dir):
        jpeg = JPEG_SIGNATURE + b"\x00" * 40

        with pytest.raises(UnsupportedType):
            await use_case.execute(make_dto(RecordingBody(chunked(jpeg))))

        assert storage.deleted == ["id1"]
        assert list(upload_dir.iterdir()) == []

    async def test_unknown_sniffed_type_is_removed(self, use_case, upload_dir):
        with pytest.raises(UnsupportedType):
            await use_case.execute(make_dto(RecordingBody([b"plain text, not an image"])))

        assert list(upload_dir.iterdir()) == []

    async def test_identifier_collision_regenerates(self, storage, sniffer, policy, upload_dir):
        (upload_dir / "taken").write_bytes(b"someone else")
        generator = FixedIdentifierGenerator(["taken", "fresh"])
        use_case = IngestFileUseCase(storage, sniffer, generator, policy)

        out = await use_case.execute(make_dto(RecordingBody(chunked(png(20)))))

        assert out.file_id == "fresh"
        assert (upload_dir / "taken").read_bytes() == b"someone else"

    async def test_gives_up_after_repeated_collisions(self, storage, sniffer, policy, upload_dir):
        (upload_dir / "taken").write_bytes(b"someone else")
        generator = FixedIdentifierGenerator(["taken"] * 5)
        use_case = IngestFileUseCase(storage, sniffer, generator, policy)

        with pytest.raises(FailedToSaveFile):
            await use_case.execute(make_dto(RecordingBody(chunked(png(20)))))

        assert (upload_dir / "taken").read_bytes() == b"someone else"
        assert storage.deleted == []

    async def test_io_failure_cleans_up_and_raises(self, sniffer, id_generator, policy, upload_dir):
        storage = DiskFullFileStorage(policy.folder, policy.identifier, fail_after=1)
        use_case = IngestFileUseCase(storage, sniffer, id_generator, policy)

        with pytest.raises(FailedToSaveFile) as exc_info:
            await use_case.execute(make_dto(RecordingBody(chunked(png(50)))))

        assert isinstance(exc_info.value.__cause__, OSError)
        assert storage.deleted == ["id1"]
        assert list(upload_dir.iterdir()) == []

    async def test_concurrent_uploads_get_separate_files(self, storage, sniffer, policy, upload_dir):
        import anyio

        from file_temp.app.infrastructure.files.identifier_generator import SecretsIdentifierGenerator

        use_case = IngestFileUseCase(storage, sniffer, SecretsIdentifierGenerator(), policy)
        payloads = [png(30) + bytes([i]) * 10 for i in range(5)]
        results: dict[int, str] = {}

        async def upload(i: int) -> None:
            out = await use_case.execute(make_dto(RecordingBody(chunked(payloads[i], size=7))))
            results[i] = out.file_id

        async with anyio.create_task_group() as tg:
            for i in range(5):
                tg.start_soon(upload, i)

        assert len(set(results.values())) == 5
        for i, file_id in results.items():
            assert (upload_dir / file_id).read_bytes() == payloads[i]
