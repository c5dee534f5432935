import pytest

from file_temp.app.domain.files.value_objects import IdentifierPolicy, UploadPolicy
from tests.unit.fakes.identifier_generator import FixedIdentifierGenerator
from tests.unit.fakes.sniffer import FakeFileTypeSniffer
from tests.unit.fakes.storage import SpyFileStorage


@pytest.fixture
def upload_dir(tmp_path):
    folder = tmp_path / "uploads"
    folder.mkdir()
    return folder


@pytest.fixture
def policy(upload_dir) -> UploadPolicy:
    return UploadPolicy(
        folder=upload_dir,
        max_size=100,
        accepted_types=frozenset({"image/png"}),
        identifier=IdentifierPolicy(),
    )


@pytest.fixture
def storage(policy) -> SpyFileStorage:
    return SpyFileStorage(policy.folder, policy.identifier)


@pytest.fixture
def sniffer() -> FakeFileTypeSniffer:
    return FakeFileTypeSniffer()


@pytest.fixture
def id_generator() -> FixedIdentifierGenerator:
    return FixedIdentifierGenerator()
