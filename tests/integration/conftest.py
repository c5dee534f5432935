import pytest

from tests.integration.pngs import make_png


@pytest.fixture
def png_50kb() -> bytes:
    return make_png(50 * 1024)
