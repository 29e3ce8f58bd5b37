from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from dropbox_paper.api.http_client import PaperHttpClient
from dropbox_paper.config import PaperConfig
from dropbox_paper.tests.utils.mock_transport import MockTransport

TOKEN = "test-token"


@pytest.fixture
def config() -> PaperConfig:
    """Create test config."""
    return PaperConfig()


@pytest.fixture
def mock_transport() -> MockTransport:
    """Create mock transport."""
    return MockTransport()


@pytest_asyncio.fixture
async def http(config: PaperConfig, mock_transport: MockTransport) -> AsyncIterator[PaperHttpClient]:
    client = PaperHttpClient(TOKEN, config, transport=mock_transport)

    yield client

    await client.aclose()
