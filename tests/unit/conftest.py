from pathlib import Path
from typing import AsyncIterator, Callable, Iterable

import httpx
import pytest
import pytest_asyncio

from did_prism.client import PrismDidClient
from did_prism.config import ClientConfig

UNIT_TEST_DIR = Path(__file__).parent

BASE_URL = "https://node.example.com"

Handler = Callable[[httpx.Request], httpx.Response]
ClientFactory = Callable[..., PrismDidClient]


def pytest_collection_modifyitems(config, items: Iterable[pytest.Item]):
    for item in items:
        path = Path(item.fspath)
        if path.is_relative_to(UNIT_TEST_DIR):
            item.add_marker(pytest.mark.unit)


@pytest_asyncio.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """AsyncClient closed after the test."""
    async with httpx.AsyncClient() as client:
        yield client


@pytest_asyncio.fixture
async def make_client() -> AsyncIterator[ClientFactory]:
    """Build resolver clients backed by a mock transport."""
    opened: list[httpx.AsyncClient] = []

    def _make_client(
        handler: Handler,
        base_url: str = BASE_URL,
        default_ledger: str | None = None,
    ) -> PrismDidClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        opened.append(http)
        return PrismDidClient(
            http, ClientConfig(base_url=base_url, default_ledger=default_ledger)
        )

    yield _make_client

    for http in opened:
        await http.aclose()
