import httpx
import pytest
import pytest_asyncio

from chargily_pay import ChargilyClient
from mocks import MOCK_API_KEY, MockApi


@pytest.fixture
def api() -> MockApi:
    return MockApi()


@pytest_asyncio.fixture
async def client(api: MockApi):
    async with ChargilyClient(
        api_key=MOCK_API_KEY,
        mode="test",
        transport=httpx.MockTransport(api.handler),
    ) as chargily:
        yield chargily
