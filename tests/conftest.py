import collections

import pytest

from vinyldns_client.client import VinylDNSClient


class MockClient(VinylDNSClient):
    def __init__(self, access_key: str, secret_key: str, host: str):
        super().__init__(access_key=access_key, secret_key=secret_key, host=host)
        self._responses = collections.deque()
        self.requests = []

    async def _make_request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        data: bytes | None = None,
    ) -> str:
        self.requests.append(
            {
                "method": method,
                "path": path,
                "params": params,
                "data": data,
            }
        )
        if self._responses:
            response = self._responses.popleft()
            if isinstance(response, Exception):
                raise response
            return response
        raise ValueError("No more responses available in the mock client.")

    def add_response(self, response: str | Exception):
        self._responses.append(response)


@pytest.fixture
def mock_client():
    return MockClient(
        access_key="test-access-key",
        secret_key="test-secret-key",
        host="https://vinyldns.example.com",
    )
