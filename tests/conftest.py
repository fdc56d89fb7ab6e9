from typing import List, Optional

import pytest
from resource_client.core.request import RequestDescriptor, TransportResponse


class RecordingDispatcher:
    """Dispatcher double: records descriptors and replays a canned response."""

    def __init__(
        self,
        response: Optional[TransportResponse] = None,
        error: Optional[Exception] = None,
    ):
        self.response = response or TransportResponse(status_code=200)
        self.error = error
        self.requests: List[RequestDescriptor] = []

    async def dispatch(self, request: RequestDescriptor) -> TransportResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last(self) -> RequestDescriptor:
        return self.requests[-1]


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()
