"""
Transport-neutral request descriptors and the dispatch contract.

Resources never talk HTTP themselves. Each operation composes a
RequestDescriptor and hands it to an injected Dispatcher (see
resource_client.client.ResourceClient for the httpx implementation).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

GET = "GET"
PUT = "PUT"
POST = "POST"
DELETE = "DELETE"


class RequestDescriptor(BaseModel):
    method: str
    url: str
    accept: Optional[str] = None
    content_type: Optional[str] = None
    data: Any = None
    # pass-through options (filters, sort, pagination, headers); never dataType
    options: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    data: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "headers", {k.lower(): v for k, v in self.headers.items()}
        )

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())


@runtime_checkable
class Dispatcher(Protocol):
    async def dispatch(self, request: RequestDescriptor) -> TransportResponse: ...


@runtime_checkable
class AddressableResource(Protocol):
    """Common surface of collection and relation resources."""

    type: str
    requests: "RequestComposer"

    def address(self, *segments: Optional[str]) -> str: ...


class RequestComposer:
    """
    Builds descriptors for one resource and sends them through its dispatcher.
    - Resource-level params act as base options; call options win on conflict.
    - No retries, no error handling: dispatcher failures propagate as-is.
    """

    def __init__(
        self, dispatcher: Dispatcher, params: Optional[Mapping[str, Any]] = None
    ):
        self.dispatcher = dispatcher
        self.params: Dict[str, Any] = dict(params or {})

    def compose(
        self,
        method: str,
        url: str,
        options: Mapping[str, Any],
        *,
        accept: Optional[str] = None,
        content_type: Optional[str] = None,
        data: Any = None,
    ) -> RequestDescriptor:
        return RequestDescriptor(
            method=method,
            url=url,
            accept=accept,
            content_type=content_type,
            data=data,
            options={**self.params, **options},
        )

    async def send(self, request: RequestDescriptor) -> TransportResponse:
        return await self.dispatcher.dispatch(request)


__all__ = [
    "GET",
    "PUT",
    "POST",
    "DELETE",
    "RequestDescriptor",
    "TransportResponse",
    "Dispatcher",
    "AddressableResource",
    "RequestComposer",
]
