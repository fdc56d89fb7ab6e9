from __future__ import annotations

from typing import Any, Mapping, Optional

from .address import build_uri
from .location import get_location_id
from .options import split_options
from .request import GET, PUT, Dispatcher, RequestComposer, TransportResponse


class CollectionResource:
    """All instances of one resource type, e.g. CollectionResource('music:Track', client)."""

    def __init__(
        self,
        type: str,
        dispatcher: Dispatcher,
        params: Optional[Mapping[str, Any]] = None,
    ):
        self.type = type
        self.requests = RequestComposer(dispatcher, params)

    def address(self, *segments: Optional[str]) -> str:
        return build_uri(self.type, *segments)

    async def get(
        self, options: Optional[Mapping[str, Any]] = None
    ) -> TransportResponse:
        """
        Fetch the collection. Filter, sort and pagination options are
        forwarded to the transport untouched.
        """
        data_type, passthrough = split_options(options)
        request = self.requests.compose(
            GET, self.address(), passthrough, accept=data_type
        )
        return await self.requests.send(request)

    async def add(
        self, data: Any, options: Optional[Mapping[str, Any]] = None
    ) -> Optional[str]:
        """
        Add a new element to the collection.

        Returns:
            The id of the created resource, taken from the response Location.
        """
        data_type, passthrough = split_options(options)
        request = self.requests.compose(
            PUT,
            self.address(),
            passthrough,
            accept=data_type,
            content_type=data_type,
            data=data,
        )
        response = await self.requests.send(request)
        return get_location_id(response)

    def __repr__(self) -> str:
        return f"CollectionResource(type={self.type!r})"


__all__ = ["CollectionResource"]
