from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .address import build_uri
from .options import DEFAULT_DATA_TYPE, split_options
from .request import (
    DELETE,
    GET,
    POST,
    PUT,
    Dispatcher,
    RequestComposer,
    TransportResponse,
)
from .validate import validate_required, validate_value

ORDER_FIELD = "_order"
REQUIRED_FIELDS = ("type", "src_id", "dest_type")


def order_directive(pos: int) -> Dict[str, str]:
    """Server-side reorder instruction: order_directive(3) -> {'_order': '$pos(3)'}"""
    return {ORDER_FIELD: f"$pos({pos})"}


def strip_type_prefix(dest_id: Any) -> str:
    """'music:Track/555' -> '555'. Ids without a '/' are returned unchanged."""
    dest_id = str(dest_id)
    _, sep, tail = dest_id.partition("/")
    return tail if sep else dest_id


class RelationResource:
    """
    Ordered relation from one source instance to instances of dest_type.
    Example: RelationResource('music:Album', '12', 'music:Track', client)
    addresses /music:Album/12/music:Track[/{dest_id}].
    """

    def __init__(
        self,
        type: str,
        src_id: str,
        dest_type: str,
        dispatcher: Dispatcher,
        params: Optional[Mapping[str, Any]] = None,
    ):
        self.type = type
        self.src_id = src_id
        self.dest_type = dest_type
        validate_required(REQUIRED_FIELDS, self)
        self.requests = RequestComposer(dispatcher, params)

    def address(self, *segments: Optional[str]) -> str:
        return build_uri(self.type, self.src_id, self.dest_type, *segments)

    async def get(
        self,
        dest_id: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        """
        Fetch one edge, or the whole relation when dest_id is omitted.
        dest_id is used verbatim, composite 'type/id' values included.
        """
        data_type, passthrough = split_options(options)
        request = self.requests.compose(
            GET, self.address(dest_id), passthrough, accept=data_type
        )
        return await self.requests.send(request)

    async def add(
        self,
        dest_id: str,
        relation_data: Any = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        """Create or replace the edge to dest_id, with optional edge data."""
        data_type, passthrough = split_options(options)
        validate_value("dest_id", dest_id)
        request = self.requests.compose(
            PUT,
            self.address(dest_id),
            passthrough,
            accept=data_type,
            content_type=data_type,
            data=relation_data,
        )
        return await self.requests.send(request)

    async def add_anonymous(
        self,
        relation_data: Any = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        """Create an edge whose destination the server assigns."""
        data_type, passthrough = split_options(options)
        request = self.requests.compose(
            POST,
            self.address(),
            passthrough,
            accept=data_type,
            content_type=data_type,
            data=relation_data,
        )
        return await self.requests.send(request)

    async def move(
        self,
        dest_id: str,
        pos: int,
        options: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        """
        Move the edge to dest_id to position pos (0-based).
        A type prefix in dest_id ('music:Track/555') is dropped.
        The body is always JSON, whatever dataType the options ask for.
        """
        validate_value("dest_id", dest_id)
        dest_id = strip_type_prefix(dest_id)
        _, passthrough = split_options(options)
        request = self.requests.compose(
            PUT,
            self.address(dest_id),
            passthrough,
            content_type=DEFAULT_DATA_TYPE,
            data=order_directive(pos),
        )
        return await self.requests.send(request)

    async def delete(
        self,
        dest_id: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        # dest_id is not validated: without it the whole relation is addressed
        data_type, passthrough = split_options(options)
        request = self.requests.compose(
            DELETE, self.address(dest_id), passthrough, accept=data_type
        )
        return await self.requests.send(request)

    def __repr__(self) -> str:
        return (
            f"RelationResource(type={self.type!r}, src_id={self.src_id!r}, "
            f"dest_type={self.dest_type!r})"
        )


__all__ = [
    "ORDER_FIELD",
    "RelationResource",
    "order_directive",
    "strip_type_prefix",
]
