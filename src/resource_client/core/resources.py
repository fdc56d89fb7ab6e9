from __future__ import annotations

from typing import Any, Mapping, Optional

from .collection import CollectionResource
from .relation import RelationResource
from .request import Dispatcher


class Resources:
    """Builds resources that share one dispatcher."""

    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher

    def collection(
        self, type: str, params: Optional[Mapping[str, Any]] = None
    ) -> CollectionResource:
        return CollectionResource(type, self.dispatcher, params)

    def relation(
        self,
        type: str,
        src_id: str,
        dest_type: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> RelationResource:
        return RelationResource(type, src_id, dest_type, self.dispatcher, params)


__all__ = ["Resources"]
