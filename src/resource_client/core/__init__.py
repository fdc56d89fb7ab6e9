"""Core domain surface for resource-client (transport-agnostic)."""

from .address import build_uri
from .collection import CollectionResource
from .errors import (
    ResourceClientError,
    ResourceHTTPError,
    ResourceParseError,
    ResourceValidationError,
    TransportError,
)
from .location import get_location_id, parse_id_from_location
from .options import (
    DATA_TYPE_KEY,
    DEFAULT_DATA_TYPE,
    get_default_options,
    split_options,
)
from .relation import RelationResource, order_directive, strip_type_prefix
from .request import (
    AddressableResource,
    Dispatcher,
    RequestComposer,
    RequestDescriptor,
    TransportResponse,
)
from .resources import Resources
from .validate import validate_required, validate_value

__all__ = [
    # Resources
    "CollectionResource",
    "RelationResource",
    "Resources",
    # Request composition
    "AddressableResource",
    "Dispatcher",
    "RequestComposer",
    "RequestDescriptor",
    "TransportResponse",
    "build_uri",
    "get_default_options",
    "split_options",
    "DATA_TYPE_KEY",
    "DEFAULT_DATA_TYPE",
    "order_directive",
    "strip_type_prefix",
    # Location
    "get_location_id",
    "parse_id_from_location",
    # Validation
    "validate_required",
    "validate_value",
    # Exceptions
    "ResourceClientError",
    "ResourceValidationError",
    "TransportError",
    "ResourceHTTPError",
    "ResourceParseError",
]
