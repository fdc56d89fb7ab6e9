"""resource_client package exports."""

from .client import ResourceClient, RetryConfig, serialize_params
from .config import (
    configure_logging_from_env,
    create_client_from_env,
    load_env_config,
)
from .core import (
    AddressableResource,
    CollectionResource,
    Dispatcher,
    RelationResource,
    RequestDescriptor,
    Resources,
    ResourceClientError,
    ResourceHTTPError,
    ResourceParseError,
    ResourceValidationError,
    TransportError,
    TransportResponse,
    build_uri,
    get_default_options,
    get_location_id,
    parse_id_from_location,
    validate_required,
    validate_value,
)
from .logging import setup_logging

__all__ = [
    # Transport
    "ResourceClient",
    "RetryConfig",
    "serialize_params",
    "configure_logging_from_env",
    "create_client_from_env",
    "load_env_config",
    "setup_logging",
    # Resources
    "CollectionResource",
    "RelationResource",
    "Resources",
    "AddressableResource",
    "Dispatcher",
    "RequestDescriptor",
    "TransportResponse",
    "build_uri",
    "get_default_options",
    "get_location_id",
    "parse_id_from_location",
    "validate_required",
    "validate_value",
    # Exceptions
    "ResourceClientError",
    "ResourceValidationError",
    "TransportError",
    "ResourceHTTPError",
    "ResourceParseError",
]
