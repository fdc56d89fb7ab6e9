from __future__ import annotations

import os
from typing import Optional, Tuple

from . import client as _client
from .client import ResourceClient
from .logging import setup_logging

DEFAULT_TIMEOUT_SECONDS = 10.0


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, Optional[str]]:
    """Load the service base URL and optional access token from environment (optional .env)."""  # noqa: E501
    if use_dotenv:
        _client.load_dotenv()
    base_url = os.getenv("RESOURCE_CLIENT_BASE_URL", "").strip()
    access_token = os.getenv("RESOURCE_CLIENT_ACCESS_TOKEN", "").strip() or None
    return base_url, access_token


def load_timeout() -> float:
    raw = os.getenv("RESOURCE_CLIENT_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ValueError(f"RESOURCE_CLIENT_TIMEOUT must be a number, got {raw!r}") from exc
    if timeout <= 0:
        raise ValueError("RESOURCE_CLIENT_TIMEOUT must be > 0")
    return timeout


def configure_logging_from_env() -> None:
    setup_logging(os.getenv("RESOURCE_CLIENT_LOG_LEVEL", "INFO"))


def create_client_from_env(**kwargs) -> ResourceClient:
    """Create a ResourceClient from environment variables."""
    base_url, access_token = load_env_config()
    if not base_url:
        raise ValueError("Missing RESOURCE_CLIENT_BASE_URL in environment.")
    kwargs.setdefault("timeout_seconds", load_timeout())
    return ResourceClient(base_url=base_url, access_token=access_token, **kwargs)


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "load_env_config",
    "load_timeout",
    "configure_logging_from_env",
    "create_client_from_env",
]
