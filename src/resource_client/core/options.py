from typing import Any, Dict, Mapping, Optional, Tuple

DATA_TYPE_KEY = "dataType"
DEFAULT_DATA_TYPE = "application/json"


def get_default_options(options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Return a copy of the caller options with dataType filled in.
    Other keys (filters, sort, pagination, headers) are copied untouched.
    """
    merged = dict(options or {})
    if not merged.get(DATA_TYPE_KEY):
        merged[DATA_TYPE_KEY] = DEFAULT_DATA_TYPE
    return merged


def split_options(
    options: Optional[Mapping[str, Any]] = None,
) -> Tuple[str, Dict[str, Any]]:
    """Separate the resolved dataType from the pass-through options."""
    merged = get_default_options(options)
    data_type = merged.pop(DATA_TYPE_KEY)
    return data_type, merged


__all__ = [
    "DATA_TYPE_KEY",
    "DEFAULT_DATA_TYPE",
    "get_default_options",
    "split_options",
]
