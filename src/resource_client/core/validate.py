from typing import Any, Iterable

from .errors import ResourceValidationError


def validate_value(name: str, value: Any) -> None:
    if not value:
        raise ResourceValidationError(name)


def validate_required(field_names: Iterable[str], owner: Any) -> None:
    """
    Check that every named attribute of owner is set and non-empty.
    Raises ResourceValidationError for the first failing field.
    """
    for name in field_names:
        validate_value(name, getattr(owner, name, None))


__all__ = ["validate_required", "validate_value"]
