from __future__ import annotations
from typing import Any, Optional

from .errors import InvalidArgumentError, ValidationError


def require_non_null(value: Any, field: str) -> Any:
    if value is None:
        raise InvalidArgumentError(f"{field} must not be None", field)
    return value


def require_non_empty(value: Optional[str], field: str) -> str:
    require_non_null(value, field)
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{field} must be a string, got {type(value).__name__}", field)
    if not value:
        raise InvalidArgumentError(f"{field} must not be empty", field)
    return value


def require_present(value: Optional[str], field: str) -> None:
    """Structural variant used by validate(): missing values are a ValidationError"""
    if not value:
        raise ValidationError(f"{field} must be provided", field)


def require_enum(value: Any, enum_cls, field: str):
    """Accept an enum member or its string value"""
    require_non_null(value, field)
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidArgumentError(f"{field} must be one of [{allowed}], got {value!r}", field)
