"""Shared validation utilities"""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

SchemaType = TypeVar("SchemaType", bound=BaseModel)

# Largest integer accepted from callers; keeps stored values and page offsets inside int64
MAX_SAFE_INTEGER = 2**53 - 1


def validate_non_empty(value: Optional[str], field: str) -> Optional[str]:
    """
    Reject empty strings while letting an absent value through.

    Raises:
        ValueError: If the value is present but empty
    """
    if value is not None and len(value) == 0:
        raise ValueError(f"{field} must not be empty")
    return value


def validate_positive_int(value: Optional[int], field: str) -> Optional[int]:
    if value is None:
        return value
    if value <= 0:
        raise ValueError(f"{field} must be a positive integer")
    if value > MAX_SAFE_INTEGER:
        raise ValueError(f"{field} must not exceed {MAX_SAFE_INTEGER}")
    return value


def validate_in_range(value: Optional[int], low: int, high: int, field: str) -> Optional[int]:
    """Inclusive range check on an optional integer"""
    if value is not None and not low <= value <= high:
        raise ValueError(f"{field} must be between {low} and {high}")
    return value


def validate_before(start: Optional[datetime], end: Optional[datetime], message: str) -> None:
    """Cross-field ordering: ``start`` must strictly precede ``end``"""
    if start is not None and end is not None and not start < end:
        raise ValueError(message)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a timestamp to naive UTC for storage.

    Aware values are converted to UTC; naive values are taken as UTC already.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a stored naive timestamp so it serializes with an offset"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def issues_from_errors(errors: list[dict[str, Any]], skip_prefix: tuple = ()) -> list[dict[str, Any]]:
    """Flatten pydantic/FastAPI error entries into ``{field, message}`` pairs"""
    issues = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in skip_prefix]
        ctx_error = (error.get("ctx") or {}).get("error")
        message = str(ctx_error) if ctx_error is not None else error.get("msg", "Invalid value")
        issues.append({"field": ".".join(loc) or None, "message": message})
    return issues


def parse_input(schema: Type[SchemaType], payload: Union[SchemaType, Mapping[str, Any], None]) -> SchemaType:
    """
    Validate an operation's input before any store access.

    Already-validated schema instances pass through unchanged; mappings are
    validated against ``schema``.

    Raises:
        ValidationError: Listing every violated precondition
    """
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(dict(payload or {}))
    except PydanticValidationError as e:
        issues = issues_from_errors(e.errors())
        raise ValidationError(issues[0]["message"], issues) from e
