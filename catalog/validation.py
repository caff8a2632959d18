"""Validation gate.

Every write passes an untrusted record through ``validate_record`` before it
reaches a repository query. Pydantic collects all violations in one pass; they
are rewritten here into short ``"<field> <problem>"`` messages.
"""
from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from catalog.errors import ERROR_PAYLOAD_NOT_OBJECT, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

_NOT_A_NUMBER = {"float_parsing", "float_type", "int_parsing", "int_type", "finite_number"}


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "payload"


def _describe(error: dict) -> str:
    """Turn one pydantic error dict into a human readable message."""
    field = _field_name(error.get("loc", ()))
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return f"{field} is required"
    if kind in _NOT_A_NUMBER:
        return f"{field} must be a valid number"
    if kind == "int_from_float":
        return f"{field} must be a valid integer"
    if kind == "string_type":
        return f"{field} must be a string"
    if kind == "string_too_short":
        return f"{field} must not be empty"
    if kind == "greater_than_equal":
        return f"{field} must be greater than or equal to {ctx.get('ge')}"
    if kind == "less_than_equal":
        return f"{field} must be less than or equal to {ctx.get('le')}"
    if kind == "extra_forbidden":
        return f"{field} is not a filterable field"
    if kind == "value_error":
        msg = error.get("msg", "")
        if "valid email address" in msg:
            return f"{field} must be a valid email"
        return f"{field} {msg.removeprefix('Value error, ')}"
    return f"{field}: {error.get('msg', 'is invalid')}"


def check_record(schema: type[ModelT], record: Any) -> tuple[Optional[ModelT], list[str]]:
    """
    Validate a record without raising.

    Returns:
        (model, []) on success, (None, messages) on failure.
    """
    if not isinstance(record, Mapping):
        return None, [ERROR_PAYLOAD_NOT_OBJECT]
    try:
        return schema.model_validate(dict(record)), []
    except PydanticValidationError as e:
        return None, [_describe(err) for err in e.errors()]


def validate_record(schema: type[ModelT], record: Any) -> ModelT:
    """
    Validate a record against an entity schema.

    Args:
        schema: Input model (ProductIn, ReviewIn, UserIn, ProductUpdate)
        record: Untrusted mapping, or an already validated instance of schema

    Raises:
        ValidationError: with one message per violation
    """
    if isinstance(record, schema):
        return record
    model, errors = check_record(schema, record)
    if errors:
        raise ValidationError(errors)
    return model
