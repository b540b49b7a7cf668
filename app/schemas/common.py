# app/schemas/common.py
"""Validation helpers shared by the input schemas."""

from typing import Iterable, Optional
from pydantic_core import PydanticCustomError


def require_text(value: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace and reject strings that end up empty."""
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise PydanticCustomError("blank_string", "must not be blank")
    return value


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def reject_cleared(model, names: Iterable[str]):
    """Partial updates may omit required fields but must not null them out."""
    for name in names:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise PydanticCustomError(
                "blank_string", "{field} is required and cannot be cleared", {"field": name}
            )
    return model
