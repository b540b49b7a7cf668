# app/utils/errors.py
"""
Record rejection errors and their categories.
Services raise RecordRejected / RecordNotFound; app.main turns them (and pydantic's
RequestValidationError) into JSON responses with one entry per offending field.
"""

import enum


class ErrorCategory(str, enum.Enum):
    MISSING_REQUIRED_FIELD = "missing_required_field"
    OUT_OF_RANGE = "out_of_range"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    UNIQUENESS_VIOLATION = "uniqueness_violation"
    REFERENCE_CONFLICT = "reference_conflict"
    UNKNOWN_REFERENCE = "unknown_reference"
    INVALID_VALUE = "invalid_value"


# pydantic error type → category
_PYDANTIC_CATEGORIES = {
    "missing": ErrorCategory.MISSING_REQUIRED_FIELD,
    "string_too_short": ErrorCategory.MISSING_REQUIRED_FIELD,
    "greater_than": ErrorCategory.OUT_OF_RANGE,
    "greater_than_equal": ErrorCategory.OUT_OF_RANGE,
    "less_than": ErrorCategory.OUT_OF_RANGE,
    "less_than_equal": ErrorCategory.OUT_OF_RANGE,
    "string_too_long": ErrorCategory.OUT_OF_RANGE,
    "enum": ErrorCategory.INVALID_ENUM_VALUE,
    # raised by app.schemas validators
    "blank_string": ErrorCategory.MISSING_REQUIRED_FIELD,
    "date_order": ErrorCategory.OUT_OF_RANGE,
}


class RecordRejected(Exception):
    """A record failed a boundary rule and was not persisted."""

    def __init__(self, field: str, category: ErrorCategory, message: str):
        super().__init__(message)
        self.field = field
        self.category = category
        self.message = message

    def to_dict(self) -> dict:
        return {"field": self.field, "category": self.category.value, "message": self.message}


class RecordNotFound(Exception):
    def __init__(self, entity: str, key):
        super().__init__(f"{entity} '{key}' not found")
        self.entity = entity
        self.key = key


def categorize_validation_error(error: dict) -> dict:
    """
    Flatten one pydantic error into {field, category, message}.
    The field is the last non-index element of the error location ('body' is dropped).
    """
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = loc[-1] if loc else "__root__"
    error_type = error.get("type", "")
    if error_type != "missing" and "input" in error and error["input"] is None:
        # Explicit null on a field that does not accept one
        category = ErrorCategory.MISSING_REQUIRED_FIELD
    else:
        category = _PYDANTIC_CATEGORIES.get(error_type, ErrorCategory.INVALID_VALUE)
    ctx = error.get("ctx") or {}
    if ctx.get("field"):
        field = ctx["field"]
    message = error.get("msg", "Invalid value")
    return {"field": field, "category": category.value, "message": f"{field}: {message}"}
