# user_api/api/validation.py
"""
Turns pydantic validation failures into the ``field -> message`` map sent in
``details``. Only the first error reported for a field is kept.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from user_api.core.exceptions import ValidationFailedError

TSchema = TypeVar("TSchema", bound=BaseModel)

_MESSAGES = {
    "missing": "{field} is required",
    "string_too_short": "{field} must be at least {min_length} characters",
    "string_too_long": "{field} must not exceed {max_length} characters",
    "too_short": "{field} must be at least {min_length} characters",
    "too_long": "{field} must not exceed {max_length} characters",
    "greater_than": "{field} must be greater than {gt}",
    "less_than_equal": "{field} must not exceed {le}",
    "enum": "{field} must be one of: {choices}",
}

# Format errors read differently depending on the field
_FORMAT_ERRORS = {"value_error", "string_pattern_mismatch"}
_FORMAT_MESSAGES = {
    "email": "{field} must be a valid email address",
    "phone": "{field} must be a valid phone number in E.164 format",
}

_QUOTED = re.compile(r"'([^']*)'")


def _message_for(field: str, error: Mapping[str, Any]) -> str:
    kind = error["type"]
    ctx = dict(error.get("ctx") or {})

    if kind in _FORMAT_ERRORS and field in _FORMAT_MESSAGES:
        return _FORMAT_MESSAGES[field].format(field=field)

    if kind == "enum":
        ctx["choices"] = " ".join(_QUOTED.findall(str(ctx.get("expected", ""))))

    template = _MESSAGES.get(kind)
    if template is None:
        return f"{field} is invalid"
    return template.format(field=field, **ctx)


def field_errors(exc: ValidationError) -> dict[str, str]:
    details: dict[str, str] = {}
    for error in exc.errors(include_url=False):
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "_error"
        details.setdefault(field, _message_for(field, error))
    return details


def validate_payload(schema: type[TSchema], payload: Mapping[str, Any]) -> TSchema:
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailedError(field_errors(exc)) from exc
