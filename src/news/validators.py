"""
Type checks over the raw request body.

These run before the body is decoded into a request form, so a client that
sends e.g. ``{"Title": 6}`` gets a message about the field's type instead of a
generic decoding failure.
"""

import json
import math
from typing import Any, Dict, Optional

CREATE_EMPTY_BODY_MESSAGE = "body must contain required fields (Title, Content)"
EDIT_EMPTY_BODY_MESSAGE = "body must contain at least one field to update (Title, Content, or Categories)"


class PayloadValidationError(Exception):
    def __init__(self, field: Optional[str], message: str):
        self.field = field
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


def decoded_type_name(value: Any) -> str:
    """Type name reported for a decoded JSON value in client messages."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "float64"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "[]interface {}"
    return "map[string]interface {}"


def _format_number(value) -> str:
    # exponent notation starts at 1e21
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def _reject_constant(name: str):
    raise ValueError(f"unsupported JSON constant {name}")


def _parse_finite(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def _load_object(data: bytes) -> Dict[str, Any]:
    # every JSON number decodes to a float here
    try:
        raw = json.loads(
            data,
            parse_int=_parse_finite,
            parse_float=_parse_finite,
            parse_constant=_reject_constant,
        )
    except (ValueError, UnicodeDecodeError):
        raise PayloadValidationError("body", "invalid JSON format")

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise PayloadValidationError("body", "invalid JSON format")
    return raw


def validate_create_news_request(data: bytes) -> None:
    raw = _load_object(data)

    if not raw:
        raise PayloadValidationError(None, CREATE_EMPTY_BODY_MESSAGE)

    for field in ("Title", "Content"):
        if field in raw and not isinstance(raw[field], str):
            raise PayloadValidationError(field, "must be string")

    if raw.get("Categories") is not None:
        validate_categories_array(raw["Categories"])


def validate_edit_news_request(data: bytes) -> None:
    raw = _load_object(data)

    if not raw:
        raise PayloadValidationError(None, EDIT_EMPTY_BODY_MESSAGE)

    # explicit null means "leave unchanged"
    for field in ("Title", "Content"):
        value = raw.get(field)
        if value is not None and not isinstance(value, str):
            raise PayloadValidationError(field, f"must be string, got {decoded_type_name(value)}")

    if raw.get("Categories") is not None:
        validate_categories_array(raw["Categories"])


def validate_categories_array(categories: Any) -> None:
    """Check a decoded ``Categories`` value, stopping at the first bad element."""
    if not isinstance(categories, list):
        raise PayloadValidationError("Categories", "must be array numbers")

    for i, category in enumerate(categories):
        if isinstance(category, bool) or not isinstance(category, (int, float)):
            raise PayloadValidationError(
                "Categories",
                f"element at index {i} must be number, got {decoded_type_name(category)}"
            )

        if isinstance(category, float) and not category.is_integer():
            raise PayloadValidationError(
                "Categories",
                f"element at index {i} must be integer, got {_format_number(category)}"
            )

        if category <= 0:
            raise PayloadValidationError(
                "Categories",
                f"element at index {i} must be positive, got {_format_number(category)}"
            )
