import re
from typing import Optional

from ..core.exceptions import BadRequestError

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"[0-9]+")

# Range of the store's BIGINT columns
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

MIN_PAGE_LIMIT = 1
MAX_PAGE_LIMIT = 100


def parse_int_param(value: Optional[str], name: str, default: int) -> int:
    if value is None or value == "":
        return default
    if not _SIGNED_INT.fullmatch(value):
        raise BadRequestError(f"{name} must be a valid number")

    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise BadRequestError(f"{name} must be a valid number")
    return number


def parse_news_id(value: str) -> int:
    if not _UNSIGNED_INT.fullmatch(value):
        raise BadRequestError("Invalid ID format")

    news_id = int(value)
    if news_id > INT64_MAX:
        raise BadRequestError("Invalid ID format")
    return news_id


def validate_pagination_params(limit: int, offset: int, max_limit: int = MAX_PAGE_LIMIT) -> None:
    if limit < MIN_PAGE_LIMIT:
        raise BadRequestError(f"limit must be greater or equal {MIN_PAGE_LIMIT}")
    if limit > max_limit:
        raise BadRequestError(f"limit must be less or equal to {max_limit}")
    if offset < 0:
        raise BadRequestError("offset cannot be negative")
