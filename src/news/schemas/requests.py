"""News API request schemas"""

from typing import Annotated, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_core import PydanticCustomError

from ...core.exceptions import BadRequestError, ValidationFailedError
from ...utils.validation_utils import INT64_MAX
from ..validators import EDIT_EMPTY_BODY_MESSAGE

TITLE_MAX_LENGTH = 255

CategoryId = Annotated[int, Field(gt=0, le=INT64_MAX)]


class NewsForm(BaseModel):
    # Title/Content are trimmed before any length rule runs
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)


class NewsCreateForm(NewsForm):
    """Request model for creating a news item"""
    title: str = Field(..., alias="Title", max_length=TITLE_MAX_LENGTH)
    content: str = Field(..., alias="Content")
    categories: Optional[List[CategoryId]] = Field(
        None,
        alias="Categories",
        description="Positive category ids, e.g. [1, 2, 3]"
    )

    @field_validator("title", "content")
    @classmethod
    def require_text(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("required", "field is required")
        return value


class NewsEditForm(NewsForm):
    """Request model for a partial update; omitted or null fields are left unchanged"""
    title: Optional[str] = Field(None, alias="Title", min_length=1, max_length=TITLE_MAX_LENGTH)
    content: Optional[str] = Field(None, alias="Content", min_length=1)
    categories: Optional[List[CategoryId]] = Field(
        None,
        alias="Categories",
        description="Replaces all category ids of the news item; [] removes them"
    )

    @model_validator(mode="after")
    def require_any_field(self):
        if self.title is None and self.content is None and self.categories is None:
            raise PydanticCustomError("no_fields_to_update", EDIT_EMPTY_BODY_MESSAGE)
        return self


_REASONS = {
    "missing": lambda ctx: "field is required",
    "string_too_short": lambda ctx: f"minimum length is {ctx['min_length']}",
    "string_too_long": lambda ctx: f"maximum length is {ctx['max_length']}",
    "greater_than": lambda ctx: f"must be greater than {ctx['gt']}",
}


def _format_location(loc) -> str:
    field = ""
    for part in loc:
        field += f"[{part}]" if isinstance(part, int) else str(part)
    return field


def format_form_error(exc: ValidationError) -> str:
    """Render the first rule violation as ``"<Field>: <reason>"``."""
    error = exc.errors()[0]
    error_type = error["type"]

    if error_type in _REASONS:
        reason = _REASONS[error_type](error.get("ctx") or {})
    elif error_type in ("required", "no_fields_to_update"):
        reason = error["msg"]
    else:
        reason = f"validation failed ({error_type})"

    field = _format_location(error["loc"])
    return f"{field}: {reason}" if field else reason


# Values that cannot be represented in the form's types, as opposed to rule violations
_DECODE_ERRORS = frozenset({
    "json_invalid",
    "json_type",
    "string_type",
    "list_type",
    "int_type",
    "int_parsing",
    "int_parsing_size",
    "int_from_float",
    "less_than_equal",
})

FormT = TypeVar("FormT", bound=NewsForm)


def decode_form(form_cls: Type[FormT], data: bytes) -> FormT:
    try:
        return form_cls.model_validate_json(data)
    except ValidationError as e:
        if any(error["type"] in _DECODE_ERRORS for error in e.errors()):
            raise BadRequestError("Failed to parse request body") from e
        raise ValidationFailedError(format_form_error(e)) from e
