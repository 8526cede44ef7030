from typing import Any, Dict, Optional, Type

import structlog
from fastapi import APIRouter, Depends, Query, Request

from src.api.dependencies import get_news_service
from src.config import get_settings
from src.core.exceptions import ValidationFailedError
from src.news.schemas.requests import NewsCreateForm, NewsEditForm, decode_form
from src.news.schemas.responses import (
    CreateNewsResponse,
    ErrorResponse,
    NewsListResponse,
    SuccessResponse,
)
from src.news.services.news_service import NewsService
from src.news.validators import (
    PayloadValidationError,
    validate_create_news_request,
    validate_edit_news_request,
)
from src.utils.validation_utils import parse_int_param, parse_news_id, validate_pagination_params

logger = structlog.get_logger(__name__)

router = APIRouter()


def _json_body(model: Type[Any]) -> Dict[str, Any]:
    # The body is read raw so it can be type checked before decoding;
    # this keeps the form schema in the OpenAPI document.
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema(by_alias=True)}},
        }
    }


def _errors(*codes: int) -> Dict[int, Dict[str, Any]]:
    return {code: {"model": ErrorResponse} for code in codes}


@router.post(
    "/create",
    status_code=201,
    response_model=CreateNewsResponse,
    responses=_errors(400, 401, 500),
    openapi_extra=_json_body(NewsCreateForm),
    summary="Create news",
)
async def create_news(
    request: Request,
    news_service: NewsService = Depends(get_news_service)
):
    """Create news with title, content and optional categories (positive integers, e.g. [1, 2, 3])"""
    body = await request.body()
    try:
        validate_create_news_request(body)
    except PayloadValidationError as e:
        raise ValidationFailedError(str(e)) from e

    form = decode_form(NewsCreateForm, body)

    news_id = await news_service.create_news(form)
    return CreateNewsResponse(id=news_id)


@router.post(
    "/edit/{id}",
    response_model=SuccessResponse,
    responses=_errors(400, 401, 404, 500),
    openapi_extra=_json_body(NewsEditForm),
    summary="Edit news",
)
async def edit_news(
    id: str,
    request: Request,
    news_service: NewsService = Depends(get_news_service)
):
    """Edit news fields (title, content, categories); omitted fields are left unchanged"""
    news_id = parse_news_id(id)

    body = await request.body()
    try:
        validate_edit_news_request(body)
    except PayloadValidationError as e:
        raise ValidationFailedError(str(e)) from e

    form = decode_form(NewsEditForm, body)

    await news_service.edit_news(news_id, form)
    return SuccessResponse()


@router.get(
    "/list",
    response_model=NewsListResponse,
    responses=_errors(400, 401, 500),
    summary="Get news",
)
async def list_news(
    limit: Optional[str] = Query(None, description="default=10, max=100"),
    offset: Optional[str] = Query(None, description="default=0"),
    news_service: NewsService = Depends(get_news_service)
):
    """List news with their category ids"""
    settings = get_settings()

    page_limit = parse_int_param(limit, "limit", settings.default_page_limit)
    page_offset = parse_int_param(offset, "offset", 0)
    validate_pagination_params(page_limit, page_offset, settings.max_page_limit)

    news = await news_service.list_news(page_limit, page_offset)
    return NewsListResponse(news=news)
