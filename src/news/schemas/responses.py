"""News API response schemas"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class NewsResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class NewsWithCategories(NewsResponseModel):
    id: int = Field(..., alias="Id")
    title: str = Field(..., alias="Title")
    content: str = Field(..., alias="Content")
    categories: List[int] = Field(default_factory=list, alias="Categories")


class SuccessResponse(NewsResponseModel):
    success: bool = Field(True, alias="Success")


class CreateNewsResponse(SuccessResponse):
    id: int = Field(..., alias="Id", examples=[1])


class NewsListResponse(SuccessResponse):
    news: List[NewsWithCategories] = Field(default_factory=list, alias="News")


class ErrorResponse(NewsResponseModel):
    success: bool = Field(False, alias="Success")
    error: str = Field(..., alias="Error")
