"""
카테고리 Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class CategoryRequest(BaseModel):
    """
    카테고리 생성/수정 요청 스키마 (name, slug 필수)

    Example:
        {
            "name": "Watches",
            "slug": "watches",
            "description": "Wrist watches"
        }
    """

    name: str = Field(..., min_length=1, max_length=100, examples=["Watches"])
    slug: str = Field(..., min_length=1, max_length=150, examples=["watches"])
    description: str | None = Field(None, description="설명 (선택)")


class CategoryResponse(BaseModel):
    """
    카테고리 응답 스키마

    Example:
        {
            "id": 1,
            "name": "Watches",
            "slug": "watches",
            "description": null,
            "products_count": 12,
            "created_at": "2025-01-22T10:30:00Z",
            "updated_at": "2025-01-22T10:30:00Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: str | None = None
    products_count: int = Field(default=0, description="카테고리에 속한 상품 수")
    created_at: datetime
    updated_at: datetime


class CategoryEnvelope(BaseModel):
    success: bool = True
    category: CategoryResponse


class CategoryListResponse(BaseModel):
    success: bool = True
    categories: list[CategoryResponse]
