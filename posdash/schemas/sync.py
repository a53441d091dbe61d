"""
Shopify 상품 동기화 Pydantic 스키마
"""

from pydantic import BaseModel, Field


class SyncBatchResponse(BaseModel):
    """
    offset 기반 배치 동기화 결과

    Example:
        {
            "success": true,
            "imported": 998,
            "failed": 2,
            "total": 1000,
            "offset": 0,
            "next_offset": 1000,
            "has_more": true
        }
    """

    success: bool = True
    imported: int = Field(..., description="저장에 성공한 상품 수")
    failed: int = Field(..., description="저장에 실패한 상품 수")
    total: int = Field(..., description="이번 배치에서 가져온 상품 수")
    offset: int
    next_offset: int | None = None
    has_more: bool = False
    message: str | None = None


class SyncPageResponse(BaseModel):
    """
    커서(page_info) 기반 페이지 동기화 결과

    has_more가 true이면 next_page_info로 다음 페이지를 요청합니다.
    """

    success: bool = True
    imported: int
    failed: int
    total: int
    next_page_info: str | None = None
    has_more: bool = False


class SyncStatusResponse(BaseModel):
    """
    Shopify 상품 수와 로컬 상품 수 비교

    Example:
        {
            "success": true,
            "shopify_products": 5230,
            "local_products": 5000,
            "sync_percentage": 96,
            "remaining": 230
        }
    """

    success: bool = True
    shopify_products: int
    local_products: int
    sync_percentage: int
    remaining: int
