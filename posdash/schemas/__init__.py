"""
Pydantic 스키마 모듈
"""

from posdash.schemas.common import SuccessResponse, ErrorResponse
from posdash.schemas.product import (
    ProductCreateRequest,
    ProductUpdateRequest,
    ProductResponse,
    VariantResponse,
)
from posdash.schemas.sale import SaleCreateRequest, SaleItemRequest, SaleResponse

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
    "ProductCreateRequest",
    "ProductUpdateRequest",
    "ProductResponse",
    "VariantResponse",
    "SaleCreateRequest",
    "SaleItemRequest",
    "SaleResponse",
]
