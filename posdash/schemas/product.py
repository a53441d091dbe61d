"""
상품 Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class ProductCreateRequest(BaseModel):
    """
    로컬 상품 생성 요청 스키마 (title 필수)

    id, handle을 생략하면 자동 생성되고 기본 variant 하나가 함께 생성됩니다.

    Example:
        {
            "title": "Classic Leather Wallet",
            "vendor": "Local",
            "sale_price": 2500,
            "original_price": 3000,
            "cost_price": 1800,
            "quantity": 10,
            "sku": "WAL-001"
        }
    """

    title: str = Field(..., min_length=1, max_length=255, examples=["Classic Leather Wallet"])
    id: str | None = Field(None, max_length=64, description="상품 ID (생략 시 local-... 자동 생성)")
    handle: str | None = Field(None, max_length=255)
    description: str | None = None
    vendor: str | None = Field(None, max_length=255)
    product_type: str | None = Field(None, max_length=255)
    status: str = Field(default="active", max_length=50)
    image: str | None = None
    sale_price: float = Field(default=0, ge=0)
    original_price: float = Field(default=0, ge=0)
    cost_price: float = Field(default=0, ge=0)
    quantity: int = Field(default=0, ge=0)
    category_id: int | None = None
    variant_id: str | None = Field(None, max_length=64)
    variant_title: str = Field(default="Default", max_length=255)
    sku: str | None = Field(None, max_length=255)
    barcode: str | None = Field(None, max_length=255)
    weight: float = Field(default=0, ge=0)
    weight_unit: str = Field(default="kg", max_length=10)


class ProductUpdateRequest(BaseModel):
    """
    상품 부분 수정 요청 스키마

    전달된 필드만 수정합니다. category_id에 null을 명시하면 카테고리 지정이 해제됩니다.

    Example:
        {
            "category_id": 3,
            "sale_price": 2200
        }
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    vendor: str | None = Field(None, max_length=255)
    product_type: str | None = Field(None, max_length=255)
    status: str | None = Field(None, max_length=50)
    image: str | None = None
    sale_price: float | None = Field(None, ge=0)
    original_price: float | None = Field(None, ge=0)
    cost_price: float | None = Field(None, ge=0)
    quantity: int | None = Field(None, ge=0)
    category_id: int | None = None


class VariantResponse(BaseModel):
    """상품 variant 응답 스키마"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str | None = None
    price: float
    compare_at_price: float | None = None
    sku: str | None = None
    barcode: str | None = None
    inventory_quantity: int
    weight: float | None = None
    weight_unit: str | None = None


class ProductResponse(BaseModel):
    """
    상품 응답 스키마 (variant, 카테고리명 포함)

    Example:
        {
            "id": "8123456789",
            "title": "Classic Leather Wallet",
            "vendor": "Local",
            "status": "active",
            "handle": "classic-leather-wallet",
            "sale_price": 2500.0,
            "quantity": 10,
            "category_id": 3,
            "category_name": "Wallets",
            "variants": [...]
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str | None = None
    vendor: str | None = None
    product_type: str | None = None
    status: str
    image: str | None = None
    handle: str | None = None
    sale_price: float
    original_price: float
    cost_price: float
    quantity: int
    category_id: int | None = None
    category_name: str | None = None
    created_at: datetime
    updated_at: datetime
    variants: list[VariantResponse] = Field(default_factory=list)


class ProductEnvelope(BaseModel):
    success: bool = True
    product: ProductResponse


class ProductListResponse(BaseModel):
    success: bool = True
    products: list[ProductResponse]
    total: int = Field(..., description="필터 적용 후 전체 상품 수 (limit 적용 전)")
