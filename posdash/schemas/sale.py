"""
판매(POS) Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator


class SaleItemRequest(BaseModel):
    """
    판매 상품 라인 요청 스키마

    inventory_tracked가 true이고 variant_id가 있으면 판매 후 Shopify 재고를 차감합니다.
    """

    product_id: str = Field(..., min_length=1)
    variant_id: str | None = None
    title: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0, description="판매 단가")
    original_price: float = Field(default=0, ge=0, description="정가 (커미션 계산용)")
    quantity: int = Field(..., gt=0)
    discount: float = Field(default=0, ge=0)
    sku: str | None = None
    image: str | None = None
    inventory_tracked: bool = Field(default=False, description="Shopify 재고 관리 대상 여부")

    @field_validator("product_id", "variant_id", mode="before")
    @classmethod
    def _id_as_string(cls, value):
        # Shopify ID가 숫자로 넘어오는 경우
        return str(value) if isinstance(value, int) else value


class SaleCreateRequest(BaseModel):
    """
    판매 생성 요청 스키마

    Example:
        {
            "items": [
                {
                    "product_id": "8123456789",
                    "variant_id": "4412345678",
                    "title": "Classic Leather Wallet",
                    "price": 2500,
                    "original_price": 3000,
                    "quantity": 1,
                    "inventory_tracked": true
                }
            ],
            "subtotal": 2500,
            "discount": 0,
            "total": 2500,
            "payment_method": "cash",
            "amount_received": 3000,
            "change": 500
        }
    """

    items: list[SaleItemRequest] = Field(..., min_length=1, description="장바구니 상품 (1개 이상)")
    subtotal: float = Field(default=0, ge=0)
    discount: float = Field(default=0, ge=0)
    total: float = Field(default=0, ge=0)
    payment_method: str = Field(default="cash", max_length=50)
    payment_breakdown: dict[str, float] | None = Field(None, description="복합 결제 시 수단별 금액")
    amount_received: float = Field(default=0, ge=0)
    change: float = Field(default=0)
    customer_name: str | None = Field(None, max_length=255)
    status: str = Field(default="completed", max_length=50)
    employee_id: int | None = None
    employee_name: str | None = Field(None, max_length=255)


class SaleItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: str
    variant_id: str | None = None
    title: str
    price: float
    quantity: int
    discount: float
    commission: float
    sku: str | None = None
    image: str | None = None


class SaleResponse(BaseModel):
    """판매 응답 스키마 (판매 라인 포함)"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    subtotal: float
    discount: float
    total: float
    payment_method: str
    payment_breakdown: dict[str, float] | None = None
    amount_received: float
    change: float
    customer_name: str | None = None
    status: str
    commission: float
    employee_id: int | None = None
    employee_name: str | None = None
    user_id: int
    user_name: str | None = None
    user_email: str | None = None
    created_at: datetime
    items: list[SaleItemResponse] = Field(default_factory=list)


class InventoryUpdateResult(BaseModel):
    """
    판매 후 Shopify 재고 차감 결과 (상품 라인별)

    status: success / skipped / error
    """

    product_id: str
    variant_id: str | None = None
    title: str
    status: str
    quantity: int | None = None
    inventory_item_id: int | None = None
    new_quantity: int | None = None
    reason: str | None = None
    error: str | None = None


class SaleCreateResponse(BaseModel):
    success: bool = True
    sale: SaleResponse
    inventory_updates: list[InventoryUpdateResult]
    message: str = "Sale completed successfully"


class SaleStats(BaseModel):
    """완료(completed) 판매 기준 통계"""

    total_sales: int = 0
    total_revenue: float = 0
    total_discount: float = 0
    total_commission: float = 0


class SaleListResponse(BaseModel):
    success: bool = True
    sales: list[SaleResponse]
    total: int
    limit: int
    offset: int
    stats: SaleStats
