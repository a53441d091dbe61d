"""
판매(POS) API 엔드포인트
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from posdash.api.deps import get_db, get_current_user, get_shopify_client
from posdash.integrations.shopify import ShopifyClient
from posdash.models.user import User
from posdash.schemas.sale import SaleCreateRequest, SaleCreateResponse, SaleListResponse
from posdash.services.sale_service import SaleService


router = APIRouter()


@router.post("", response_model=SaleCreateResponse, status_code=status.HTTP_201_CREATED)
def create_sale(
    data: SaleCreateRequest,
    db: Session = Depends(get_db),
    client: ShopifyClient = Depends(get_shopify_client),
    current_user: User = Depends(get_current_user),
):
    """
    판매를 등록하고 Shopify 재고를 차감합니다 (인증 필요).

    로컬 저장(판매, 판매 라인, 재고 차감)은 하나의 트랜잭션입니다.
    Shopify 재고 차감 결과는 inventory_updates로 반환되며 실패해도 판매는 유지됩니다.

    Example:
        Response (201):
        ```json
        {
            "success": true,
            "sale": {"id": 12, "total": 2500.0, "commission": 75.0, "items": [...]},
            "inventory_updates": [
                {"product_id": "8123456789", "variant_id": "4412345678",
                 "title": "Classic Leather Wallet", "status": "success",
                 "quantity": 1, "inventory_item_id": 998877, "new_quantity": 9}
            ],
            "message": "Sale completed successfully"
        }
        ```
    """
    sale = SaleService.create_sale(data, current_user.id, db)
    inventory_updates = SaleService.sync_shopify_inventory(data.items, client)

    return {
        "success": True,
        "sale": sale,
        "inventory_updates": inventory_updates,
        "message": "Sale completed successfully",
    }


@router.get("", response_model=SaleListResponse)
def list_sales(
    sale_status: str | None = Query(None, alias="status"),
    employee_id: int | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    판매 목록을 최신순으로 조회합니다 (판매 라인 포함).

    start_date, end_date는 해당 날짜를 포함합니다 (YYYY-MM-DD).
    """
    sales, total, stats = SaleService.list_sales(
        db,
        status=sale_status,
        employee_id=employee_id,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )
    return {
        "success": True,
        "sales": sales,
        "total": total,
        "limit": limit,
        "offset": offset,
        "stats": stats,
    }
