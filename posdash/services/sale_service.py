"""
판매(POS) 서비스

판매 등록 시 로컬 재고를 차감하고, 커밋 후 Shopify 재고를 조정합니다.
Shopify 재고 조정 실패는 판매를 실패시키지 않습니다.
"""

import logging
from datetime import date
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from posdash.core.currency import format_pkr
from posdash.core.dates import start_of_day, end_of_day_exclusive
from posdash.core.exceptions import ShopifyNotConfiguredException
from posdash.integrations.shopify import ShopifyClient
from posdash.models.product import Product, ProductVariant
from posdash.models.sale import Sale, SaleItem
from posdash.schemas.sale import SaleCreateRequest, SaleItemRequest

logger = logging.getLogger(__name__)

BASE_COMMISSION_RATE = 0.01
PROFIT_COMMISSION_RATE = 0.10


def calculate_item_commission(price: float, original_price: float, quantity: int) -> float:
    """
    판매 라인 커미션을 계산합니다.

    - 판매가 <= 정가: 판매가의 1%
    - 판매가 > 정가: 정가의 1% + 초과분의 10%

    Example:
        >>> calculate_item_commission(1000, 1000, 2)
        20.0
        >>> calculate_item_commission(1200, 1000, 1)
        30.0
    """
    if price <= original_price:
        per_unit = price * BASE_COMMISSION_RATE
    else:
        per_unit = (
            original_price * BASE_COMMISSION_RATE
            + (price - original_price) * PROFIT_COMMISSION_RATE
        )
    return per_unit * quantity


class SaleService:
    """판매 등록 및 조회"""

    @staticmethod
    def create_sale(data: SaleCreateRequest, user_id: int, db: Session) -> Sale:
        """
        판매와 판매 라인을 저장하고 로컬 재고를 차감합니다 (단일 트랜잭션).

        로컬에 없는 상품/variant는 재고 차감을 건너뜁니다.
        """
        try:
            sale = Sale(
                subtotal=data.subtotal,
                discount=data.discount,
                total=data.total,
                payment_method=data.payment_method,
                payment_breakdown=data.payment_breakdown,
                amount_received=data.amount_received,
                change=data.change,
                customer_name=data.customer_name,
                status=data.status,
                employee_id=data.employee_id,
                employee_name=data.employee_name,
                user_id=user_id,
            )

            total_commission = 0.0
            for item in data.items:
                commission = calculate_item_commission(
                    item.price, item.original_price, item.quantity
                )
                total_commission += commission
                sale.items.append(
                    SaleItem(
                        product_id=item.product_id,
                        variant_id=item.variant_id,
                        title=item.title,
                        price=item.price,
                        quantity=item.quantity,
                        discount=item.discount,
                        commission=commission,
                        sku=item.sku,
                        image=item.image,
                    )
                )
                SaleService._decrement_local_stock(item, db)

            sale.commission = total_commission
            db.add(sale)
            db.commit()
        except Exception:
            db.rollback()
            raise

        db.refresh(sale)
        logger.info(
            "Sale %s completed: total=%s commission=%s items=%d",
            sale.id,
            format_pkr(sale.total),
            format_pkr(sale.commission),
            len(data.items),
        )
        return sale

    @staticmethod
    def _decrement_local_stock(item: SaleItemRequest, db: Session) -> None:
        if item.variant_id:
            db.query(ProductVariant).filter(
                ProductVariant.id == item.variant_id
            ).update(
                {
                    ProductVariant.inventory_quantity: ProductVariant.inventory_quantity
                    - item.quantity
                },
                synchronize_session=False,
            )
        db.query(Product).filter(Product.id == item.product_id).update(
            {Product.quantity: Product.quantity - item.quantity},
            synchronize_session=False,
        )

    @staticmethod
    def _result(item: SaleItemRequest, status: str, **extra) -> dict[str, Any]:
        return {
            "product_id": item.product_id,
            "variant_id": item.variant_id,
            "title": item.title,
            "status": status,
            **extra,
        }

    @staticmethod
    def sync_shopify_inventory(
        items: list[SaleItemRequest], client: ShopifyClient
    ) -> list[dict[str, Any]]:
        """
        판매된 수량만큼 Shopify 재고를 차감합니다 (첫 번째 location 기준).

        상품 라인별로 success / skipped / error 결과를 반환하며 예외를 던지지 않습니다.
        """
        updates: list[dict[str, Any]] = []
        tracked: list[SaleItemRequest] = []

        for item in items:
            if not item.inventory_tracked:
                updates.append(
                    SaleService._result(
                        item, "skipped", reason="Inventory not tracked in Shopify"
                    )
                )
            elif not item.variant_id:
                updates.append(
                    SaleService._result(item, "skipped", reason="No variant ID provided")
                )
            else:
                tracked.append(item)

        if not tracked:
            return updates

        try:
            locations = client.get_locations()
        except ShopifyNotConfiguredException:
            for item in tracked:
                updates.append(
                    SaleService._result(
                        item, "skipped", reason="Shopify not configured"
                    )
                )
            return updates
        except Exception as e:
            logger.exception("Failed to load Shopify locations")
            for item in tracked:
                updates.append(SaleService._result(item, "error", error=str(e)))
            return updates

        if not locations:
            for item in tracked:
                updates.append(
                    SaleService._result(
                        item, "skipped", reason="No Shopify location found"
                    )
                )
            return updates

        location_id = locations[0]["id"]
        for item in tracked:
            try:
                variant = client.get_variant(item.product_id, item.variant_id)
                if not variant:
                    updates.append(
                        SaleService._result(item, "skipped", reason="Variant not found")
                    )
                    continue
                inventory_item_id = variant.get("inventory_item_id")
                if not inventory_item_id:
                    updates.append(
                        SaleService._result(
                            item, "skipped", reason="No inventory_item_id found"
                        )
                    )
                    continue

                level = client.adjust_inventory(
                    location_id, inventory_item_id, -item.quantity
                )
                updates.append(
                    SaleService._result(
                        item,
                        "success",
                        quantity=item.quantity,
                        inventory_item_id=inventory_item_id,
                        new_quantity=level.get("available"),
                    )
                )
            except Exception as e:
                # 한 상품 실패가 다른 상품 조정을 막지 않음
                logger.warning(
                    "Shopify inventory update failed for variant %s: %s",
                    item.variant_id,
                    e,
                )
                updates.append(SaleService._result(item, "error", error=str(e)))

        return updates

    @staticmethod
    def list_sales(
        db: Session,
        status: str | None = None,
        employee_id: int | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> tuple[list[Sale], int, dict[str, Any]]:
        """
        판매 목록을 최신순으로 조회합니다.

        stats는 status 필터와 관계없이 completed 판매만 집계합니다.

        Returns:
            (판매 목록, 전체 건수, 통계)
        """
        shared_filters = []
        if employee_id is not None:
            shared_filters.append(Sale.employee_id == employee_id)
        if start_date:
            shared_filters.append(Sale.created_at >= start_of_day(start_date))
        if end_date:
            shared_filters.append(Sale.created_at < end_of_day_exclusive(end_date))

        query = db.query(Sale).filter(*shared_filters)
        if status:
            query = query.filter(Sale.status == status)

        total = query.count()
        sales = (
            query.options(selectinload(Sale.items), selectinload(Sale.user))
            .order_by(Sale.created_at.desc(), Sale.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

        count, revenue, discount, commission = (
            db.query(
                func.count(Sale.id),
                func.coalesce(func.sum(Sale.total), 0),
                func.coalesce(func.sum(Sale.discount), 0),
                func.coalesce(func.sum(Sale.commission), 0),
            )
            .filter(Sale.status == "completed", *shared_filters)
            .one()
        )
        stats = {
            "total_sales": int(count or 0),
            "total_revenue": float(revenue or 0),
            "total_discount": float(discount or 0),
            "total_commission": float(commission or 0),
        }
        return sales, total, stats
