"""
Shopify 상품 동기화 서비스

Shopify 상품을 페이지 단위로 가져와 로컬 products / product_variants에
upsert합니다. 동시에 하나의 동기화만 실행되도록 Redis 락을 사용합니다.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from redis import Redis
from sqlalchemy.orm import Session

from posdash.core.config import Settings
from posdash.core.exceptions import SyncInProgressException
from posdash.integrations.shopify import ShopifyClient
from posdash.models.product import Product, ProductVariant

logger = logging.getLogger(__name__)

SYNC_LOCK_KEY = "lock:product-sync"

# 소유자 확인 후 삭제 (GET + 비교 + DEL 원자 실행)
RELEASE_LOCK_SCRIPT = """
if redis.call("GET", KEYS[1]) == ARGV[1] then
    return redis.call("DEL", KEYS[1])
else
    return 0
end
"""

# 소유자 확인 후 만료 시간 갱신
EXTEND_LOCK_SCRIPT = """
if redis.call("GET", KEYS[1]) == ARGV[1] then
    return redis.call("EXPIRE", KEYS[1], ARGV[2])
else
    return 0
end
"""

# 이 개수만큼 처리할 때마다 락 만료 시간을 갱신
LOCK_EXTEND_EVERY = 100


def _to_float(value, default: float | None = 0.0) -> float | None:
    if value in (None, ""):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _to_int(value) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


class ProductSyncService:
    """Shopify → 로컬 상품 미러링"""

    @staticmethod
    @contextmanager
    def sync_lock(redis: Redis, settings: Settings) -> Iterator[str]:
        """
        상품 동기화 락을 획득하고 블록 종료 시 해제합니다.

        Raises:
            SyncInProgressException: 다른 동기화가 락을 점유 중인 경우
        """
        lock_id = str(uuid.uuid4())

        # NX: 키가 없을 때만 설정, EX: 프로세스 중단 시 자동 만료
        acquired = redis.set(
            SYNC_LOCK_KEY, lock_id, nx=True, ex=settings.sync_lock_timeout_seconds
        )
        if not acquired:
            raise SyncInProgressException()

        try:
            yield lock_id
        finally:
            redis.eval(RELEASE_LOCK_SCRIPT, 1, SYNC_LOCK_KEY, lock_id)

    @staticmethod
    def _apply_variant(variant: ProductVariant, data: dict[str, Any]) -> None:
        variant.title = data.get("title")
        variant.price = _to_float(data.get("price"))
        variant.compare_at_price = _to_float(data.get("compare_at_price"), None)
        variant.sku = data.get("sku") or None
        variant.barcode = data.get("barcode") or None
        variant.inventory_quantity = _to_int(data.get("inventory_quantity"))
        variant.weight = _to_float(data.get("weight"), None)
        variant.weight_unit = data.get("weight_unit") or None

    @staticmethod
    def upsert_product(shopify_product: dict[str, Any], db: Session) -> Product:
        """
        Shopify 상품 하나를 로컬 DB에 저장합니다 (last write wins).

        - sale_price: 첫 번째 variant 가격
        - quantity: variant inventory_quantity 합계
        - category_id, original_price, cost_price는 로컬 값을 유지
        - variant는 id 기준으로 갱신, 새 variant 추가, 사라진 variant 삭제

        실패 시 롤백 후 예외를 다시 발생시킵니다.
        """
        product_id = str(shopify_product["id"])
        variants_data = shopify_product.get("variants") or []
        images = shopify_product.get("images") or []
        image = (shopify_product.get("image") or {}).get("src") or (
            images[0].get("src") if images else None
        )

        try:
            product = db.query(Product).filter(Product.id == product_id).first()
            if product is None:
                product = Product(id=product_id)
                db.add(product)

            product.title = shopify_product.get("title") or ""
            product.description = shopify_product.get("body_html") or None
            product.vendor = shopify_product.get("vendor") or None
            product.product_type = shopify_product.get("product_type") or None
            product.status = shopify_product.get("status") or "active"
            product.image = image
            product.handle = shopify_product.get("handle") or None
            product.sale_price = (
                _to_float(variants_data[0].get("price")) if variants_data else 0.0
            )
            product.quantity = sum(
                _to_int(v.get("inventory_quantity")) for v in variants_data
            )

            existing = {variant.id: variant for variant in product.variants}
            incoming_ids = set()
            for data in variants_data:
                variant_id = str(data["id"])
                incoming_ids.add(variant_id)
                variant = existing.get(variant_id)
                if variant is None:
                    variant = ProductVariant(id=variant_id)
                    product.variants.append(variant)
                ProductSyncService._apply_variant(variant, data)

            for variant_id, variant in existing.items():
                if variant_id not in incoming_ids:
                    product.variants.remove(variant)

            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error upserting product %s", product_id)
            raise

        return product

    @staticmethod
    def extend_sync_lock(redis: Redis, settings: Settings, lock_id: str) -> bool:
        """
        보유 중인 동기화 락의 만료 시간을 sync_lock_timeout_seconds로 되돌립니다.

        Returns:
            락을 여전히 보유하고 있으면 True
        """
        extended = redis.eval(
            EXTEND_LOCK_SCRIPT,
            1,
            SYNC_LOCK_KEY,
            lock_id,
            settings.sync_lock_timeout_seconds,
        )
        if not extended:
            logger.warning("Product sync lock %s expired before it was extended", lock_id)
        return bool(extended)

    @staticmethod
    def _upsert_all(
        products: list[dict[str, Any]],
        db: Session,
        extend_lock: Callable[[], bool] | None = None,
    ) -> tuple[int, int]:
        imported = 0
        failed = 0
        for index, shopify_product in enumerate(products, start=1):
            if extend_lock and index % LOCK_EXTEND_EVERY == 0:
                extend_lock()
            try:
                ProductSyncService.upsert_product(shopify_product, db)
            except Exception:
                # 개별 상품 실패는 집계만 하고 계속 진행
                failed += 1
                continue
            imported += 1
            if imported % 100 == 0:
                logger.info("Synced %d/%d products", imported, len(products))
        return imported, failed

    @staticmethod
    def sync_batch(
        client: ShopifyClient,
        db: Session,
        redis: Redis,
        settings: Settings,
        max_products: int = 1000,
        offset: int = 0,
    ) -> dict[str, Any]:
        """
        offset부터 max_products개의 상품을 동기화합니다.

        Shopify API가 offset을 지원하지 않으므로 offset + max_products개를
        가져온 뒤 잘라냅니다.

        Raises:
            SyncInProgressException: 다른 동기화가 실행 중인 경우
            ShopifyNotConfiguredException / ShopifyAPIException: Shopify 호출 실패
        """
        with ProductSyncService.sync_lock(redis, settings) as lock_id:
            logger.info(
                "Starting batch sync (offset=%d, max_products=%d)", offset, max_products
            )
            products = client.get_products(max_products=offset + max_products)
            ProductSyncService.extend_sync_lock(redis, settings, lock_id)
            batch = products[offset : offset + max_products]

            if not batch:
                return {
                    "imported": 0,
                    "failed": 0,
                    "total": 0,
                    "offset": offset,
                    "next_offset": None,
                    "has_more": False,
                    "message": "No products found to sync",
                }

            imported, failed = ProductSyncService._upsert_all(
                batch,
                db,
                lambda: ProductSyncService.extend_sync_lock(redis, settings, lock_id),
            )

        logger.info(
            "Batch sync finished: imported=%d failed=%d total=%d",
            imported,
            failed,
            len(batch),
        )
        return {
            "imported": imported,
            "failed": failed,
            "total": len(batch),
            "offset": offset,
            "next_offset": offset + len(batch),
            "has_more": len(batch) == max_products,
        }

    @staticmethod
    def sync_page(
        client: ShopifyClient,
        db: Session,
        redis: Redis,
        settings: Settings,
        limit: int = 250,
        page_info: str | None = None,
        status: str | None = None,
        order: str | None = None,
    ) -> dict[str, Any]:
        """page_info 커서 한 페이지를 동기화합니다."""
        with ProductSyncService.sync_lock(redis, settings) as lock_id:
            products, next_page_info = client.get_products_page(
                limit=limit, page_info=page_info, status=status, order=order
            )
            if not products:
                return {
                    "imported": 0,
                    "failed": 0,
                    "total": 0,
                    "next_page_info": None,
                    "has_more": False,
                }

            imported, failed = ProductSyncService._upsert_all(
                products,
                db,
                lambda: ProductSyncService.extend_sync_lock(redis, settings, lock_id),
            )

        return {
            "imported": imported,
            "failed": failed,
            "total": len(products),
            "next_page_info": next_page_info,
            "has_more": bool(next_page_info),
        }

    @staticmethod
    def get_sync_status(client: ShopifyClient, db: Session) -> dict[str, int]:
        """
        Shopify 상품 수와 로컬 상품 수를 비교합니다.

        Example:
            {"shopify_products": 200, "local_products": 150,
             "sync_percentage": 75, "remaining": 50}
        """
        shopify_count = client.get_product_count()
        local_count = db.query(Product).count()

        # .5는 올림
        percentage = int(local_count * 100 / shopify_count + 0.5) if shopify_count else 0
        return {
            "shopify_products": shopify_count,
            "local_products": local_count,
            "sync_percentage": percentage,
            "remaining": max(shopify_count - local_count, 0),
        }
