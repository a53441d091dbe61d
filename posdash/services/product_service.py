"""
상품 서비스

상품 목록 조회(검색/필터/정렬)와 로컬 상품 CRUD를 제공합니다.
"""

import logging
import random
import re
import string
import time

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from posdash.core.exceptions import ProductNotFoundException, CategoryNotFoundException
from posdash.models.category import Category
from posdash.models.product import Product, ProductVariant
from posdash.schemas.product import ProductCreateRequest, ProductUpdateRequest

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase

SORT_OPTIONS = {
    "name": Product.title.asc(),
    "name-desc": Product.title.desc(),
    "price-low": Product.sale_price.asc(),
    "price-high": Product.sale_price.desc(),
    "stock-low": Product.quantity.asc(),
    "stock-high": Product.quantity.desc(),
}


def generate_local_product_id() -> str:
    """local-<epoch ms>-<base36 7자리> 형식의 상품 ID"""
    suffix = "".join(random.choices(_BASE36, k=7))
    return f"local-{int(time.time() * 1000)}-{suffix}"


def slugify_title(title: str) -> str:
    """
    상품명을 handle로 변환합니다.

    Example:
        >>> slugify_title("Classic Leather Wallet!")
        'classic-leather-wallet'
    """
    handle = re.sub(r"\s+", "-", title.strip().lower())
    return re.sub(r"[^a-z0-9-]", "", handle)


class ProductService:
    """상품 조회 및 로컬 상품 관리"""

    @staticmethod
    def list_products(
        db: Session,
        search: str = "",
        status: str = "all",
        vendor: str = "all",
        sort_by: str = "name",
        limit: int | None = None,
    ) -> tuple[list[Product], int]:
        """
        상품 목록을 조회합니다.

        search는 상품명, 벤더, variant의 SKU/바코드 중 하나라도 포함하면 매칭합니다.
        정의되지 않은 sort_by는 최근 수정 순으로 정렬합니다.

        Returns:
            (상품 목록, limit 적용 전 전체 상품 수)
        """
        query = db.query(Product)

        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    Product.title.ilike(pattern),
                    Product.vendor.ilike(pattern),
                    Product.variants.any(
                        or_(
                            ProductVariant.sku.ilike(pattern),
                            ProductVariant.barcode.ilike(pattern),
                        )
                    ),
                )
            )
        if status and status != "all":
            query = query.filter(Product.status == status)
        if vendor and vendor != "all":
            query = query.filter(Product.vendor == vendor)

        total = query.count()

        order = SORT_OPTIONS.get(sort_by, Product.updated_at.desc())
        query = query.options(
            selectinload(Product.variants), selectinload(Product.category)
        ).order_by(order, Product.id)
        if limit:
            query = query.limit(limit)

        return query.all(), total

    @staticmethod
    def get_product(product_id: str, db: Session) -> Product:
        product = db.query(Product).filter(Product.id == product_id).first()
        if not product:
            raise ProductNotFoundException(product_id)
        return product

    @staticmethod
    def _unique_handle(base_handle: str, db: Session) -> str:
        """이미 사용 중이면 -1, -2, ... 를 붙입니다."""
        handle = base_handle
        counter = 1
        while db.query(Product.id).filter(Product.handle == handle).first():
            handle = f"{base_handle}-{counter}"
            counter += 1
        return handle

    @staticmethod
    def _ensure_category(category_id: int | None, db: Session) -> None:
        if category_id is None:
            return
        if not db.query(Category.id).filter(Category.id == category_id).first():
            raise CategoryNotFoundException(category_id)

    @staticmethod
    def create_product(data: ProductCreateRequest, db: Session) -> Product:
        """
        로컬 상품과 기본 variant 하나를 생성합니다.

        Raises:
            CategoryNotFoundException: 존재하지 않는 category_id
        """
        ProductService._ensure_category(data.category_id, db)

        product_id = data.id or generate_local_product_id()
        handle = ProductService._unique_handle(
            data.handle or slugify_title(data.title), db
        )

        product = Product(
            id=product_id,
            title=data.title,
            description=data.description,
            vendor=data.vendor,
            product_type=data.product_type,
            status=data.status,
            image=data.image,
            handle=handle,
            sale_price=data.sale_price,
            original_price=data.original_price,
            cost_price=data.cost_price,
            quantity=data.quantity,
            category_id=data.category_id,
        )
        product.variants.append(
            ProductVariant(
                id=data.variant_id or f"{product_id}-variant-1",
                title=data.variant_title,
                price=data.sale_price,
                compare_at_price=data.original_price,
                sku=data.sku,
                barcode=data.barcode,
                inventory_quantity=data.quantity,
                weight=data.weight,
                weight_unit=data.weight_unit,
            )
        )
        db.add(product)
        db.commit()
        db.refresh(product)

        logger.info("Created local product %s (handle=%s)", product.id, product.handle)
        return product

    @staticmethod
    def update_product(
        product_id: str, data: ProductUpdateRequest, db: Session
    ) -> Product:
        """
        전달된 필드만 수정합니다. category_id: null은 카테고리 해제입니다.

        Raises:
            ProductNotFoundException: 상품이 없는 경우
            CategoryNotFoundException: 존재하지 않는 category_id
        """
        product = ProductService.get_product(product_id, db)
        changes = data.model_dump(exclude_unset=True)

        if "category_id" in changes:
            ProductService._ensure_category(changes["category_id"], db)

        for field, value in changes.items():
            # category_id 외에는 null을 "변경 없음"으로 취급
            if value is None and field != "category_id":
                continue
            setattr(product, field, value)

        db.commit()
        db.refresh(product)
        return product

    @staticmethod
    def delete_product(product_id: str, db: Session) -> None:
        product = ProductService.get_product(product_id, db)
        db.delete(product)
        db.commit()
        logger.info("Deleted product %s", product_id)

    @staticmethod
    def count_products(db: Session) -> int:
        return db.query(Product).count()
