"""
Product / ProductVariant 모델

Shopify에서 동기화된 상품과 로컬에서 직접 등록한 상품을 함께 저장합니다.
상품 ID는 Shopify ID 문자열 또는 "local-..." 형식입니다.
"""

from datetime import datetime
from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    Numeric,
    ForeignKey,
)
from sqlalchemy.orm import relationship
from posdash.db.database import Base, Money


class Product(Base):
    """
    상품 모델

    Attributes:
        id: 상품 ID (Shopify ID 또는 local-<ms>-<rand>)
        title: 상품명 (Not Null)
        handle: URL 핸들 (Unique)
        sale_price: 판매가 (Shopify 동기화 시 첫 번째 variant 가격)
        original_price: 정가
        cost_price: 원가
        quantity: 전체 재고 (variant 재고 합계)
        category_id: 카테고리 (Nullable, 카테고리 삭제 시 NULL)
    """

    __tablename__ = "products"

    id = Column(String(64), primary_key=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    vendor = Column(String(255), nullable=True, index=True)
    product_type = Column(String(255), nullable=True)
    status = Column(String(50), nullable=False, default="active", index=True)
    image = Column(Text, nullable=True)
    handle = Column(String(255), unique=True, nullable=True, index=True)
    sale_price = Column(Money, nullable=False, default=0)
    original_price = Column(Money, nullable=False, default=0)
    cost_price = Column(Money, nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=0)
    category_id = Column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    category = relationship("Category", back_populates="products")
    variants = relationship(
        "ProductVariant",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductVariant.id",
    )

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category else None

    def __repr__(self) -> str:
        return f"<Product(id='{self.id}', title='{self.title}')>"

    def __str__(self) -> str:
        return f"Product: {self.title}"


class ProductVariant(Base):
    """
    상품 옵션(variant) 모델

    Attributes:
        id: variant ID (Shopify variant ID 또는 <product_id>-variant-1)
        product_id: 상품 ID (상품 삭제 시 함께 삭제)
        inventory_quantity: variant 재고
    """

    __tablename__ = "product_variants"

    id = Column(String(64), primary_key=True)
    product_id = Column(
        String(64),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=True)
    price = Column(Money, nullable=False, default=0)
    compare_at_price = Column(Money, nullable=True)
    sku = Column(String(255), nullable=True, index=True)
    barcode = Column(String(255), nullable=True, index=True)
    inventory_quantity = Column(Integer, nullable=False, default=0)
    weight = Column(Numeric(10, 3, asdecimal=False), nullable=True)
    weight_unit = Column(String(10), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    product = relationship("Product", back_populates="variants")

    def __repr__(self) -> str:
        return f"<ProductVariant(id='{self.id}', product_id='{self.product_id}')>"
