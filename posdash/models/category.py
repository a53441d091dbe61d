"""
Category 모델
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from posdash.db.database import Base


class Category(Base):
    """
    상품 카테고리 모델

    Attributes:
        id: 카테고리 ID (Primary Key)
        name: 카테고리명
        description: 설명 (Nullable)
        slug: URL용 식별자 (Unique)
        products: 이 카테고리에 속한 상품 목록
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    slug = Column(String(150), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # 카테고리 삭제 시 상품은 남기고 category_id만 NULL로 (passive_deletes 미사용)
    products = relationship("Product", back_populates="category")

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, slug='{self.slug}')>"
