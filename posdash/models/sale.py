"""
Sale / SaleItem 모델
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from posdash.db.database import Base, Money


class Sale(Base):
    """
    POS 판매 모델

    Attributes:
        id: 판매 ID (Primary Key)
        subtotal / discount / total: 금액 (할인 적용 전/할인/최종)
        payment_method: 결제 수단 (기본값 cash)
        payment_breakdown: 복합 결제 시 수단별 금액 (JSON, Nullable)
        amount_received / change: 받은 금액 / 거스름돈
        status: 판매 상태 (completed만 매출 통계에 포함)
        commission: 판매 직원 커미션 합계
        employee_id / employee_name: 판매 직원 (Nullable)
        user_id: 판매를 등록한 사용자 ID
        items: SaleItem 목록
    """

    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    subtotal = Column(Money, nullable=False, default=0)
    discount = Column(Money, nullable=False, default=0)
    total = Column(Money, nullable=False, default=0)
    payment_method = Column(String(50), nullable=False, default="cash")
    payment_breakdown = Column(JSON, nullable=True)
    amount_received = Column(Money, nullable=False, default=0)
    change = Column(Money, nullable=False, default=0)
    customer_name = Column(String(255), nullable=True)
    status = Column(String(50), nullable=False, default="completed", index=True)
    commission = Column(Money, nullable=False, default=0)
    employee_id = Column(Integer, nullable=True, index=True)
    employee_name = Column(String(255), nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    user = relationship("User")
    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleItem.id",
    )

    @property
    def user_name(self) -> str | None:
        return self.user.name if self.user else None

    @property
    def user_email(self) -> str | None:
        return self.user.email if self.user else None

    def __repr__(self) -> str:
        return f"<Sale(id={self.id}, total={self.total}, status='{self.status}')>"


class SaleItem(Base):
    """
    판매 상품 라인 모델

    product_id / variant_id는 판매 시점의 값을 그대로 저장하며
    상품이 삭제되어도 판매 기록은 유지되도록 FK를 두지 않습니다.
    """

    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    sale_id = Column(
        Integer, ForeignKey("sales.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id = Column(String(64), nullable=False)
    variant_id = Column(String(64), nullable=True)
    title = Column(String(255), nullable=False)
    price = Column(Money, nullable=False)
    quantity = Column(Integer, nullable=False)
    discount = Column(Money, nullable=False, default=0)
    commission = Column(Money, nullable=False, default=0)
    sku = Column(String(255), nullable=True)
    image = Column(String(1024), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    sale = relationship("Sale", back_populates="items")

    def __repr__(self) -> str:
        return (
            f"<SaleItem(id={self.id}, sale_id={self.sale_id}, "
            f"variant_id='{self.variant_id}', quantity={self.quantity})>"
        )
