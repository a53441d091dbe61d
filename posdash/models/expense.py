"""
ExpenseTitle / Expense 모델
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from posdash.db.database import Base, Money


class ExpenseTitle(Base):
    """
    지출 항목 모델 (예: 전기요금, 임대료)

    Attributes:
        id: 항목 ID (Primary Key)
        exp_title: 항목명
        created_at: 생성 일시
    """

    __tablename__ = "expense_titles"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    exp_title = Column(String(150), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<ExpenseTitle(id={self.id}, exp_title='{self.exp_title}')>"


class Expense(Base):
    """
    지출 내역 모델

    Attributes:
        id: 지출 ID (Primary Key)
        exp_title_id: 지출 항목 ID (Foreign Key to expense_titles.id)
        exp_description: 메모 (Nullable)
        exp_amount: 금액
        exp_date: 지출 일시
        added_by: 등록한 사용자 ID (Foreign Key to users.id)
        title: ExpenseTitle 모델과의 관계
        user: User 모델과의 관계
    """

    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    exp_title_id = Column(
        Integer, ForeignKey("expense_titles.id"), nullable=False, index=True
    )
    exp_description = Column(Text, nullable=True)
    exp_amount = Column(Money, nullable=False)
    exp_date = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    added_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    title = relationship("ExpenseTitle")
    user = relationship("User")

    @property
    def exp_title(self) -> str | None:
        return self.title.exp_title if self.title else None

    @property
    def user_name(self) -> str | None:
        return self.user.name if self.user else None

    @property
    def user_email(self) -> str | None:
        return self.user.email if self.user else None

    def __repr__(self) -> str:
        return f"<Expense(id={self.id}, exp_amount={self.exp_amount})>"
