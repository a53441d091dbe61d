"""
DayEnd 모델
"""

from datetime import datetime
from sqlalchemy import Column, Integer, Date, DateTime
from posdash.db.database import Base, Money


class DayEnd(Base):
    """
    일 마감(현금 정산) 모델

    날짜별로 하나의 레코드만 존재합니다 (date Unique).

    Attributes:
        date: 정산 일자
        opening_balance: 시작 잔액 (직전 마감의 closing_balance)
        total_expenses: 당일 지출 합계
        total_sales: 당일 완료 판매 합계
        daily_cash: 실제 보유 현금
        closing_balance: 마감 잔액
    """

    __tablename__ = "day_ends"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    date = Column(Date, unique=True, nullable=False, index=True)
    opening_balance = Column(Money, nullable=False, default=0)
    total_expenses = Column(Money, nullable=False, default=0)
    total_sales = Column(Money, nullable=False, default=0)
    daily_cash = Column(Money, nullable=False, default=0)
    closing_balance = Column(Money, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<DayEnd(date={self.date}, closing_balance={self.closing_balance})>"
