"""
일 마감(Day End) 서비스
"""

import logging
from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session

from posdash.core.currency import format_pkr
from posdash.core.dates import start_of_day, end_of_day_exclusive
from posdash.models.day_end import DayEnd
from posdash.models.expense import Expense
from posdash.models.sale import Sale
from posdash.schemas.day_end import DayEndRequest, DayEndResponse

logger = logging.getLogger(__name__)


class DayEndService:
    """일별 현금 정산 기록"""

    @staticmethod
    def list_records(db: Session) -> list[DayEnd]:
        return db.query(DayEnd).order_by(DayEnd.date.desc()).all()

    @staticmethod
    def get_or_draft(day: date, db: Session) -> DayEndResponse:
        """
        해당 날짜의 정산 기록을 반환합니다.

        기록이 없으면 저장되지 않은 초안(id=None)을 만듭니다:
        opening_balance는 직전 기록의 closing_balance, 지출/매출은 당일 합계.
        """
        record = db.query(DayEnd).filter(DayEnd.date == day).first()
        if record:
            return DayEndResponse.model_validate(record)

        previous = (
            db.query(DayEnd)
            .filter(DayEnd.date < day)
            .order_by(DayEnd.date.desc())
            .first()
        )
        start, end = start_of_day(day), end_of_day_exclusive(day)

        total_expenses = (
            db.query(func.coalesce(func.sum(Expense.exp_amount), 0))
            .filter(Expense.exp_date >= start, Expense.exp_date < end)
            .scalar()
        )
        total_sales = (
            db.query(func.coalesce(func.sum(Sale.total), 0))
            .filter(
                Sale.status == "completed",
                Sale.created_at >= start,
                Sale.created_at < end,
            )
            .scalar()
        )

        return DayEndResponse(
            id=None,
            date=day,
            opening_balance=previous.closing_balance if previous else 0,
            total_expenses=float(total_expenses or 0),
            total_sales=float(total_sales or 0),
            daily_cash=0,
            closing_balance=0,
        )

    @staticmethod
    def save(data: DayEndRequest, db: Session) -> DayEnd:
        """같은 날짜 기록이 있으면 덮어쓰고, 없으면 새로 만듭니다."""
        record = db.query(DayEnd).filter(DayEnd.date == data.date).first()
        if record is None:
            record = DayEnd(date=data.date)
            db.add(record)

        record.opening_balance = data.opening_balance
        record.total_expenses = data.total_expenses
        record.total_sales = data.total_sales
        record.daily_cash = data.daily_cash
        record.closing_balance = data.closing_balance
        db.commit()
        db.refresh(record)

        logger.info(
            "Day end saved for %s: closing=%s",
            record.date,
            format_pkr(record.closing_balance),
        )
        return record
