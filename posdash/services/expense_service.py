"""
지출 서비스
"""

import logging
from datetime import date, datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from posdash.core.currency import format_pkr
from posdash.core.dates import start_of_day, end_of_day_exclusive
from posdash.core.exceptions import ExpenseTitleNotFoundException, ExpenseNotFoundException
from posdash.models.expense import Expense, ExpenseTitle
from posdash.schemas.expense import ExpenseCreateRequest

logger = logging.getLogger(__name__)


class ExpenseService:
    """지출 항목(title)과 지출 내역 관리"""

    @staticmethod
    def list_titles(db: Session) -> list[ExpenseTitle]:
        return db.query(ExpenseTitle).order_by(ExpenseTitle.exp_title.asc()).all()

    @staticmethod
    def create_title(exp_title: str, db: Session) -> ExpenseTitle:
        title = ExpenseTitle(exp_title=exp_title)
        db.add(title)
        db.commit()
        db.refresh(title)
        return title

    @staticmethod
    def create_expense(
        data: ExpenseCreateRequest, user_id: int, db: Session
    ) -> Expense:
        """
        지출을 등록합니다. exp_date가 없으면 현재 시각을 사용합니다.

        Raises:
            ExpenseTitleNotFoundException: 존재하지 않는 지출 항목
        """
        title = db.query(ExpenseTitle).filter(ExpenseTitle.id == data.exp_title_id).first()
        if not title:
            raise ExpenseTitleNotFoundException(data.exp_title_id)

        expense = Expense(
            exp_title_id=title.id,
            exp_description=data.exp_description,
            exp_amount=data.exp_amount,
            exp_date=data.exp_date or datetime.utcnow(),
            added_by=user_id,
        )
        db.add(expense)
        db.commit()
        db.refresh(expense)

        logger.info(
            "Expense %s added: %s (%s)",
            expense.id,
            title.exp_title,
            format_pkr(expense.exp_amount),
        )
        return expense

    @staticmethod
    def list_expenses(
        db: Session,
        exp_title_id: int | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> dict[str, Any]:
        """
        지출 내역을 최신 exp_date 순으로 조회합니다.

        stats와 title_breakdown은 날짜 필터만 적용합니다.
        """
        date_filters = []
        if start_date:
            date_filters.append(Expense.exp_date >= start_of_day(start_date))
        if end_date:
            date_filters.append(Expense.exp_date < end_of_day_exclusive(end_date))

        query = db.query(Expense).filter(*date_filters)
        if exp_title_id is not None:
            query = query.filter(Expense.exp_title_id == exp_title_id)

        total = query.count()
        expenses = (
            query.options(selectinload(Expense.title), selectinload(Expense.user))
            .order_by(Expense.exp_date.desc(), Expense.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

        count, amount = (
            db.query(func.count(Expense.id), func.coalesce(func.sum(Expense.exp_amount), 0))
            .filter(*date_filters)
            .one()
        )

        breakdown_rows = (
            db.query(
                ExpenseTitle.id,
                ExpenseTitle.exp_title,
                func.count(Expense.id),
                func.coalesce(func.sum(Expense.exp_amount), 0),
            )
            .join(Expense, Expense.exp_title_id == ExpenseTitle.id)
            .filter(*date_filters)
            .group_by(ExpenseTitle.id, ExpenseTitle.exp_title)
            .order_by(func.sum(Expense.exp_amount).desc())
            .all()
        )

        return {
            "expenses": expenses,
            "total": total,
            "stats": {"total_expenses": int(count or 0), "total_amount": float(amount or 0)},
            "title_breakdown": [
                {
                    "title_id": title_id,
                    "exp_title": exp_title,
                    "total_expenses": int(title_count),
                    "total_amount": float(title_amount or 0),
                }
                for title_id, exp_title, title_count, title_amount in breakdown_rows
            ],
        }

    @staticmethod
    def delete_expense(expense_id: int, user_id: int, db: Session) -> None:
        """
        본인이 등록한 지출만 삭제합니다.

        Raises:
            ExpenseNotFoundException: 지출이 없거나 다른 사용자가 등록한 경우
        """
        expense = (
            db.query(Expense)
            .filter(Expense.id == expense_id, Expense.added_by == user_id)
            .first()
        )
        if not expense:
            raise ExpenseNotFoundException(expense_id)

        db.delete(expense)
        db.commit()
