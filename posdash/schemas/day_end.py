"""
일 마감(Day End) Pydantic 스키마
"""

import datetime as dt
from pydantic import BaseModel, ConfigDict


class DayEndRequest(BaseModel):
    """
    일 마감 저장 요청 스키마 (같은 날짜가 있으면 덮어씀)

    Example:
        {
            "date": "2025-01-22",
            "opening_balance": 5000,
            "total_expenses": 1200,
            "total_sales": 48000,
            "daily_cash": 51800,
            "closing_balance": 51800
        }
    """

    date: dt.date
    opening_balance: float = 0
    total_expenses: float = 0
    total_sales: float = 0
    daily_cash: float = 0
    closing_balance: float = 0


class DayEndResponse(BaseModel):
    """
    일 마감 응답 스키마

    저장되지 않은 초안(draft)은 id가 null입니다.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    date: dt.date
    opening_balance: float
    total_expenses: float
    total_sales: float
    daily_cash: float
    closing_balance: float
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class DayEndEnvelope(BaseModel):
    success: bool = True
    record: DayEndResponse


class DayEndListResponse(BaseModel):
    success: bool = True
    records: list[DayEndResponse]
