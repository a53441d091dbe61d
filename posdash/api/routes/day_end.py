"""
일 마감(Day End) API 엔드포인트
"""

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from posdash.api.deps import get_db, get_current_user
from posdash.schemas.day_end import DayEndRequest, DayEndEnvelope, DayEndListResponse
from posdash.services.day_end_service import DayEndService


router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=DayEndEnvelope | DayEndListResponse)
def get_day_end(
    day: date | None = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    """
    date가 없으면 전체 기록(최신 날짜 순), 있으면 해당 날짜 기록 또는 초안을 반환합니다.

    Example:
        Request:
        ```
        GET /api/day-end?date=2025-01-22
        ```

        Response (200, 저장 전 초안):
        ```json
        {
            "success": true,
            "record": {
                "id": null,
                "date": "2025-01-22",
                "opening_balance": 5000.0,
                "total_expenses": 1200.0,
                "total_sales": 48000.0,
                "daily_cash": 0.0,
                "closing_balance": 0.0
            }
        }
        ```
    """
    if day is None:
        return {"success": True, "records": DayEndService.list_records(db)}
    return {"success": True, "record": DayEndService.get_or_draft(day, db)}


@router.post("", response_model=DayEndEnvelope)
def save_day_end(data: DayEndRequest, db: Session = Depends(get_db)):
    """같은 날짜 기록이 있으면 덮어씁니다."""
    return {"success": True, "record": DayEndService.save(data, db)}
