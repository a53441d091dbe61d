"""
지출 API 엔드포인트

/titles 경로는 /{expense_id}보다 먼저 정의합니다.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from posdash.api.deps import get_db, get_current_user
from posdash.core.exceptions import ExpenseTitleNotFoundException, ExpenseNotFoundException
from posdash.models.user import User
from posdash.schemas.common import SuccessResponse
from posdash.schemas.expense import (
    ExpenseTitleRequest,
    ExpenseTitleEnvelope,
    ExpenseTitleListResponse,
    ExpenseCreateRequest,
    ExpenseEnvelope,
    ExpenseListResponse,
)
from posdash.services.expense_service import ExpenseService


router = APIRouter()


@router.get("/titles", response_model=ExpenseTitleListResponse)
def list_titles(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """지출 항목 목록 (이름순)"""
    return {"success": True, "titles": ExpenseService.list_titles(db)}


@router.post(
    "/titles", response_model=ExpenseTitleEnvelope, status_code=status.HTTP_201_CREATED
)
def create_title(
    data: ExpenseTitleRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    title = ExpenseService.create_title(data.exp_title, db)
    return {"success": True, "title": title, "message": "Expense title created"}


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    exp_title_id: int | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    지출 내역 조회

    Example:
        Response (200):
        ```json
        {
            "success": true,
            "expenses": [...],
            "total": 42,
            "limit": 100,
            "offset": 0,
            "stats": {"total_expenses": 42, "total_amount": 185000.0},
            "title_breakdown": [
                {"title_id": 1, "exp_title": "Electricity", "total_expenses": 3, "total_amount": 45000.0}
            ]
        }
        ```
    """
    result = ExpenseService.list_expenses(
        db,
        exp_title_id=exp_title_id,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )
    return {"success": True, "limit": limit, "offset": offset, **result}


@router.post("", response_model=ExpenseEnvelope, status_code=status.HTTP_201_CREATED)
def create_expense(
    data: ExpenseCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    지출을 등록합니다. 등록자는 현재 사용자입니다.

    Raises:
        HTTPException 404: 존재하지 않는 지출 항목
    """
    try:
        expense = ExpenseService.create_expense(data, current_user.id, db)
    except ExpenseTitleNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return {"success": True, "expense": expense, "message": "Expense added successfully"}


@router.delete("/{expense_id}", response_model=SuccessResponse)
def delete_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """본인이 등록한 지출만 삭제할 수 있습니다 (그 외에는 404)."""
    try:
        ExpenseService.delete_expense(expense_id, current_user.id, db)
    except ExpenseNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return SuccessResponse(message="Expense deleted successfully")
