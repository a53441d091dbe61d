"""
지출 Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator


class ExpenseTitleRequest(BaseModel):
    """
    지출 항목 생성 요청 스키마

    Example:
        {"exp_title": "Electricity"}
    """

    exp_title: str = Field(..., max_length=150, examples=["Electricity"])

    @field_validator("exp_title")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Expense title is required")
        return value


class ExpenseTitleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    exp_title: str
    created_at: datetime


class ExpenseTitleEnvelope(BaseModel):
    success: bool = True
    title: ExpenseTitleResponse
    message: str | None = None


class ExpenseTitleListResponse(BaseModel):
    success: bool = True
    titles: list[ExpenseTitleResponse]


class ExpenseCreateRequest(BaseModel):
    """
    지출 등록 요청 스키마 (exp_date 생략 시 현재 시각)

    Example:
        {
            "exp_title_id": 1,
            "exp_amount": 4500,
            "exp_description": "October bill"
        }
    """

    exp_title_id: int = Field(..., gt=0)
    exp_amount: float = Field(..., gt=0)
    exp_description: str | None = None
    exp_date: datetime | None = None


class ExpenseResponse(BaseModel):
    """지출 응답 스키마 (항목명, 등록자 정보 포함)"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    exp_title_id: int
    exp_title: str | None = None
    exp_description: str | None = None
    exp_amount: float
    exp_date: datetime
    added_by: int
    user_name: str | None = None
    user_email: str | None = None
    created_at: datetime


class ExpenseEnvelope(BaseModel):
    success: bool = True
    expense: ExpenseResponse
    message: str | None = None


class ExpenseStats(BaseModel):
    total_expenses: int = 0
    total_amount: float = 0


class ExpenseTitleBreakdown(BaseModel):
    """지출 항목별 합계"""

    title_id: int | None = None
    exp_title: str | None = None
    total_expenses: int
    total_amount: float


class ExpenseListResponse(BaseModel):
    success: bool = True
    expenses: list[ExpenseResponse]
    total: int
    limit: int
    offset: int
    stats: ExpenseStats
    title_breakdown: list[ExpenseTitleBreakdown]
