"""
직원 Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class EmployeeCreateRequest(BaseModel):
    """
    직원 등록 요청 스키마

    Example:
        {
            "name": "Ali Raza",
            "phone_number": "03001234567",
            "city": "Lahore",
            "address": "Main Boulevard, Gulberg",
            "cnic": "35202-1234567-1"
        }
    """

    name: str = Field(..., min_length=1, max_length=255)
    phone_number: str = Field(..., min_length=1, max_length=50)
    city: str = Field(..., min_length=1, max_length=100)
    address: str = Field(..., min_length=1)
    cnic: str | None = Field(None, max_length=50)


class EmployeeUpdateRequest(BaseModel):
    """직원 수정 요청 스키마 (전달된 필드만 수정, 필수 필드의 null은 무시)"""

    name: str | None = Field(None, min_length=1, max_length=255)
    phone_number: str | None = Field(None, min_length=1, max_length=50)
    city: str | None = Field(None, min_length=1, max_length=100)
    address: str | None = Field(None, min_length=1)
    cnic: str | None = Field(None, max_length=50)


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    phone_number: str
    city: str
    address: str
    cnic: str | None = None
    created_at: datetime
    updated_at: datetime


class EmployeeEnvelope(BaseModel):
    success: bool = True
    employee: EmployeeResponse


class EmployeeListResponse(BaseModel):
    success: bool = True
    employees: list[EmployeeResponse]


class EmployeeStatsResponse(BaseModel):
    success: bool = True
    total_employees: int
