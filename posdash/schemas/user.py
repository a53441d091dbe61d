"""
사용자 관리 Pydantic 스키마
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator

# 공백과 @가 없는 local@domain.tld 형식
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class UserCreateRequest(BaseModel):
    """
    사용자 생성 요청 스키마

    Example:
        {
            "email": "cashier@shop.pk",
            "password": "securePass123",
            "name": "Cashier",
            "role": "user",
            "modules": ["sales", "products"]
        }
    """

    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=191, examples=["cashier@shop.pk"])
    password: str = Field(..., min_length=6, max_length=100, description="비밀번호 (6자 이상)")
    name: str = Field(..., min_length=1, max_length=100, examples=["Cashier"])
    role: str = Field(default="user", max_length=50)
    status: str = Field(default="active", max_length=50)
    modules: list[str] | None = Field(None, description="접근 가능한 대시보드 모듈 키")


class UserUpdateRequest(BaseModel):
    """
    사용자 수정 요청 스키마 (전달된 필드만 수정)

    Example:
        {
            "name": "Senior Cashier",
            "status": "inactive"
        }
    """

    email: str | None = Field(None, pattern=EMAIL_PATTERN, max_length=191)
    password: str | None = Field(None, min_length=6, max_length=100)
    name: str | None = Field(None, max_length=100)
    role: str | None = Field(None, max_length=50)
    status: str | None = Field(None, max_length=50)
    modules: list[str] | None = None


class UserResponse(BaseModel):
    """
    사용자 정보 응답 스키마 (비밀번호 해시는 포함하지 않음)

    Example:
        {
            "id": 1,
            "email": "admin@shop.pk",
            "name": "Admin",
            "role": "admin",
            "status": "active",
            "modules": [],
            "created_at": "2025-01-22T10:30:00Z",
            "updated_at": "2025-01-22T10:30:00Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="사용자 ID")
    email: str = Field(..., description="이메일")
    name: str | None = Field(None, description="이름")
    role: str = Field(..., description="권한")
    status: str = Field(..., description="계정 상태")
    modules: list[str] = Field(default_factory=list, description="접근 가능한 모듈")
    created_at: datetime
    updated_at: datetime

    @field_validator("modules", mode="before")
    @classmethod
    def _modules_or_empty(cls, value):
        return value if isinstance(value, list) else []


class UserEnvelope(BaseModel):
    success: bool = True
    user: UserResponse
    message: str | None = None


class UserListResponse(BaseModel):
    success: bool = True
    users: list[UserResponse]
