"""
인증 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다.
"""

from pydantic import BaseModel, Field

from posdash.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """
    로그인 요청 스키마

    Example:
        {
            "email": "admin@shop.pk",
            "password": "securePass123"
        }
    """

    email: str = Field(..., min_length=3, description="로그인 이메일", examples=["admin@shop.pk"])
    password: str = Field(..., min_length=1, description="비밀번호", examples=["securePass123"])


class TokenResponse(BaseModel):
    """
    JWT 토큰 응답 스키마

    Example:
        {
            "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            "token_type": "bearer"
        }
    """

    access_token: str = Field(..., description="JWT 액세스 토큰")
    token_type: str = Field(default="bearer", description="토큰 타입")


class MeResponse(BaseModel):
    """현재 로그인 사용자 응답 스키마"""

    success: bool = True
    user: UserResponse
