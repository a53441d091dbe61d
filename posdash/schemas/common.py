"""
공통 응답 스키마

모든 API 응답은 {"success": true/false, ...} 형태의 envelope를 사용합니다.
"""

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """
    처리 결과만 알려주는 응답 스키마

    Example:
        {
            "success": true,
            "message": "User deleted successfully"
        }
    """

    success: bool = Field(default=True, description="처리 성공 여부")
    message: str | None = Field(None, description="결과 메시지")


class ErrorResponse(BaseModel):
    """
    에러 응답 스키마 (예외 핸들러에서 사용)

    Example:
        {
            "success": false,
            "error": "Category with id 3 not found"
        }
    """

    success: bool = Field(default=False)
    error: str = Field(..., description="에러 메시지")
    details: list | None = Field(None, description="검증 실패 상세 (422)")
