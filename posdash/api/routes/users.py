"""
사용자 관리 API 엔드포인트
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from posdash.api.deps import get_db, get_current_user
from posdash.core.exceptions import (
    UserAlreadyExistsException,
    UserNotFoundException,
    SelfDeletionException,
)
from posdash.models.user import User
from posdash.schemas.common import SuccessResponse
from posdash.schemas.user import (
    UserCreateRequest,
    UserUpdateRequest,
    UserEnvelope,
    UserListResponse,
)
from posdash.services.user_service import UserService


router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=UserListResponse)
def list_users(db: Session = Depends(get_db)):
    """전체 사용자 목록 (최근 생성 순)"""
    return {"success": True, "users": UserService.list_users(db)}


@router.post("", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreateRequest, db: Session = Depends(get_db)):
    """
    사용자를 생성합니다.

    Raises:
        HTTPException 400: 이미 등록된 이메일

    Example:
        Request:
        ```json
        {
            "email": "cashier@shop.pk",
            "password": "securePass123",
            "name": "Cashier",
            "modules": ["sales"]
        }
        ```
    """
    try:
        user = UserService.create_user(data, db)
    except UserAlreadyExistsException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return {"success": True, "user": user, "message": "User created successfully"}


@router.get("/{user_id}", response_model=UserEnvelope)
def get_user(user_id: int, db: Session = Depends(get_db)):
    try:
        user = UserService.get_user(user_id, db)
    except UserNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return {"success": True, "user": user}


@router.put("/{user_id}", response_model=UserEnvelope)
def update_user(user_id: int, data: UserUpdateRequest, db: Session = Depends(get_db)):
    """
    사용자 정보를 부분 수정합니다.

    Raises:
        HTTPException 404: 사용자가 없는 경우
        HTTPException 400: 다른 사용자가 쓰는 이메일
    """
    try:
        user = UserService.update_user(user_id, data, db)
    except UserNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except UserAlreadyExistsException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return {"success": True, "user": user, "message": "User updated successfully"}


@router.delete("/{user_id}", response_model=SuccessResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    사용자를 삭제합니다. 자기 자신은 삭제할 수 없습니다.

    Raises:
        HTTPException 404: 사용자가 없는 경우
        HTTPException 400: 자기 계정 삭제 시도
    """
    try:
        UserService.delete_user(user_id, current_user.id, db)
    except UserNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except SelfDeletionException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return SuccessResponse(message="User deleted successfully")
