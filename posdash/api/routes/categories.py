"""
카테고리 API 엔드포인트
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from posdash.api.deps import get_db, get_current_user
from posdash.core.exceptions import (
    CategoryNotFoundException,
    CategoryAlreadyExistsException,
)
from posdash.schemas.category import (
    CategoryRequest,
    CategoryEnvelope,
    CategoryListResponse,
)
from posdash.schemas.common import SuccessResponse
from posdash.services.category_service import CategoryService


router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=CategoryListResponse)
def list_categories(db: Session = Depends(get_db)):
    """
    이름순 카테고리 목록 (카테고리별 상품 수 포함)

    Example:
        Response (200):
        ```json
        {
            "success": true,
            "categories": [
                {"id": 1, "name": "Watches", "slug": "watches", "products_count": 12, ...}
            ]
        }
        ```
    """
    return {"success": True, "categories": CategoryService.list_categories(db)}


@router.post("", response_model=CategoryEnvelope, status_code=status.HTTP_201_CREATED)
def create_category(data: CategoryRequest, db: Session = Depends(get_db)):
    """
    Raises:
        HTTPException 409: 중복된 slug
    """
    try:
        category = CategoryService.create_category(data, db)
    except CategoryAlreadyExistsException as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    return {"success": True, "category": category}


@router.put("/{category_id}", response_model=CategoryEnvelope)
def update_category(
    category_id: int, data: CategoryRequest, db: Session = Depends(get_db)
):
    try:
        category = CategoryService.update_category(category_id, data, db)
    except CategoryNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except CategoryAlreadyExistsException as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    return {"success": True, "category": category}


@router.delete("/{category_id}", response_model=SuccessResponse)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    """카테고리를 삭제합니다. 소속 상품은 카테고리 없음으로 남습니다."""
    try:
        CategoryService.delete_category(category_id, db)
    except CategoryNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return SuccessResponse(message="Category deleted successfully")
