"""
상품 API 엔드포인트

상품 목록/검색과 로컬 상품 CRUD를 제공합니다.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from posdash.api.deps import get_db, get_current_user
from posdash.core.exceptions import ProductNotFoundException, CategoryNotFoundException
from posdash.schemas.common import SuccessResponse
from posdash.schemas.product import (
    ProductCreateRequest,
    ProductUpdateRequest,
    ProductEnvelope,
    ProductListResponse,
)
from posdash.services.product_service import ProductService


router = APIRouter(dependencies=[Depends(get_current_user)])


def _parse_limit(limit: str | None) -> int | None:
    """"all", 빈 값, 양수가 아닌 값은 제한 없음"""
    if not limit or limit == "all":
        return None
    try:
        value = int(limit)
    except ValueError:
        return None
    return value if value > 0 else None


@router.get("", response_model=ProductListResponse)
def list_products(
    search: str = "",
    product_status: str = Query("all", alias="status"),
    vendor: str = "all",
    sort_by: str = "name",
    limit: str | None = None,
    db: Session = Depends(get_db),
):
    """
    상품 목록을 조회합니다.

    Query:
        search: 상품명, 벤더, SKU, 바코드 검색
        status / vendor: "all"이면 필터 없음
        sort_by: name, name-desc, price-low, price-high, stock-low, stock-high
        limit: 정수 또는 "all"

    Example:
        Request:
        ```
        GET /api/products?search=wallet&sort_by=price-low&limit=50
        ```
    """
    products, total = ProductService.list_products(
        db,
        search=search,
        status=product_status,
        vendor=vendor,
        sort_by=sort_by,
        limit=_parse_limit(limit),
    )
    return {"success": True, "products": products, "total": total}


@router.post("", response_model=ProductEnvelope, status_code=status.HTTP_201_CREATED)
def create_product(data: ProductCreateRequest, db: Session = Depends(get_db)):
    """
    로컬 상품을 생성합니다 (기본 variant 포함).

    Raises:
        HTTPException 404: 존재하지 않는 category_id
    """
    try:
        product = ProductService.create_product(data, db)
    except CategoryNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return {"success": True, "product": product}


@router.get("/{product_id}", response_model=ProductEnvelope)
def get_product(product_id: str, db: Session = Depends(get_db)):
    try:
        product = ProductService.get_product(product_id, db)
    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return {"success": True, "product": product}


@router.patch("/{product_id}", response_model=ProductEnvelope)
def update_product(
    product_id: str, data: ProductUpdateRequest, db: Session = Depends(get_db)
):
    """
    상품을 부분 수정합니다.

    Example:
        Request:
        ```json
        {"category_id": null}
        ```
    """
    try:
        product = ProductService.update_product(product_id, data, db)
    except (ProductNotFoundException, CategoryNotFoundException) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return {"success": True, "product": product}


@router.delete("/{product_id}", response_model=SuccessResponse)
def delete_product(product_id: str, db: Session = Depends(get_db)):
    try:
        ProductService.delete_product(product_id, db)
    except ProductNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    return SuccessResponse(message="Product deleted successfully")
