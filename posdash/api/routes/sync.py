"""
Shopify 상품 동기화 API 엔드포인트

/api/products/sync 경로는 /api/products/{product_id}보다 먼저 등록해야 합니다.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from redis import Redis
from sqlalchemy.orm import Session

from posdash.api.deps import get_db, get_current_user, get_shopify_client
from posdash.core.config import Settings, get_settings
from posdash.core.exceptions import (
    ShopifyAPIException,
    ShopifyNotConfiguredException,
    SyncInProgressException,
)
from posdash.db.redis_client import get_redis_client
from posdash.integrations.shopify import ShopifyClient, MAX_PAGE_SIZE
from posdash.schemas.sync import SyncBatchResponse, SyncPageResponse, SyncStatusResponse
from posdash.services.product_sync_service import ProductSyncService

logger = logging.getLogger(__name__)

FULL_SYNC_MAX_PRODUCTS = 50000

router = APIRouter(dependencies=[Depends(get_current_user)])


def _raise_http(e: Exception):
    """동기화 관련 예외를 HTTP 상태 코드로 변환합니다."""
    if isinstance(e, SyncInProgressException):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    if isinstance(e, ShopifyNotConfiguredException):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message
        )
    if isinstance(e, ShopifyAPIException):
        logger.error("Shopify API error (%s): %s", e.status_code, e.message)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    raise e


@router.post("", response_model=SyncBatchResponse)
def sync_products(
    batch_size: int = Query(1000, ge=1, le=FULL_SYNC_MAX_PRODUCTS),
    offset: int = Query(0, ge=0),
    full_sync: bool = False,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    settings: Settings = Depends(get_settings),
    client: ShopifyClient = Depends(get_shopify_client),
):
    """
    Shopify 상품을 offset 기반 배치로 동기화합니다.

    full_sync=true이면 offset 0부터 최대 50000개를 가져옵니다.

    Raises:
        HTTPException 409: 다른 동기화가 실행 중
        HTTPException 502: Shopify API 오류
        HTTPException 503: Shopify 자격 증명 미설정

    Example:
        Request:
        ```
        POST /api/products/sync?batch_size=1000&offset=2000
        ```

        Response (200):
        ```json
        {
            "success": true,
            "imported": 1000,
            "failed": 0,
            "total": 1000,
            "offset": 2000,
            "next_offset": 3000,
            "has_more": true
        }
        ```
    """
    if full_sync:
        batch_size, offset = FULL_SYNC_MAX_PRODUCTS, 0

    try:
        result = ProductSyncService.sync_batch(
            client, db, redis, settings, max_products=batch_size, offset=offset
        )
    except (
        SyncInProgressException,
        ShopifyNotConfiguredException,
        ShopifyAPIException,
    ) as e:
        _raise_http(e)
    return result


@router.post("/page", response_model=SyncPageResponse)
def sync_products_page(
    limit: int = Query(MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    page_info: str | None = None,
    product_status: str | None = Query(None, alias="status"),
    order: str | None = None,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    settings: Settings = Depends(get_settings),
    client: ShopifyClient = Depends(get_shopify_client),
):
    """
    Shopify 상품 한 페이지를 page_info 커서로 동기화합니다.

    응답의 next_page_info를 다음 요청에 넘겨 이어서 동기화합니다.
    """
    try:
        result = ProductSyncService.sync_page(
            client,
            db,
            redis,
            settings,
            limit=limit,
            page_info=page_info,
            status=product_status,
            order=order,
        )
    except (
        SyncInProgressException,
        ShopifyNotConfiguredException,
        ShopifyAPIException,
    ) as e:
        _raise_http(e)
    return result


@router.get("/status", response_model=SyncStatusResponse)
def sync_status(
    db: Session = Depends(get_db),
    client: ShopifyClient = Depends(get_shopify_client),
):
    """Shopify 상품 수 대비 로컬 상품 수"""
    try:
        result = ProductSyncService.get_sync_status(client, db)
    except (ShopifyNotConfiguredException, ShopifyAPIException) as e:
        _raise_http(e)
    return result
