"""
Shopify Admin REST API 클라이언트

상품 동기화와 판매 후 재고 차감에 필요한 엔드포인트만 제공합니다.
"""

import logging
import re
from typing import Any
from urllib.parse import unquote

import requests

from posdash.core.config import Settings
from posdash.core.exceptions import ShopifyAPIException, ShopifyNotConfiguredException

logger = logging.getLogger(__name__)

# Shopify REST API 페이지 최대 크기
MAX_PAGE_SIZE = 250
DEFAULT_ORDER = "created_at desc"

NEXT_LINK_PATTERN = re.compile(r'<[^>]*[?&]page_info=([^&>]+)[^>]*>;\s*rel="next"')


def parse_next_page_info(link_header: str | None) -> str | None:
    """
    Link 헤더에서 rel="next" URL의 page_info 커서를 추출합니다.

    Example:
        >>> parse_next_page_info(
        ...     '<https://s.myshopify.com/admin/api/2024-01/products.json?limit=250&page_info=abc>; rel="next"'
        ... )
        'abc'
    """
    if not link_header or 'rel="next"' not in link_header:
        return None
    match = NEXT_LINK_PATTERN.search(link_header)
    if not match:
        return None
    return unquote(match.group(1))


class ShopifyClient:
    """
    Shopify Admin API 클라이언트

    requests.Session을 재사용하며, 테스트에서는 session을 주입할 수 있습니다.
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        self.settings = settings
        self.session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return (
            f"https://{self.settings.shopify_store_domain}"
            f"/admin/api/{self.settings.shopify_api_version}"
        )

    def _ensure_configured(self) -> None:
        if not self.settings.shopify_configured:
            raise ShopifyNotConfiguredException()

    def _send(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> requests.Response:
        """
        요청을 보내고 응답 상태를 검사합니다.

        Raises:
            ShopifyNotConfiguredException: 자격 증명이 없는 경우
            ShopifyAPIException: 2xx 이외의 응답
        """
        self._ensure_configured()

        url = f"{self.base_url}{endpoint}"
        logger.debug("Shopify %s %s params=%s", method, endpoint, params)

        response = self.session.request(
            method,
            url,
            params=params,
            json=json,
            headers={
                "Content-Type": "application/json",
                "X-Shopify-Access-Token": self.settings.shopify_access_token,
            },
            timeout=self.settings.shopify_timeout_seconds,
        )

        if response.status_code == 401:
            raise ShopifyAPIException(
                401,
                "Authentication Failed: Your access token is invalid or expired. "
                "Please check your SHOPIFY_ACCESS_TOKEN in the .env file.",
            )
        if response.status_code == 403:
            raise ShopifyAPIException(
                403,
                "Permission Denied: Your Shopify app doesn't have the required "
                f"permissions for this operation. {response.text}",
            )
        if not response.ok:
            raise ShopifyAPIException(
                response.status_code,
                f"Shopify API Error: {response.status_code} - {response.text}",
            )
        return response

    def _request(self, method: str, endpoint: str, **kwargs) -> dict[str, Any]:
        response = self._send(method, endpoint, **kwargs)
        # DELETE 등 본문 없는 응답
        if response.status_code == 204:
            return {}
        return response.json()

    @staticmethod
    def _page_params(
        limit: int, page_info: str | None, status: str | None, order: str | None
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"limit": limit}
        if page_info:
            # 커서 요청에는 limit 외의 필터를 붙일 수 없음
            params["page_info"] = page_info
        else:
            params["order"] = order or DEFAULT_ORDER
            if status:
                params["status"] = status
        return params

    def get_products_page(
        self,
        limit: int = MAX_PAGE_SIZE,
        page_info: str | None = None,
        status: str | None = None,
        order: str | None = None,
    ) -> tuple[list[dict[str, Any]], str | None]:
        """
        상품 한 페이지를 가져옵니다.

        Returns:
            (상품 목록, 다음 페이지 page_info 또는 None)
        """
        limit = min(limit or MAX_PAGE_SIZE, MAX_PAGE_SIZE)
        response = self._send(
            "GET",
            "/products.json",
            params=self._page_params(limit, page_info, status, order),
        )
        products = response.json().get("products") or []
        return products, parse_next_page_info(response.headers.get("Link"))

    def get_products(
        self,
        max_products: int = 50000,
        status: str | None = None,
        order: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        page_info 커서를 따라가며 최대 max_products개의 상품을 가져옵니다.

        빈 페이지, 다음 링크 없음, 같은 커서 반복, 최대 개수 도달 시 중단합니다.
        """
        all_products: list[dict[str, Any]] = []
        page_info: str | None = None
        page_count = 0

        logger.info("Fetching products from Shopify (max: %d)", max_products)

        while len(all_products) < max_products:
            page_count += 1
            products, next_page_info = self.get_products_page(
                MAX_PAGE_SIZE, page_info, status, order
            )
            if not products:
                logger.info("No more products returned, stopping pagination")
                break

            all_products.extend(products)
            logger.info(
                "Page %d: fetched %d products (total: %d)",
                page_count,
                len(products),
                len(all_products),
            )

            if not next_page_info:
                break
            if next_page_info == page_info:
                logger.warning("Same page_info returned twice, stopping pagination")
                break
            page_info = next_page_info

        logger.info(
            "Total products fetched: %d (%d pages)", len(all_products), page_count
        )
        return all_products[:max_products]

    def get_product_count(self) -> int:
        data = self._request("GET", "/products/count.json")
        return int(data.get("count") or 0)

    def get_product(self, product_id: str) -> dict[str, Any]:
        data = self._request("GET", f"/products/{product_id}.json")
        return data.get("product") or {}

    def get_variant(self, product_id: str, variant_id: str) -> dict[str, Any] | None:
        """상품의 variant 목록에서 variant_id와 일치하는 항목을 찾습니다."""
        product = self.get_product(product_id)
        for variant in product.get("variants") or []:
            if str(variant.get("id")) == str(variant_id):
                return variant
        return None

    def get_locations(self) -> list[dict[str, Any]]:
        data = self._request("GET", "/locations.json")
        return data.get("locations") or []

    def adjust_inventory(
        self, location_id: int, inventory_item_id: int, adjustment: int
    ) -> dict[str, Any]:
        """
        재고 수량을 상대값(adjustment)만큼 조정합니다.

        Returns:
            inventory_level (available 포함)
        """
        data = self._request(
            "POST",
            "/inventory_levels/adjust.json",
            json={
                "location_id": location_id,
                "inventory_item_id": inventory_item_id,
                "available_adjustment": adjustment,
            },
        )
        return data.get("inventory_level") or {}
