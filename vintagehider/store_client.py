#!/usr/bin/env python3
"""
Store Admin API client

Thin wrapper around a requests.Session for the three calls the hider
needs: list a page of products, fetch one product and unpublish one
product. Every call waits on the rate limiter first.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from vintagehider.config import StoreConfig
from vintagehider.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


@dataclass
class ApiResponse:
    """What the report keeps of a mutating request"""
    method: str
    requested_url: str
    body: str
    code: int

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300

    def to_dict(self) -> Dict[str, Any]:
        return {
            'method': self.method,
            'requested_url': self.requested_url,
            'body': self.body,
            'code': self.code,
        }


class StoreClient:
    """Reads and unpublishes products through the store Admin API"""

    def __init__(self, config: StoreConfig, session: Optional[requests.Session] = None,
                 rate_limiter: Optional[RateLimiter] = None):
        self.config = config
        self.base_url = config.url_base.rstrip('/')
        self.session = session or requests.Session()
        self.rate_limiter = rate_limiter or RateLimiter(config.delay)
        self._setup_session()

    def _setup_session(self):
        """Setup requests session headers and authentication"""
        headers = {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            'User-Agent': 'Vintage-Product-Hider/1.0',
        }
        if self.config.access_token:
            headers['X-Shopify-Access-Token'] = self.config.access_token
        self.session.headers.update(headers)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.session.close()

    def url_for(self, relative_url: str) -> str:
        return self.base_url + relative_url

    def _get(self, relative_url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        self.rate_limiter.wait()
        url = self.url_for(relative_url)
        logger.debug(f"GET {url} {params or ''}")
        response = self.session.get(url, params=params, timeout=self.config.timeout)
        response.raise_for_status()
        return response.json()

    def get_products(self, page_number: int) -> List[Dict[str, Any]]:
        """Fetch one page of products"""
        data = self._get('/products.json', params={'page': page_number})
        return data['products']

    def get_product(self, product_id) -> Dict[str, Any]:
        """Fetch a single product by id"""
        data = self._get(f'/products/{product_id}.json')
        return data['product']

    def hide_product(self, product_id) -> ApiResponse:
        """
        Unpublish a product.

        A non-2xx answer is returned, not raised; the caller decides what a
        rejected update means. Transport errors propagate.
        """
        self.rate_limiter.wait()
        url = self.url_for(f'/products/{product_id}.json')
        payload = {'product': {'id': product_id, 'published': False}}
        response = self.session.put(url, json=payload, timeout=self.config.timeout)
        return ApiResponse(
            method='put',
            requested_url=url,
            body=response.text,
            code=response.status_code,
        )
