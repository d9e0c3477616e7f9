#!/usr/bin/env python3
"""
Product processing and page driving

ProductProcessor takes one product JSON object through classification,
the visibility check and, if needed, the unpublish request. It never
raises for a single product; it returns a ProductResult instead.

PageDriver walks a page range (or a single product id) and decides what
a failed product means for the rest of the run.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from vintagehider.classifier import (
    ELIGIBLE_TO_HIDE,
    SKIP_MESSAGES,
    Outcome,
    classify_product,
    is_hidden,
)
from vintagehider.outcomes import OutcomeTally
from vintagehider.product_data import Product
from vintagehider.store_client import StoreClient

logger = logging.getLogger(__name__)

DIVIDER = '-' * 42


@dataclass
class ProductResult:
    """Result of processing one product"""
    product_id: Any
    outcome: Optional[Outcome] = None
    error: Optional[BaseException] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class RunResult:
    """Result of a page range or single product run"""
    completed: bool = True
    processed: int = 0
    pages: List[int] = field(default_factory=list)
    failures: List[ProductResult] = field(default_factory=list)

    @property
    def first_failure(self) -> Optional[ProductResult]:
        return self.failures[0] if self.failures else None


class ProductProcessor:
    """Classifies a product and unpublishes it when it is a sold out vintage item"""

    def __init__(self, client: StoreClient, tally: OutcomeTally):
        self.client = client
        self.tally = tally

    def process(self, data: Dict[str, Any]) -> ProductResult:
        product_id = data.get('id') if isinstance(data, dict) else None
        logger.info(DIVIDER)
        try:
            product = Product.from_api(data)
            outcome = self._handle(product)
        except Exception as e:
            self.tally.record(Outcome.ERRORS, product_id)
            logger.exception(f"❌ Error on product {product_id}: {e}")
            return ProductResult(product_id=product_id, error=e)
        return ProductResult(product_id=product_id, outcome=outcome)

    def _handle(self, product: Product) -> Outcome:
        decision = classify_product(product)
        if decision != ELIGIBLE_TO_HIDE:
            self.tally.record(decision, product.product_id)
            self.tally.record(Outcome.SKIPPED, product.product_id)
            logger.info(SKIP_MESSAGES[decision])
            logger.info(f"⏭️ Skipping product {product.product_id}")
            return decision

        if is_hidden(product):
            self.tally.record(Outcome.ALREADY_HIDDEN, product.product_id)
            logger.info(f"🙈 Vintage product {product.product_id} is already hidden")
            return Outcome.ALREADY_HIDDEN

        return self._hide(product)

    def _hide(self, product: Product) -> Outcome:
        response = self.client.hide_product(product.product_id)
        self.tally.record_response(response)
        if response.ok:
            self.tally.record(Outcome.HID_PRODUCT, product.product_id)
            logger.info(f"✅ Hid product {product.product_id}")
            return Outcome.HID_PRODUCT
        self.tally.record(Outcome.UNABLE_TO_HIDE, product.product_id)
        logger.warning(
            f"⚠️ Unable to hide product {product.product_id} "
            f"(HTTP {response.code}): {response.body}"
        )
        return Outcome.UNABLE_TO_HIDE


class PageDriver:
    """
    Runs the processor over pages of the catalog.

    With stop_on_error (the default) the first failed product ends the
    run: nothing after it is processed and the returned RunResult is not
    completed. Errors fetching a page or a product are not product
    failures and propagate to the caller.
    """

    def __init__(self, client: StoreClient, processor: ProductProcessor,
                 stop_on_error: bool = True):
        self.client = client
        self.processor = processor
        self.stop_on_error = stop_on_error

    def _run_product(self, data: Dict[str, Any], result: RunResult) -> bool:
        """Process one product; return False when the run must stop"""
        product_result = self.processor.process(data)
        result.processed += 1
        if product_result.success:
            return True
        result.failures.append(product_result)
        if self.stop_on_error:
            result.completed = False
            logger.error(f"🛑 Aborting run after failure on product {product_result.product_id}")
            return False
        return True

    def process_page(self, page_number: int, result: Optional[RunResult] = None) -> RunResult:
        result = result if result is not None else RunResult()
        logger.info(f"📄 Starting page {page_number}")
        products = self.client.get_products(page_number)
        if not products:
            logger.info(f"📭 Page {page_number} has no products")
        for data in products:
            if not self._run_product(data, result):
                return result
        result.pages.append(page_number)
        logger.info(f"🏁 Finished page {page_number}")
        return result

    def process_page_range(self, start_page: int, end_page: int) -> RunResult:
        """Process pages start_page..end_page inclusive, in order"""
        result = RunResult()
        for page_number in range(start_page, end_page + 1):
            self.process_page(page_number, result)
            if not result.completed:
                break
        return result

    def process_product_by_id(self, product_id) -> RunResult:
        result = RunResult()
        logger.info(f"🔍 Looking up product {product_id}")
        data = self.client.get_product(product_id)
        self._run_product(data, result)
        return result
