#!/usr/bin/env python3
"""
Vintage product classifier

Decides what to do with a product from its tags, its variant count and
the inventory fields of its first variant. Only products that come out
as ELIGIBLE_TO_HIDE move on to the visibility check and the unpublish
request. Nothing in here performs I/O or touches the run tally.
"""

from enum import Enum
from typing import Iterable, Optional

from vintagehider.product_data import Product

# Exact matches only. "VINTAGE" or " vintage" are not vintage products.
VINTAGE_TAGS = ('vintage', 'Vintage')


class Outcome(str, Enum):
    """Report categories, in the order they appear in the report"""
    ERRORS = 'errors'
    SKIPPED = 'skipped'
    NO_INVENTORY_TRACKING = 'skipped_because_no_inventory_tracking'
    MULTIPLE_VARIANTS = 'skipped_because_multiple_variants'
    NOT_SOLD_OUT = 'skipped_because_not_sold_out'
    NOT_VINTAGE = 'skipped_because_product_not_vintage'
    ALREADY_HIDDEN = 'product_is_already_hidden'
    HID_PRODUCT = 'successfully_hid_product'
    UNABLE_TO_HIDE = 'unable_to_hide_product'


# Classifier result that is not a report category
ELIGIBLE_TO_HIDE = 'eligible_to_hide'

SKIP_OUTCOMES = frozenset({
    Outcome.NO_INVENTORY_TRACKING,
    Outcome.MULTIPLE_VARIANTS,
    Outcome.NOT_SOLD_OUT,
    Outcome.NOT_VINTAGE,
})

SKIP_MESSAGES = {
    Outcome.NO_INVENTORY_TRACKING: "Skipped because item's inventory is not tracked",
    Outcome.MULTIPLE_VARIANTS: "!!**Multiple Variant Vintage Item, Won't Hide Usually**!!",
    Outcome.NOT_SOLD_OUT: "Skipped because item is not sold out",
    Outcome.NOT_VINTAGE: "Skipping because product is not vintage",
}


def is_vintage(tags: Iterable[str]) -> bool:
    tags = set(tags)
    return any(tag in tags for tag in VINTAGE_TAGS)


def classify(tags: Iterable[str], inventory_management: Optional[str],
             inventory_quantity: Optional[int], variant_count: int):
    """
    Return the skip Outcome for a product, or ELIGIBLE_TO_HIDE.

    Only the first variant's inventory fields are passed in; the other
    variants only count towards variant_count.
    """
    if not is_vintage(tags):
        return Outcome.NOT_VINTAGE
    if inventory_management is None:
        return Outcome.NO_INVENTORY_TRACKING
    if inventory_quantity == 0:
        if variant_count > 1:
            return Outcome.MULTIPLE_VARIANTS
        return ELIGIBLE_TO_HIDE
    return Outcome.NOT_SOLD_OUT


def classify_product(product: Product):
    variant = product.first_variant
    return classify(
        product.tags,
        variant.inventory_management,
        variant.inventory_quantity,
        product.variant_count,
    )


def is_hidden(product: Product) -> bool:
    """A product is hidden when it has no publication timestamp"""
    return product.published_at is None
