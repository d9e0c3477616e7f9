#!/usr/bin/env python3
"""
Product Data Models for the vintage hider

Read-only snapshots of the store's product JSON. They are built fresh
for every page or lookup and never cached.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

TAG_SEPARATOR = ', '


@dataclass
class Variant:
    """Inventory fields of a single product variant"""
    inventory_management: Optional[str] = None
    inventory_quantity: Optional[int] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Variant':
        return cls(
            inventory_management=data.get('inventory_management'),
            inventory_quantity=data.get('inventory_quantity'),
        )


@dataclass
class Product:
    """Structured product data from the Admin API"""
    product_id: Any
    tags: List[str]
    variants: List[Variant]
    published_at: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Product':
        """
        Build a Product from an API product object.

        Raises KeyError when the product has no tags or variants field;
        callers treat that as a processing error for this product.
        """
        return cls(
            product_id=data['id'],
            tags=parse_tags(data['tags']),
            variants=[Variant.from_api(v) for v in data['variants']],
            published_at=data.get('published_at'),
        )

    @property
    def first_variant(self) -> Variant:
        if not self.variants:
            raise ValueError(f"Product {self.product_id} has no variants")
        return self.variants[0]

    @property
    def variant_count(self) -> int:
        return len(self.variants)


def parse_tags(tags) -> List[str]:
    """Split the API's "a, b, c" tag string. Lists pass through unchanged."""
    if tags is None:
        return []
    if isinstance(tags, (list, tuple, set)):
        return list(tags)
    if not tags:
        return []
    return tags.split(TAG_SEPARATOR)
