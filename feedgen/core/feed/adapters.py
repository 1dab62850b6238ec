"""
Adapters for converting plain dict records into FeedProduct.
"""

from typing import List, Dict, Any, Iterable

from .models import FeedProduct


# Keys that map onto FeedProduct fields; everything else becomes an attribute
_FIELD_KEYS = {'sku', 'name', 'price', 'final_price', 'product_url', 'attributes'}


def feed_product_from_dict(record: Dict[str, Any]) -> FeedProduct:
    """
    Build a FeedProduct from a dict record.

    Accepts either an explicit 'attributes' mapping or flat attribute keys
    next to the product fields (e.g. {'sku': ..., 'color': 'Red'}).
    Flat keys win over the same key inside 'attributes'.

    Raises:
        ValueError: missing/empty sku or negative prices
    """
    attributes = dict(record.get('attributes') or {})
    for key, value in record.items():
        if key not in _FIELD_KEYS:
            attributes[key] = value

    return FeedProduct(
        sku=record.get('sku', ''),
        name=record.get('name', ''),
        price=record.get('price'),
        final_price=record.get('final_price'),
        product_url=record.get('product_url', ''),
        attributes=attributes,
    )


def feed_products_from_dicts(records: Iterable[Dict[str, Any]]) -> List[FeedProduct]:
    """Convert a sequence of dict records, keeping their order."""
    return [feed_product_from_dict(record) for record in records]
