"""
Stock classification shared by the query filter and the response payloads.

Both renditions of the rule live here, so a filter on ``stock=lowstock``
and the ``stock_status`` field of an item always agree:

    out_of_stock  quantity = 0
    low_stock     0 < quantity < min_stock
    in_stock      quantity >= min_stock and quantity > 0
"""

from typing import Optional

from sqlalchemy import and_

from .enums import StockLevel

# Query-string tokens accepted by the ``stock`` filter
STOCK_FILTER_TOKENS = {
    'instock': StockLevel.IN_STOCK,
    'lowstock': StockLevel.LOW_STOCK,
    'outofstock': StockLevel.OUT_OF_STOCK,
}


def classify_stock(quantity: int, min_stock: int) -> StockLevel:
    """Classify an on-hand quantity against its threshold"""
    if quantity <= 0:
        return StockLevel.OUT_OF_STOCK
    if quantity < min_stock:
        return StockLevel.LOW_STOCK
    return StockLevel.IN_STOCK


def stock_level_condition(level: StockLevel, quantity, min_stock):
    """
    SQL expression selecting the rows that classify_stock() puts in ``level``.

    Args:
        level: Stock level to select
        quantity: Quantity column (or any SQL expression)
        min_stock: Threshold column (or any SQL expression)
    """
    if level is StockLevel.OUT_OF_STOCK:
        return quantity <= 0
    if level is StockLevel.LOW_STOCK:
        return and_(quantity > 0, quantity < min_stock)
    return and_(quantity > 0, quantity >= min_stock)


def parse_stock_filter(value: Optional[str]) -> Optional[StockLevel]:
    """Map a ``stock`` query token to a level; unknown or empty tokens give None"""
    if not value:
        return None
    return STOCK_FILTER_TOKENS.get(value.strip().lower())
