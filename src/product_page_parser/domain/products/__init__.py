# 📦 product_page_parser/domain/products/__init__.py
"""📦 Доменні сутності документа сторінки товару."""

from .entities import (
    Currency,
    Discount,
    ImageRef,
    PageDocument,
    PageMeta,
    Product,
    Review,
    ReviewAuthor,
    SuggestedItem,
    TagSet,
)

__all__ = [
    "Currency",
    "Discount",
    "ImageRef",
    "PageDocument",
    "PageMeta",
    "Product",
    "Review",
    "ReviewAuthor",
    "SuggestedItem",
    "TagSet",
]
