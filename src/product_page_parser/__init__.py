# 📦 product_page_parser/__init__.py
"""
📦 product_page_parser: структурна екстракція даних зі сторінки товару інтернет-магазину.

Використання:
    from product_page_parser import parse_page
    document = parse_page(html)
    print(document.to_json())
"""

from __future__ import annotations

from product_page_parser.domain.products.entities import PageDocument
from product_page_parser.errors import (
    MalformedFragmentError,
    MissingFragmentError,
    ParsingError,
    PriceFormatError,
)
from product_page_parser.infrastructure.parsers import (
    PageParser,
    ParseReport,
    ParserInfraOptions,
    ProductPageExtractor,
    Selectors,
    parse_page,
    parse_page_with_report,
)

__version__ = "0.1.0"

__all__ = [
    "PageDocument",
    "PageParser",
    "ParseReport",
    "ParserInfraOptions",
    "ProductPageExtractor",
    "Selectors",
    "parse_page",
    "parse_page_with_report",
    "ParsingError",
    "MissingFragmentError",
    "MalformedFragmentError",
    "PriceFormatError",
]
