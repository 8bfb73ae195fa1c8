# 🧠 product_page_parser/infrastructure/parsers/__init__.py
"""
🧠 Пакет інфраструктурних парсерів сторінки товару.

🔹 `PageParser` + `ProductPageExtractor`: повний цикл «HTML → PageDocument».
🔹 `ParserInfraOptions`: конфігурація інфраструктурних опцій.
🔹 `Selectors` / `FIELD_RULES`: структурний контракт сторінки.
"""

from __future__ import annotations

# 🏗️ Базові компоненти
from .page_parser import PageParser, ParseReport, parse_page, parse_page_with_report
from .product_page_extractor import ProductPageExtractor

# 🧩 Опції та контракт
from ._infra_options import DEFAULT_PARSER_INFRA_OPTIONS, ParserInfraOptions
from .extractors.base import FIELD_RULES, ExtractionIssue, FieldRule, Selectors

__all__ = [
    "PageParser",
    "ParseReport",
    "parse_page",
    "parse_page_with_report",
    "ProductPageExtractor",
    "DEFAULT_PARSER_INFRA_OPTIONS",
    "ParserInfraOptions",
    "FIELD_RULES",
    "ExtractionIssue",
    "FieldRule",
    "Selectors",
]
