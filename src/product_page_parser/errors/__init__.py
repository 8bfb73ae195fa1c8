# 🚨 product_page_parser/errors/__init__.py
"""🚨 Винятки парсера сторінки товару."""

from .custom_errors import (
    AppError,
    ErrorCode,
    MalformedFragmentError,
    MissingFragmentError,
    ParsingError,
    PriceFormatError,
)

__all__ = [
    "AppError",
    "ErrorCode",
    "MalformedFragmentError",
    "MissingFragmentError",
    "ParsingError",
    "PriceFormatError",
]
