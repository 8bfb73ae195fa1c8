# 🚨 product_page_parser/errors/custom_errors.py
"""
🚨 Ієрархія винятків парсера сторінки товару.

🔹 `AppError` → `ParsingError` → конкретні фатальні збої екстракції.
🔹 Кожен виняток знає поле документа, CSS-селектор і `ErrorCode`.
🔹 `to_log_extra()` формує словник для `logger.extra` (структуровані логи).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення винятків
from typing import Dict, Optional									# 📐 Типізація

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger("product_page_parser.errors")


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Стабільні коди для логів і зовнішніх споживачів."""

    PARSING = "parsing_error"										# 📄 Загальна помилка парсингу
    MISSING_FRAGMENT = "missing_fragment"							# 🕳️ Обовʼязковий фрагмент відсутній
    MALFORMED_FRAGMENT = "malformed_fragment"						# 🧩 Фрагмент має неочікувану структуру
    PRICE_FORMAT = "price_format"									# 💰 Нечислова ціна
    UNKNOWN = "unknown_error"


# ================================
# 🧠 БАЗОВІ ВИНЯТКИ
# ================================
class AppError(Exception):
    """🧠 Базовий виняток пакета з опційними деталями."""

    code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message

    def to_log_extra(self) -> Dict[str, object]:
        extra: Dict[str, object] = {"error_code": self.code}
        if self.details:
            extra["details"] = self.details
        return extra


class ParsingError(AppError):
    """🧾 Фатальна помилка екстракції, що перериває побудову документа."""

    code = ErrorCode.PARSING

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        selector: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.field = field											# 🏷️ Поле документа (напр. `product.id`)
        self.selector = selector									# 🔍 Селектор, що не спрацював
        logger.debug("🧾 %s created", type(self).__name__, extra={"field": field, "selector": selector})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.field:
            extra["field"] = self.field
        if self.selector:
            extra["selector"] = self.selector
        return extra


# ================================
# 🧾 КОНКРЕТНІ ВИНЯТКИ
# ================================
class MissingFragmentError(ParsingError):
    """🕳️ Обовʼязковий фрагмент (meta, контейнер, атрибут) відсутній."""

    code = ErrorCode.MISSING_FRAGMENT

    def __init__(self, field: str, selector: Optional[str] = None, *, details: Optional[str] = None) -> None:
        where = f" ({selector})" if selector else ""
        super().__init__(
            f"Required fragment for '{field}' not found{where}",
            field=field,
            selector=selector,
            details=details,
        )


class MalformedFragmentError(ParsingError):
    """🧩 Фрагмент є, але його структура не відповідає контракту сторінки."""

    code = ErrorCode.MALFORMED_FRAGMENT

    def __init__(self, field: str, selector: Optional[str] = None, *, details: Optional[str] = None) -> None:
        super().__init__(
            f"Malformed fragment for '{field}'",
            field=field,
            selector=selector,
            details=details,
        )


class PriceFormatError(ParsingError):
    """💰 Токен ціни після символу валюти не є скінченним числом."""

    code = ErrorCode.PRICE_FORMAT

    def __init__(self, token: str, *, field: str = "product.price", selector: Optional[str] = None) -> None:
        super().__init__(
            f"Price token {token!r} is not numeric",
            field=field,
            selector=selector,
            details=token,
        )
        self.token = token


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "AppError",
    "ParsingError",
    "MissingFragmentError",
    "MalformedFragmentError",
    "PriceFormatError",
]
