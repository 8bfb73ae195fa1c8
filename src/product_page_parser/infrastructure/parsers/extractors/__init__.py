# 🧾 product_page_parser/infrastructure/parsers/extractors/__init__.py
"""
🧾 Міксини-екстрактори для окремих фрагментів сторінки товару.

🔹 `Selectors`, `FIELD_RULES`, `_ConfigSnapshot`: структурний контракт сторінки.
🔹 `MetaMixin`, `ProductMixin`, `SuggestedMixin`, `ReviewsMixin`: спеціалізовані екстрактори.
"""

from __future__ import annotations

from .base import FIELD_RULES, ExtractionIssue, FieldRule, Selectors, _ConfigSnapshot	# 🧱 Контракт і діагностика
from .description import DescriptionMixin, sanitize_fragment	# 📝 Витяг опису
from .images import ImagesMixin	# 🖼️ Витяг зображень
from .meta import MetaMixin	# 🧾 Метадані сторінки
from .price import PriceMixin, PriceQuote	# 💰 Ціни
from .product import ProductMixin	# 📦 Картка товару
from .reviews import ReviewsMixin, normalize_review_date	# ⭐ Відгуки
from .suggested import SuggestedMixin	# 🛍️ Рекомендації

__all__ = [
    "FIELD_RULES",
    "ExtractionIssue",
    "FieldRule",
    "Selectors",
    "_ConfigSnapshot",
    "DescriptionMixin",
    "sanitize_fragment",
    "ImagesMixin",
    "MetaMixin",
    "PriceMixin",
    "PriceQuote",
    "ProductMixin",
    "ReviewsMixin",
    "normalize_review_date",
    "SuggestedMixin",
]
