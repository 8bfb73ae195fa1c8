# 📦 product_page_parser/domain/products/entities.py
"""
📦 Доменні сутності результату парсингу сторінки товару.

🔹 Усі сутності іммʼютабельні (frozen dataclass + mapping proxy + tuple).
🔹 Гроші зберігаються як Decimal; у wire-формі рендеряться як int/float.
🔹 `to_dict()` повертає форму документа з camelCase-ключами (`isLiked`, `oldPrice`, ...).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import json                                                         # 🧾 Серіалізація документа
import logging                                                      # 🧾 Логування нормалізацій
from dataclasses import dataclass, field                            # 🧱 Опис сутностей
from decimal import Decimal                                         # 💰 Робота з цінами
from enum import Enum                                               # 🔖 Перелік валют
from types import MappingProxyType                                  # 🧊 Незмінні мапи
from typing import Any, Dict, Mapping, Optional, Tuple, Union       # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from product_page_parser.shared.utils.immutables import freeze, thaw

# ================================
# 🪵 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(__name__)

WireNumber = Union[int, float]


# ================================
# 💱 ДОМЕННІ ТИПИ
# ================================
class Currency(str, Enum):
    """Валюти, які розпізнаються за символом у ціні."""

    USD = "USD"
    EUR = "EUR"
    RUB = "RUB"


def _to_wire_number(value: Decimal) -> WireNumber:
    """Decimal → int (якщо ціле) або float."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _currency_code(currency: Optional[Currency]) -> Optional[str]:
    return currency.value if currency is not None else None


def _freeze_field(instance: Any, name: str) -> None:
    """Заморожує поле frozen-датакласу на місці (dict → mapping proxy, list → tuple)."""
    object.__setattr__(instance, name, freeze(getattr(instance, name)))


# ================================
# 🧾 МЕТАДАНІ СТОРІНКИ
# ================================
@dataclass(frozen=True, slots=True)
class PageMeta:
    """Метадані сторінки: заголовок, опис, мова, ключові слова та Open Graph."""

    title: str
    description: str
    language: str
    keywords: Tuple[str, ...] = ()
    opengraph: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        _freeze_field(self, "keywords")
        _freeze_field(self, "opengraph")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "language": self.language,
            "keywords": list(self.keywords),
            "opengraph": thaw(self.opengraph),
        }


# ================================
# 🖼️ ТОВАР
# ================================
@dataclass(frozen=True, slots=True)
class ImageRef:
    """Посилання на зображення галереї (preview може бути відносним)."""

    preview: str
    full: Optional[str] = None
    alt: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"preview": self.preview, "full": self.full, "alt": self.alt}


@dataclass(frozen=True, slots=True)
class TagSet:
    """Теги товару, розкладені за маркер-класами."""

    category: Tuple[str, ...] = ()
    discount: Tuple[str, ...] = ()
    label: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("category", "discount", "label"):
            _freeze_field(self, name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": list(self.category),
            "discount": list(self.discount),
            "label": list(self.label),
        }


@dataclass(frozen=True, slots=True)
class Discount:
    """
    Абсолютна знижка як tagged-значення.

    Нульова знижка у wire-формі стає рядком `"0"`, ненульова залишається числом.
    Усередині пакета завжди працюємо з `amount: Decimal` та `is_zero`.
    """

    amount: Decimal = Decimal("0")

    @classmethod
    def zero(cls) -> "Discount":
        return cls(Decimal("0"))

    @classmethod
    def between(cls, base: Decimal, discounted: Decimal) -> "Discount":
        """Різниця `base - discounted`."""
        return cls(base - discounted)

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def to_wire(self) -> Union[str, WireNumber]:
        if self.is_zero:
            return "0"
        return _to_wire_number(self.amount)


@dataclass(frozen=True, slots=True)
class Product:
    """Картка товару."""

    id: str
    name: str
    images: Tuple[ImageRef, ...]
    is_liked: bool
    tags: TagSet
    price: Decimal
    old_price: Decimal
    discount: Discount
    discount_percent: str
    currency: Optional[Currency]
    properties: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    description: str = ""

    def __post_init__(self) -> None:
        _freeze_field(self, "images")
        _freeze_field(self, "properties")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "images": [image.to_dict() for image in self.images],
            "isLiked": self.is_liked,
            "tags": self.tags.to_dict(),
            "price": _to_wire_number(self.price),
            "oldPrice": _to_wire_number(self.old_price),
            "discount": self.discount.to_wire(),
            "discountPercent": self.discount_percent,
            "currency": _currency_code(self.currency),
            "properties": thaw(self.properties),
            "description": self.description,
        }


# ================================
# 🛍️ РЕКОМЕНДАЦІЇ
# ================================
@dataclass(frozen=True, slots=True)
class SuggestedItem:
    """Легка картка cross-sell; ціна лишається текстом без символу валюти."""

    name: str
    description: str
    image: str
    price: str
    currency: Optional[Currency] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "image": self.image,
            "price": self.price,
            "currency": _currency_code(self.currency),
        }


# ================================
# ⭐ ВІДГУКИ
# ================================
@dataclass(frozen=True, slots=True)
class ReviewAuthor:
    avatar: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"avatar": self.avatar, "name": self.name}


@dataclass(frozen=True, slots=True)
class Review:
    """Відгук; `author` відсутній (None), якщо на сторінці немає блоку автора."""

    rating: int
    title: str
    description: str
    author: Optional[ReviewAuthor]
    date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rating": self.rating,
            "title": self.title,
            "description": self.description,
            "author": self.author.to_dict() if self.author is not None else None,
            "date": self.date,
        }


# ================================
# 📄 ДОКУМЕНТ
# ================================
@dataclass(frozen=True, slots=True)
class PageDocument:
    """Підсумковий документ: метадані, товар, рекомендації, відгуки."""

    meta: PageMeta
    product: Product
    suggested: Tuple[SuggestedItem, ...] = ()
    reviews: Tuple[Review, ...] = ()

    def __post_init__(self) -> None:
        _freeze_field(self, "suggested")
        _freeze_field(self, "reviews")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "meta": self.meta.to_dict(),
            "product": self.product.to_dict(),
            "suggested": [item.to_dict() for item in self.suggested],
            "reviews": [review.to_dict() for review in self.reviews],
        }

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        payload = self.to_dict()
        logger.debug("🧾 PageDocument.to_json: %d suggested, %d reviews", len(self.suggested), len(self.reviews))
        return json.dumps(payload, ensure_ascii=False, indent=indent)


__all__ = [
    "Currency",
    "PageMeta",
    "ImageRef",
    "TagSet",
    "Discount",
    "Product",
    "SuggestedItem",
    "ReviewAuthor",
    "Review",
    "PageDocument",
]
