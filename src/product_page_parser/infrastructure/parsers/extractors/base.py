# 🧾 product_page_parser/infrastructure/parsers/extractors/base.py
"""
🧾 Структурний контракт сторінки та спільна основа для mixin-екстракторів.

🔹 `Selectors`: frozen-набір CSS-селекторів і маркер-класів (дефолти = фіксована форма сторінки).
🔹 `FIELD_RULES`: декларативна мапа «поле документа → (селектор, обовʼязковість)».
🔹 `_ConfigSnapshot`: кешує селектори, змерджені з `parser.selectors` у ConfigService.
🔹 `FragmentLocator`: пошук фрагментів за правилами + канал діагностики `ExtractionIssue`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4 import BeautifulSoup	# 🥣 DOM-дерево сторінки
from bs4.element import Tag	# 🧱 Тип DOM-вузлів

# 🔠 Системні імпорти
import logging	# 🧾 Логування подій
from dataclasses import dataclass, fields	# 🧱 Створення датакласів
from types import MappingProxyType	# 🧊 Незмінна таблиця правил
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union	# 🧰 Типи для статичного аналізу

# 🧩 Внутрішні модулі проєкту
from product_page_parser.config.config_service import ConfigService	# ⚙️ Доступ до конфігурацій
from product_page_parser.errors import MissingFragmentError	# 🚨 Фатальні збої
from product_page_parser.shared.utils.logger import LOG_NAME	# 🏷️ Базова назва логера

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parser.extractor")

# ================================
# 📦 КОНСТАНТИ МОДУЛЯ
# ================================
TAG_GROUPS: Tuple[str, ...] = ("category", "discount", "label")	# 🏷️ Групи TagSet

_DEFAULT_SELECTORS: Dict[str, Any] = {
    # 🧾 Метадані
    "DOCUMENT_ROOT": "html",
    "LANGUAGE_ATTR": "lang",
    "META_TITLE": 'meta[property="og:title"]',
    "META_DESCRIPTION": 'meta[name="description"]',
    "META_KEYWORDS": 'meta[name="keywords"]',
    "OPENGRAPH_META": 'meta[property^="og:"]',
    "TITLE_SEPARATOR": "—",
    # 📦 Товар
    "PRODUCT_CONTAINER": ".product",
    "PRODUCT_ID_ATTR": "data-id",
    "PRODUCT_TITLE": "h1",
    "PRODUCT_IMAGES_NAV": "nav",
    "PRODUCT_IMAGE": "img",
    "LIKE_BUTTON": "figure button",
    "LIKE_ACTIVE_CLASS": "active",
    "TAGS_CONTAINER": ".tags",
    "TAG_MARKERS": (("green", "category"), ("blue", "label"), ("red", "discount")),
    "PRICE": ".price",
    "PROPERTIES": ".properties",
    "PROPERTY_ITEM": "li",
    "PROPERTY_PART": "span",
    "DESCRIPTION": ".description",
    # 🛍️ Рекомендації
    "SUGGESTED": ".suggested",
    "SUGGESTED_CARD": "article",
    "SUGGESTED_NAME": "h3",
    "SUGGESTED_DESCRIPTION": "p",
    "SUGGESTED_IMAGE": "img",
    "SUGGESTED_PRICE": "b",
    # ⭐ Відгуки
    "REVIEWS": ".reviews",
    "REVIEW_ARTICLE": "article",
    "REVIEW_RATING": ".rating",
    "RATING_FILLED_CLASS": "filled",
    "REVIEW_AUTHOR": ".author",
    "AUTHOR_AVATAR": "img",
    "AUTHOR_NAME": "span",
    "AUTHOR_DATE": "i",
    "REVIEW_TITLE": ".title",
    "REVIEW_BODY": "p",
}	# 🧾 Базовий структурний контракт сторінки


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _attr_to_str(value: Any) -> Optional[str]:
    """Повертає значення атрибута як рядок (multi-valued атрибути склеюються пробілом)."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def _text(node: Optional[Tag]) -> str:
    """Сирий текст вузла (аналог textContent), без обрізання."""
    if node is None:
        return ""
    return node.get_text()


def _has_class(node: Tag, class_name: str) -> bool:
    return class_name in (node.get("class") or [])


# ================================
# 🧱 СТРУКТУРА СЕЛЕКТОРІВ
# ================================
@dataclass(frozen=True)
class Selectors:
    """Структурний контракт сторінки: CSS-селектори, атрибути та маркер-класи."""
    DOCUMENT_ROOT: str
    LANGUAGE_ATTR: str
    META_TITLE: str
    META_DESCRIPTION: str
    META_KEYWORDS: str
    OPENGRAPH_META: str
    TITLE_SEPARATOR: str
    PRODUCT_CONTAINER: str
    PRODUCT_ID_ATTR: str
    PRODUCT_TITLE: str
    PRODUCT_IMAGES_NAV: str
    PRODUCT_IMAGE: str
    LIKE_BUTTON: str
    LIKE_ACTIVE_CLASS: str
    TAGS_CONTAINER: str
    TAG_MARKERS: Tuple[Tuple[str, str], ...]
    PRICE: str
    PROPERTIES: str
    PROPERTY_ITEM: str
    PROPERTY_PART: str
    DESCRIPTION: str
    SUGGESTED: str
    SUGGESTED_CARD: str
    SUGGESTED_NAME: str
    SUGGESTED_DESCRIPTION: str
    SUGGESTED_IMAGE: str
    SUGGESTED_PRICE: str
    REVIEWS: str
    REVIEW_ARTICLE: str
    REVIEW_RATING: str
    RATING_FILLED_CLASS: str
    REVIEW_AUTHOR: str
    AUTHOR_AVATAR: str
    AUTHOR_NAME: str
    AUTHOR_DATE: str
    REVIEW_TITLE: str
    REVIEW_BODY: str

    @classmethod
    def default(cls) -> "Selectors":
        return cls.from_mapping({})

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, Any]]) -> "Selectors":
        """Будує селектори з дефолтів, підміняючи лише відомі ключі."""
        merged: Dict[str, Any] = dict(_DEFAULT_SELECTORS)
        for key, value in (overrides or {}).items():
            if key not in merged:
                logger.warning("⚠️ Невідомий ключ селектора '%s' проігноровано.", key)
                continue
            if value in (None, ""):
                continue
            merged[key] = value
        merged["TAG_MARKERS"] = _normalize_tag_markers(merged["TAG_MARKERS"])
        for item in fields(cls):
            if item.name != "TAG_MARKERS":
                merged[item.name] = str(merged[item.name]).strip()
        return cls(**merged)

    def replace(self, **overrides: Any) -> "Selectors":
        """Новий екземпляр із підміненими полями."""
        current = {item.name: getattr(self, item.name) for item in fields(self)}
        current.update(overrides)
        return Selectors.from_mapping(current)


def _normalize_tag_markers(value: Union[Mapping[str, str], Any]) -> Tuple[Tuple[str, str], ...]:
    """Приводить маркери тегів до кортежу пар (клас, група) з перевіркою груп."""
    pairs = value.items() if isinstance(value, Mapping) else value
    normalized: List[Tuple[str, str]] = []
    for marker, group in pairs:
        group_name = str(group).strip().lower()
        if group_name not in TAG_GROUPS:
            raise ValueError(f"Unknown tag group {group!r} for marker {marker!r}; expected one of {TAG_GROUPS}")
        normalized.append((str(marker).strip(), group_name))
    return tuple(normalized)


# ================================
# 📐 ДЕКЛАРАТИВНІ ПРАВИЛА ПОЛІВ
# ================================
@dataclass(frozen=True)
class FieldRule:
    """Правило пошуку фрагмента: імʼя поля `Selectors` та чи є фрагмент обовʼязковим."""
    selector: str
    required: bool = False


FIELD_RULES: Mapping[str, FieldRule] = MappingProxyType({
    "meta.title": FieldRule("META_TITLE", required=True),
    "meta.description": FieldRule("META_DESCRIPTION"),
    "meta.keywords": FieldRule("META_KEYWORDS"),
    "meta.language": FieldRule("DOCUMENT_ROOT", required=True),
    "product.id": FieldRule("PRODUCT_CONTAINER", required=True),
    "product.name": FieldRule("PRODUCT_TITLE"),
    "product.images": FieldRule("PRODUCT_IMAGES_NAV"),
    "product.isLiked": FieldRule("LIKE_BUTTON"),
    "product.tags": FieldRule("TAGS_CONTAINER"),
    "product.price": FieldRule("PRICE", required=True),
    "product.properties": FieldRule("PROPERTIES"),
    "product.description": FieldRule("DESCRIPTION"),
    "suggested": FieldRule("SUGGESTED"),
    "reviews": FieldRule("REVIEWS", required=True),
    "review.rating": FieldRule("REVIEW_RATING"),
    "review.author": FieldRule("REVIEW_AUTHOR"),
    "review.author.avatar": FieldRule("AUTHOR_AVATAR"),
    "review.author.name": FieldRule("AUTHOR_NAME"),
    "review.date": FieldRule("AUTHOR_DATE"),
    "review.title": FieldRule("REVIEW_TITLE"),
    "review.description": FieldRule("REVIEW_BODY"),
})	# 📐 Поле документа → правило пошуку


@dataclass(frozen=True)
class ExtractionIssue:
    """Запис про деградовану екстракцію: поле отримало дефолт замість даних зі сторінки."""
    field: str
    selector: Optional[str]
    reason: str


# ================================
# 🧠 СНАПШОТ КОНФІГУРАЦІЇ
# ================================
class _ConfigSnapshot:
    """Кешує селектори, змерджені з конфігурацією (`parser.selectors`)."""
    _SELECTORS_CACHE: Optional[Selectors] = None

    @classmethod
    def selectors(cls) -> Selectors:
        if cls._SELECTORS_CACHE is None:
            overrides = ConfigService().get("parser.selectors") or {}
            if not isinstance(overrides, Mapping):
                logger.warning("⚠️ parser.selectors має бути словником, отримано %s.", type(overrides).__name__)
                overrides = {}
            cls._SELECTORS_CACHE = Selectors.from_mapping(overrides)
            logger.debug("🔧 Селектори екстрактора завантажені (overrides=%d).", len(overrides))
        return cls._SELECTORS_CACHE

    @classmethod
    def reset(cls) -> None:
        cls._SELECTORS_CACHE = None


# ================================
# 🔍 ПОШУК ФРАГМЕНТІВ
# ================================
class FragmentLocator:
    """Спільна основа mixin-ів: доступ до DOM, селекторів і журналу деградацій."""

    soup: BeautifulSoup
    _S: Selectors
    _issues: List[ExtractionIssue]

    def _selector_for(self, field: str) -> str:
        return getattr(self._S, FIELD_RULES[field].selector)

    def _find(self, field: str, root: Optional[Tag] = None) -> Optional[Tag]:
        """Перший вузол за правилом поля (без побічних ефектів)."""
        scope = root if root is not None else self.soup
        node = scope.select_one(self._selector_for(field))
        return node if isinstance(node, Tag) else None

    def _locate(self, field: str, root: Optional[Tag] = None, *, required: Optional[bool] = None) -> Optional[Tag]:
        """
        Шукає фрагмент поля та застосовує політику обовʼязковості.

        Args:
            field: Ключ із `FIELD_RULES`.
            root: Вузол-область пошуку (за замовчуванням увесь документ).
            required: Перекриває `FieldRule.required`.

        Returns:
            Optional[Tag]: Знайдений вузол або None для необовʼязкового фрагмента.

        Raises:
            MissingFragmentError: Обовʼязковий фрагмент відсутній.
        """
        node = self._find(field, root)
        if node is not None:
            return node
        selector = self._selector_for(field)
        must = FIELD_RULES[field].required if required is None else required
        if must:
            logger.warning("🕳️ Обовʼязковий фрагмент '%s' не знайдено (%s).", field, selector)
            raise MissingFragmentError(field, selector)
        self._degrade(field, selector, "fragment not found")
        return None

    def _degrade(self, field: str, selector: Optional[str], reason: str) -> None:
        """Фіксує деградацію поля в журналі та логах."""
        self._issues.append(ExtractionIssue(field=field, selector=selector, reason=reason))
        logger.debug("🪣 Поле '%s' деградовано: %s (%s).", field, reason, selector)

    @property
    def issues(self) -> Tuple[ExtractionIssue, ...]:
        return tuple(self._issues)


# ================================
# 📤 ЕКСПОРТ МОДУЛЯ
# ================================
__all__ = [
    "Selectors",
    "FieldRule",
    "FIELD_RULES",
    "TAG_GROUPS",
    "ExtractionIssue",
    "FragmentLocator",
    "_ConfigSnapshot",
    "_attr_to_str",
    "_text",
    "_has_class",
    "logger",
]
