# 📦 product_page_parser/infrastructure/parsers/extractors/product.py
"""
📦 ProductMixin: картка товару з контейнера `.product`.

🔹 Ідентифікатор (`data-id`), назва (`h1`), стан «вподобано», теги, характеристики.
🔹 Ціни, галерея та опис делегуються `PriceMixin`, `ImagesMixin`, `DescriptionMixin`.
🔹 Контейнер товару та його `data-id` обовʼязкові; решта деградує до дефолтів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, List

# 🧩 Внутрішні модулі проєкту
from product_page_parser.domain.products.entities import Product, TagSet
from product_page_parser.errors import MalformedFragmentError, MissingFragmentError

from .base import TAG_GROUPS, _attr_to_str, _has_class, _text, logger
from .description import DescriptionMixin
from .images import ImagesMixin
from .price import PriceMixin


class ProductMixin(PriceMixin, ImagesMixin, DescriptionMixin):
    """📦 Збирає `Product` з окремих фрагментів сторінки."""

    def extract_product_id(self) -> str:
        container = self._locate("product.id")
        assert container is not None
        product_id = _attr_to_str(container.get(self._S.PRODUCT_ID_ATTR))
        if product_id is None:
            selector = f"{self._S.PRODUCT_CONTAINER}[{self._S.PRODUCT_ID_ATTR}]"
            logger.warning("🕳️ Контейнер товару без ідентифікатора (%s).", selector)
            raise MissingFragmentError("product.id", selector)
        return product_id

    def extract_product_title(self) -> str:
        heading = self._locate("product.name")
        return _text(heading).strip()

    def is_liked(self) -> bool:
        """❤️ Кнопка «вподобати» з активним маркер-класом."""
        button = self._locate("product.isLiked")
        if button is None:
            return False
        return _has_class(button, self._S.LIKE_ACTIVE_CLASS)

    def extract_tags(self) -> TagSet:
        """
        🏷️ Розкладає дочірні елементи `.tags` за маркер-класами.

        Перший маркер, що збігся (у порядку `TAG_MARKERS`), визначає групу.
        Елементи без маркера відкидаються.
        Текст тегу обрізається (`" New "` → `"New"`), а не береться сирим `textContent`:
        відступи розмітки не є частиною назви тегу.
        """
        container = self._locate("product.tags")
        if container is None:
            return TagSet()

        groups: Dict[str, List[str]] = {name: [] for name in TAG_GROUPS}
        for child in container.find_all(True, recursive=False):
            group = next(
                (name for marker, name in self._S.TAG_MARKERS if _has_class(child, marker)),
                None,
            )
            if group is None:
                logger.debug("🏷️ Тег без маркера пропущено: %r", _text(child).strip())
                continue
            groups[group].append(_text(child).strip())

        return TagSet(
            category=tuple(groups["category"]),
            discount=tuple(groups["discount"]),
            label=tuple(groups["label"]),
        )

    def extract_properties(self) -> Dict[str, str]:
        """📋 Пари «ключ → значення» з `.properties li` (порядок документа)."""
        container = self._locate("product.properties")
        if container is None:
            return {}

        result: Dict[str, str] = {}
        for item in container.select(self._S.PROPERTY_ITEM):
            spans = item.select(self._S.PROPERTY_PART)
            if len(spans) < 2:
                raise MalformedFragmentError(
                    "product.properties",
                    f"{self._S.PROPERTIES} {self._S.PROPERTY_ITEM}",
                    details=f"expected two '{self._S.PROPERTY_PART}' parts, got {len(spans)}",
                )
            result[_text(spans[0]).strip()] = _text(spans[1]).strip()
        return result

    def extract_product(self) -> Product:
        product_id = self.extract_product_id()
        container = self._find("product.id")
        quote = self.extract_price_quote()

        product = Product(
            id=product_id,
            name=self.extract_product_title(),
            images=tuple(self.extract_product_images(container)),
            is_liked=self.is_liked(),
            tags=self.extract_tags(),
            price=quote.discounted,
            old_price=quote.base,
            discount=quote.discount,
            discount_percent=quote.discount_percent,
            currency=quote.currency,
            properties=self.extract_properties(),
            description=self.extract_full_description(),
        )
        logger.info("📦 Товар %s: %s", product.id, product.name)
        return product


__all__ = ["ProductMixin"]
