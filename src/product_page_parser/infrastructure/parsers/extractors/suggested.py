# 🛍️ product_page_parser/infrastructure/parsers/extractors/suggested.py
"""
🛍️ SuggestedMixin: картки рекомендованих товарів з `.suggested`.

🔹 Кожна картка `article` має `h3` (назва), `p` (опис), `img[src]` та `b` (ціна).
🔹 Картка з відсутнім або порожнім елементом тихо відкидається (лише debug-лог).
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import List, Optional

# 🧩 Внутрішні модулі проєкту
from product_page_parser.domain.products.entities import SuggestedItem
from product_page_parser.shared.utils.text import currency_from_symbol

from .base import FragmentLocator, Tag, _attr_to_str, _text, logger


class SuggestedMixin(FragmentLocator):
    """🛍️ Cross-sell картки."""

    def _read_suggested_card(self, card: Tag) -> Optional[SuggestedItem]:
        name_node = card.select_one(self._S.SUGGESTED_NAME)
        description_node = card.select_one(self._S.SUGGESTED_DESCRIPTION)
        image_node = card.select_one(self._S.SUGGESTED_IMAGE)
        price_node = card.select_one(self._S.SUGGESTED_PRICE)

        name = _text(name_node).strip()
        description = _text(description_node).strip()
        image = _attr_to_str(image_node.get("src")) if image_node is not None else None
        price = _text(price_node).strip()

        if not name or not description or not image or not price:
            logger.debug("🛍️ Неповну картку рекомендації пропущено: %r", name)
            return None

        return SuggestedItem(
            name=name,
            description=description,
            image=image,
            price=price[1:].strip(),
            currency=currency_from_symbol(price[:1]),
        )

    def extract_suggested_products(self) -> List[SuggestedItem]:
        region = self._locate("suggested")
        if region is None:
            return []

        items: List[SuggestedItem] = []
        for card in region.select(self._S.SUGGESTED_CARD):
            item = self._read_suggested_card(card)
            if item is not None:
                items.append(item)
        logger.debug("🛍️ Рекомендацій: %d", len(items))
        return items


__all__ = ["SuggestedMixin"]
