# 💰 product_page_parser/infrastructure/parsers/extractors/price.py
"""
💰 PriceMixin: подвійна ціна товару («зі знижкою» + «базова»).

🔹 Фрагмент `.price` містить два токени через пробіл: `$80 $100`.
🔹 Перший токен: ціна зі знижкою, другий: базова ціна; кожен починається символом валюти.
🔹 Нечисловий токен → `PriceFormatError` (помилка не ковтається, зупиняє екстракцію).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from product_page_parser.domain.products.entities import Currency, Discount
from product_page_parser.errors import MalformedFragmentError, MissingFragmentError, PriceFormatError
from product_page_parser.shared.utils.text import currency_from_symbol, format_percent

from .base import FragmentLocator, _text, logger

_HUNDRED = Decimal("100")
_PRICE_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
ZERO_PERCENT = "0%"


# ================================
# 💵 VALUE OBJECT ЦІНИ
# ================================
@dataclass(frozen=True)
class PriceQuote:
    """Розібрана пара цін з похідними значеннями."""

    discounted: Decimal
    base: Decimal
    currency: Optional[Currency]

    @property
    def discount(self) -> Discount:
        if self.base == self.discounted:
            return Discount.zero()
        return Discount.between(self.base, self.discounted)

    @property
    def discount_percent(self) -> str:
        """
        `100 - discounted * 100 / base`, відформатоване через `format_percent`.

        Рівні ціни → `"0%"` без ділення. Базова ціна 0 при ненульовій різниці
        теж дає `"0%"`: відсоток від нуля не визначений.
        """
        if self.base - self.discounted == 0:
            return ZERO_PERCENT
        if self.base == 0:
            logger.warning("⚠️ Базова ціна 0 при ціні зі знижкою %s: відсоток знижки → 0%%.", self.discounted)
            return ZERO_PERCENT
        percent = _HUNDRED - (self.discounted * _HUNDRED / self.base)
        return format_percent(percent)


# ================================
# 💰 МІКСИН ЦІН
# ================================
class PriceMixin(FragmentLocator):
    """💰 Price engine: токени, базова/знижена ціна, знижка, відсоток, валюта."""

    def parse_price_tokens(self) -> List[str]:
        """Токени фрагмента ціни; `[]`, якщо фрагмента немає (це «немає даних про ціну»)."""
        fragment = self._find("product.price")
        if fragment is None:
            logger.debug("💰 Фрагмент ціни відсутній.")
            return []
        return [token.strip() for token in _text(fragment).split() if token.strip()]

    def _price_pair(self) -> Tuple[str, str]:
        tokens = self.parse_price_tokens()
        selector = self._selector_for("product.price")
        if not tokens:
            logger.warning("🕳️ Немає даних про ціну (%s).", selector)
            raise MissingFragmentError("product.price", selector)
        if len(tokens) < 2:
            raise MalformedFragmentError(
                "product.price",
                selector,
                details=f"expected two price tokens, got {tokens!r}",
            )
        return tokens[0], tokens[1]

    def _parse_price_token(self, token: str, field: str) -> Decimal:
        """Відкидає перший символ (валюта) і парсить решту як Decimal (лише ASCII-цифри)."""
        raw = token[1:]
        if not _PRICE_NUMBER.fullmatch(raw):
            raise PriceFormatError(token, field=field, selector=self._selector_for("product.price"))
        return Decimal(raw)

    def extract_discounted_price(self) -> Decimal:
        discounted_raw, _ = self._price_pair()
        return self._parse_price_token(discounted_raw, "product.price")

    def extract_base_price(self) -> Decimal:
        _, base_raw = self._price_pair()
        return self._parse_price_token(base_raw, "product.oldPrice")

    def extract_currency(self) -> Optional[Currency]:
        discounted_raw, _ = self._price_pair()
        return currency_from_symbol(discounted_raw[:1])

    def extract_price_quote(self) -> PriceQuote:
        """Зчитує фрагмент один раз і повертає `PriceQuote`."""
        discounted_raw, base_raw = self._price_pair()
        quote = PriceQuote(
            discounted=self._parse_price_token(discounted_raw, "product.price"),
            base=self._parse_price_token(base_raw, "product.oldPrice"),
            currency=currency_from_symbol(discounted_raw[:1]),
        )
        if quote.base == 0 and quote.discounted != 0:
            self._degrade("product.discountPercent", self._selector_for("product.price"), "base price is zero")
        logger.debug(
            "💰 Ціна: %s (база %s, валюта %s)",
            quote.discounted,
            quote.base,
            quote.currency.value if quote.currency else None,
        )
        return quote

    def extract_discount(self) -> Discount:
        return self.extract_price_quote().discount

    def extract_discount_percent(self) -> str:
        return self.extract_price_quote().discount_percent
