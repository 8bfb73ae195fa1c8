# 🔤 product_page_parser/shared/utils/text.py
"""
🔤 Нормалізатори тексту та значень, спільні для всіх екстракторів.

🔹 `normalize_list` розбиває рядок за роздільником, прибирає пробіли та порожні елементи.
🔹 `currency_from_symbol` мапить символ валюти на `Currency` (невідомий → None).
🔹 `format_percent` рендерить відсоток: ціле число без дробу, інакше рівно 2 знаки.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation	# 💰 Точна арифметика
from typing import List, Optional, Union			# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from product_page_parser.domain.products.entities import Currency	# 💱 Підтримувані валюти

# ================================
# 📦 КОНСТАНТИ МОДУЛЯ
# ================================
TITLE_SEPARATOR = "—"							# ✂️ Em-dash між назвою товару та магазину

_CURRENCY_BY_SYMBOL = {
    "$": Currency.USD,
    "€": Currency.EUR,
    "₽": Currency.RUB,
}	# 💱 Фіксована таблиця символів

_PERCENT_QUANTUM = Decimal("0.01")


# ================================
# 🧹 РЯДКИ ТА СПИСКИ
# ================================
def normalize_list(raw: Optional[str], separator: str = ",") -> List[str]:
    """
    Розбиває рядок на елементи, обрізає пробіли та відкидає порожні.

    >>> normalize_list(" a, ,b ,")
    ['a', 'b']
    """
    if not raw:
        return []
    return [item.strip() for item in raw.split(separator) if item.strip()]


def split_title(raw: Optional[str], separator: str = TITLE_SEPARATOR) -> str:
    """Повертає першу частину заголовка до em-dash (`"Widget — Acme"` → `"Widget"`)."""
    return (raw or "").split(separator)[0].strip()


# ================================
# 💱 ВАЛЮТИ
# ================================
def currency_from_symbol(symbol: Optional[str]) -> Optional[Currency]:
    """Мапить символ валюти на `Currency`; невідомий символ → None (не помилка)."""
    if not symbol:
        return None
    return _CURRENCY_BY_SYMBOL.get(symbol.strip())


# ================================
# 📊 ВІДСОТКИ
# ================================
def format_percent(value: Union[Decimal, int, float, str]) -> str:
    """
    Форматує відсоток: без дробової частини → ціле, інакше рівно 2 знаки; завжди з `%`.

    >>> format_percent(Decimal("20"))
    '20%'
    >>> format_percent(Decimal("33.3333"))
    '33.33%'
    """
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {value!r}") from exc
    if not number.is_finite():
        raise ValueError(f"Percent must be finite, got: {value!r}")
    if number == number.to_integral_value():
        return f"{int(number)}%"
    return f"{number.quantize(_PERCENT_QUANTUM, rounding=ROUND_HALF_UP)}%"


__all__ = [
    "TITLE_SEPARATOR",
    "normalize_list",
    "split_title",
    "currency_from_symbol",
    "format_percent",
]
