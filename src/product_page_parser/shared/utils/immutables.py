# 🧊 product_page_parser/shared/utils/immutables.py
"""
🧊 Утиліти для «заморожених» структур вихідного документа.

🔹 Конвертує словники, списки та набори у їхні незмінні аналоги.
🔹 `thaw` робить зворотне перетворення для серіалізації (dict/list).
"""

from __future__ import annotations

# 🔠 Системні імпорти
from collections.abc import Iterable, Mapping            # 🧰 Перевірки типів колекцій
from decimal import Decimal                              # 💵 Підтримка грошових значень
from enum import Enum                                    # 🏷️ Перерахування
from types import MappingProxyType                       # 🔒 Незмінна обгортка над dict
from typing import Any                                   # 🧰 Загальний тип для даних

# ================================
# 🧾 АЛІАСИ
# ================================
FrozenMapping = MappingProxyType                         # 🔄 Псевдонім для читаємості


# ================================
# ❄️ ЗАМОРОЖУВАЧ СТРУКТУР
# ================================
def freeze(obj: Any) -> Any:
    """Рекурсивно перетворює колекції на незмінні аналоги."""
    if obj is None or isinstance(
        obj,
        (str, bytes, int, float, bool, Decimal, Enum),
    ):
        return obj
    if isinstance(obj, Mapping):   # 🧭 Словники → MappingProxyType (порядок ключів зберігається)
        return MappingProxyType({key: freeze(value) for key, value in obj.items()})
    if isinstance(obj, set):
        return frozenset(freeze(value) for value in obj)
    if isinstance(obj, (list, tuple)) or _is_iterable_but_not_str(obj):
        try:
            return tuple(freeze(value) for value in obj)
        except TypeError:                                  # ⚠️ Одноразово-ітеровані обʼєкти
            return obj
    return obj


def thaw(obj: Any) -> Any:
    """Повертає звичайні dict/list замість заморожених колекцій (для JSON)."""
    if isinstance(obj, Mapping):
        return {key: thaw(value) for key, value in obj.items()}
    if isinstance(obj, (tuple, list, frozenset)):
        return [thaw(value) for value in obj]
    return obj


def _is_iterable_but_not_str(obj: Any) -> bool:
    return isinstance(obj, Iterable) and not isinstance(obj, (str, bytes))
