# 🧰 product_page_parser/shared/utils/__init__.py
"""
🧰 Пакет спільних утиліт: логування та незмінні структури.

🔹 Нормалізатори тексту живуть у `shared.utils.text` і імпортуються напряму
   (вони залежать від доменного `Currency`, тож не тягнемо їх у пакет).
"""

from __future__ import annotations

# 🔠 Логування
from .logger import (
    LOG_NAME,
    get_logger,
    init_logging,
    init_logging_from_config,
)

# 🧊 Незмінні структури
from .immutables import FrozenMapping, freeze, thaw

__all__ = [
    # logging
    "LOG_NAME",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
    # immutables
    "FrozenMapping",
    "freeze",
    "thaw",
]
