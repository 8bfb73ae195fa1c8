# 🧾 product_page_parser/infrastructure/parsers/product_page_extractor.py
"""
🧾 ProductPageExtractor: композиція mixin-екстракторів для однієї сторінки товару.

🔹 Збирає `PageDocument` (meta → product → suggested → reviews) за один прохід.
🔹 Не змінює DOM-дерево; документ не тримає посилань на вузли.
🔹 Деградовані поля накопичуються в `issues` (канал діагностики).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4 import BeautifulSoup	# 🥣 DOM-дерево сторінки

# 🔠 Системні імпорти
import logging	# 🧾 Логування сценаріїв
from typing import List, Optional	# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from product_page_parser.config.config_service import ConfigService	# ⚙️ Політика відгуків за замовчуванням
from product_page_parser.domain.products.entities import PageDocument
from product_page_parser.shared.utils.logger import LOG_NAME	# 🏷️ Імʼя базового логера
from .extractors.base import ExtractionIssue, Selectors, _ConfigSnapshot	# 🧱 Контракт сторінки
from .extractors.meta import MetaMixin	# 🧾 Метадані
from .extractors.product import ProductMixin	# 📦 Товар
from .extractors.reviews import ReviewsMixin	# ⭐ Відгуки
from .extractors.suggested import SuggestedMixin	# 🛍️ Рекомендації

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parser.page")


# ================================
# 🏛️ ОСНОВНИЙ ЕКСТРАКТОР
# ================================
class ProductPageExtractor(MetaMixin, ProductMixin, SuggestedMixin, ReviewsMixin):
    """🏛️ Оркеструє mixin-и і віддає незмінний `PageDocument`."""

    def __init__(
        self,
        soup: BeautifulSoup,
        *,
        selectors: Optional[Selectors] = None,
        require_reviews: Optional[bool] = None,
    ) -> None:
        """
        Args:
            soup: Готове DOM-дерево сторінки.
            selectors: Структурний контракт; None → селектори з конфігурації.
            require_reviews: Чи фатальний відсутній регіон відгуків;
                None → `parser.reviews.required` з ConfigService.
        """
        self.soup = soup
        self._S = selectors or _ConfigSnapshot.selectors()
        self._issues: List[ExtractionIssue] = []
        if require_reviews is None:
            require_reviews = ConfigService().get("parser.reviews.required", True, cast=bool)
        self._require_reviews = require_reviews
        logger.debug("🧾 ProductPageExtractor ініціалізовано (require_reviews=%s).", require_reviews)

    def extract_document(self) -> PageDocument:
        """
        📄 Повний документ сторінки.

        Raises:
            ParsingError: Відсутній обовʼязковий фрагмент або некоректна ціна.
        """
        self._issues.clear()
        document = PageDocument(
            meta=self.extract_meta(),
            product=self.extract_product(),
            suggested=tuple(self.extract_suggested_products()),
            reviews=tuple(self.extract_review_list()),
        )
        if self._issues:
            logger.info("🪣 Документ зібрано з %d деградованими полями.", len(self._issues))
        return document


__all__ = ["ProductPageExtractor"]
