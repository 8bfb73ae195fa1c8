# 🧠 product_page_parser/infrastructure/parsers/page_parser.py
"""
🧠 PageParser: сирий HTML → DOM → `PageDocument`.

🔹 Будує `BeautifulSoup` обраним HTML-парсером (`ParserInfraOptions.html_parser`).
🔹 Передає селектори та політику відгуків у `ProductPageExtractor`.
🔹 `parse_page()` повертає документ, `parse_page_with_report()` ще й деградовані поля.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4 import BeautifulSoup	# 🥣 DOM-дерево сторінки

# 🔠 Системні імпорти
import logging	# 🧾 Логування сценаріїв
from dataclasses import dataclass	# 🧱 Звіт парсингу
from typing import Optional, Tuple, Union	# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from product_page_parser.domain.products.entities import PageDocument
from product_page_parser.shared.utils.logger import LOG_NAME
from ._infra_options import DEFAULT_PARSER_INFRA_OPTIONS, ParserInfraOptions
from .extractors.base import ExtractionIssue, Selectors
from .product_page_extractor import ProductPageExtractor

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parser")

HtmlSource = Union[str, bytes]


@dataclass(frozen=True)
class ParseReport:
    """Документ разом із журналом деградованих полів."""

    document: PageDocument
    issues: Tuple[ExtractionIssue, ...] = ()

    @property
    def is_complete(self) -> bool:
        return not self.issues


class PageParser:
    """🧠 Фасад над `ProductPageExtractor` для сирого HTML."""

    def __init__(
        self,
        *,
        options: Optional[ParserInfraOptions] = None,
        selectors: Optional[Selectors] = None,
    ) -> None:
        self.options = options or DEFAULT_PARSER_INFRA_OPTIONS
        self.selectors = selectors

    def build_soup(self, html: HtmlSource) -> BeautifulSoup:
        return BeautifulSoup(html, self.options.html_parser)

    def make_extractor(self, soup: BeautifulSoup) -> ProductPageExtractor:
        return ProductPageExtractor(
            soup,
            selectors=self.selectors,
            require_reviews=self.options.require_reviews,
        )

    def parse_with_report(self, html: HtmlSource) -> ParseReport:
        """
        Парсить сторінку і повертає документ із журналом деградацій.

        Raises:
            ParsingError: Фатальний структурний збій (див. `FIELD_RULES`).
        """
        soup = self.build_soup(html)
        extractor = self.make_extractor(soup)
        document = extractor.extract_document()
        logger.debug(
            "✅ Сторінку розібрано: parser=%s suggested=%d reviews=%d issues=%d",
            self.options.html_parser,
            len(document.suggested),
            len(document.reviews),
            len(extractor.issues),
        )
        return ParseReport(document=document, issues=extractor.issues)

    def parse(self, html: HtmlSource) -> PageDocument:
        return self.parse_with_report(html).document


def parse_page(
    html: HtmlSource,
    *,
    options: Optional[ParserInfraOptions] = None,
    selectors: Optional[Selectors] = None,
) -> PageDocument:
    """📄 Розбирає одну сторінку товару в `PageDocument`."""
    return PageParser(options=options, selectors=selectors).parse(html)


def parse_page_with_report(
    html: HtmlSource,
    *,
    options: Optional[ParserInfraOptions] = None,
    selectors: Optional[Selectors] = None,
) -> ParseReport:
    return PageParser(options=options, selectors=selectors).parse_with_report(html)


__all__ = ["PageParser", "ParseReport", "parse_page", "parse_page_with_report"]
