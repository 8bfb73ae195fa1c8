# 📝 product_page_parser/infrastructure/parsers/extractors/description.py
"""
📝 DescriptionMixin: повний опис товару у вигляді очищеної HTML-розмітки.

🔹 Очищення чисте: працює з глибокою копією піддерева, живе дерево не змінюється.
🔹 Кожен нащадок втрачає всі атрибути; теги та текст зберігаються.
🔹 Void-елементи серіалізуються в HTML-формі (`<br>`, `<img>`), як `innerHTML` у браузері.
🔹 Повторне очищення вже чистої розмітки дає той самий результат.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4.dammit import EntitySubstitution	# 🔤 Екранування &, <, > у тексті
from bs4.formatter import HTMLFormatter	# 🧾 Форматер без `/` у void-елементах

# 🔠 Системні імпорти
import copy

# 🧩 Внутрішні модулі проєкту
from .base import FragmentLocator, Tag, logger

INNER_HTML_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def sanitize_fragment(fragment: Tag) -> str:
    """
    Повертає внутрішню розмітку `fragment` без атрибутів нащадків.

    Атрибути самого кореня на результат не впливають: повертається лише його вміст.
    """
    clone = copy.copy(fragment)
    stripped = 0
    for element in clone.find_all(True):
        if element.attrs:
            stripped += len(element.attrs)
            element.attrs = {}
    if stripped:
        logger.debug("🧽 Видалено %d атрибутів з опису.", stripped)
    return clone.decode_contents(formatter=INNER_HTML_FORMATTER).strip()


class DescriptionMixin(FragmentLocator):
    """📝 Опис товару з `.description`."""

    def extract_full_description(self) -> str:
        region = self._locate("product.description")
        if region is None:
            return ""
        return sanitize_fragment(region)


__all__ = ["DescriptionMixin", "sanitize_fragment"]
