# 🧾 product_page_parser/infrastructure/parsers/extractors/meta.py
"""
🧾 MetaMixin: метадані сторінки (заголовок, опис, мова, ключові слова, Open Graph).

🔹 Заголовок береться з `og:title` і обрізається до першого em-dash; він обовʼязковий.
🔹 Опис та ключові слова опційні: відсутність → порожній рядок / порожній список.
🔹 Open Graph збирається в мапу «суфікс після останньої двокрапки → content».
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, List

# 🧩 Внутрішні модулі проєкту
from product_page_parser.domain.products.entities import PageMeta
from product_page_parser.errors import MissingFragmentError
from product_page_parser.shared.utils.text import normalize_list, split_title

from .base import FragmentLocator, Tag, _attr_to_str, logger


class MetaMixin(FragmentLocator):
    """📄 Витягує `PageMeta` з head-секції документа."""

    def extract_page_title(self) -> str:
        """🏷️ Заголовок з `og:title` до першого em-dash (обовʼязковий)."""
        meta = self._locate("meta.title")
        assert meta is not None
        content = _attr_to_str(meta.get("content")) or ""
        title = split_title(content, self._S.TITLE_SEPARATOR)
        logger.debug("🏷️ Заголовок сторінки: %s", title)
        return title

    def extract_page_description(self) -> str:
        meta = self._locate("meta.description")
        if meta is None:
            return ""
        return (_attr_to_str(meta.get("content")) or "").strip()

    def extract_page_keywords(self) -> List[str]:
        """🔑 Ключові слова через кому; порожні елементи відкидаються."""
        meta = self._locate("meta.keywords")
        if meta is None:
            return []
        return normalize_list(_attr_to_str(meta.get("content")), ",")

    def extract_page_language(self) -> str:
        """🌍 Атрибут `lang` кореневого елемента (обовʼязковий)."""
        root = self._locate("meta.language")
        assert root is not None
        lang = _attr_to_str(root.get(self._S.LANGUAGE_ATTR))
        if lang is None:
            selector = f"{self._S.DOCUMENT_ROOT}[{self._S.LANGUAGE_ATTR}]"
            logger.warning("🕳️ Кореневий елемент без атрибута мови (%s).", selector)
            raise MissingFragmentError("meta.language", selector)
        return lang.strip()

    def extract_opengraph(self) -> Dict[str, str]:
        """
        🌐 Збирає Open Graph властивості.

        Ключ: частина `property` після останньої двокрапки (`og:image:width` → `width`).
        Для `title` застосовується та ж em-dash-обрізка, що й для заголовка сторінки.
        Порожні ключі або значення пропускаються; дублікати перезаписуються в порядку документа.
        """
        result: Dict[str, str] = {}
        for meta in self.soup.select(self._S.OPENGRAPH_META):
            if not isinstance(meta, Tag):
                continue
            key = (_attr_to_str(meta.get("property")) or "").split(":")[-1]
            content = _attr_to_str(meta.get("content")) or ""
            if key == "title":
                content = split_title(content, self._S.TITLE_SEPARATOR)
            if key and content:
                result[key] = content
        logger.debug("🌐 Open Graph: %d властивостей.", len(result))
        return result

    def extract_meta(self) -> PageMeta:
        return PageMeta(
            title=self.extract_page_title(),
            description=self.extract_page_description(),
            language=self.extract_page_language(),
            keywords=tuple(self.extract_page_keywords()),
            opengraph=self.extract_opengraph(),
        )
