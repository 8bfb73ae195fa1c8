# 🖼️ product_page_parser/infrastructure/parsers/extractors/images.py
"""
🖼️ ImagesMixin: галерея товару з навігаційного блоку `.product nav`.

🔹 `preview` ← `src` (відсутній → ""), `full` ← `data-src`, `alt` ← `alt`.
🔹 Порядок зображень = порядок у документі; дублікати не відкидаються.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import List, Optional

# 🧩 Внутрішні модулі проєкту
from product_page_parser.domain.products.entities import ImageRef

from .base import FragmentLocator, Tag, _attr_to_str, logger


class ImagesMixin(FragmentLocator):
    """🖼️ Збирає `ImageRef` з галереї товару."""

    def extract_product_images(self, container: Optional[Tag] = None) -> List[ImageRef]:
        """
        Зображення з `nav` всередині контейнера товару.

        Args:
            container: Вузол `.product`; якщо None, шукається в документі.

        Returns:
            List[ImageRef]: Порожній список, якщо контейнера чи `nav` немає.
        """
        if container is None:
            container = self._find("product.id")
        if container is None:
            self._degrade("product.images", self._selector_for("product.id"), "product container not found")
            return []

        nav = self._locate("product.images", container)
        if nav is None:
            return []

        images: List[ImageRef] = []
        for img in nav.select(self._S.PRODUCT_IMAGE):
            if not isinstance(img, Tag):
                continue
            images.append(
                ImageRef(
                    preview=_attr_to_str(img.get("src")) or "",
                    full=_attr_to_str(img.get("data-src")),
                    alt=_attr_to_str(img.get("alt")),
                )
            )
        logger.debug("🖼️ Знайдено %d зображень товару.", len(images))
        return images
