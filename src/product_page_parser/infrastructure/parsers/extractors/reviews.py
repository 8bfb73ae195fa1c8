# ⭐ product_page_parser/infrastructure/parsers/extractors/reviews.py
"""
⭐ ReviewsMixin: відгуки покупців з `.reviews article`.

🔹 Рейтинг = кількість дочірніх елементів `.rating` з класом `filled`.
🔹 Блок `.author` дає аватар, імʼя та дату; без нього `author=None`, `date=""`.
🔹 Дата нормалізується: кожен `/` → `.`.
🔹 Відсутній регіон відгуків фатальний, якщо `_require_reviews` не вимкнено.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import List, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from product_page_parser.domain.products.entities import Review, ReviewAuthor

from .base import FragmentLocator, Tag, _attr_to_str, _has_class, _text, logger


def normalize_review_date(raw: str) -> str:
    """`12/03/2024` → `12.03.2024`."""
    return raw.replace("/", ".").strip()


class ReviewsMixin(FragmentLocator):
    """⭐ Список відгуків."""

    _require_reviews: bool = True

    def extract_rating(self, article: Tag) -> int:
        rating = self._locate("review.rating", article)
        if rating is None:
            return 0
        return sum(
            1 for star in rating.find_all(True, recursive=False)
            if _has_class(star, self._S.RATING_FILLED_CLASS)
        )

    def extract_review_author(self, article: Tag) -> Tuple[Optional[ReviewAuthor], str]:
        """
        👤 Автор відгуку та сира дата з блоку автора.

        Returns:
            Tuple[Optional[ReviewAuthor], str]: `(None, "")`, якщо блоку автора немає.
        """
        block = self._locate("review.author", article)
        if block is None:
            return None, ""

        avatar_node = self._locate("review.author.avatar", block)
        name_node = self._locate("review.author.name", block)
        date_node = self._locate("review.date", block)

        avatar = (_attr_to_str(avatar_node.get("src")) or "") if avatar_node is not None else ""
        author = ReviewAuthor(avatar=avatar.strip(), name=_text(name_node).strip())
        return author, normalize_review_date(_text(date_node))

    def _read_review(self, article: Tag) -> Review:
        author, date = self.extract_review_author(article)
        return Review(
            rating=self.extract_rating(article),
            title=_text(self._locate("review.title", article)).strip(),
            description=_text(self._locate("review.description", article)).strip(),
            author=author,
            date=date,
        )

    def extract_review_list(self) -> List[Review]:
        region = self._locate("reviews", required=self._require_reviews)
        if region is None:
            return []

        reviews = [
            self._read_review(article)
            for article in region.select(self._S.REVIEW_ARTICLE)
        ]
        logger.debug("⭐ Відгуків: %d", len(reviews))
        return reviews


__all__ = ["ReviewsMixin", "normalize_review_date"]
