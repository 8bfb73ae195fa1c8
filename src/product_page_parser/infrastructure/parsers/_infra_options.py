# 🧾 product_page_parser/infrastructure/parsers/_infra_options.py
"""
🧾 Налаштування інфраструктурного шару парсера.

🔹 Визначає іммутабельні опції (HTML-парсер, політика відгуків, рівень логів).
🔹 Підтримує зчитування з ENV (префікс `PARSER_`) та мердж словників.
🔹 Експортує дефолтний обʼєкт `DEFAULT_PARSER_INFRA_OPTIONS`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging	# 🧾 Логування ініціалізації та валідації
import os	# 🌱 Зчитування ENV
from dataclasses import dataclass	# 🧱 Dataclass для опцій
from typing import Any, Dict, Literal, Mapping, Optional	# 🧰 Типи для статичного аналізу

# 🧩 Внутрішні модулі проєкту
from product_page_parser.shared.utils.logger import LOG_NAME	# 🏷️ Базове імʼя логера

# ================================
# 🧾 ЛОГЕР ТА КОНСТАНТИ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parsers.infra_options")

_BOOL_TRUE = {"1", "true", "yes", "on", "y", "t"}	# ✅ Булеві true-представлення
_BOOL_FALSE = {"0", "false", "no", "off", "n", "f"}	# ❌ Булеві false-представлення

_LOG_LEVELS: Dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}	# 🎚️ Підтримувані рівні логів

_ALLOWED_PARSERS = {"lxml", "html.parser", "html5lib"}

_KEYS = ("html_parser", "require_reviews", "log_level")


# ================================
# 🛠️ ХЕЛПЕРИ КОНВЕРСІЙ
# ================================
def _parse_bool(val: Optional[str], default: Optional[bool]) -> Optional[bool]:
    """🔀 Перетворює ENV-рядок у bool з fallback."""
    if val is None:
        return default
    cleaned = val.strip().lower()
    if cleaned in _BOOL_TRUE:
        return True
    if cleaned in _BOOL_FALSE:
        return False
    logger.warning("⚠️ Неможливо перетворити '%s' у bool → fallback=%s.", val, default)
    return default


# ================================
# 🧱 МОДЕЛЬ ОПЦІЙ
# ================================
@dataclass(frozen=True, slots=True)
class ParserInfraOptions:
    """🧱 Іммутабельні параметри парсера сторінки.

    `require_reviews=None` означає «взяти `parser.reviews.required` з ConfigService».
    """

    html_parser: Literal["lxml", "html.parser", "html5lib"] = "lxml"	# 🥣 Дефолтний парсер DOM
    require_reviews: Optional[bool] = None	# ⭐ Відсутній блок відгуків: фатально чи порожньо
    log_level: Optional[str] = None	# 🎚️ Рівень логів пакета; застосовує лише CLI під час init_logging

    def __post_init__(self) -> None:
        """🛡️ Валідує інваріанти одразу після створення."""
        if self.html_parser not in _ALLOWED_PARSERS:
            raise ValueError(f"html_parser must be one of {_ALLOWED_PARSERS}, got: {self.html_parser!r}")
        if self.require_reviews is not None and not isinstance(self.require_reviews, bool):
            raise ValueError(f"require_reviews must be bool or None, got: {self.require_reviews!r}")
        if self.log_level is not None and self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {set(_LOG_LEVELS)}, got: {self.log_level!r}")

    # ================================
    # 🧱 КОНСТРУКТОРИ
    # ================================
    @classmethod
    def default(cls) -> "ParserInfraOptions":
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "PARSER_") -> "ParserInfraOptions":
        """🌱 Будує опції з ENV (невідомі значення ігноруємо)."""
        defaults = cls.default()

        html_parser = os.getenv(f"{prefix}HTML_PARSER", defaults.html_parser)
        if html_parser not in _ALLOWED_PARSERS:
            logger.warning("⚠️ Невідомий HTML-парсер '%s' → використовуємо '%s'", html_parser, defaults.html_parser)
            html_parser = defaults.html_parser
        require_reviews = _parse_bool(os.getenv(f"{prefix}REQUIRE_REVIEWS"), defaults.require_reviews)
        log_level = os.getenv(f"{prefix}LOG_LEVEL", defaults.log_level)
        if log_level is not None and log_level.upper() not in _LOG_LEVELS:
            logger.warning("⚠️ Невідомий рівень логів '%s' → ігноруємо", log_level)
            log_level = defaults.log_level

        logger.debug("🌱 ParserInfraOptions зібрано з ENV (prefix=%s).", prefix)
        return cls(
            html_parser=html_parser,  # type: ignore[arg-type]
            require_reviews=require_reviews,
            log_level=log_level,
        )

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ParserInfraOptions":
        """🧾 Складання опцій із словника (зайві ключі ігноруються)."""
        if not data:
            return cls.default()
        kwargs: Dict[str, Any] = {key: data[key] for key in _KEYS if key in data}
        return cls(**kwargs)

    # ================================
    # 🧰 УТИЛІТИ ЕКЗЕМПЛЯРА
    # ================================
    def merge(self, **overrides: Any) -> "ParserInfraOptions":
        """🔀 Повертає новий екземпляр із підмінними полями (immutability)."""
        base = self.to_kwargs()
        base.update({key: value for key, value in overrides.items() if value is not None})
        return ParserInfraOptions.from_dict(base)

    def to_kwargs(self) -> Dict[str, Any]:
        return {
            "html_parser": self.html_parser,
            "require_reviews": self.require_reviews,
            "log_level": self.log_level,
        }


# ================================
# 📦 ГЛОБАЛЬНИЙ ДЕФОЛТ
# ================================
DEFAULT_PARSER_INFRA_OPTIONS = ParserInfraOptions.default()

__all__ = ["ParserInfraOptions", "DEFAULT_PARSER_INFRA_OPTIONS"]
