# ⚙️ product_page_parser/config/__init__.py
"""
⚙️ Пакет Config: централізована конфігурація парсера.

Відповідає за завантаження налаштувань (.env, config.yaml, YAML-оверрайди).
"""

from .config_service import CONFIG_PATH_ENV, ConfigService

__all__ = [
    "CONFIG_PATH_ENV",
    "ConfigService",
]
