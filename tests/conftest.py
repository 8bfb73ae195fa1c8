# tests/conftest.py
import os
import sys
from pathlib import Path

import pytest

# 1) Гасимо автопідхоплення сторонніх плагінів
os.environ.setdefault("PYTEST_DISABLE_PLUGIN_AUTOLOAD", "1")

# 2) Додаємо src у sys.path, щоб працював імпорт "product_page_parser.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from product_page_parser.config.config_service import CONFIG_PATH_ENV, ConfigService  # noqa: E402
from product_page_parser.infrastructure.parsers.extractors.base import _ConfigSnapshot  # noqa: E402

FIXTURES_DIR = ROOT / "tests" / "parsers" / "fixtures"


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Кожен тест бачить лише пакетний config.yaml."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    monkeypatch.delenv("PARSER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PARSER_LOG_FILE", raising=False)
    ConfigService.reset()
    _ConfigSnapshot.reset()
    yield
    ConfigService.reset()
    _ConfigSnapshot.reset()


@pytest.fixture
def product_page_html() -> str:
    return (FIXTURES_DIR / "product_page.html").read_text(encoding="utf-8")
