# ⚙️ config_service.py
"""
⚙️ config_service.py: сервіс доступу до статичної конфігурації парсера.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з .env, пакетного config.yaml та (опційно) YAML-файлу
  зі змінної `PRODUCT_PAGE_PARSER_CONFIG`.
- Надає єдиний метод .get() для доступу до будь-якого параметра.
- Працює як Singleton.
"""

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import logging                              # 🧾 Логування
import os                                   # 📁 Доступ до змінних середовища
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Callable, Dict, Optional  # 🧩 Типізація

logger = logging.getLogger("product_page_parser.config")

CONFIG_PATH_ENV = "PRODUCT_PAGE_PARSER_CONFIG"   # 🗂️ ENV зі шляхом до YAML-оверрайдів
PACKAGED_CONFIG = Path(__file__).parent / "config.yaml"


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних конфігураційних параметрів парсера.
    Працює як Singleton: конфігурація зчитується лише один раз.
    """

    _instance = None                          # 🧩 Singleton-екземпляр
    _config: Dict[str, Any] = {}              # 📦 Обʼєднана конфігурація зі всіх джерел

    def __new__(cls):
        # ✅ Патерн Singleton: створюємо лише один екземпляр
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = {}
            cls._instance._load_all_configs()
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """♻️ Скидає singleton (наступний виклик перечитає всі джерела)."""
        cls._instance = None

    def _load_all_configs(self) -> None:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет (пізніше перекриває раніше): config.yaml → $PRODUCT_PAGE_PARSER_CONFIG → .env
        """
        # --- 1. Пакетний YAML ---
        self._merge_yaml(PACKAGED_CONFIG)

        # --- 2. YAML-оверрайди користувача ---
        load_dotenv()
        override_path = os.getenv(CONFIG_PATH_ENV)
        if override_path:
            self._merge_yaml(Path(override_path))

        # --- 3. .env змінні ---
        env_vars = {
            "logging.level": os.getenv("PARSER_LOG_LEVEL"),
            "logging.file": os.getenv("PARSER_LOG_FILE"),
        }
        env_vars = {key: value for key, value in env_vars.items() if value}
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.debug(f"🔍 Обʼєднаний словник конфігурації: {self._config}")

    def _merge_yaml(self, path: Path) -> None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning(f"⚠️ Не вдалося завантажити {path}: {e}")
            return
        if not isinstance(data, dict):
            logger.warning("⚠️ %s не містить словника верхнього рівня, пропускаємо", path)
            return
        self._deep_update(self._config, data)
        logger.debug("📘 Завантажено YAML-конфіг %s", path)

    def get(self, key: str, default: Any = None, cast: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'parser.reviews.required').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.
            cast: Опційне приведення типу знайденого значення.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        if value is None:
            return default
        if cast is not None:
            try:
                return cast(value)
            except (TypeError, ValueError):
                logger.warning("⚠️ Ключ '%s': неможливо привести %r, повертаємо default", key, value)
                return default
        return value

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================

    def _unflatten_dict(self, d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'logging.level' → {'logging': {'level': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split('.')
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict, overrides: Dict) -> None:
        """
        🔁 Рекурсивно обʼєднує два словники.
        Якщо значення є словником, обʼєднує його глибоко.
        """
        for key, value in overrides.items():
            if (
                isinstance(value, dict) and
                key in source and
                isinstance(source[key], dict)
            ):
                self._deep_update(source[key], value)
            else:
                source[key] = value
