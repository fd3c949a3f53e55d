"""
Пакет GS1-128 Barcode
=====================

Кодирование строк идентификаторов GS1 "(AI)значение" в символ GS1-128
(Code 128, набор C с FNC1 и переходом в набор B) и растровый рендеринг.

Этот пакет предоставляет:
    - Разбор сегментов "(01)...(10)..." с проверкой синтаксиса
    - Кодер символов: набор C/B, FNC1 после полей переменной длины
    - Контрольную сумму mod 103 и проверенную таблицу шаблонов 0..106
    - Неизменяемую модель Barcode (последовательность модулей)
    - Рендеринг через Pillow: PNG, base64, data URI
    - Интерфейс командной строки (python -m gs1barcode)

Пример базового использования:
    >>> from gs1barcode import Gs1128Generator, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> gen = Gs1128Generator("(01)12345678901231(10)123")
    >>> barcode = gen.encode()
    >>> barcode.module_count()
    >>> png = gen.render_bytes(width=600, height=150)
    >>>
    >>> logger.info(f"Сгенерировано {len(png)} байт PNG")

Управление конфигурацией:
    >>> import os
    >>> os.environ['GS1BARCODE_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from gs1barcode import load_config, EncoderConfig
    >>>
    >>> config = load_config()
    >>> encoder_config = EncoderConfig.from_mapping(config)

Автор: GS1 Barcode Development Team
Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "GS1 Barcode Development Team"
__description__ = "GS1-128 (Code 128 subset C) encoder and raster renderer"
__license__ = "MIT"
__python_requires__ = ">=3.11"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"GS1-128 Barcode требует Python 3.11 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

_ROOT_LOGGER_NAME = "gs1barcode"
_CONSOLE_HANDLER_NAME = "gs1barcode.console"
_FILE_HANDLER_NAME = "gs1barcode.file"


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком для всех уровней, если задана
      переменная окружения GS1BARCODE_LOG_DIR
    - Форматом с временной меткой, уровнем, модулем и сообщением

    Уровень логирования задаётся переменной окружения
    GS1BARCODE_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Идемпотентна - повторные вызовы не имеют дополнительного эффекта.
    """
    log_level_str = os.environ.get("GS1BARCODE_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    # учитываются только собственные обработчики пакета, не чужие (pytest и т.п.)
    if any(h.get_name() == _CONSOLE_HANDLER_NAME for h in root_logger.handlers):
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Консольный обработчик (stderr) - WARNING и выше
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_dir_env = os.environ.get("GS1BARCODE_LOG_DIR")
    if log_dir_env:
        try:
            log_dir = Path(log_dir_env)
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_dir / "gs1barcode.log",
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.set_name(_FILE_HANDLER_NAME)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                f"Не удалось инициализировать файловое логирование: {e}. "
                f"Используется только консоль."
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить настроенный логгер для указанного модуля.

    Логгеры именуются как 'gs1barcode.<module_name>' и наследуют
    обработчики логгера пакета.

    Аргументы:
        module_name: Имя модуля, обычно `__name__`.

    Возвращает:
        Экземпляр logging.Logger.

    Пример:
        >>> logger = get_logger(__name__)
        >>> logger.info("Начинается кодирование")
    """
    if module_name == _ROOT_LOGGER_NAME or module_name.startswith(_ROOT_LOGGER_NAME + "."):
        full_name = module_name
    elif module_name == "__main__":
        full_name = f"{_ROOT_LOGGER_NAME}.main"
    else:
        clean_name = module_name.lstrip(".")
        full_name = f"{_ROOT_LOGGER_NAME}.{clean_name}"

    return logging.getLogger(full_name)


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "variable_length_profile": "legacy",
    "quiet_zone_modules": 10,
    "segment_terminator": "'",
    "render_width": 400,
    "render_height": 120,
    "foreground": "black",
    "background": "white",
    "image_format": "PNG",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из gs1barcode.json или использовать
    настройки по умолчанию.

    Ключи конфигурации:
        - variable_length_profile: str - "legacy" или "gs1"
        - variable_length_ais: list[str] - явный список AI (перекрывает профиль)
        - quiet_zone_modules: int - Ширина тихой зоны (>= 10)
        - segment_terminator: str - Дополнительный разделитель сегментов
        - render_width / render_height: int - Размер изображения
        - foreground / background: str - Цвета
        - image_format: str - Формат изображения (PNG)

    Аргументы:
        config_path: Путь к файлу конфигурации. Если None, ищет
                    'gs1barcode.json' в текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, пользовательские
        значения перекрывают значения по умолчанию.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("gs1barcode.json")

    config = _DEFAULT_CONFIG.copy()

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Файл конфигурации должен содержать JSON-объект, "
                    f"получен {type(user_config).__name__}"
                )

            config.update(user_config)

            logger.info(f"Конфигурация загружена из {config_path}")
            logger.debug(f"Конфигурация: {config}")

        except json.JSONDecodeError as e:
            logger.warning(
                f"Не удалось разобрать {config_path}: Недопустимый JSON "
                f"в строке {e.lineno}, столбце {e.colno}. "
                f"Используется конфигурация по умолчанию."
            )
        except OSError as e:
            logger.warning(
                f"Не удалось прочитать {config_path}: {e}. "
                f"Используется конфигурация по умолчанию."
            )
        except ValueError as e:
            logger.warning(
                f"Недопустимый формат конфигурации: {e}. "
                f"Используется конфигурация по умолчанию."
            )
    else:
        logger.info(
            f"Файл конфигурации {config_path} не найден. "
            f"Используется конфигурация по умолчанию."
        )

    return config


# =============================================================================
# ИМПОРТЫ ПУБЛИЧНОГО API
# =============================================================================

# Примечание: barcodegen импортируется первым, model зависит от его исключений.

from .barcodegen import (  # noqa: E402
    BarcodeGenError,
    EncodeError,
    FormatError,
    Gs1128Generator,
    PanicError,
    RenderError,
    Segment,
    encode,
    parse_segments,
)
from .config import EncoderConfig, RenderConfig, VariableLengthProfile  # noqa: E402
from .model import Barcode, CodeSet, SpecialSymbol  # noqa: E402

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    # Конфигурация
    "EncoderConfig",
    "RenderConfig",
    "VariableLengthProfile",
    # Кодирование
    "Gs1128Generator",
    "encode",
    "parse_segments",
    "Segment",
    "Barcode",
    "CodeSet",
    "SpecialSymbol",
    # Исключения
    "BarcodeGenError",
    "FormatError",
    "EncodeError",
    "RenderError",
    "PanicError",
]

# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()

_logger = get_logger(__name__)
_logger.debug(f"GS1-128 Barcode v{__version__} инициализирован")
