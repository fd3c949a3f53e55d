"""
Модульные тесты для gs1barcode/__init__.py
Тестирует метаданные пакета, конфигурацию, логирование и публичный API.
"""

import json
import logging
import logging.handlers
import re
from pathlib import Path
from typing import Iterator, List
from unittest import mock

import pytest

import gs1barcode


_OWN_HANDLERS = {"gs1barcode.console", "gs1barcode.file"}


def _own_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if h.get_name() in _OWN_HANDLERS]


@pytest.fixture
def isolated_root_logger() -> Iterator[logging.Logger]:
    """
    Временно убрать собственные обработчики пакета и вернуть их после теста.
    Обработчики, добавленные pytest, не трогаются.
    """
    root_logger = logging.getLogger("gs1barcode")
    saved_handlers = _own_handlers(root_logger)
    saved_level = root_logger.level
    for handler in saved_handlers:
        root_logger.removeHandler(handler)
    yield root_logger
    for handler in _own_handlers(root_logger):
        root_logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


class TestVersionMetadata:
    """Тестирование метаданных версии и констант."""

    def test_version_format(self) -> None:
        """Проверить, что __version__ следует семантическому версионированию."""
        assert re.match(r"^\d+\.\d+\.\d+$", gs1barcode.__version__)

    def test_version_components(self) -> None:
        expected_version = (
            f"{gs1barcode.VERSION_MAJOR}."
            f"{gs1barcode.VERSION_MINOR}."
            f"{gs1barcode.VERSION_PATCH}"
        )
        assert gs1barcode.__version__ == expected_version

    @pytest.mark.parametrize(
        "attr", ["__author__", "__description__", "__license__", "__python_requires__"]
    )
    def test_metadata_attributes(self, attr: str) -> None:
        value = getattr(gs1barcode, attr)
        assert isinstance(value, str) and value


class TestPublicAPI:
    """Тестирование экспортов публичного API."""

    def test_all_exports_exist(self) -> None:
        for name in gs1barcode.__all__:
            assert hasattr(gs1barcode, name), f"{name} отсутствует в пакете"

    def test_no_duplicate_exports(self) -> None:
        assert len(gs1barcode.__all__) == len(set(gs1barcode.__all__))

    @pytest.mark.parametrize(
        "name",
        [
            "Gs1128Generator",
            "encode",
            "parse_segments",
            "Barcode",
            "EncoderConfig",
            "FormatError",
            "PanicError",
            "get_logger",
            "load_config",
        ],
    )
    def test_key_names_exported(self, name: str) -> None:
        assert name in gs1barcode.__all__

    def test_encode_via_package(self) -> None:
        assert gs1barcode.encode("(10)12").check_symbol == 57


class TestLogging:
    """Тестирование конфигурации логирования."""

    def test_get_logger_name_format(self) -> None:
        logger = gs1barcode.get_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "gs1barcode.test_module"

    def test_get_logger_with_qualified_name(self) -> None:
        logger = gs1barcode.get_logger("gs1barcode.barcodegen.encoder")
        assert logger.name == "gs1barcode.barcodegen.encoder"

    def test_get_logger_with_main(self) -> None:
        assert gs1barcode.get_logger("__main__").name == "gs1barcode.main"

    def test_get_logger_with_leading_dots(self) -> None:
        assert gs1barcode.get_logger("..model").name == "gs1barcode.model"

    def test_module_loggers_share_namespace(self) -> None:
        from gs1barcode.barcodegen import encoder

        assert encoder.logger.name.startswith("gs1barcode.")

    def test_logger_is_configured(self) -> None:
        root_logger = logging.getLogger("gs1barcode")
        assert len(root_logger.handlers) >= 1
        assert root_logger.propagate is False

    def test_log_level_from_environment(self, isolated_root_logger: logging.Logger) -> None:
        with mock.patch.dict("os.environ", {"GS1BARCODE_LOG_LEVEL": "DEBUG"}):
            gs1barcode._setup_logging()
        assert isolated_root_logger.level == logging.DEBUG

    def test_unknown_log_level_defaults_to_info(
        self, isolated_root_logger: logging.Logger
    ) -> None:
        with mock.patch.dict("os.environ", {"GS1BARCODE_LOG_LEVEL": "LOUD"}):
            gs1barcode._setup_logging()
        assert isolated_root_logger.level == logging.INFO

    def test_file_handler_from_environment(
        self, isolated_root_logger: logging.Logger, tmp_path: Path
    ) -> None:
        log_dir = tmp_path / "logs"
        with mock.patch.dict("os.environ", {"GS1BARCODE_LOG_DIR": str(log_dir)}):
            gs1barcode._setup_logging()
        assert log_dir.is_dir()
        assert any(
            isinstance(h, logging.handlers.RotatingFileHandler)
            for h in isolated_root_logger.handlers
        )

    def test_setup_ignores_foreign_handlers(
        self, isolated_root_logger: logging.Logger
    ) -> None:
        """Посторонний обработчик на логгере не должен блокировать настройку."""
        foreign = logging.NullHandler()
        isolated_root_logger.addHandler(foreign)
        try:
            with mock.patch.dict("os.environ", {"GS1BARCODE_LOG_LEVEL": "DEBUG"}):
                gs1barcode._setup_logging()
            assert isolated_root_logger.level == logging.DEBUG
            assert "gs1barcode.console" in [
                h.get_name() for h in _own_handlers(isolated_root_logger)
            ]
        finally:
            isolated_root_logger.removeHandler(foreign)

    def test_setup_is_idempotent(self) -> None:
        root_logger = logging.getLogger("gs1barcode")
        before = len(root_logger.handlers)
        gs1barcode._setup_logging()
        assert len(root_logger.handlers) == before


class TestConfiguration:
    """Тестирование управления конфигурацией."""

    def test_load_config_defaults(self, tmp_path: Path) -> None:
        config = gs1barcode.load_config(tmp_path / "nonexistent.json")
        assert config["variable_length_profile"] == "legacy"
        assert config["quiet_zone_modules"] == 10
        assert config["segment_terminator"] == "'"
        assert config["render_width"] == 400
        assert config["image_format"] == "PNG"

    def test_load_config_returns_copy(self, tmp_path: Path) -> None:
        config = gs1barcode.load_config(tmp_path / "nonexistent.json")
        config["render_width"] = 1
        assert gs1barcode.load_config(tmp_path / "nonexistent.json")["render_width"] == 400

    def test_load_config_from_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "gs1barcode.json"
        config_path.write_text(
            json.dumps({"variable_length_profile": "gs1", "render_width": 800}),
            encoding="utf-8",
        )
        config = gs1barcode.load_config(config_path)
        assert config["variable_length_profile"] == "gs1"
        assert config["render_width"] == 800
        # значения по умолчанию сохраняются для отсутствующих ключей
        assert config["render_height"] == 120

    def test_load_config_default_path(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "gs1barcode.json").write_text('{"quiet_zone_modules": 12}')
        monkeypatch.chdir(tmp_path)
        assert gs1barcode.load_config()["quiet_zone_modules"] == 12

    def test_load_config_invalid_json(self, tmp_path: Path) -> None:
        config_path = tmp_path / "invalid.json"
        config_path.write_text("{invalid json content", encoding="utf-8")
        config = gs1barcode.load_config(config_path)
        assert config["variable_length_profile"] == "legacy"

    def test_load_config_non_dict_json(self, tmp_path: Path) -> None:
        config_path = tmp_path / "list.json"
        config_path.write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
        config = gs1barcode.load_config(config_path)
        assert config["quiet_zone_modules"] == 10

    def test_load_config_unreadable(self, tmp_path: Path) -> None:
        config_path = tmp_path / "unreadable.json"
        config_path.write_text("{}", encoding="utf-8")
        with mock.patch("builtins.open", side_effect=PermissionError("denied")):
            config = gs1barcode.load_config(config_path)
        assert config["render_height"] == 120


class TestDocumentation:
    def test_module_has_docstring(self) -> None:
        assert gs1barcode.__doc__ and "GS1-128" in gs1barcode.__doc__

    @pytest.mark.parametrize("func", ["get_logger", "load_config"])
    def test_functions_have_docstrings(self, func: str) -> None:
        assert getattr(gs1barcode, func).__doc__
