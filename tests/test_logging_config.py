import logging

import pytest

from product_catalog_api.app.core.logging_config import resolve_log_level, setup_logging


def test_setup_logging_configures_root_once(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "api.log"

    setup_logging("debug", str(logfile))
    setup_logging("error")
    try:
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        logging.getLogger("product_catalog_api.test").info("catalog ready")
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] product_catalog_api.test: catalog ready" in logfile.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()


@pytest.mark.parametrize(
    "level,expected",
    [("debug", "DEBUG"), (" Warning ", "WARNING"), ("INFO", "INFO"),
     ("verbose", "INFO"), ("", "INFO"), (None, "INFO"), ("trace", "INFO")],
)
def test_resolve_log_level(level, expected):
    assert resolve_log_level(level) == expected


def test_unknown_level_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("verbose")
    try:
        assert root.level == logging.INFO
    finally:
        for handler in root.handlers:
            handler.close()
