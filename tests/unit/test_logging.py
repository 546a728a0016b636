"""
Тесты для logging setup и DEBUG записей форматтеров
"""

import logging

import pytest

from snaccs.core.errors import InvalidArgument
from snaccs.core.format import format_bytes, format_phone
from snaccs.infrastructure import get_logger, setup_logging


def test_get_logger_uses_module_name():
    logger = get_logger("snaccs.core.format.money")
    assert logger.name == "snaccs.core.format.money"


def test_setup_logging_passes_level_and_format(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    setup_logging("debug")

    assert captured["level"] == logging.DEBUG
    assert "%(name)s" in captured["format"]
    assert len(captured["handlers"]) == 1


def test_setup_logging_custom_format(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    setup_logging("WARNING", format_string="%(message)s")

    assert captured["level"] == logging.WARNING
    assert captured["format"] == "%(message)s"


def test_negative_bytes_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="snaccs")
    with pytest.raises(InvalidArgument):
        format_bytes(-1)
    assert "Rejected negative byte count -1" in caplog.text


def test_unknown_country_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="snaccs")
    with pytest.raises(InvalidArgument):
        format_phone("5551112222", "ZZ")
    assert "No phone format for country 'ZZ'" in caplog.text
