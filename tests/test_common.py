"""
Test for common module.
"""

import logging

import pytest

from ssm_eb.common import BANNER_RULE, format_settings_banner, get_logger, log_level


def test_format_settings_banner_aligns_values():
    banner = format_settings_banner({
        "input": "params.yaml",
        "output": "",
        "environment": "prod",
        "mode": "get",
    })
    lines = banner.split("\n")

    assert lines[0] == BANNER_RULE
    assert lines[-1] == BANNER_RULE
    assert lines[1] == "input:        params.yaml"
    assert lines[2] == "output:"
    assert lines[3] == "environment:  prod"
    assert lines[4] == "mode:         get"


def test_format_settings_banner_empty():
    assert format_settings_banner({}) == f"{BANNER_RULE}\n{BANNER_RULE}"


def test_get_logger_returns_named_logger():
    logger = get_logger("ssm_eb.test")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "ssm_eb.test"


@pytest.mark.parametrize("name,expected", [
    ("debug", "DEBUG"),
    ("Info", "INFO"),
    (None, "WARNING"),
    ("", "WARNING"),
    ("verbose", "WARNING"),
])
def test_log_level(name, expected):
    assert log_level(name) == expected


def test_get_logger_with_unknown_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    logger = get_logger("ssm_eb.test.unknown")
    assert logger.name == "ssm_eb.test.unknown"
