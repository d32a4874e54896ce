from __future__ import annotations

import logging

import pytest

from shell_client.util.logging import build_logger, get_logger


def test_build_logger_shows_label(capsys: pytest.CaptureFixture[str]) -> None:
    logger = build_logger("version-example", show_label=True)

    logger.info("blob")

    assert capsys.readouterr().out == "version-example ▸ blob\n"


def test_build_logger_hides_label_and_filters_level(capsys: pytest.CaptureFixture[str]) -> None:
    logger = build_logger("shell-client-hidden", level="warning")

    logger.info("quiet")
    logger.warning("loud")

    assert capsys.readouterr().out == "loud\n"
    assert logger.level == logging.WARNING


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("shell_client.test").name == "shell_client.test"
