#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the console and debug file logging."""

import io
import logging
import os
from typing import Iterator

import pytest

from ubootenv.apps.utils import ubootenv_logger
from ubootenv.utils.misc import load_text, write_file


@pytest.fixture
def isolated_logger() -> Iterator[logging.Logger]:
    """Get a logger without handlers, removed after the test."""
    logger = logging.getLogger("ubootenv_logger_test")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_install(isolated_logger: logging.Logger) -> None:
    """Test the console handler filters records by level."""
    stream = io.StringIO()
    ubootenv_logger.install(
        stream=stream, colored=False, logger=isolated_logger, create_debug_logger=False
    )
    isolated_logger.info("info message")
    isolated_logger.warning("warning message")
    output = stream.getvalue()
    assert "info message" not in output
    assert "WARNING:ubootenv_logger_test:warning message" in output


def test_install_level(isolated_logger: logging.Logger) -> None:
    stream = io.StringIO()
    ubootenv_logger.install(
        level=logging.DEBUG,
        stream=stream,
        colored=False,
        logger=isolated_logger,
        create_debug_logger=False,
    )
    isolated_logger.debug("debug message")
    assert "debug message" in stream.getvalue()


def test_install_replaces_handler(isolated_logger: logging.Logger) -> None:
    for _ in range(3):
        ubootenv_logger.install(
            stream=io.StringIO(), logger=isolated_logger, create_debug_logger=False
        )
    handlers = [
        h for h in isolated_logger.handlers if isinstance(h, ubootenv_logger.ColoredStreamHandler)
    ]
    assert len(handlers) == 1


def test_colored_formatter() -> None:
    record = logging.LogRecord(
        "test", logging.WARNING, __file__, 1, "\x1b[31mred\x1b[39m", None, None
    )
    assert "\x1b[" in ubootenv_logger.ColoredFormatter(colored=True).format(record)
    assert ubootenv_logger.ColoredFormatter(colored=False).format(record) == "WARNING:test:red"


def test_debug_file_handler(
    isolated_logger: logging.Logger, tmpdir: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test the debug log file gets the banner and all records."""
    log_file = os.path.join(tmpdir, "logs", "debug.log")
    monkeypatch.setattr(ubootenv_logger, "UBOOTENV_DEBUG_LOG_FILE", log_file)
    isolated_logger.setLevel(logging.DEBUG)
    ubootenv_logger._install_debug_file_handler(isolated_logger)
    # second installation is ignored
    ubootenv_logger._install_debug_file_handler(isolated_logger)
    isolated_logger.debug("debug record")
    for handler in isolated_logger.handlers:
        handler.flush()
    content = load_text(log_file)
    assert "UBOOTENV DEBUG LOGGING STARTED" in content
    assert content.count("UBOOTENV DEBUG LOGGING STARTED") == 1
    assert "debug record" in content


def test_load_logging_config(tmpdir: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ubootenv_logger, "UBOOTENV_USER_CONFIG_DIR", str(tmpdir))
    assert ubootenv_logger.load_logging_config() is None

    config_file = os.path.join(tmpdir, "logging.yaml")
    write_file(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "loggers:\n"
        "  ubootenv_config_test:\n"
        "    level: ERROR\n",
        config_file,
    )
    assert ubootenv_logger.load_logging_config() == config_file
    assert logging.getLogger("ubootenv_config_test").level == logging.ERROR


def test_load_invalid_logging_config(tmpdir: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ubootenv_logger, "UBOOTENV_USER_CONFIG_DIR", str(tmpdir))
    write_file("version: 5\n", os.path.join(tmpdir, "logging.yaml"))
    assert ubootenv_logger.load_logging_config() is None
