#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Logging setup of the applications.

Records go to a colored console handler filtered by the verbosity chosen on the
command line, and to a rotating debug log file holding everything.
"""

import logging
import logging.config
import logging.handlers
import os
import platform
import re
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from ubootenv import (
    UBOOTENV_DEBUG,
    UBOOTENV_DEBUG_LOG_FILE,
    UBOOTENV_DEBUG_LOGGING_DISABLED,
    UBOOTENV_USER_CONFIG_DIR,
    __version__,
)
from ubootenv.exceptions import UBootEnvError
from ubootenv.utils.misc import find_file, load_configuration

colorama.just_fix_windows_console()

LOGGING_CONFIG_FILE = "logging.yaml"
ROOT_LOGGER_NAME = "ubootenv"
DEBUG_LOG_MAX_BYTES = 1_000_000
DEBUG_LOG_BACKUPS = 5

ANSI_COLOR_RE = re.compile(r"\x1b\[\d{1,3}m")


def load_logging_config() -> Optional[str]:
    """Apply ``logging.yaml`` from the user configuration folder.

    :return: Path of the applied file, None if there is none or it's invalid.
    """
    config_file = find_file(LOGGING_CONFIG_FILE, [UBOOTENV_USER_CONFIG_DIR], raise_exc=False)
    if not config_file:
        return None
    try:
        logging.config.dictConfig(load_configuration(config_file))
    except (UBootEnvError, ValueError, TypeError) as exc:
        logging.getLogger(__name__).warning(f"Invalid logging config {config_file}: {exc}")
        return None
    return config_file


class ColoredFormatter(logging.Formatter):
    """Formatter coloring the record by its level.

    Debug and error records also carry their origin (source file and line).

    :cvar LEVEL_STYLES: ANSI color prefix per logging level.
    """

    BASIC = logging.BASIC_FORMAT
    DETAILED = BASIC + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    LEVEL_STYLES = {
        logging.DEBUG: colorama.Fore.BLUE,
        logging.INFO: colorama.Fore.WHITE + colorama.Style.BRIGHT,
        logging.WARNING: colorama.Fore.YELLOW,
        logging.ERROR: colorama.Fore.RED,
        logging.CRITICAL: colorama.Fore.RED + colorama.Style.BRIGHT,
    }

    def __init__(self, colored: bool = True) -> None:
        """Create the formatter.

        :param colored: Add ANSI colors, otherwise colors are removed from the messages.
        """
        super().__init__()
        self.colored = colored
        self._formatters: dict[int, logging.Formatter] = {}
        for level, style in self.LEVEL_STYLES.items():
            fmt = self.BASIC if level in (logging.INFO, logging.WARNING) else self.DETAILED
            if colored:
                fmt = style + fmt + colorama.Style.RESET_ALL
            self._formatters[level] = logging.Formatter(fmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with the format of its level.

        :param record: Logged record.
        :return: Formatted record.
        """
        if not self.colored and isinstance(record.msg, str):
            record.msg = ANSI_COLOR_RE.sub("", record.msg)
        formatter = self._formatters.get(record.levelno, self._formatters[logging.ERROR])
        return formatter.format(record)


class ColoredStreamHandler(logging.StreamHandler):
    """Console handler installed by :func:`install`."""


def _install_debug_file_handler(target_logger: logging.Logger) -> None:
    log_file = os.path.abspath(UBOOTENV_DEBUG_LOG_FILE)
    if any(
        isinstance(h, logging.handlers.RotatingFileHandler) and h.baseFilename == log_file
        for h in target_logger.handlers
    ):
        return
    os.makedirs(os.path.dirname(log_file), exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        mode="a",
        maxBytes=DEBUG_LOG_MAX_BYTES,
        backupCount=DEBUG_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(ColoredFormatter(colored=False))
    target_logger.addHandler(handler)

    banner = [
        f"UBOOTENV DEBUG LOGGING STARTED {datetime.now():%Y-%m-%d %H:%M:%S}",
        f"ubootenv version: {__version__}",
        f"Python version: {sys.version.split()[0]}",
        f"OS version: {platform.platform()}",
        f"Last command: {sys.argv}",
    ]
    width = max(len(line) for line in banner)
    target_logger.debug("*" * (width + 4))
    for line in banner:
        target_logger.debug(f"* {line.ljust(width)} *")
    target_logger.debug("*" * (width + 4))


def install(
    level: Optional[int] = None,
    stream: Optional[TextIO] = None,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,
    create_debug_logger: bool = True,
) -> None:
    """Install console (and debug file) logging.

    A console handler of a previous call is replaced.

    :param level: Console level, WARNING by default (DEBUG with UBOOTENV_DEBUG set).
    :param stream: Console stream, sys.stderr by default.
    :param colored: Force colors on or off, by default colored on a terminal unless
        NO_COLOR is set.
    :param logger: Configured logger, the package logger by default.
    :param create_debug_logger: Also log everything into the debug log file.
    """
    if not level:
        level = logging.DEBUG if UBOOTENV_DEBUG else logging.WARNING
    stream = stream or sys.stderr
    if colored is None:
        # https://no-color.org/
        colored = "NO_COLOR" not in os.environ and hasattr(stream, "isatty") and stream.isatty()

    load_logging_config()
    target_logger = logger or logging.getLogger(ROOT_LOGGER_NAME)
    # handlers filter the records, the logger passes them all
    target_logger.setLevel(logging.DEBUG)
    target_logger.propagate = True

    for h in list(target_logger.handlers):
        if isinstance(h, ColoredStreamHandler):
            target_logger.removeHandler(h)
    handler = ColoredStreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(colored))
    target_logger.addHandler(handler)

    if create_debug_logger and not UBOOTENV_DEBUG_LOGGING_DISABLED:
        try:
            _install_debug_file_handler(target_logger)
        except OSError as exc:
            target_logger.warning(f"Failed to initialize debug logging: {exc}")
