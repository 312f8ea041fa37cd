#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Application utilities: error handling, click parameter types and console output."""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from ubootenv import UBOOTENV_DEBUG_LOG_FILE, UBOOTENV_DEBUG_LOGGING_DISABLED
from ubootenv.exceptions import UBootEnvError
from ubootenv.utils.verifier import Verifier, VerifierResult

logger = logging.getLogger(__name__)

# exit codes of failed applications
EXIT_LIBRARY_ERROR = 2
EXIT_GENERAL_ERROR = 3


class UBootEnvAppError(UBootEnvError):
    """Error of the application itself, ends the process with its own exit code."""

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Create application error.

        :param desc: Message printed to the user, nothing is printed if None.
        :param error_code: Process exit code, values outside 1-255 end with 1.
        """
        super().__init__(desc)
        self.error_code = error_code


class INT(click.ParamType):
    """Integer given as decimal or prefixed (0x, 0o, 0b) number, like ``-s 0x4000``."""

    name = "integer"

    def __init__(self, base: int = 0) -> None:
        """Create the parameter type.

        :param base: Base of the number, 0 detects it from the prefix.
        """
        super().__init__()
        self.base = base

    def convert(
        self,
        value: Any,
        param: Optional[click.Parameter] = None,
        ctx: Optional[click.Context] = None,
    ) -> int:
        """Convert command line value into integer.

        :param value: Value from the command line or an already converted default.
        :param param: Converted parameter.
        :param ctx: Click context.
        :return: Integer value.
        """
        if isinstance(value, int):
            return value
        base = self.base
        if base == 0 and isinstance(value, str) and value.strip().lstrip("+-").isdigit():
            # plain digits are decimal even with leading zeros, like "0100"
            base = 10
        try:
            return int(value, base)
        except (TypeError, ValueError):
            self.fail(f"{value!r} is not a valid integer", param, ctx)


def _report_failure(message: str) -> None:
    click.echo(message, err=True)
    logger.debug(message, exc_info=True)
    if not UBOOTENV_DEBUG_LOGGING_DISABLED:
        click.secho(
            f"See debug log file: {UBOOTENV_DEBUG_LOG_FILE} for more info", fg="yellow", err=True
        )


def catch_ubootenv_error(function: Callable) -> Callable:
    """Turn exceptions of the decorated entry point into process exit codes.

    ``UBootEnvAppError`` ends with its own error code, other library errors (and failed
    assertions) with 2 and anything else with 3. The error is printed to stderr.

    :param function: Entry point of the application.
    :return: Decorated entry point.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return function(*args, **kwargs)
        except UBootEnvAppError as exc:
            if exc.description:
                click.echo(f"{type(exc).__name__}: {exc}", err=True)
            sys.exit(exc.error_code if 0 < exc.error_code < 256 else 1)
        except (AssertionError, UBootEnvError) as exc:
            _report_failure(f"{type(exc).__name__}: {exc}")
            sys.exit(EXIT_LIBRARY_ERROR)
        except (Exception, KeyboardInterrupt) as exc:  # pylint: disable=broad-except
            _report_failure(f"GENERAL ERROR: {type(exc).__name__}: {exc}")
            sys.exit(EXIT_GENERAL_ERROR)

    return wrapper


def print_verifier_to_console(v: Verifier, problems: bool = False) -> None:
    """Print verification report with its summary.

    :param v: Verification report.
    :param problems: Print only warnings and errors.
    """
    click.echo(v.draw([VerifierResult.WARNING, VerifierResult.ERROR] if problems else None))
    click.echo(f"Summary table of verifier results:\n{v.get_summary_table()}\n")
    click.echo(f"Overall  result: {VerifierResult.draw(v.result)}")
