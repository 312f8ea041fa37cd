#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI helper for Click."""

import logging
from typing import Any, Callable, TypeVar, Union

import click

from ubootenv import __version__ as ubootenv_version
from ubootenv.image.image_file import EnvImageFormat
from ubootenv.utils.misc import Endianness

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])
logger = logging.getLogger(__name__)

NATIVE_ENDIANNESS = "native"


def ubootenv_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets -h/--help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("-h", "--help")(options)
    options = click.version_option(ubootenv_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def image_type_option(options: FC) -> FC:
    """Click decorator handling type of the image file.

    Provides: `image_type: str` label of the image file format.

    :return: Click decorator
    """
    return click.option(
        "-t",
        "--type",
        "image_type",
        type=click.Choice(EnvImageFormat.labels(), case_sensitive=False),
        default=EnvImageFormat.BINARY.label,
        show_default=True,
        help="Type of the environment image file.",
    )(options)


def endianness_option(options: FC) -> FC:
    """Click decorator handling byte order of the image checksum.

    Provides: `endianness: Endianness` selected byte order.

    :return: Click decorator
    """

    def callback(
        ctx: click.Context,  # pylint: disable=unused-argument  # click's callback signature
        param: click.Parameter,  # pylint: disable=unused-argument
        value: str,
    ) -> Endianness:
        if value == NATIVE_ENDIANNESS:
            return Endianness.native()
        return Endianness(value)

    return click.option(
        "-e",
        "--endianness",
        type=click.Choice([NATIVE_ENDIANNESS] + Endianness.values(), case_sensitive=False),
        default=NATIVE_ENDIANNESS,
        show_default=True,
        callback=callback,
        help="Byte order of the image checksum, the native one is used by the bootloader.",
    )(options)
