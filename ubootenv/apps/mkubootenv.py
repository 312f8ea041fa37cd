#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Console script converting U-Boot environment between plaintext and binary image."""

import logging
import sys
from typing import Optional

import click

from ubootenv.apps.utils import ubootenv_logger
from ubootenv.apps.utils.common_cli_options import (
    endianness_option,
    image_type_option,
    ubootenv_apps_common_options,
)
from ubootenv.apps.utils.utils import INT, catch_ubootenv_error
from ubootenv.image.env_image import EnvImage, EnvWarning, EnvWarningType
from ubootenv.image.image_file import load_image, save_image
from ubootenv.utils.misc import Endianness, load_binary, size_fmt, write_file

logger = logging.getLogger(__name__)


def get_ignored_options(
    size: Optional[int], flags: Optional[int], no_crc: bool
) -> list[EnvWarning]:
    """Get warnings for options without effect on decoding.

    :param size: Requested image size.
    :param flags: Requested flags byte.
    :param no_crc: Checksum computation disabled.
    :return: List of warnings, one per ignored option.
    """
    ret = []
    if size is not None:
        ret.append(
            EnvWarning(
                EnvWarningType.OPTION_IGNORED,
                "Option -s/--size is ignored in reverse mode, the whole image is decoded.",
            )
        )
    if flags is not None:
        ret.append(
            EnvWarning(
                EnvWarningType.OPTION_IGNORED,
                f"Value {flags} of option -f/--flags is ignored in reverse mode, "
                "the flags byte is read from the image.",
            )
        )
    if no_crc:
        ret.append(
            EnvWarning(
                EnvWarningType.OPTION_IGNORED,
                "Option -n/--no-crc is ignored in reverse mode.",
            )
        )
    return ret


def log_warnings(warnings: list[EnvWarning]) -> None:
    """Log conversion warnings.

    :param warnings: Warnings to log.
    """
    for warning in warnings:
        logger.warning(str(warning))


@click.command(name="mkubootenv", no_args_is_help=True)
@click.option(
    "-s",
    "--size",
    type=INT(),
    help="Size of the target image, decimal or 0x prefixed hexadecimal. "
    "Defaults to the smallest size able to hold the source.",
)
@click.option(
    "-f",
    "--flags",
    type=click.IntRange(0, 1),
    help="Use the redundant environment layout with given flags byte (0 or 1).",
)
@click.option(
    "-r",
    "--reverse",
    is_flag=True,
    default=False,
    help="Reverse operation: decode binary image SOURCE into plaintext TARGET.",
)
@click.option(
    "-n",
    "--no-crc",
    is_flag=True,
    default=False,
    help="Don't compute the checksum, the checksum field stays zero.",
)
@image_type_option
@endianness_option
@click.argument("source", type=click.Path(dir_okay=False))
@click.argument("target", type=click.Path(dir_okay=False))
@ubootenv_apps_common_options
def main(
    size: Optional[int],
    flags: Optional[int],
    reverse: bool,
    no_crc: bool,
    image_type: str,
    endianness: Endianness,
    source: str,
    target: str,
    log_level: int,
) -> None:
    """Create U-Boot environment image from plaintext file or reverse.

    SOURCE is a text file with one `name=value` variable per line, TARGET the binary
    image. With -r/--reverse the SOURCE is the binary image and TARGET the text file.
    """
    ubootenv_logger.install(level=log_level)

    if reverse:
        log_warnings(get_ignored_options(size, flags, no_crc))
        env = EnvImage.parse(
            load_image(source, image_type), redundant=flags is not None, endianness=endianness
        )
        log_warnings(env.warnings)
        logger.info(str(env))
        write_file(env.data, target, mode="wb")
        click.echo(f"Source image file: {source}")
        click.echo(f"Target file: {target}")
        click.echo(f"Data size: {size_fmt(len(env.data))}")
        click.echo(f"Image type: {image_type}")
        return

    env = EnvImage(
        data=load_binary(source),
        size=size,
        flags=flags,
        compute_crc=not no_crc,
        endianness=endianness,
    )
    image = env.export()
    logger.info(str(env))
    save_image(image, target, image_type)
    click.echo(f"Source file: {source}")
    click.echo(f"Target image file: {target}")
    click.echo(f"Image size: {size_fmt(len(image))}")
    click.echo(f"Image type: {image_type}")


@catch_ubootenv_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
