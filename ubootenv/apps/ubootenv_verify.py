#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Console script verifying U-Boot environment image."""

import logging
import sys

import click

from ubootenv.apps.utils import ubootenv_logger
from ubootenv.apps.utils.common_cli_options import (
    endianness_option,
    image_type_option,
    ubootenv_apps_common_options,
)
from ubootenv.apps.utils.utils import (
    UBootEnvAppError,
    catch_ubootenv_error,
    print_verifier_to_console,
)
from ubootenv.image.env_image import EnvImage
from ubootenv.image.image_file import load_image
from ubootenv.utils.misc import Endianness

logger = logging.getLogger(__name__)


@click.command(name="ubootenv-verify", no_args_is_help=True)
@click.option(
    "-r",
    "--redundant",
    is_flag=True,
    default=False,
    help="Image uses the redundant environment layout with the flags byte.",
)
@image_type_option
@endianness_option
@click.option(
    "--problems",
    is_flag=True,
    default=False,
    help="Show just problems (warnings and errors).",
)
@click.argument("image", type=click.Path(dir_okay=False))
@ubootenv_apps_common_options
def main(
    redundant: bool,
    image_type: str,
    endianness: Endianness,
    problems: bool,
    image: str,
    log_level: int,
) -> None:
    """Verify U-Boot environment image and print the report."""
    ubootenv_logger.install(level=log_level)

    env = EnvImage.parse(load_image(image, image_type), redundant=redundant, endianness=endianness)
    for warning in env.warnings:
        logger.info(str(warning))
    verifier = env.verify()
    print_verifier_to_console(verifier, problems)
    if verifier.has_errors:
        raise UBootEnvAppError(f"The image {image} contains errors.", error_code=1)


@catch_ubootenv_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
