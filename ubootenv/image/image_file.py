#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Environment image file formats.

The binary image is stored either verbatim or as Motorola S-records placed at
address 0, ready for flash programming tools.
"""

import logging
from typing import Union

from ubootenv.exceptions import UBootEnvError, UBootEnvValueError
from ubootenv.utils.env_enum import UBootEnvEnum
from ubootenv.utils.misc import load_binary, load_text, write_file

logger = logging.getLogger(__name__)


class EnvImageFormat(UBootEnvEnum):
    """Type of the image file."""

    BINARY = (0, "binary", "Raw binary image")
    SREC = (1, "srec", "Motorola S-record image")


def _get_format(file_format: Union[EnvImageFormat, str]) -> EnvImageFormat:
    if isinstance(file_format, EnvImageFormat):
        return file_format
    try:
        return EnvImageFormat.from_label(file_format)
    except UBootEnvError as exc:
        raise UBootEnvValueError(
            f"Invalid image file format: {file_format}, use one of {EnvImageFormat.labels()}"
        ) from exc


def save_image(
    data: bytes, path: str, file_format: Union[EnvImageFormat, str] = EnvImageFormat.BINARY
) -> None:
    """Save binary image into file.

    :param data: Binary image.
    :param path: Path to the output file.
    :param file_format: Format of the file, defaults to binary.
    :raises UBootEnvValueError: The file format is invalid.
    """
    file_format = _get_format(file_format)
    logger.debug(f"Saving {file_format.label} image into {path}")
    if file_format == EnvImageFormat.BINARY:
        write_file(data, path, mode="wb")
        return

    # import bincopy only if needed to save startup time
    import bincopy  # pylint: disable=import-outside-toplevel

    bin_file = bincopy.BinFile()
    bin_file.add_binary(data, address=0)
    write_file(bin_file.as_srec(), path)


def load_image(path: str, file_format: Union[EnvImageFormat, str] = EnvImageFormat.BINARY) -> bytes:
    """Load binary image from file.

    S-records are flattened into contiguous bytes starting at their lowest address.

    :param path: Path to the input file.
    :param file_format: Format of the file, defaults to binary.
    :raises UBootEnvValueError: The file format is invalid.
    :raises UBootEnvError: The S-record file can't be parsed.
    :return: Binary image.
    """
    file_format = _get_format(file_format)
    logger.debug(f"Loading {file_format.label} image from {path}")
    if file_format == EnvImageFormat.BINARY:
        return load_binary(path)

    import bincopy  # pylint: disable=import-outside-toplevel

    bin_file = bincopy.BinFile()
    try:
        bin_file.add_srec(load_text(path))
    except bincopy.Error as exc:
        raise UBootEnvError(f"Can't parse S-record file '{path}': {exc}") from exc
    return bytes(bin_file.as_binary())
