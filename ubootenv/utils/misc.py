#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Miscellaneous utilities and helper functions.

File access for the source and target of every conversion, range checks, text
formatting and configuration file loading.
"""

import json
import logging
import os
import sys
from enum import Enum
from typing import Optional, Union

import yaml

from ubootenv.exceptions import UBootEnvError, UBootEnvFileNotFoundError, UBootEnvIOError

logger = logging.getLogger(__name__)


class Endianness(str, Enum):
    """Byte order of multi-byte values."""

    BIG = "big"
    LITTLE = "little"

    @classmethod
    def values(cls) -> list[str]:
        """Get names of all byte orders.

        :return: List of byte order names.
        """
        return [member.value for member in cls]

    @classmethod
    def native(cls) -> "Endianness":
        """Get byte order of the running platform.

        :return: Native endianness.
        """
        return cls(sys.byteorder)


def _read(path: str, binary: bool) -> Union[str, bytes]:
    if not os.path.isfile(path):
        raise UBootEnvFileNotFoundError(f"Source file '{path}' not found")
    logger.debug(f"Reading {'binary' if binary else 'text'} file {path}")
    try:
        if binary:
            with open(path, "rb") as f:
                return f.read()
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise UBootEnvIOError(f"Can't read source file '{path}': {exc}") from exc


def load_binary(path: str) -> bytes:
    """Read whole file into memory.

    :param path: Path to the file.
    :raises UBootEnvFileNotFoundError: The file doesn't exist.
    :raises UBootEnvIOError: The file can't be read.
    :return: File content.
    """
    data = _read(path, binary=True)
    assert isinstance(data, bytes)
    return data


def load_text(path: str) -> str:
    """Read whole UTF-8 text file into memory.

    :param path: Path to the file.
    :raises UBootEnvFileNotFoundError: The file doesn't exist.
    :raises UBootEnvIOError: The file can't be read or decoded.
    :return: File content.
    """
    text = _read(path, binary=False)
    assert isinstance(text, str)
    return text


def write_file(
    data: Union[str, bytes],
    path: str,
    mode: str = "w",
    encoding: str = "utf-8",
) -> int:
    """Write data into file.

    Missing parent folders are created, an existing file is truncated.

    :param data: Text or bytes to store.
    :param path: Path to the target file.
    :param mode: "w" for text, "wb" for bytes.
    :param encoding: Encoding of text data.
    :raises UBootEnvIOError: The file can't be created or written.
    :return: Count of written characters or bytes.
    """
    folder = os.path.dirname(path)
    logger.debug(f"Writing {len(data)} {'bytes' if 'b' in mode else 'characters'} into {path}")
    try:
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(path, mode, encoding=None if "b" in mode else encoding) as f:
            return f.write(data)
    except OSError as exc:
        raise UBootEnvIOError(f"Can't write target file '{path}': {exc}") from exc


def find_file(file_name: str, search_paths: list[str], raise_exc: bool = True) -> str:
    """Find file in the first folder containing it.

    :param file_name: Name or relative path of the file.
    :param search_paths: Folders to look into, in order of precedence.
    :param raise_exc: Raise exception if the file is not found.
    :raises UBootEnvFileNotFoundError: The file is in none of the folders.
    :return: Absolute path of the file, empty string if not found and raise_exc is False.
    """
    for folder in filter(None, search_paths):
        candidate = os.path.abspath(os.path.join(folder, file_name))
        if os.path.isfile(candidate):
            return candidate
    msg = f"File '{file_name}' not found in: {', '.join(filter(None, search_paths))}"
    if raise_exc:
        raise UBootEnvFileNotFoundError(msg)
    logger.debug(msg)
    return ""


def check_range(x: int, start: int = 0, end: int = (1 << 32) - 1) -> bool:
    """Check that the number lies within the range, borders included.

    :param x: Checked number.
    :param start: Lowest allowed value.
    :param end: Highest allowed value, unsigned 32-bit maximum by default.
    :return: True if the number fits.
    """
    return start <= x <= end


def size_fmt(num: Union[float, int], use_kibibyte: bool = True) -> str:
    """Format size in bytes with binary (kiB) or decimal (kB) units.

    Sizes below one kilobyte are printed as a whole number of bytes.

    :param num: Size in bytes.
    :param use_kibibyte: Use 1024-based units.
    :return: Size like "34 B" or "16.0 kiB".
    """
    base = 1024.0 if use_kibibyte else 1000.0
    suffix = "iB" if use_kibibyte else "B"
    if num < base:
        return f"{int(num)} B"
    for prefix in "kMGT":
        num /= base
        if num < base:
            break
    else:
        prefix = "P"
        num /= base
    return f"{num:3.1f} {prefix}{suffix}"


def load_configuration(path: str) -> dict:
    """Load JSON or YAML configuration file.

    :param path: Path to the configuration file.
    :raises UBootEnvError: The file can't be read or doesn't hold a mapping.
    :return: Configuration.
    """
    try:
        content = load_text(path)
    except UBootEnvError as exc:
        raise UBootEnvError(f"Can't load configuration file: {exc}") from exc

    try:
        config = json.loads(content)
    except json.JSONDecodeError:
        try:
            config = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise UBootEnvError(f"Can't parse configuration file {path}: {exc}") from exc

    if not config or not isinstance(config, dict):
        raise UBootEnvError(f"Invalid configuration file: {path}")
    return config
