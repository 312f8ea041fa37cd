#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the environment image file formats."""

import os

import pytest

from ubootenv.exceptions import UBootEnvError, UBootEnvValueError
from ubootenv.image import EnvImageFormat, encode, load_image, save_image
from ubootenv.utils.misc import load_binary, load_text

ENV = b"baudrate=115200\nbootdelay=5\n"


def test_binary_file(tmpdir: str) -> None:
    image = encode(ENV, size=0x100)
    path = os.path.join(tmpdir, "env.bin")
    save_image(image, path)
    assert load_binary(path) == image
    assert load_image(path) == image
    assert load_image(path, "binary") == image


@pytest.mark.parametrize("file_format", [EnvImageFormat.SREC, "srec", "SREC"])
def test_srec_file(tmpdir: str, file_format: str) -> None:
    """Test the image stored as S-records keeps all bytes, padding included.

    :param tmpdir: Temporary directory.
    :param file_format: Requested format.
    """
    image = encode(ENV, size=0x100, flags=1)
    path = os.path.join(tmpdir, "env.srec")
    save_image(image, path, file_format)
    text = load_text(path)
    assert all(line[0] == "S" for line in text.splitlines())
    assert load_image(path, file_format) == image


def test_invalid_format(tmpdir: str) -> None:
    with pytest.raises(UBootEnvValueError):
        save_image(b"\x00" * 8, os.path.join(tmpdir, "env.hex"), "ihex")
    with pytest.raises(UBootEnvValueError):
        load_image(os.path.join(tmpdir, "env.hex"), "ihex")


def test_invalid_srec_file(tmpdir: str) -> None:
    path = os.path.join(tmpdir, "env.srec")
    with open(path, "w", encoding="utf-8") as f:
        f.write("baudrate=115200\nbootdelay=5\n")
    with pytest.raises(UBootEnvError, match="Can't parse S-record file"):
        load_image(path, EnvImageFormat.SREC)


def test_missing_file(tmpdir: str) -> None:
    with pytest.raises(UBootEnvError):
        load_image(os.path.join(tmpdir, "missing.bin"))


def test_save_creates_folders(tmpdir: str) -> None:
    path = os.path.join(tmpdir, "a", "b", "env.bin")
    save_image(b"\x01\x02", path)
    assert load_binary(path) == b"\x01\x02"
