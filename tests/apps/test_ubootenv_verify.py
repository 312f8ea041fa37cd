#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the ubootenv-verify application."""

import os
import sys

import pytest

from ubootenv.apps import ubootenv_verify
from ubootenv.apps.utils.utils import UBootEnvAppError
from tests.cli_runner import CliRunner


@pytest.mark.parametrize(
    "args",
    [
        ["-e", "little", "env_le.bin"],
        ["-r", "-e", "little", "env_redundant_le.bin"],
    ],
)
def test_verify_valid(cli_runner: CliRunner, data_dir: str, args: list) -> None:
    """Test report of valid images.

    :param cli_runner: Click CLI runner.
    :param data_dir: Test data folder.
    :param args: Command line arguments, the last one is the image file name.
    """
    args[-1] = os.path.join(data_dir, args[-1])
    result = cli_runner.invoke(ubootenv_verify.main, args)
    assert "U-Boot environment image" in result.output
    assert "Summary table of verifier results" in result.output
    assert "Overall  result: " in result.output


def test_verify_bad_crc(cli_runner: CliRunner, data_dir: str) -> None:
    result = cli_runner.invoke(
        ubootenv_verify.main,
        ["-e", "little", os.path.join(data_dir, "env_bad_crc.bin")],
        expected_code=1,
    )
    assert isinstance(result.exception, UBootEnvAppError)
    assert "doesn't match computed" in result.output


def test_verify_problems(cli_runner: CliRunner, data_dir: str) -> None:
    """Only problems are printed with --problems."""
    result = cli_runner.invoke(
        ubootenv_verify.main,
        ["--problems", "-e", "little", os.path.join(data_dir, "env_bad_crc.bin")],
        expected_code=1,
    )
    assert "doesn't match computed" in result.output
    assert "Size" not in result.output.split("Summary table")[0]


def test_verify_wrong_endianness(cli_runner: CliRunner, data_dir: str) -> None:
    cli_runner.invoke(
        ubootenv_verify.main,
        ["-e", "big", os.path.join(data_dir, "env_le.bin")],
        expected_code=1,
    )


def test_safe_main_error_code(monkeypatch: pytest.MonkeyPatch, data_dir: str) -> None:
    monkeypatch.setattr(
        sys, "argv", ["ubootenv-verify", "-e", "little", os.path.join(data_dir, "env_bad_crc.bin")]
    )
    with pytest.raises(SystemExit) as exc_info:
        ubootenv_verify.safe_main()
    assert exc_info.value.code == 1
