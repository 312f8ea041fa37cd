#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Shared fixtures of the tests."""

import os

import pytest

from tests.cli_runner import CliRunner

# keep the tests away from the user's debug log
os.environ["UBOOTENV_DEBUG_LOGGING_DISABLED"] = "True"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get runner of the application commands."""
    return CliRunner()


@pytest.fixture(scope="module")
def data_dir(request: pytest.FixtureRequest) -> str:
    """Get the ``data`` folder next to the test module.

    :param request: Request of the test module.
    :return: Absolute path of the folder.
    """
    return os.path.join(os.path.dirname(os.path.abspath(str(request.fspath))), "data")
