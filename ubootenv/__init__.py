#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""U-Boot environment tools.

Library and command line tools converting a plaintext ``name=value`` variable list
into the binary environment image persisted by the U-Boot bootloader in flash/NVRAM,
and back.

Interfaces:
    - Python library (``ubootenv.image.env_image``) for custom integrations
    - CLI tools ``mkubootenv`` and ``ubootenv-verify`` for automation and scripting

Behavior is tuned by environment variables:
    - ``UBOOTENV_DEBUG``: print debug messages on the console
    - ``UBOOTENV_DEBUG_LOGGING_DISABLED``: don't write the debug log file
    - ``UBOOTENV_DEBUG_LOG_FILE``: location of the debug log file
"""

import os
from typing import Optional, Union

from packaging.version import Version
from platformdirs import PlatformDirs

from .__version__ import __version__ as _raw_version

TRUE_VALUES = ("True", "true", "T", "1")


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Interpret a setting as boolean.

    Strings are true only when spelled as one of ``TRUE_VALUES``, other values follow
    the Python truth rules.

    :param value: Setting value, None if the setting is missing.
    :return: The boolean.
    """
    if isinstance(value, str):
        return value in TRUE_VALUES
    return bool(value)


version = Version(_raw_version)

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

UBOOTENV_PLATFORM_DIRS = PlatformDirs(
    appname="ubootenv", appauthor="nxp", version=version.base_version
)

UBOOTENV_DEBUG = value_to_bool(os.environ.get("UBOOTENV_DEBUG"))
UBOOTENV_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("UBOOTENV_DEBUG_LOGGING_DISABLED"))
UBOOTENV_DEBUG_LOG_FILE = os.environ.get("UBOOTENV_DEBUG_LOG_FILE") or os.path.join(
    UBOOTENV_PLATFORM_DIRS.user_log_dir, "debug.log"
)

# folder of the optional logging.yaml
UBOOTENV_USER_CONFIG_DIR = os.path.expanduser("~/.ubootenv")
