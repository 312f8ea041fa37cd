#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""U-Boot environment image codec and image file formats."""

from ubootenv.image.env_image import EnvFlags, EnvImage, EnvWarning, EnvWarningType, decode, encode
from ubootenv.image.image_file import EnvImageFormat, load_image, save_image

__all__ = [
    "EnvFlags",
    "EnvImage",
    "EnvImageFormat",
    "EnvWarning",
    "EnvWarningType",
    "decode",
    "encode",
    "load_image",
    "save_image",
]
