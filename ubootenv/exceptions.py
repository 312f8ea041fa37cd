#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""U-Boot environment exception classes.

This module defines the hierarchy of custom exception classes used throughout
the ubootenv library for consistent error handling and reporting.
"""

from typing import Optional

#######################################################################
# # U-Boot Environment Exceptions
#######################################################################


class UBootEnvError(Exception):
    """U-Boot environment base exception.

    Base exception class for all errors raised by the ubootenv library. It provides
    consistent error formatting across the package.

    :cvar fmt: Default error message format template.
    """

    fmt = "UBootEnv: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class UBootEnvKeyError(UBootEnvError, KeyError):
    """Key error exception for missing or invalid keys."""


class UBootEnvValueError(UBootEnvError, ValueError):
    """Standard value error exception.

    Raised when an invalid value is provided to an operation, for example a flags
    byte other than 0 or 1.
    """


class UBootEnvTypeError(UBootEnvError, TypeError):
    """Standard type error exception."""


class UBootEnvIOError(UBootEnvError, IOError):
    """Standard IO error exception.

    Raised when a source file can't be opened or read, or a destination file can't be
    created or written. The description names the file and the operating system cause.
    """


class UBootEnvFileNotFoundError(UBootEnvIOError, FileNotFoundError):
    """Source file doesn't exist."""


class UBootEnvLengthError(UBootEnvError, ValueError):
    """Length validation error for binary data operations.

    Raised when input or output data does not meet the length requirements of the
    environment image layout.
    """


class UBootEnvSizeTooSmallError(UBootEnvLengthError):
    """Requested image size can't hold the environment data and its trailer."""

    def __init__(self, requested_size: int, min_size: int) -> None:
        """Initialize the exception.

        :param requested_size: Size of the image requested by the caller.
        :param min_size: Minimal size of the image able to hold the data.
        """
        super().__init__(
            f"Specified size ({requested_size}) is too small for the source file to fit into. "
            f"Must be at least {min_size} bytes."
        )
        self.requested_size = requested_size
        self.min_size = min_size


class UBootEnvImageTooSmallError(UBootEnvLengthError):
    """Binary image is shorter than its header."""

    def __init__(self, size: int, min_size: int) -> None:
        """Initialize the exception.

        :param size: Size of the binary image.
        :param min_size: Size of the image header.
        """
        super().__init__(
            f"Image size ({size}) is smaller than the image header. "
            f"Must be at least {min_size} bytes."
        )
        self.size = size
        self.min_size = min_size
