#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Base class of objects with binary representation."""

from abc import ABC, abstractmethod
from typing import Any

from typing_extensions import Self


class BaseClass(ABC):
    """Object exported into and parsed from bytes.

    Two objects of the same class are equal when all their attributes are equal.
    """

    def __eq__(self, obj: Any) -> bool:
        return isinstance(obj, self.__class__) and vars(obj) == vars(self)

    def __ne__(self, obj: Any) -> bool:
        return not self.__eq__(obj)

    @abstractmethod
    def __repr__(self) -> str:
        """Short one-line identification of the object."""

    @abstractmethod
    def __str__(self) -> str:
        """Multi-line human readable description of the object."""

    @abstractmethod
    def export(self) -> bytes:
        """Serialize the object.

        :return: Binary representation.
        """

    @classmethod
    @abstractmethod
    def parse(cls, data: bytes) -> Self:
        """Deserialize the object.

        :param data: Binary representation.
        :return: New object.
        """
