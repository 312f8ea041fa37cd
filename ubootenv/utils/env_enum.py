#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Enumeration with numeric tag, textual label and description.

The tag is the value stored in the image (e.g. the flags byte), the label is the
name used on the command line and in reports.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from typing_extensions import Self

from ubootenv.exceptions import UBootEnvKeyError, UBootEnvTypeError


@dataclass(frozen=True)
class UBootEnvEnumMember:
    """Value of an enumeration member."""

    tag: int
    label: str
    description: Optional[str] = None


class UBootEnvEnum(UBootEnvEnumMember, Enum):
    """Enumeration looked up by tag or label.

    A member is equal to its tag and to its label, so ``EnvFlags.ACTIVE == 1``.
    """

    def __eq__(self, other: object) -> bool:
        return self.tag == other or self.label == other

    def __hash__(self) -> int:
        return hash((self.tag, self.label, self.description))

    @classmethod
    def labels(cls) -> list[str]:
        """Labels of all members in definition order."""
        return [member.label for member in cls]

    @classmethod
    def tags(cls) -> list[int]:
        """Tags of all members in definition order."""
        return [member.tag for member in cls]

    @classmethod
    def contains(cls, obj: Union[int, str]) -> bool:
        """Check whether a member with given tag or label exists.

        :param obj: Tag or label.
        :raises UBootEnvTypeError: The object is neither integer nor string.
        :return: True if the member exists.
        """
        if not isinstance(obj, (int, str)):
            raise UBootEnvTypeError(f"Expected tag or label, got {type(obj).__name__}")
        try:
            cls.from_attr(obj)
        except UBootEnvKeyError:
            return False
        return True

    @classmethod
    def from_attr(cls, attribute: Union[int, str]) -> Self:
        """Get member by tag (integer) or label (string).

        :param attribute: Tag or label.
        :return: The member.
        """
        if isinstance(attribute, int):
            return cls.from_tag(attribute)
        return cls.from_label(attribute)

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Get member by tag.

        :param tag: Tag of the member.
        :raises UBootEnvKeyError: No member has the tag.
        :return: The member.
        """
        for member in cls:
            if member.tag == tag:
                return member
        raise UBootEnvKeyError(f"{cls.__name__} has no member with tag {tag}")

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get member by label, ignoring case.

        :param label: Label of the member.
        :raises UBootEnvKeyError: No member has the label or the label isn't a string.
        :return: The member.
        """
        if not isinstance(label, str):
            raise UBootEnvKeyError(f"{cls.__name__} label must be a string, got {label!r}")
        for member in cls:
            if member.label.lower() == label.lower():
                return member
        raise UBootEnvKeyError(f"{cls.__name__} has no member with label '{label}'")
