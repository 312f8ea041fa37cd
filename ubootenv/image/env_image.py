#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""U-Boot environment image codec.

The bootloader persists its variables as a fixed layout binary image::

    +-----------+----------+-------------------------------+-----------+
    | CRC32 (4) | flags(1) | name=value\\0name=value\\0 ... | \\0 padding |
    +-----------+----------+-------------------------------+-----------+

The flags byte exists only in the redundant environment layout. The checksum covers
the data and the padding; the flags byte is not covered. The variable list ends
with two consecutive zero bytes.

The plaintext form is the same list with variables separated by a newline. The
conversion between both forms is a delimiter translation only; variables are never
parsed nor reordered.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from typing_extensions import Self

from ubootenv.crypto.crc import checksum
from ubootenv.exceptions import (
    UBootEnvImageTooSmallError,
    UBootEnvSizeTooSmallError,
    UBootEnvValueError,
)
from ubootenv.utils.abstract import BaseClass
from ubootenv.utils.env_enum import UBootEnvEnum
from ubootenv.utils.misc import Endianness, size_fmt
from ubootenv.utils.verifier import Verifier, VerifierResult

logger = logging.getLogger(__name__)

CRC32_SIZE = 4
FLAGS_SIZE = 1
# minimum trailing null bytes
TRAILER_SIZE = 2

PLAIN_SEPARATOR = b"\n"
IMAGE_SEPARATOR = b"\x00"
IMAGE_TERMINATOR = IMAGE_SEPARATOR * 2


class EnvFlags(UBootEnvEnum):
    """Value of the flags byte in the redundant environment layout."""

    OBSOLETE = (0, "obsolete", "Environment copy is obsolete")
    ACTIVE = (1, "active", "Environment copy is active")


class EnvWarningType(UBootEnvEnum):
    """Kind of advisory condition reported during conversion."""

    CHECKSUM_MISMATCH = (0, "checksum-mismatch", "Stored checksum doesn't match the image")
    NO_TERMINATOR_FOUND = (1, "no-terminator", "Double zero terminator not found")
    OPTION_IGNORED = (2, "option-ignored", "Option has no effect in this direction")


@dataclass(frozen=True)
class EnvWarning:
    """Non-fatal condition found during conversion; the output is still produced."""

    type: EnvWarningType
    message: str

    def __str__(self) -> str:
        return self.message


def get_flags_size(redundant: bool) -> int:
    """Get size of the flags field.

    :param redundant: Redundant environment layout is used.
    :return: 1 for the redundant layout, 0 otherwise.
    """
    return FLAGS_SIZE if redundant else 0


def get_data_offset(flags_size: int) -> int:
    """Get offset of the first variable in the image.

    :param flags_size: Size of the flags field.
    :return: Offset of the data section.
    """
    return CRC32_SIZE + flags_size


def get_min_size(data_size: int, flags_size: int = 0) -> int:
    """Get the smallest image able to hold the data.

    :param data_size: Size of the plaintext environment.
    :param flags_size: Size of the flags field.
    :return: Minimal image size in bytes.
    """
    return get_data_offset(flags_size) + data_size + TRAILER_SIZE


def encode(
    data: bytes,
    size: Optional[int] = None,
    flags: Optional[int] = None,
    compute_crc: bool = True,
    endianness: Optional[Endianness] = None,
) -> bytes:
    """Encode plaintext environment into binary image.

    :param data: Plaintext environment, variables separated by newline.
    :param size: Total size of the image, defaults to the minimal size.
    :param flags: Flags byte of the redundant layout, None for the single layout.
    :param compute_crc: Compute checksum, otherwise the checksum field stays zero.
    :param endianness: Byte order of the checksum, defaults to the native one.
    :raises UBootEnvValueError: Invalid flags value.
    :raises UBootEnvSizeTooSmallError: Requested size can't hold the data.
    :return: Binary image of exactly the resolved size.
    """
    if flags is not None and not EnvFlags.contains(flags):
        raise UBootEnvValueError(f"Invalid flags value: {flags}, must be one of {EnvFlags.tags()}")
    endianness = endianness or Endianness.native()
    flags_size = get_flags_size(flags is not None)
    data_offset = get_data_offset(flags_size)

    min_size = get_min_size(len(data), flags_size)
    if size is None:
        size = min_size
    elif size < min_size:
        raise UBootEnvSizeTooSmallError(size, min_size)

    image = bytearray(size)

    if flags is not None:
        logger.debug(f"writing flags: {flags}")
        image[CRC32_SIZE] = flags

    logger.debug("writing data...")
    image[data_offset : data_offset + len(data)] = data.replace(PLAIN_SEPARATOR, IMAGE_SEPARATOR)

    # the rest of the image is already zeroed and forms the trailer

    if compute_crc:
        logger.debug("calculating crc...")
        crc = checksum(0, bytes(image[data_offset:]))
        logger.debug(f"crc: 0x{crc:08x}")
        image[:CRC32_SIZE] = crc.to_bytes(CRC32_SIZE, endianness.value)
    else:
        logger.debug("crc computation disabled")

    return bytes(image)


def find_data_end(image: bytes, data_offset: int) -> Optional[int]:
    """Find the end of the variable list.

    The list ends with the first zero byte of the first double zero found at or after
    the data offset. That zero byte terminates the last variable and belongs to the data.

    :param image: Binary image.
    :param data_offset: Offset of the data section.
    :return: Offset behind the last variable, None if there is no double zero.
    """
    terminator = image.find(IMAGE_TERMINATOR, data_offset)
    if terminator < 0:
        return None
    if terminator == data_offset:
        # empty environment
        return data_offset
    return terminator + len(IMAGE_SEPARATOR)


@dataclass
class DecodedEnv:
    """Result of image decoding."""

    data: bytes
    stored_crc: int
    computed_crc: int
    flags: Optional[int]
    warnings: list[EnvWarning]

    @property
    def crc_valid(self) -> bool:
        """Stored checksum matches the image."""
        return self.stored_crc == self.computed_crc


def decode(
    image: bytes,
    flags_size: int = 0,
    endianness: Optional[Endianness] = None,
) -> DecodedEnv:
    """Decode binary image into plaintext environment.

    Checksum mismatch and missing terminator don't stop the decoding, they are
    returned as warnings together with the plaintext.

    :param image: Binary image.
    :param flags_size: Size of the flags field, 1 for the redundant layout.
    :param endianness: Byte order of the checksum, defaults to the native one.
    :raises UBootEnvValueError: Invalid flags size.
    :raises UBootEnvImageTooSmallError: Image is shorter than its header.
    :return: Decoded environment and its image fields.
    """
    if flags_size not in (0, FLAGS_SIZE):
        raise UBootEnvValueError(f"Invalid flags size: {flags_size}")
    endianness = endianness or Endianness.native()
    data_offset = get_data_offset(flags_size)
    if len(image) < data_offset:
        raise UBootEnvImageTooSmallError(len(image), data_offset)

    warnings: list[EnvWarning] = []

    stored_crc = int.from_bytes(image[:CRC32_SIZE], endianness.value)
    computed_crc = checksum(0, image[data_offset:])
    logger.debug(f"crc: stored 0x{stored_crc:08x}, computed 0x{computed_crc:08x}")
    if stored_crc != computed_crc:
        warnings.append(
            EnvWarning(
                EnvWarningType.CHECKSUM_MISMATCH,
                f"Bad CRC: stored 0x{stored_crc:08x}, computed 0x{computed_crc:08x}. "
                "Continuing anyway.",
            )
        )

    flags = image[CRC32_SIZE] if flags_size else None

    data_end = find_data_end(image, data_offset)
    if data_end is None:
        warnings.append(
            EnvWarning(
                EnvWarningType.NO_TERMINATOR_FOUND,
                "No double zero terminator found, using the end of the image.",
            )
        )
        data_end = len(image)

    logger.debug(f"data size: {data_end - data_offset}")
    data = image[data_offset:data_end].replace(IMAGE_SEPARATOR, PLAIN_SEPARATOR)
    return DecodedEnv(
        data=data,
        stored_crc=stored_crc,
        computed_crc=computed_crc,
        flags=flags,
        warnings=warnings,
    )


class EnvImage(BaseClass):
    """U-Boot environment image.

    Holds the plaintext environment together with the layout parameters of its binary
    image. ``export`` encodes the image, ``parse`` decodes one.
    """

    def __init__(
        self,
        data: bytes,
        size: Optional[int] = None,
        flags: Optional[int] = None,
        compute_crc: bool = True,
        endianness: Optional[Endianness] = None,
    ) -> None:
        """Constructor of environment image.

        :param data: Plaintext environment, variables separated by newline.
        :param size: Total size of the image, defaults to the minimal size.
        :param flags: Flags byte of the redundant layout, None for the single layout.
        :param compute_crc: Compute checksum on export.
        :param endianness: Byte order of the checksum, defaults to the native one.
        """
        self.data = data
        self.size = size
        self.flags = flags
        self.compute_crc = compute_crc
        self.endianness = endianness or Endianness.native()
        self.stored_crc: Optional[int] = None
        self.computed_crc: Optional[int] = None
        self.warnings: list[EnvWarning] = []

    @property
    def redundant(self) -> bool:
        """Image uses the redundant layout with the flags byte."""
        return self.flags is not None

    @property
    def flags_size(self) -> int:
        """Size of the flags field."""
        return get_flags_size(self.redundant)

    @property
    def min_size(self) -> int:
        """Smallest image able to hold the data."""
        return get_min_size(len(self.data), self.flags_size)

    @property
    def image_size(self) -> int:
        """Total size of the exported image."""
        return self.min_size if self.size is None else self.size

    @property
    def crc_valid(self) -> Optional[bool]:
        """Stored checksum matches the parsed image, None if the image wasn't parsed."""
        if self.stored_crc is None:
            return None
        return self.stored_crc == self.computed_crc

    @property
    def variables(self) -> list[bytes]:
        """Non-empty ``name=value`` entries of the environment."""
        return [entry for entry in self.data.split(PLAIN_SEPARATOR) if entry]

    def __repr__(self) -> str:
        return f"U-Boot environment image, size: {self.image_size}"

    def __str__(self) -> str:
        ret = "U-Boot environment image:\n"
        ret += f" Size:          {size_fmt(self.image_size)}\n"
        ret += f" Data size:     {len(self.data)}\n"
        ret += f" Variables:     {len(self.variables)}\n"
        ret += f" Redundant:     {self.redundant}\n"
        if self.flags is not None:
            ret += f" Flags:         {self.flags}\n"
        ret += f" Endianness:    {self.endianness.value}\n"
        if self.stored_crc is not None:
            ret += f" Stored CRC:    0x{self.stored_crc:08X}\n"
            ret += f" Computed CRC:  0x{self.computed_crc:08X}\n"
        return ret

    def export(self) -> bytes:
        """Export environment into binary image.

        :return: Binary image.
        """
        return encode(
            data=self.data,
            size=self.size,
            flags=self.flags,
            compute_crc=self.compute_crc,
            endianness=self.endianness,
        )

    @classmethod
    def parse(
        cls,
        data: bytes,
        redundant: bool = False,
        endianness: Optional[Endianness] = None,
    ) -> Self:
        """Parse binary image into environment object.

        Advisory conditions found during decoding are kept in ``warnings``.

        :param data: Binary image.
        :param redundant: Image uses the redundant layout with the flags byte.
        :param endianness: Byte order of the checksum, defaults to the native one.
        :return: Environment image object.
        """
        decoded = decode(data, get_flags_size(redundant), endianness)
        env = cls(
            data=decoded.data,
            size=len(data),
            flags=decoded.flags,
            endianness=endianness,
        )
        env.stored_crc = decoded.stored_crc
        env.computed_crc = decoded.computed_crc
        env.warnings = decoded.warnings
        return env

    def verify(self) -> Verifier:
        """Verify the environment image.

        A parsed image is checked against its stored checksum, an image to be exported
        against its layout parameters.

        :return: Verification report.
        """
        ret = Verifier("U-Boot environment image")
        ret.add_record("Size", VerifierResult.SUCCEEDED, self.image_size)
        if self.stored_crc is None:
            ret.add_record(
                "CRC",
                VerifierResult.SUCCEEDED if self.compute_crc else VerifierResult.WARNING,
                "Computed on export" if self.compute_crc else "Disabled",
            )
        elif self.crc_valid:
            ret.add_record_bit_range("CRC", self.stored_crc)
        else:
            ret.add_record(
                "CRC",
                VerifierResult.ERROR,
                f"Stored 0x{self.stored_crc:08X} doesn't match computed 0x{self.computed_crc:08X}",
            )
        if self.flags is not None:
            ret.add_record_enum("Flags", self.flags, EnvFlags)

        data = Verifier("Data", important=False)
        data.add_record("Data size", VerifierResult.SUCCEEDED, len(self.data))
        data.add_record("Variables", VerifierResult.SUCCEEDED, len(self.variables))
        if any(warning.type == EnvWarningType.NO_TERMINATOR_FOUND for warning in self.warnings):
            data.add_record("Terminator", VerifierResult.WARNING, "Not found")
        else:
            data.add_record("Terminator", VerifierResult.SUCCEEDED, "Found")
            if self.stored_crc is None:
                free_space = self.image_size - self.min_size
            else:
                # the list ends with one more zero behind the last variable, an empty
                # list is a double zero
                trailer = IMAGE_SEPARATOR if self.data else IMAGE_TERMINATOR
                used = get_data_offset(self.flags_size) + len(self.data) + len(trailer)
                free_space = self.image_size - used
            data.add_record_range("Free space", free_space, max_val=self.image_size)
        ret.add_child(data)
        return ret
