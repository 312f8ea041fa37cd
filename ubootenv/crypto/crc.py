#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Checksums of the environment image.

U-Boot protects the environment with the zlib flavour of CRC-32 (reflected
polynomial 0xEDB88320, final complement). The parameters live in :class:`CrcConfig`,
the computation itself is done by ``crcmod``.
"""

from dataclasses import dataclass
from typing import Optional

import crcmod

CRC32_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class CrcConfig:
    """Parameters of a CRC algorithm in ``crcmod`` notation.

    The polynomial includes its top bit and the initial value is the checksum of
    zero-length data.
    """

    polynomial: int
    initial_value: int
    final_xor: int
    reverse: bool


CRC32_CONFIG = CrcConfig(
    polynomial=0x104C11DB7, initial_value=0, final_xor=CRC32_MASK, reverse=True
)


class Crc:
    """Calculator of one CRC algorithm."""

    def __init__(self, config: CrcConfig):
        """Create the calculator.

        :param config: Polynomial, initial value, final XOR value and reflection of the CRC.
        """
        self.config = config
        self._compute = crcmod.mkCrcFun(
            config.polynomial,
            initCrc=config.initial_value,
            rev=config.reverse,
            xorOut=config.final_xor,
        )

    def __repr__(self) -> str:
        return f"Crc(polynomial=0x{self.config.polynomial:X}, reverse={self.config.reverse})"

    def calculate(self, data: bytes, seed: Optional[int] = None) -> int:
        """Compute checksum of the data.

        :param data: Checksummed data.
        :param seed: Checksum of preceding data, the computation starts anew if None.
        :return: The checksum.
        """
        return self._compute(data) if seed is None else self._compute(data, seed)


_CRC32 = Crc(CRC32_CONFIG)


def checksum(seed: int, data: bytes) -> int:
    """Compute the CRC-32 of the environment image.

    The seed is the checksum of preceding data, so the computation may be split:
    ``checksum(checksum(0, a), b) == checksum(0, a + b)``. Zero-length data returns
    the seed.

    :param seed: Checksum to continue from, 0 to start a new computation.
    :param data: Data to checksum.
    :return: 32-bit checksum.
    """
    return _CRC32.calculate(data, seed & CRC32_MASK)
