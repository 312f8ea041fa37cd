#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the verification report."""

import pytest

from ubootenv.utils.env_enum import UBootEnvEnum
from ubootenv.utils.verifier import Verifier, VerifierResult


class Color(UBootEnvEnum):
    """Test enumeration."""

    RED = (0, "red", "Red color")
    GREEN = (1, "green")


def test_empty_verifier() -> None:
    verifier = Verifier("Empty")
    assert verifier.result == VerifierResult.SUCCEEDED
    assert not verifier.has_errors
    assert verifier.get_count() == 0
    assert verifier.draw(colorize=False) == "Empty(Succeeded) \n"


def test_add_record() -> None:
    """Test boolean results are converted to succeeded and error."""
    verifier = Verifier("Test")
    verifier.add_record("Passed", True, "value")
    assert verifier.result == VerifierResult.SUCCEEDED
    verifier.add_record("Maybe", VerifierResult.WARNING)
    assert verifier.result == VerifierResult.WARNING
    verifier.add_record("Failed", False, 5)
    assert verifier.result == VerifierResult.ERROR
    assert verifier.has_errors
    assert verifier.get_count() == 3
    assert verifier.get_count([VerifierResult.WARNING, VerifierResult.ERROR]) == 2


def test_add_record_bit_range() -> None:
    verifier = Verifier("Test")
    verifier.add_record_bit_range("CRC", 0x1234)
    verifier.add_record_bit_range("Byte", 0x100, bit_range=8)
    verifier.add_record_bit_range("Missing", None)
    assert "CRC(Succeeded): 0x00001234" in verifier.draw(colorize=False)
    assert verifier.get_count([VerifierResult.ERROR]) == 2


@pytest.mark.parametrize(
    "value,result",
    [
        (0, VerifierResult.SUCCEEDED),
        (10, VerifierResult.SUCCEEDED),
        (-1, VerifierResult.ERROR),
        (11, VerifierResult.ERROR),
        (None, VerifierResult.ERROR),
    ],
)
def test_add_record_range(value: int, result: VerifierResult) -> None:
    verifier = Verifier("Test")
    verifier.add_record_range("Free space", value, max_val=10)
    assert verifier.result == result


def test_add_record_enum() -> None:
    verifier = Verifier("Test")
    verifier.add_record_enum("Color", 0, Color)
    verifier.add_record_enum("Color", "green", Color)
    assert not verifier.has_errors
    output = verifier.draw(colorize=False)
    assert "red, Red color" in output
    verifier.add_record_enum("Color", 7, Color)
    verifier.add_record_enum("Color", None, Color)
    assert verifier.get_count([VerifierResult.ERROR]) == 2


def test_child() -> None:
    """Test result of the nested report propagates to the parent."""
    parent = Verifier("Parent")
    parent.add_record("Size", True, 64)
    child = Verifier("Child", important=False)
    child.add_record("Terminator", VerifierResult.WARNING, "Not found")
    parent.add_child(child)
    assert parent.result == VerifierResult.WARNING
    assert parent.get_count() == 2
    output = parent.draw(colorize=False)
    assert "Terminator(Warning): Not found" in output
    assert "Size(Succeeded)" not in parent.draw(
        results=[VerifierResult.WARNING, VerifierResult.ERROR], colorize=False
    )


def test_shortened_draw() -> None:
    verifier = Verifier("Short")
    verifier.add_record("Value", True, 5)
    assert verifier.draw(colorize=False) == "Short(Succeeded): 5\n"
    assert str(verifier) == "Short(Succeeded): 5\n"


def test_failed_draw() -> None:
    """Failed records are listed below the report name, unimportant ones are hidden."""
    verifier = Verifier("Failed")
    verifier.add_record("Hidden", True, important=False)
    verifier.add_record("Broken", False, "value")
    assert verifier.draw(colorize=False) == "Failed(Error) \n  Broken(Error): value\n"


def test_summary_table() -> None:
    verifier = Verifier("Test")
    verifier.add_record("A", True)
    verifier.add_record("B", VerifierResult.WARNING)
    table = verifier.get_summary_table(colorize=False)
    assert "Succeeded" in table
    assert "Warning" in table
    assert "Error" in table
