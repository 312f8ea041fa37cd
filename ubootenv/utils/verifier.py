#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Verification reports.

A report is a tree of named records. Each record has a result (succeeded, warning
or error) and an optional value, the result of a report is the most severe result
of its records. Reports render into indented text, colored for the console.
"""

import textwrap
from dataclasses import dataclass
from typing import Iterator, Optional, Type, Union

import colorama
import prettytable

from ubootenv.exceptions import UBootEnvError
from ubootenv.utils.env_enum import UBootEnvEnum
from ubootenv.utils.misc import check_range

RecordValue = Optional[Union[str, int, bool]]


class VerifierResult(UBootEnvEnum):
    """Result of one check, ordered by severity; the description is its console color."""

    SUCCEEDED = (0, "Succeeded", colorama.Fore.GREEN)
    WARNING = (1, "Warning", colorama.Fore.YELLOW)
    ERROR = (2, "Error", colorama.Fore.RED)

    @classmethod
    def draw(cls, res: "VerifierResult", colorize: bool = True) -> str:
        """Get label of the result.

        :param res: The result.
        :param colorize: Wrap the label into ANSI color codes.
        :return: Label, colored on request.
        """
        if colorize and res.description:
            return f"{res.description}{res.label}{colorama.Fore.RESET}"
        return res.label


@dataclass
class VerifierRecord:
    """Single check of a report."""

    name: str
    result: VerifierResult = VerifierResult.ERROR
    value: RecordValue = None
    # succeeded record is hidden unless important
    important: bool = True


class Verifier:
    """Report of a verified object.

    :cvar MAX_LINE_LENGTH: Width of the rendered report.
    :cvar TITLE_FG_COLOR: Color of report names.
    """

    MAX_LINE_LENGTH = 120
    TITLE_FG_COLOR = colorama.Fore.CYAN

    def __init__(
        self,
        name: str,
        indent: int = 2,
        important: bool = True,
    ) -> None:
        """Create empty report.

        :param name: Name of the verified object.
        :param indent: Indentation of nested records.
        :param important: Render the records even if the whole report succeeded.
        """
        self.name = name
        self.indent = indent
        self.important = important
        self.records: list[Union[VerifierRecord, "Verifier"]] = []
        # nesting depth, set by the parent while rendering
        self.level = 1

    def __repr__(self) -> str:
        return f"Verifier({self.name!r}, {len(self.records)} records)"

    def __str__(self) -> str:
        return self.draw(colorize=False)

    @property
    def max_line(self) -> int:
        """Width available at the current nesting depth."""
        return self.MAX_LINE_LENGTH - self.level * self.indent

    @property
    def result(self) -> VerifierResult:
        """The most severe result of all records."""
        return max(
            (record.result for record in self.records),
            key=lambda res: res.tag,
            default=VerifierResult.SUCCEEDED,
        )

    @property
    def has_errors(self) -> bool:
        """At least one record of the report failed."""
        return self.get_count([VerifierResult.ERROR]) > 0

    def _iter_records(self) -> Iterator[VerifierRecord]:
        for record in self.records:
            if isinstance(record, Verifier):
                yield from record._iter_records()
            else:
                yield record

    def get_count(self, results: Optional[list[VerifierResult]] = None) -> int:
        """Count records, nested reports included.

        :param results: Count only records with these results, all records if None.
        :return: Count of records.
        """
        return sum(1 for rec in self._iter_records() if results is None or rec.result in results)

    def add_record(
        self,
        name: str,
        result: Union[VerifierResult, bool],
        value: RecordValue = None,
        important: bool = True,
    ) -> None:
        """Add a check.

        :param name: Name of the check.
        :param result: Result of the check, a boolean maps to succeeded or error.
        :param value: Value shown beside the result.
        :param important: Render the record even if it succeeded.
        """
        if isinstance(result, bool):
            result = VerifierResult.SUCCEEDED if result else VerifierResult.ERROR
        self.records.append(VerifierRecord(name, result, value, important))

    def add_record_bit_range(
        self, name: str, value: Optional[int], bit_range: int = 32, important: bool = True
    ) -> None:
        """Add a check that the value is an unsigned number of given width.

        The value of a passed check is rendered as zero padded hexadecimal number.
        """
        if value is None:
            self.add_record(name, False, "Doesn't exist")
        elif check_range(value, end=(1 << bit_range) - 1):
            digits = (bit_range + 3) // 4
            self.add_record(name, True, f"0x{value:0{digits}X}", important)
        else:
            self.add_record(name, False, f"Out of {bit_range} bit range: {value}")

    def add_record_range(
        self,
        name: str,
        value: Optional[int],
        min_val: int = 0,
        max_val: int = (1 << 32) - 1,
    ) -> None:
        """Add a check that the value lies within borders, both included."""
        if value is None:
            self.add_record(name, False, "Doesn't exist")
        elif value < min_val:
            self.add_record(name, False, f"Lower than allowed: {value} < {min_val}")
        elif value > max_val:
            self.add_record(name, False, f"Higher than allowed: {value} > {max_val}")
        else:
            self.add_record(name, True, value)

    def add_record_enum(
        self, name: str, value: Optional[Union[int, str]], enum: Type[UBootEnvEnum]
    ) -> None:
        """Add a check that the value is a tag or label of the enumeration.

        :param name: Name of the check.
        :param value: Tag or label.
        :param enum: The enumeration.
        """
        if value is None:
            self.add_record(name, False, "Doesn't exist")
            return
        try:
            member = enum.from_attr(value)
        except UBootEnvError:
            self.add_record(name, False, f"{value} not fit to known enumeration {enum.__name__}")
            return
        text = member.label
        if member.description:
            text += f", {member.description}"
        self.add_record(name, True, text)

    def add_child(self, child: "Verifier") -> None:
        """Nest another report."""
        self.records.append(child)

    def _headline(self, colorize: bool) -> str:
        color, reset = (self.TITLE_FG_COLOR, colorama.Fore.RESET) if colorize else ("", "")
        return f"{color}{self.name}{reset}({VerifierResult.draw(self.result, colorize)})"

    def _single_record(self) -> Optional[VerifierRecord]:
        """Get the only important record of a flat report."""
        if any(isinstance(record, Verifier) for record in self.records):
            return None
        important = [
            rec for rec in self.records if isinstance(rec, VerifierRecord) and rec.important
        ]
        return important[0] if len(important) == 1 else None

    def _draw_record(self, record: VerifierRecord, colorize: bool = True) -> str:
        text = f"{record.name}({VerifierResult.draw(record.result, colorize)}): "
        if record.value is not None:
            text += str(record.value)
        hanging = " " * len(f"{record.name}({record.result.label}): ")
        return "\n".join(textwrap.wrap(text, width=self.max_line, subsequent_indent=hanging))

    def draw(self, results: Optional[list[VerifierResult]] = None, colorize: bool = True) -> str:
        """Render the report.

        A succeeded report is rendered as a single line when it isn't important, or when
        it holds just one important record and no nested report.

        :param results: Render only records with these results, all of them if None.
        :param colorize: Use ANSI colors.
        :return: Rendered report, empty if the report itself doesn't match the results.
        """
        if results and self.result not in results:
            return ""

        if self.result == VerifierResult.SUCCEEDED:
            if not self.important:
                return self._headline(colorize) + "\n"
            single = self._single_record()
            if single:
                value = "" if single.value is None else f": {single.value}"
                return self._headline(colorize) + value + "\n"

        ret = self._headline(colorize) + " \n"
        pad = " " * self.indent
        for record in self.records:
            if isinstance(record, Verifier):
                record.level = self.level + 1
                ret += textwrap.indent(record.draw(results, colorize), pad)
                continue
            if results and record.result not in results:
                continue
            if record.result == VerifierResult.SUCCEEDED and not record.important:
                continue
            ret += textwrap.indent(self._draw_record(record, colorize) + "\n", pad)
        return ret

    def get_summary_table(self, colorize: bool = True) -> str:
        """Render count of records per result as a table.

        :param colorize: Use ANSI colors in the header.
        :return: The table.
        """
        table = prettytable.PrettyTable(
            [VerifierResult.draw(res, colorize) for res in VerifierResult]
        )
        table.align = "c"
        table.add_row([self.get_count([res]) for res in VerifierResult])
        return table.get_string()
