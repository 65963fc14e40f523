# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Locates a single attribute, by default `Main-Class`, in manifest text.

The attribute MUST be all on one line. A value such as

    Main-Class: name.of.sta
     rt.class

which the jar format allows to be continued onto the next line, is read as `name.of.sta`.
With a single separating space and the 72 byte line ceiling that leaves room for a 60 character
class name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from jarmain.errors import ScanLimitExceededError
from jarmain.manifest.attributes import MAIN_CLASS, WHITESPACE, header_prefix


@dataclass(frozen=True)
class Found:
    value: str

    @property
    def found(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    """No line declares the attribute."""

    @property
    def found(self) -> bool:
        return False


@dataclass(frozen=True)
class MalformedEmpty:
    """The attribute is declared but nothing but whitespace follows it."""

    @property
    def found(self) -> bool:
        return False


ScanResult = Union[Found, NotFound, MalformedEmpty]


def _skip(line: str, start: int, *, whitespace: bool) -> int:
    end = len(line)
    i = start
    while i < end and (line[i] in WHITESPACE) == whitespace:
        i += 1
    return i


def extract_value(line: str, prefix: str) -> ScanResult:
    """Read the value following `prefix` on a line already known to start with it."""
    i = _skip(line, len(prefix), whitespace=True)
    j = _skip(line, i, whitespace=False)
    if i == j:
        return MalformedEmpty()
    return Found(line[i:j])


def scan(
    lines: Iterable[str], *, attribute: str = MAIN_CLASS, max_lines: int | None = None
) -> ScanResult:
    """Return the value of the first line declaring `attribute`.

    Lines are consumed in order and iteration stops at the first line whose leading characters are
    exactly `attribute` followed by a colon, so later lines are never pulled from `lines`.

    :param lines: Manifest lines, terminators included.
    :param attribute: Case-sensitive attribute name.
    :param max_lines: If set, the most lines to pull from `lines`. Inspecting that many without a
      match raises `ScanLimitExceededError`, even when the last of them ended the input.
    """
    if max_lines is not None and max_lines <= 0:
        raise ValueError(f"max_lines must be positive, given {max_lines}")

    prefix = header_prefix(attribute)
    for inspected, line in enumerate(lines, start=1):
        if line.startswith(prefix):
            return extract_value(line, prefix)
        if max_lines is not None and inspected >= max_lines:
            raise ScanLimitExceededError(max_lines)
    return NotFound()
