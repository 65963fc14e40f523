# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from typing import Iterator

import pytest

from jarmain.errors import ScanLimitExceededError
from jarmain.manifest.scanner import Found, MalformedEmpty, NotFound, extract_value, scan


class UnexpectedRead(AssertionError):
    pass


def lines_then_explode(*lines: str) -> Iterator[str]:
    yield from lines
    raise UnexpectedRead("scanner read past the matching line")


@pytest.mark.parametrize(
    "line",
    [
        "Main-Class: foo.Bar\n",
        "Main-Class:foo.Bar\n",
        "Main-Class:   foo.Bar   \n",
        "Main-Class:\tfoo.Bar\r\n",
        "Main-Class: foo.Bar",
    ],
)
def test_found(line: str) -> None:
    assert Found("foo.Bar") == scan([line])


@pytest.mark.parametrize(
    "line", ["Main-Class: \n", "Main-Class:\n", "Main-Class:", "Main-Class:\t \r\n"]
)
def test_malformed_empty(line: str) -> None:
    assert MalformedEmpty() == scan([line])


def test_not_found() -> None:
    assert NotFound() == scan(["Other-Attr: x\n"])
    assert NotFound() == scan([])


def test_outcomes_are_distinct() -> None:
    assert NotFound() != MalformedEmpty()
    assert not NotFound().found
    assert not MalformedEmpty().found
    assert Found("a.B").found


def test_skips_non_matching_lines() -> None:
    lines = ["Manifest-Version: 1.0\n", "Other: y\n", "Main-Class: foo.Bar\n"]
    assert Found("foo.Bar") == scan(lines)


def test_first_match_wins() -> None:
    assert Found("first.Class") == scan(
        ["Main-Class: first.Class\n", "Main-Class: second.Class\n"]
    )
    # An empty first declaration is not rescued by a later one.
    assert MalformedEmpty() == scan(["Main-Class:\n", "Main-Class: second.Class\n"])


def test_stops_reading_at_match() -> None:
    assert Found("foo.Bar") == scan(lines_then_explode("Other: y\n", "Main-Class: foo.Bar\n"))
    assert MalformedEmpty() == scan(lines_then_explode("Main-Class: \n"))
    with pytest.raises(UnexpectedRead):
        scan(lines_then_explode("Other: y\n"))


def test_prefix_must_start_the_line() -> None:
    assert NotFound() == scan([" Main-Class: foo.Bar\n"])
    assert NotFound() == scan(["\tMain-Class: foo.Bar\n"])


def test_prefix_is_case_sensitive() -> None:
    assert NotFound() == scan(["main-class: foo.Bar\n"])
    assert NotFound() == scan(["MAIN-CLASS: foo.Bar\n"])


def test_colon_required() -> None:
    assert NotFound() == scan(["Main-Class foo.Bar\n"])
    assert NotFound() == scan(["Main-ClassPath: foo.Bar\n"])
    assert NotFound() == scan(["Main-Clas"])


def test_value_ends_at_first_whitespace() -> None:
    assert Found("foo.Bar") == scan(["Main-Class: foo.Bar baz.Qux\n"])


def test_continuation_lines_are_not_joined() -> None:
    assert Found("name.of.sta") == scan(["Main-Class: name.of.sta\n", " rt.class\n"])


def test_only_c_whitespace_separates() -> None:
    # A no-break space is part of the value, as it is not in the C whitespace class.
    assert Found("\u00a0foo.Bar") == scan(["Main-Class: \u00a0foo.Bar\n"])
    assert Found("foo.Bar") == scan(["Main-Class:\f\vfoo.Bar\v\n"])


@pytest.mark.parametrize("leading", ["", " ", "  \t", "\f"])
@pytest.mark.parametrize("trailing", ["", " ", "\n", "\r\n", " \t \n"])
@pytest.mark.parametrize("value", ["Main", "com.example.Main", "a.b.C$Inner", "x"])
def test_value_is_exact(leading: str, trailing: str, value: str) -> None:
    assert Found(value) == scan([f"Main-Class:{leading}{value}{trailing}"])


def test_other_attribute() -> None:
    lines = ["Main-Class: foo.Bar\n", "Class-Path: lib/a.jar lib/b.jar\n"]
    assert Found("lib/a.jar") == scan(lines, attribute="Class-Path")
    assert NotFound() == scan(lines, attribute="Created-By")


def test_max_lines() -> None:
    lines = ["A: 1\n", "B: 2\n", "Main-Class: foo.Bar\n"]
    assert Found("foo.Bar") == scan(lines, max_lines=3)
    assert Found("foo.Bar") == scan(lines, max_lines=30)
    assert NotFound() == scan(lines[:2], max_lines=3)
    with pytest.raises(ScanLimitExceededError) as exc:
        scan(lines, max_lines=2)
    assert exc.value.max_lines == 2
    # The bound is hit on the final line, and nothing past it is read to see if input remains.
    with pytest.raises(ScanLimitExceededError):
        scan(lines[:2], max_lines=2)


def test_max_lines_pulls_no_more_than_the_bound() -> None:
    pulled: list[str] = []

    def recording(*lines: str) -> Iterator[str]:
        for line in lines:
            pulled.append(line)
            yield line

    with pytest.raises(ScanLimitExceededError):
        scan(recording("A: 1\n", "B: 2\n", "C: 3\n"), max_lines=2)
    assert ["A: 1\n", "B: 2\n"] == pulled

    # A line that would fail to be read stays unread once the bound is spent.
    with pytest.raises(ScanLimitExceededError):
        scan(lines_then_explode("A: 1\n", "B: 2\n"), max_lines=2)


@pytest.mark.parametrize("max_lines", [0, -1])
def test_max_lines_must_be_positive(max_lines: int) -> None:
    with pytest.raises(ValueError):
        scan([], max_lines=max_lines)


def test_extract_value() -> None:
    assert Found("foo.Bar") == extract_value("Main-Class:  foo.Bar\n", "Main-Class:")
    assert MalformedEmpty() == extract_value("Main-Class:", "Main-Class:")
