# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from enum import Enum, unique
from typing import IO, Iterable, Iterator

from jarmain.errors import LineTooLongError, ManifestDecodeError, ManifestUnavailableError
from jarmain.manifest.attributes import MAX_LINE_LENGTH

logger = logging.getLogger(__name__)


@unique
class LineLengthPolicy(Enum):
    REJECT = "reject"
    TRUNCATE = "truncate"


def split_terminator(line: str) -> tuple[str, str]:
    """Split `line` into its content and its `\\r\\n`, `\\n`, `\\r` or empty terminator."""
    if line.endswith("\r\n"):
        return line[:-2], "\r\n"
    if line.endswith(("\n", "\r")):
        return line[:-1], line[-1]
    return line, ""


def _encoded_length(text: str, encoding: str) -> int:
    return len(text.encode(encoding, errors="replace"))


def _truncate_to_bytes(content: str, max_bytes: int, encoding: str) -> str:
    # Cut on a character boundary so no partial multi-byte sequence is left behind.
    size = 0
    for index, char in enumerate(content):
        size += _encoded_length(char, encoding)
        if size > max_bytes:
            return content[:index]
    return content


def iter_manifest_lines(
    stream: Iterable[str],
    *,
    max_line_length: int = MAX_LINE_LENGTH,
    policy: LineLengthPolicy = LineLengthPolicy.REJECT,
    encoding: str = "utf-8",
) -> Iterator[str]:
    """Yield the lines of `stream`, each holding at most `max_line_length` bytes of content.

    Length is measured on the line without its terminator, encoded with `encoding`, which should be
    the encoding the manifest was decoded from. Over-long lines either raise `LineTooLongError` or
    are cut down with their terminator kept, per `policy`.
    """
    if max_line_length <= 0:
        raise ValueError(f"max_line_length must be positive, given {max_line_length}")

    for line_number, line in enumerate(stream, start=1):
        content, terminator = split_terminator(line)
        length = _encoded_length(content, encoding)
        if length <= max_line_length:
            yield line
        elif policy is LineLengthPolicy.REJECT:
            raise LineTooLongError(line_number, length, max_line_length)
        else:
            logger.debug(
                f"Truncating manifest line {line_number} from {length} to {max_line_length} bytes."
            )
            yield _truncate_to_bytes(content, max_line_length, encoding) + terminator


def _read_lines(fp: IO[str], path: str, encoding: str) -> Iterator[str]:
    try:
        yield from fp
    except UnicodeDecodeError as e:
        raise ManifestDecodeError(f"Manifest {path} is not valid {encoding} text: {e}") from e
    except OSError as e:
        raise ManifestUnavailableError(f"Could not read manifest {path}: {e}") from e


@contextmanager
def open_manifest_lines(
    path: str | os.PathLike[str],
    *,
    max_line_length: int = MAX_LINE_LENGTH,
    policy: LineLengthPolicy = LineLengthPolicy.REJECT,
    encoding: str = "utf-8",
) -> Iterator[Iterator[str]]:
    """Open the manifest at `path` and yield an iterator over its bounded lines.

    The file is closed when the block exits, however it exits. Only failures to read the file
    itself are converted to `ManifestError`s; exceptions from the block pass through untouched.
    """
    try:
        fp = open(path, "r", encoding=encoding, newline="")
    except OSError as e:
        raise ManifestUnavailableError(f"Could not open manifest {os.fspath(path)}: {e}") from e

    logger.debug(f"Reading manifest {os.fspath(path)}")
    with fp:
        yield iter_manifest_lines(
            _read_lines(fp, os.fspath(path), encoding),
            max_line_length=max_line_length,
            policy=policy,
            encoding=encoding,
        )
