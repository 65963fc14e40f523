# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import io
import logging
import os
from typing import IO

from jarmain.errors import ManifestDecodeError, MissingMainClassError
from jarmain.manifest.line_reader import iter_manifest_lines, open_manifest_lines
from jarmain.manifest.scanner import Found, MalformedEmpty, ScanResult, scan
from jarmain.options import ManifestScanOptions

logger = logging.getLogger(__name__)


def _resolve(result: ScanResult, options: ManifestScanOptions, origin: str) -> str | None:
    if isinstance(result, Found):
        logger.debug(f"Found {options.attribute} {result.value} in {origin}")
        return result.value
    if isinstance(result, MalformedEmpty):
        raise MissingMainClassError(f"Missing {options.attribute} value in manifest {origin}")
    logger.debug(f"No {options.attribute} attribute in {origin}")
    return None


def get_main_class(
    manifest_path: str | os.PathLike[str], options: ManifestScanOptions | None = None
) -> str | None:
    """Return the entry point class named by the manifest at `manifest_path`.

    Returns None when the manifest has no such attribute. Raises `ManifestUnavailableError` when
    the file can't be read and `MissingMainClassError` when the attribute has an empty value.
    """
    options = options or ManifestScanOptions()
    with open_manifest_lines(
        manifest_path,
        max_line_length=options.max_line_length,
        policy=options.line_length_policy,
        encoding=options.encoding,
    ) as lines:
        result = scan(lines, attribute=options.attribute, max_lines=options.max_lines)
    return _resolve(result, options, os.fspath(manifest_path))


def read_main_class(
    stream: IO[str], options: ManifestScanOptions | None = None, *, origin: str = "<stream>"
) -> str | None:
    """Like `get_main_class`, but for an already open text stream the caller closes.

    The stream should have been decoded with `options.encoding`, which line lengths are measured in.
    """
    options = options or ManifestScanOptions()
    lines = iter_manifest_lines(
        stream,
        max_line_length=options.max_line_length,
        policy=options.line_length_policy,
        encoding=options.encoding,
    )
    try:
        result = scan(lines, attribute=options.attribute, max_lines=options.max_lines)
    except UnicodeDecodeError as e:
        raise ManifestDecodeError(
            f"Manifest {origin} is not valid {options.encoding} text: {e}"
        ) from e
    return _resolve(result, options, origin)


def read_main_class_from_bytes(
    stream: IO[bytes], options: ManifestScanOptions | None = None, *, origin: str = "<stream>"
) -> str | None:
    """Like `read_main_class`, but decodes a binary stream with `options.encoding`.

    `stream` is left open for the caller.
    """
    options = options or ManifestScanOptions()
    text = io.TextIOWrapper(stream, encoding=options.encoding, newline="")
    try:
        return read_main_class(text, options, origin=origin)
    finally:
        text.detach()
