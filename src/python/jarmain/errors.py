# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from enum import IntEnum, unique


class ManifestError(Exception):
    """Base class for failures while locating a manifest attribute."""


class ManifestUnavailableError(ManifestError):
    """The manifest could not be opened or read."""


class ManifestDecodeError(ManifestUnavailableError):
    """The manifest bytes could not be decoded as text."""


class LineTooLongError(ManifestError):
    """A manifest line exceeds the configured length ceiling."""

    def __init__(self, line_number: int, length: int, max_line_length: int) -> None:
        self.line_number = line_number
        self.length = length
        self.max_line_length = max_line_length
        super().__init__(
            f"Manifest line {line_number} is {length} bytes long, which exceeds the maximum of "
            f"{max_line_length} bytes."
        )


class ScanLimitExceededError(ManifestError):
    """The line budget ran out before the attribute was found or the input was exhausted."""

    def __init__(self, max_lines: int) -> None:
        self.max_lines = max_lines
        super().__init__(f"Gave up after scanning {max_lines} manifest lines.")


class MissingMainClassError(ManifestError):
    """The manifest declares the attribute but gives it no value."""


class ConfigError(ManifestError):
    """The scan configuration could not be loaded or is invalid."""


@unique
class ExitCode(IntEnum):
    SUCCESS = 0
    NOT_FOUND = 1
    # 2 is left to argparse, which exits with it on usage errors.
    MANIFEST_UNAVAILABLE = 3
    MALFORMED_MANIFEST = 4
    CONFIG_ERROR = 5

    @classmethod
    def for_error(cls, error: ManifestError) -> ExitCode:
        if isinstance(error, ConfigError):
            return cls.CONFIG_ERROR
        if isinstance(error, ManifestUnavailableError):
            return cls.MANIFEST_UNAVAILABLE
        return cls.MALFORMED_MANIFEST
