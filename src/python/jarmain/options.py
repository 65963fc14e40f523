# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import codecs
import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

import toml
from typing_extensions import Protocol

from jarmain.errors import ConfigError
from jarmain.manifest.attributes import MAIN_CLASS, MAX_LINE_LENGTH
from jarmain.manifest.line_reader import LineLengthPolicy

logger = logging.getLogger(__name__)

SECTION = "manifest"


class ConfigSource(Protocol):
    """Anything with a path to report in errors and TOML bytes to parse."""

    @property
    def path(self) -> str:
        raise NotImplementedError()

    @property
    def content(self) -> bytes:
        raise NotImplementedError()


@dataclass(frozen=True)
class FileContent:
    path: str
    content: bytes


def _is_positive_int(value: Any) -> bool:
    # TOML booleans are ints to Python.
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class ManifestScanOptions:
    """How a manifest is read and which attribute is looked up in it.

    Config files carry these under a `[manifest]` table, using the field names as keys.
    """

    max_line_length: int = MAX_LINE_LENGTH
    line_length_policy: LineLengthPolicy = LineLengthPolicy.REJECT
    max_lines: int | None = None
    attribute: str = MAIN_CLASS
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if isinstance(self.line_length_policy, str):
            try:
                policy = LineLengthPolicy(self.line_length_policy.lower())
            except ValueError:
                choices = ", ".join(p.value for p in LineLengthPolicy)
                raise ConfigError(
                    f"Invalid line_length_policy {self.line_length_policy!r}, "
                    f"expected one of: {choices}"
                )
            object.__setattr__(self, "line_length_policy", policy)
        if not _is_positive_int(self.max_line_length):
            raise ConfigError(
                f"max_line_length must be a positive integer, given {self.max_line_length!r}"
            )
        if self.max_lines is not None and not _is_positive_int(self.max_lines):
            raise ConfigError(f"max_lines must be a positive integer, given {self.max_lines!r}")
        if not self.attribute or ":" in self.attribute or self.attribute != self.attribute.strip():
            raise ConfigError(f"Invalid attribute name {self.attribute!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigError(f"Unknown encoding {self.encoding!r}")

    @classmethod
    def load(cls, source: ConfigSource) -> ManifestScanOptions:
        try:
            values = toml.loads(source.content.decode())
        except (toml.TomlDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"Config file {source.path} could not be parsed as TOML:\n  {e}")
        section = values.get(SECTION, {})
        if not isinstance(section, dict):
            raise ConfigError(f"Config file {source.path} has a non-table [{SECTION}] entry.")
        logger.debug(f"Loaded [{SECTION}] options from {source.path}")
        return cls.from_mapping(section, origin=source.path)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> ManifestScanOptions:
        try:
            with open(path, "rb") as fp:
                content = fp.read()
        except OSError as e:
            raise ConfigError(f"Could not read config file {os.fspath(path)}: {e}") from e
        return cls.load(FileContent(os.fspath(path), content))

    @classmethod
    def from_mapping(
        cls, values: Mapping[str, Any], *, origin: str = "<mapping>"
    ) -> ManifestScanOptions:
        valid = {field.name for field in dataclasses.fields(cls)}
        unknown = sorted(set(values) - valid)
        if unknown:
            raise ConfigError(
                f"Unknown [{SECTION}] options in {origin}: {', '.join(unknown)}. "
                f"Valid options are: {', '.join(sorted(valid))}"
            )
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> ManifestScanOptions:
        """Return a copy with each non-None override applied."""
        return dataclasses.replace(self, **{k: v for k, v in overrides.items() if v is not None})
