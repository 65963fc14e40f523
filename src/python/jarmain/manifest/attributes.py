# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Names from the jar manifest specification.

See: https://docs.oracle.com/javase/8/docs/technotes/guides/jar/jar.html#JAR_Manifest
"""

PATH = "META-INF/MANIFEST.MF"

MANIFEST_VERSION = "Manifest-Version"
CREATED_BY = "Created-By"
MAIN_CLASS = "Main-Class"
CLASS_PATH = "Class-Path"

# Bytes of content per line, not counting the line terminator.
MAX_LINE_LENGTH = 72

# The `isspace()` class from C's locale, narrower than `str.isspace()`.
WHITESPACE = frozenset(" \t\n\r\f\v")


def header_prefix(attribute: str) -> str:
    """The literal that starts a line declaring `attribute`, e.g. `Main-Class:`."""
    return f"{attribute}:"
