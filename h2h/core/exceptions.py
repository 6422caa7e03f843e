#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for h2h.

Exception Hierarchy:
    Exception (built-in)
    └── H2HError - Base for every error raised by h2h
        ├── ConfigurationError - Unsupported format, direction or limits
        ├── InvalidDocumentError - Missing or incomplete front matter delimiters
        ├── FormatError - Structured format failure (names the format)
        │   ├── DecodeError - Front matter could not be parsed
        │   └── EncodeError - Front matter could not be serialized
        ├── WalkError - Source tree could not be enumerated
        ├── ConversionError - One file failed (wraps the cause)
        └── ConversionFailedError - One or more files failed in a run

Usage:
    from h2h.core.exceptions import ConversionFailedError, WalkError

    try:
        stats = convert_posts(src, dst, config)
    except WalkError as e:
        logger.error(f"Cannot read source tree: {e}")
    except ConversionFailedError as e:
        for failure in e.failures:
            print(f"Error: {failure}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from h2h.core.cli import ConversionStats


class H2HError(Exception):
    """Base exception for all h2h errors."""

    pass


class ConfigurationError(H2HError):
    """
    Exception for invalid conversion settings.

    Raised before any file is touched:
    - Unknown source or target format
    - Unknown conversion direction
    - Non-positive concurrency limit
    - Malformed configuration file

    Examples:
        >>> raise ConfigurationError("unsupported format: json")
        >>> raise ConfigurationError("max_concurrency must be >= 1, got 0")
    """

    pass


class InvalidDocumentError(H2HError):
    """
    Exception for documents without a complete front matter block.

    Raised for empty files, files that do not open with a ``---`` line,
    and files whose front matter is never closed.

    Examples:
        >>> raise InvalidDocumentError("missing closing front matter delimiter")
    """

    pass


class FormatError(H2HError):
    """
    Exception for structured format failures.

    Attributes:
        format: Name of the format that failed (``yaml`` or ``toml``)
        cause: Underlying parser or serializer exception
    """

    action = "processing"

    def __init__(self, format: str, cause: Optional[BaseException] = None) -> None:
        self.format = str(format)
        self.cause = cause
        message = f"{self.action} {self.format} front matter"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class DecodeError(FormatError):
    """
    Front matter could not be parsed under the source format.

    Examples:
        >>> raise DecodeError("yaml", yaml.YAMLError("mapping values are not allowed here"))
    """

    action = "decoding"


class EncodeError(FormatError):
    """
    Front matter could not be serialized under the target format.

    Examples:
        >>> raise EncodeError("toml", TypeError("Object of type set is not serializable"))
    """

    action = "encoding"


class WalkError(H2HError):
    """
    Exception for source tree enumeration failures.

    Fatal for the whole run: when the tree cannot be listed the set of
    files to convert cannot be trusted, so nothing is dispatched.
    """

    pass


class ConversionError(H2HError):
    """
    A single file failed to convert.

    Attributes:
        source_file: Path of the source document
        cause: Exception that stopped the conversion
    """

    def __init__(self, source_file: Path | str, cause: BaseException) -> None:
        self.source_file = Path(source_file)
        self.cause = cause
        super().__init__(f"converting file {self.source_file}: {cause}")


class ConversionFailedError(H2HError):
    """
    Terminal error for a run in which at least one file failed.

    Attributes:
        failures: Per-file ConversionError instances
        stats: Statistics for the whole run (successes included)
    """

    def __init__(
        self,
        failures: Sequence[ConversionError],
        stats: Optional["ConversionStats"] = None,
    ) -> None:
        self.failures: List[ConversionError] = list(failures)
        self.stats = stats
        super().__init__(
            f"encountered {len(self.failures)} errors during conversion"
        )
