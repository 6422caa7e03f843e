#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and run statistics.

Functions:
    setup_logger: Initialize an H2HLogger for a CLI component

Classes:
    ConversionStats: Counters and timing for a tree conversion

Usage:
    from h2h.core.cli import setup_logger, ConversionStats

    logger = setup_logger(log_dir, "convert")
    stats = ConversionStats()
    stats.files_converted += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from h2h.core.exceptions import ConversionError
from h2h.core.logging_manager import H2HLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> H2HLogger:
    """
    Create an H2HLogger writing under ``<log_dir>/operations``.

    Args:
        log_dir: Base log directory (see ``h2h.core.config.LOG_DIR``)
        component_name: Component identifier (e.g. 'convert')

    Returns:
        Configured H2HLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return H2HLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ConversionStats:
    """
    Statistics for a directory conversion.

    Attributes:
        files_found: Number of files matching the configured extension
        files_converted: Number of files written successfully
        errors: Number of files that failed
        failures: Per-file errors, in completion order
        matched_files: Files found by the walk (filled on dry runs)
        start_time: Run start timestamp
    """
    files_found: int = 0
    files_converted: int = 0
    errors: int = 0
    failures: List[ConversionError] = field(default_factory=list)
    matched_files: List[Path] = field(default_factory=list)
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.files_found < 0:
            raise ValueError(f"files_found must be non-negative, got {self.files_found}")
        if self.files_converted < 0:
            raise ValueError(
                f"files_converted must be non-negative, got {self.files_converted}"
            )
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def record_failure(self, failure: ConversionError) -> None:
        """Append a failure and bump the error count. Callers hold the run lock."""
        self.failures.append(failure)
        self.errors += 1

    def finish(self) -> None:
        """Freeze the duration at the current time."""
        self._duration_cached = (datetime.now() - self.start_time).total_seconds()

    def duration(self) -> float:
        """Seconds elapsed since start, frozen once ``finish`` is called."""
        if self._duration_cached is not None:
            return self._duration_cached
        return (datetime.now() - self.start_time).total_seconds()

    def summary(self) -> str:
        return (
            f"{self.files_found} files found, "
            f"{self.files_converted} converted, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "files_found": self.files_found,
            "files_converted": self.files_converted,
            "errors": self.errors,
            "failures": [str(failure) for failure in self.failures],
            "duration": self.duration(),
        }
