#!/usr/bin/env python3
"""
engine.py
-------------------
Convert every post of a source tree into a mirrored destination tree.

    source/                         destination/
    ├── a.md            ->          ├── a.md
    ├── notes.txt       (skipped)   └── nested/
    └── nested/                         └── post.md
        └── post.md

Files are converted by a thread pool bounded by ``Config.max_concurrency``.
A file that fails (unreadable, no front matter, bad YAML/TOML, write
error) is recorded and leaves no destination file; the other files carry
on. Only configuration and directory-walk errors stop the whole run.

Programmatic API:
    from h2h.pipeline.engine import convert_posts

    stats = convert_posts(Path("source/_posts"), Path("content/posts"), config, logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

# --- Local imports ---
from h2h.core.cli import ConversionStats
from h2h.core.config import Config, default_config
from h2h.core.exceptions import ConversionError, ConversionFailedError
from h2h.core.logging_manager import H2HLogger, safe_logger
from h2h.pipeline.converter import MarkdownConverter
from h2h.utils.fs import find_matching_files, mirror_path


class _FileTask:
    """Converts one file and records the outcome in the shared stats."""

    def __init__(
        self,
        converter: MarkdownConverter,
        src_dir: Path,
        dst_dir: Path,
        stats: ConversionStats,
        lock: threading.Lock,
        logger: Optional[H2HLogger],
    ) -> None:
        self.converter = converter
        self.src_dir = src_dir
        self.dst_dir = dst_dir
        self.stats = stats
        self.lock = lock
        self.logger = logger

    def __call__(self, source: Path) -> None:
        destination = mirror_path(source, self.src_dir, self.dst_dir)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            self.converter.convert_file(source, destination)
        except Exception as e:
            failure = ConversionError(source, e)
            with self.lock:
                self.stats.record_failure(failure)
            safe_logger(self.logger).log_error(
                e, {"operation": "convert_file", "file": str(source)}
            )
            return

        with self.lock:
            self.stats.files_converted += 1
        safe_logger(self.logger).log_debug(
            "Converted file", {"source": str(source), "destination": str(destination)}
        )


def convert_posts(
    src_dir: Path,
    dst_dir: Path,
    config: Optional[Config] = None,
    logger: Optional[H2HLogger] = None,
    dry_run: bool = False,
) -> ConversionStats:
    """
    Convert all matching files under ``src_dir`` into ``dst_dir``.

    Processing Flow:
    1. Builds the converter from ``config`` (defaults when None)
    2. Creates ``dst_dir`` and its parents
    3. Lists every file ending with ``config.file_extension``
    4. Converts them on a pool of ``config.max_concurrency`` threads
    5. Raises if any file failed, after all files have been tried

    Args:
        src_dir: Root of the posts to convert
        dst_dir: Root of the converted tree (created if missing)
        config: Conversion settings
        logger: Optional logger for operation tracking
        dry_run: List matching files only; nothing is created or written

    Returns:
        ConversionStats with ``files_converted`` equal to the number of
        files found (or ``matched_files`` filled, on a dry run)

    Raises:
        ConfigurationError: If the settings are invalid
        OSError: If ``dst_dir`` cannot be created
        WalkError: If the source tree cannot be listed
        ConversionFailedError: If one or more files failed; carries the
            per-file errors and the run's stats
    """
    config = config or default_config()
    src_dir = Path(src_dir)
    dst_dir = Path(dst_dir)
    log = safe_logger(logger)
    stats = ConversionStats()

    converter = MarkdownConverter.from_config(config)

    log.log_operation(
        "convert_posts_start",
        {"source": str(src_dir), "destination": str(dst_dir), "config": config.to_dict()},
    )

    if not dry_run:
        dst_dir.mkdir(parents=True, exist_ok=True)

    files = find_matching_files(src_dir, config.file_extension)
    stats.files_found = len(files)

    if dry_run:
        stats.matched_files = files
        stats.finish()
        log.log_operation("convert_posts_dry_run", {"files_found": len(files)})
        return stats

    if not files:
        log.log_info(f"No {config.file_extension} files found in {src_dir}")

    task = _FileTask(converter, src_dir, dst_dir, stats, threading.Lock(), logger)
    with ThreadPoolExecutor(
        max_workers=config.max_concurrency, thread_name_prefix="h2h"
    ) as executor:
        # Exceptions never escape _FileTask, so the results carry nothing
        list(executor.map(task, files))

    stats.finish()
    log.log_operation("convert_posts_complete", {"stats": stats.summary()})

    if stats.failures:
        stats.failures.sort(key=lambda failure: str(failure.source_file))
        raise ConversionFailedError(stats.failures, stats)
    return stats
