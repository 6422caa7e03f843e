#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for h2h conversion runs.

Writes a rotating operations log per component plus a shared errors log,
and echoes warnings to the console. The core pipeline takes the logger as
an optional argument; ``safe_logger`` turns ``None`` into a no-op logger.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(threadName)s] - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _reset_handlers(logger: logging.Logger) -> None:
    """Close and drop handlers left by a previous H2HLogger of the same name."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class H2HLogger:
    """
    Rotating file logger for conversion runs.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Prefix for logger names and the main log file
        main_logger: Receives every message (``<component>.log``)
        error_logger: Receives errors only (``errors.log``)
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "h2h",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Name for the component logger (e.g. 'convert')
            max_bytes: Size at which a log file rotates
            backup_count: Number of rotated files to keep
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = logging.getLogger(f"h2h.{self.component_name}")
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        _reset_handlers(self.main_logger)

        self.error_logger = logging.getLogger(f"h2h.{self.component_name}.errors")
        self.error_logger.setLevel(logging.ERROR)
        self.error_logger.propagate = False
        _reset_handlers(self.error_logger)

        self._add_file_handler(
            self.main_logger, self.log_dir / f"{self.component_name}.log", logging.DEBUG
        )
        self._add_file_handler(
            self.error_logger, self.log_dir / "errors.log", logging.ERROR
        )

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

    def _add_file_handler(self, logger: logging.Logger, path: Path, level: int) -> None:
        handler = RotatingFileHandler(
            path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(
            logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)

    @staticmethod
    def _with_details(message: str, details: Optional[Dict[str, Any]]) -> str:
        if details:
            return f"{message}: {json.dumps(details, default=str)}"
        return message

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a pipeline milestone (start, file done, run complete)."""
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}"
        )

    def log_error(
        self, error: BaseException, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log an error with its context to both logs.

        Args:
            error: Exception that occurred
            context: Where it happened (operation, file, ...)
        """
        error_type = type(error).__name__
        context_str = ""
        if context:
            context_str = " | " + ", ".join(f"{k}={v}" for k, v in context.items())

        self.main_logger.debug(f"ERROR - {error_type}: {error}{context_str}")
        self.error_logger.error(f"ERROR - {error_type}: {error}{context_str}")
        if error.__traceback__ is not None:
            tb = "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
            self.error_logger.error(f"Traceback:\n{tb}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(self._with_details(f"DEBUG - {message}", details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(self._with_details(f"INFO - {message}", details))

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.main_logger.warning(self._with_details(f"WARNING - {message}", details))

    def log_cli_error(
        self,
        error: BaseException,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log full error details and return a short message for the terminal.

        Examples:
            >>> logger.log_cli_error(WalkError("permission denied: posts/"))
            '❌ WalkError: permission denied: posts/'
        """
        self.log_error(error, context or {"source": "cli"})
        message = f"❌ {type(error).__name__}: {error}"
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: BaseException,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed CLI command and exit.

    Pulls the logger and verbose flag from ``ctx.obj``, logs the error with
    the operation name and any extra context, echoes a one-line message on
    stderr (with traceback when verbose) and exits with ``exit_code``.
    """
    logger: Optional[H2HLogger] = ctx.obj.get("logger")
    verbose: bool = ctx.obj.get("verbose", False)

    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    click.echo(
        safe_logger(logger).log_cli_error(error, context, show_traceback=verbose),
        err=True,
    )
    sys.exit(exit_code)


class NullLogger:
    """No-op stand-in with the H2HLogger interface."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(
        self, error: BaseException, context: Optional[Dict[str, Any]] = None
    ) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: BaseException,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return f"❌ {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[H2HLogger]) -> H2HLogger:
    """
    Return ``logger``, or the shared NullLogger when it is None.

    Lets callers write ``safe_logger(logger).log_info(...)`` without
    checking for a logger first.
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
