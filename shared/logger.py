"""
Macloader Structured Logger
============================

Provides :class:`LoaderLogger`, a structured logging facade that emits
both human-friendly Rich console output and (optionally) machine-parseable
JSON logs to a rotating log file.

At boot the console handler writes to stderr, which the init system
forwards to the platform log; the file handler is for bring-up work.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Rich theme consistent with LoaderConsole colour palette
# ---------------------------------------------------------------------------
_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)


# ========================== JSON Formatter =================================


class _JSONFormatter(logging.Formatter):
    """Emit each log record as a single-line JSON object.

    Output fields::

        {
          "timestamp": "...",
          "level": "INFO",
          "logger": "macloader.core.engine",
          "message": "...",
          "component": "core.engine",
          "operation": "write_cid_file",
          "extra": { ... },
          "exc_info": "..."
        }
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr in ("component", "operation"):
            val = getattr(record, attr, None)
            if val is not None:
                entry[attr] = val

        extra = getattr(record, "loader_extra", None)
        if extra is not None:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


# ========================== Rich Console Handler ===========================


class _ColorConsoleHandler(RichHandler):
    """Thin wrapper over :class:`rich.logging.RichHandler` applying the
    macloader theme and writing to stderr.
    """

    def __init__(self, **kwargs: Any) -> None:
        console = Console(theme=_LOG_THEME, stderr=True)
        super().__init__(
            console=console,
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=False,
            **kwargs,
        )


# ========================== LoaderLogger ===================================


class LoaderLogger:
    """Structured, context-aware logger for macloader components.

    Each instance is bound to a *component* (e.g. ``"core.engine"``) and
    can carry a temporary *operation* context via a context manager; the
    provisioning pipeline uses it to tag records with the current stage.

    Usage::

        log = LoaderLogger("core.engine", log_file="macloader.log", json_logs=True)
        log.info("Provisioning started")
        with log.operation("read_mac_prefix"):
            log.debug("Reading %s", path)

    Args:
        component:       Identifying name of the emitting component.
        log_level:       Minimum severity (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file:        Path to the rotating log file. ``None`` or ``""``
                         disables file logging.
        json_logs:       If ``True`` the file handler emits JSON lines.
        max_bytes:       Maximum log-file size before rotation (default 1 MiB).
        backup_count:    Number of rotated backup files to keep.
        console_output:  If ``True`` attach a colour Rich console handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 1_048_576,
        backup_count: int = 2,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None

        self._logger = logging.getLogger(f"macloader.{component}")
        self._logger.setLevel(
            getattr(logging, log_level.upper(), logging.INFO)
        )
        self._logger.propagate = False

        # Prevent duplicate handlers on re-instantiation
        self._logger.handlers.clear()

        if console_output:
            ch = _ColorConsoleHandler(level=log_level.upper())
            self._logger.addHandler(ch)

        if log_file:
            file_path = Path(log_file)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                filename=str(file_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            fh.setLevel(getattr(logging, log_level.upper(), logging.INFO))
            if json_logs:
                fh.setFormatter(_JSONFormatter())
            else:
                fh.setFormatter(
                    logging.Formatter(
                        fmt=(
                            "%(asctime)s | %(levelname)-8s | "
                            "%(name)s | %(message)s"
                        ),
                        datefmt="%Y-%m-%dT%H:%M:%S%z",
                    )
                )
            self._logger.addHandler(fh)

    # ------------------------------------------------------------------ #
    #  Context management -- operation scope
    # ------------------------------------------------------------------ #

    class _OperationContext:
        """Context manager that temporarily binds an operation name."""

        def __init__(self, parent: LoaderLogger, operation: str) -> None:
            self._parent = parent
            self._operation = operation
            self._prev: str | None = None

        def __enter__(self) -> LoaderLogger:
            self._prev = self._parent._operation
            self._parent._operation = self._operation
            return self._parent

        def __exit__(self, *exc: Any) -> None:
            self._parent._operation = self._prev

    def operation(self, name: str) -> _OperationContext:
        """Return a context manager that sets the *operation* field.

        While active, every log record will include ``operation=<name>``.
        """
        return self._OperationContext(self, name)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _enrich(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Inject component/operation context into the record via *extra*."""
        extra = kwargs.pop("extra", {}) or {}

        loader_extra: dict[str, Any] = {}
        standard_keys = {"exc_info", "stack_info", "stacklevel"}
        for key in list(kwargs):
            if key not in standard_keys:
                loader_extra[key] = kwargs.pop(key)

        extra["component"] = self._component
        extra["operation"] = self._operation
        if loader_extra:
            extra["loader_extra"] = loader_extra

        kwargs["extra"] = extra
        return kwargs

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs = self._enrich(kwargs)
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs = self._enrich(kwargs)
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs = self._enrich(kwargs)
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs = self._enrich(kwargs)
        self._logger.error(msg, *args, **kwargs)

    def close(self) -> None:
        """Detach and close every handler, flushing the log file."""
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()


def build_logger(component: str, settings: Any = None, *, verbose: bool = False) -> LoaderLogger:
    """Create a :class:`LoaderLogger` from a ``GlobalConfig`` section.

    *settings* may be ``None``, in which case INFO-level console logging
    is used.  *verbose* (or ``settings.debug``) forces DEBUG level.
    """
    if settings is None:
        return LoaderLogger(component, log_level="DEBUG" if verbose else "INFO")

    level = "DEBUG" if (verbose or settings.debug) else settings.log_level
    return LoaderLogger(
        component,
        log_level=level,
        log_file=settings.log_file or None,
        json_logs=settings.log_json,
    )
