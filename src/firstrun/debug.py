# Copyright (c) 2025 Rémy Olson
"""
Structured debug log for firstrun.

Each event is one JSON object per line in ~/.firstrun/debug.log, stamped with
the calling module, function and line. Logging is off until
``enable_debug_logging()`` is called (the CLI does this for ``--debug``).

Usage:
    from firstrun.debug import debug_logger

    debug_logger.info("launch_arguments_configured", recognised=["-skipOnboarding"])

    with debug_logger.context("app_launch", arguments=argv):
        ...
"""

from __future__ import annotations

import json
import sys
import threading
import time
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Literal, Optional

DEBUG_DIR = Path.home() / ".firstrun"
DEBUG_LOG_FILE = DEBUG_DIR / "debug.log"

MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
MAX_BACKUPS = 3
MAX_VALUE_LENGTH = 500

LogLevel = Literal["DEBUG", "INFO", "ERROR"]

_debug_enabled = False
_write_lock = threading.Lock()


def enable_debug_logging() -> None:
    global _debug_enabled
    _debug_enabled = True


def disable_debug_logging() -> None:
    global _debug_enabled
    _debug_enabled = False


def is_debug_enabled() -> bool:
    return _debug_enabled


def _scrub(value: Any) -> Any:
    """Make ``value`` JSON-friendly, hiding the home directory and capping strings."""
    if isinstance(value, dict):
        return {str(key): _scrub(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_scrub(item) for item in value]
    if not isinstance(value, (str, Path)):
        return value

    text = str(value).replace(str(Path.home()), "~")
    if len(text) <= MAX_VALUE_LENGTH:
        return text
    return f"{text[:MAX_VALUE_LENGTH]}... (truncated, {len(text)} chars total)"


def _backup(index: int) -> Path:
    return DEBUG_LOG_FILE.with_name(f"{DEBUG_LOG_FILE.name}.{index}")


def _rotate() -> None:
    """Shift debug.log -> debug.log.1 -> ... once the log outgrows MAX_LOG_SIZE."""
    try:
        if not DEBUG_LOG_FILE.exists() or DEBUG_LOG_FILE.stat().st_size <= MAX_LOG_SIZE:
            return
        for index in range(MAX_BACKUPS, 1, -1):
            if _backup(index - 1).exists():
                _backup(index - 1).replace(_backup(index))
        DEBUG_LOG_FILE.replace(_backup(1))
    except OSError:
        pass


def _caller(depth: int = 3) -> Dict[str, Any]:
    # 0: _caller, 1: _emit, 2: public method, 3: its caller (4 from inside context())
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return {"module": "unknown", "function": "unknown", "line": 0}
    module = frame.f_globals.get("__name__", "unknown")
    if module.startswith("firstrun."):
        module = module[len("firstrun.") :]
    return {"module": module, "function": frame.f_code.co_name, "line": frame.f_lineno}


class DebugLogger:
    """JSON-lines logger; ``context()`` blocks tag nested events with an operation id."""

    def __init__(self) -> None:
        self._local = threading.local()

    def _operations(self) -> List[Dict[str, Any]]:
        if not hasattr(self._local, "operations"):
            self._local.operations = []
        return self._local.operations

    def _emit(
        self,
        level: LogLevel,
        event: str,
        tags: Optional[List[str]],
        data: Dict[str, Any],
        depth: int = 3,
    ) -> None:
        if not _debug_enabled:
            return

        stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        record: Dict[str, Any] = {"timestamp": stamp.replace("+00:00", "Z"), "level": level}
        record.update(_caller(depth))
        record["event"] = event
        if tags:
            record["tags"] = tags
        operations = self._operations()
        if operations:
            record["operation_id"] = operations[-1]["operation_id"]
            record["context"] = _scrub(operations[-1])
        if data:
            record["data"] = _scrub(data)

        line = json.dumps(record, ensure_ascii=False, default=str)
        try:
            with _write_lock:
                DEBUG_DIR.mkdir(parents=True, exist_ok=True)
                _rotate()
                with DEBUG_LOG_FILE.open("a", encoding="utf-8") as handle:
                    handle.write(line + "\n")
        except OSError:
            # A broken log never interrupts the caller.
            pass

    def debug(self, event: str, tags: Optional[List[str]] = None, **data: Any) -> None:
        self._emit("DEBUG", event, tags, data)

    def info(self, event: str, tags: Optional[List[str]] = None, **data: Any) -> None:
        self._emit("INFO", event, tags, data)

    def state_change(self, event: str, tags: Optional[List[str]] = None, **data: Any) -> None:
        """Log a flag or store mutation; always tagged "state"."""
        tags = ["state"] + [tag for tag in (tags or []) if tag != "state"]
        self._emit("INFO", event, tags, data)

    @contextmanager
    def context(
        self,
        operation: str,
        operation_id: Optional[str] = None,
        tags: Optional[List[str]] = None,
        **data: Any,
    ) -> Iterator[None]:
        """Wrap an operation in ``<operation>_started`` / ``_completed`` / ``_failed`` events."""
        entry = {
            "operation": operation,
            "operation_id": operation_id or f"{operation}-{uuid.uuid4().hex[:8]}",
            **data,
        }
        operations = self._operations()
        operations.append(entry)
        started = time.monotonic()
        self._emit("INFO", f"{operation}_started", tags or [operation, "start"], data, depth=4)
        try:
            yield
        except Exception as exc:
            self._emit(
                "ERROR",
                f"{operation}_failed",
                tags or [operation, "failed"],
                {
                    "duration": round(time.monotonic() - started, 3),
                    "error_type": type(exc).__name__,
                    "error_message": str(exc),
                },
                depth=4,
            )
            raise
        else:
            self._emit(
                "INFO",
                f"{operation}_completed",
                tags or [operation, "completed"],
                {"duration": round(time.monotonic() - started, 3)},
                depth=4,
            )
        finally:
            operations.pop()


debug_logger = DebugLogger()


__all__ = [
    "DebugLogger",
    "debug_logger",
    "enable_debug_logging",
    "disable_debug_logging",
    "is_debug_enabled",
    "DEBUG_LOG_FILE",
]
