# Copyright (c) 2025 Rémy Olson
"""
Persisted onboarding flag.

The flag lives in a small JSON "defaults" file (``~/.firstrun/defaults.json``
unless configured otherwise) under the key ``hasOnboardingBeenShown``. Other
keys in the file are left alone. Every read and write goes through a single
module-level lock so that several store instances sharing a file stay
consistent within the process.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

from .config import load_config
from .debug import debug_logger

ONBOARDING_KEY = "hasOnboardingBeenShown"
SCHEMA_VERSION = 1

_STORE_LOCK = threading.RLock()


class SettingsError(RuntimeError):
    """Raised when the defaults file cannot be read or written."""


class DefaultsDocument(BaseModel):
    """Validated contents of the defaults file."""

    schema_version: int = Field(default=SCHEMA_VERSION, ge=0)
    has_onboarding_been_shown: Optional[StrictBool] = Field(default=None, alias=ONBOARDING_KEY)

    model_config = ConfigDict(extra="allow", populate_by_name=True)


@runtime_checkable
class SettingStorage(Protocol):
    """Anything that can read and write the onboarding flag."""

    def read(self) -> bool:
        ...

    def write(self, value: bool) -> None:
        ...


class SettingStore:
    """File-backed onboarding flag.

    Args:
        path: Defaults file to use. Falls back to ``store.path`` from the
            configuration when omitted.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else load_config().store.path

    def read(self) -> bool:
        """Return the persisted flag, or ``False`` if it was never written.

        Raises:
            SettingsError: If the file exists but cannot be read or parsed.
        """
        with _STORE_LOCK:
            document = self._load()
        return bool(document.has_onboarding_been_shown)

    def write(self, value: bool) -> None:
        """Persist ``value`` atomically, keeping unrelated keys.

        Raises:
            SettingsError: If the current file is corrupt or the write fails.
        """
        with _STORE_LOCK:
            document = self._load()
            document.has_onboarding_been_shown = bool(value)
            self._persist(document)
        debug_logger.state_change("onboarding_flag_written", path=self.path, value=bool(value))

    def reset(self) -> None:
        """Forget the persisted flag so the next read returns ``False``."""
        with _STORE_LOCK:
            if not self.path.exists():
                return
            document = self._load()
            document.has_onboarding_been_shown = None
            self._persist(document)
        debug_logger.state_change("onboarding_flag_reset", path=self.path)

    def _load(self) -> DefaultsDocument:
        if not self.path.exists():
            return DefaultsDocument()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SettingsError(f"Corrupted defaults file at {self.path}: {exc}") from exc
        except OSError as exc:
            raise SettingsError(f"Failed to read defaults file at {self.path}: {exc}") from exc

        if not isinstance(data, dict):
            raise SettingsError(
                f"Defaults file at {self.path} must be a JSON object, got {type(data).__name__}"
            )

        try:
            return DefaultsDocument.model_validate(data)
        except ValidationError as exc:
            raise SettingsError(f"Invalid defaults file at {self.path}: {exc}") from exc

    def _persist(self, document: DefaultsDocument) -> None:
        data: Dict[str, Any] = document.model_dump(by_alias=True)
        if data.get(ONBOARDING_KEY) is None:
            data.pop(ONBOARDING_KEY, None)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path = self.path.parent / f"{self.path.name}.tmp"
            temp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as exc:
            raise SettingsError(f"Failed to write defaults file at {self.path}: {exc}") from exc

    def __repr__(self) -> str:
        return f"SettingStore(path={str(self.path)!r})"


class MemorySettingStore:
    """In-memory store for tests and previews."""

    def __init__(self, initial: bool = False) -> None:
        self.value = initial
        self.writes = 0

    def read(self) -> bool:
        return self.value

    def write(self, value: bool) -> None:
        self.value = bool(value)
        self.writes += 1


__all__ = [
    "ONBOARDING_KEY",
    "SettingsError",
    "SettingStorage",
    "SettingStore",
    "MemorySettingStore",
    "DefaultsDocument",
]
