# Copyright (c) 2025 Rémy Olson
"""
Automation context: the in-memory source of truth for "show onboarding".

The context caches the flag read from a :class:`~firstrun.store.SettingStorage`
and writes every change straight back to it. The cache update and the store
write happen under one lock, so readers never see the two disagree.
"""

from __future__ import annotations

import threading
from typing import Callable, List, Optional

from .debug import debug_logger
from .store import SettingStorage, SettingStore

Observer = Callable[[bool], None]


class AutomationContext:
    """Cached onboarding flag with write-through persistence.

    Args:
        setting_store: Backing store. Defaults to the file-backed
            :class:`~firstrun.store.SettingStore`.
    """

    def __init__(self, setting_store: Optional[SettingStorage] = None) -> None:
        self._setting_store: SettingStorage = (
            setting_store if setting_store is not None else SettingStore()
        )
        self._lock = threading.RLock()
        self._observers: List[Observer] = []
        self._show_onboarding = bool(self._setting_store.read())
        debug_logger.debug("automation_context_created", show_onboarding=self._show_onboarding)

    @property
    def setting_store(self) -> SettingStorage:
        return self._setting_store

    @property
    def show_onboarding(self) -> bool:
        with self._lock:
            return self._show_onboarding

    def get_show_onboarding(self) -> bool:
        return self.show_onboarding

    def set_show_onboarding(self, value: bool) -> None:
        """Update the cached flag and persist it as a single step.

        If the store write fails the cached value is restored and the error
        propagates.
        """
        value = bool(value)
        with self._lock:
            previous = self._show_onboarding
            self._show_onboarding = value
            try:
                self._setting_store.write(value)
            except Exception:
                self._show_onboarding = previous
                raise
            observers = list(self._observers) if value != previous else []

        debug_logger.state_change("show_onboarding_set", value=value, changed=value != previous)
        for observer in observers:
            observer(value)

    def mark_onboarding_seen(self) -> None:
        self.set_show_onboarding(False)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Call ``observer`` with the new value whenever the flag changes.

        Returns a function that removes the observer again.
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def __repr__(self) -> str:
        return f"AutomationContext(show_onboarding={self.show_onboarding!r})"


_shared: Optional[AutomationContext] = None
_shared_lock = threading.Lock()


def shared_context() -> AutomationContext:
    """Return the process-wide context, creating it on first use."""
    global _shared
    with _shared_lock:
        if _shared is None:
            _shared = AutomationContext()
        return _shared


def reset_shared_context() -> None:
    """Drop the process-wide context. Intended for tests."""
    global _shared
    with _shared_lock:
        _shared = None


__all__ = [
    "AutomationContext",
    "Observer",
    "shared_context",
    "reset_shared_context",
]
