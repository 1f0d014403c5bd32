# Copyright (c) 2025 Rémy Olson
"""
Headless view layer.

Decides which of the two mutually exclusive screens is showing and keeps that
decision in sync with the automation context. No rendering happens here; the
screen only describes the elements it would expose.
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .automation import Automation
from .context import AutomationContext, shared_context
from .debug import debug_logger
from .launch import configure


@dataclass(frozen=True)
class ElementSpec:
    identifier: str
    text: str
    actionable: bool = False


class Screen(Enum):
    ONBOARDING = "onboarding"
    CONTENT = "content"

    @property
    def elements(self) -> Tuple[ElementSpec, ...]:
        if self is Screen.ONBOARDING:
            return (ElementSpec(Automation.OnboardingScreen.COMPLETE.id, "Okay", actionable=True),)
        return (ElementSpec(Automation.ContentScreen.TITLE.id, "Our main app flow"),)

    @property
    def text(self) -> str:
        if self is Screen.ONBOARDING:
            return "Imagine a lengthy onboarding flow here"
        return "Our main app flow"


class AppViewModel:
    """Observes the context and exposes the screen to show."""

    def __init__(self, context: AutomationContext) -> None:
        self.context = context
        self._lock = threading.Lock()
        # Subscribe first so a change racing the initial read is not lost.
        self._unsubscribe = context.subscribe(self._on_change)
        self._refresh()

    def _refresh(self) -> None:
        # Notifications can arrive out of order; always take the current value.
        with self._lock:
            self._show_onboarding = self.context.show_onboarding

    def _on_change(self, _value: bool) -> None:
        self._refresh()
        debug_logger.debug("screen_changed", screen=self.screen.value)

    @property
    def show_onboarding(self) -> bool:
        return self._show_onboarding

    @property
    def screen(self) -> Screen:
        return Screen.ONBOARDING if self._show_onboarding else Screen.CONTENT

    def complete_onboarding(self) -> None:
        self.context.mark_onboarding_seen()
        self._refresh()

    def close(self) -> None:
        self._unsubscribe()


class AppLauncher:
    @staticmethod
    def main(
        arguments: Optional[Sequence[str]] = None,
        context: Optional[AutomationContext] = None,
    ) -> AppViewModel:
        """Apply launch arguments, then hand the context to the view model."""
        if arguments is None:
            arguments = sys.argv[1:]
        if context is None:
            context = shared_context()

        with debug_logger.context("app_launch", arguments=list(arguments)):
            configure(context, arguments)
            view_model = AppViewModel(context)
            debug_logger.info("initial_screen", screen=view_model.screen.value)
        return view_model


__all__ = ["AppLauncher", "AppViewModel", "ElementSpec", "Screen"]
