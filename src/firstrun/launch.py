# Copyright (c) 2025 Rémy Olson
"""
Launch arguments: parsing them at start-up and building them for tests.

``configure`` runs once, before any view reads the automation context, and
turns recognised start-up tokens into context changes. ``LaunchArgumentBuilder``
is the test-side counterpart that collects the tokens to launch with.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Tuple

from .context import AutomationContext
from .debug import debug_logger


class LaunchArgumentKey(str, Enum):
    SKIP_ONBOARDING = "-skipOnboarding"

    def __str__(self) -> str:
        return self.value


def configure(context: AutomationContext, arguments: Iterable[str]) -> FrozenSet[LaunchArgumentKey]:
    """Apply start-up arguments to ``context``.

    Tokens must match exactly; anything unrecognised is ignored.

    Returns:
        The launch argument keys that were found in ``arguments``.
    """
    present = set(arguments)
    recognised = frozenset(key for key in LaunchArgumentKey if key.value in present)

    if LaunchArgumentKey.SKIP_ONBOARDING in recognised:
        context.set_show_onboarding(False)

    debug_logger.info(
        "launch_arguments_configured",
        tags=["launch"],
        recognised=sorted(key.value for key in recognised),
        argument_count=len(present),
    )
    return recognised


class LaunchArgumentBuilder:
    """Collect unique launch arguments for a test launch.

    Mutating methods return the builder so calls can be chained::

        arguments = LaunchArgumentBuilder(["-uiTesting"]).skip_onboarding().build()
    """

    def __init__(self, initial_arguments: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        # Insertion-ordered set.
        self._arguments: Dict[str, None] = dict.fromkeys(
            str(argument) for argument in initial_arguments
        )

    def add(self, *arguments: str) -> "LaunchArgumentBuilder":
        with self._lock:
            for argument in arguments:
                self._arguments[str(argument)] = None
        return self

    def skip_onboarding(self) -> "LaunchArgumentBuilder":
        return self.add(LaunchArgumentKey.SKIP_ONBOARDING.value)

    def build(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._arguments)

    def __contains__(self, argument: object) -> bool:
        if isinstance(argument, str):
            argument = str(argument)
        with self._lock:
            return argument in self._arguments

    def __len__(self) -> int:
        with self._lock:
            return len(self._arguments)

    def __repr__(self) -> str:
        return f"LaunchArgumentBuilder({list(self.build())!r})"


__all__ = ["LaunchArgumentKey", "LaunchArgumentBuilder", "configure"]
