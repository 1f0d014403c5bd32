# Copyright (c) 2025 Rémy Olson
"""Stable automation identifiers for the onboarding and content screens."""

from __future__ import annotations

from enum import Enum
from typing import List, Protocol, Union, runtime_checkable


@runtime_checkable
class AutomationIdentifying(Protocol):
    @property
    def id(self) -> str:
        ...


class _Identifier(str, Enum):
    @property
    def id(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Automation:
    """Namespace of identifiers, one enum per screen."""

    class OnboardingScreen(_Identifier):
        COMPLETE = "automation.onboarding.complete"

    class ContentScreen(_Identifier):
        TITLE = "automation.content.title"

    SCREENS = (OnboardingScreen, ContentScreen)


def all_identifiers() -> List[str]:
    return [member.id for screen in Automation.SCREENS for member in screen]


def identifier_of(identifying: Union[str, AutomationIdentifying]) -> str:
    """Return the raw identifier for a string or an identifying value."""
    if isinstance(identifying, str) and not isinstance(identifying, _Identifier):
        return identifying
    return identifying.id


__all__ = ["Automation", "AutomationIdentifying", "all_identifiers", "identifier_of"]
