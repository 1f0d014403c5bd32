# Copyright (c) 2025 Rémy Olson
"""
UI-test helpers: a launch harness and page objects.

The harness plays the part of a UI test case. It collects launch arguments,
launches the app in-process against its own setting store, and returns a
:class:`LaunchedApp` that can be queried by automation identifier.

Example:
    >>> app = UITestHarness(MemorySettingStore(True)).skip_onboarding().launch()
    >>> ContentScreen(app).is_on_screen()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, TypeVar, Union

from .app import AppLauncher, AppViewModel, Screen
from .automation import Automation, AutomationIdentifying, identifier_of
from .context import AutomationContext
from .debug import debug_logger
from .launch import LaunchArgumentBuilder
from .store import MemorySettingStore, SettingStorage

Identifier = Union[str, AutomationIdentifying]
PageT = TypeVar("PageT", bound="PageObject")


@dataclass(frozen=True)
class Element:
    """A queried element; ``exists`` is False when the current screen lacks it."""

    app: "LaunchedApp"
    identifier: str
    text: Optional[str] = None
    actionable: bool = False

    @property
    def exists(self) -> bool:
        return self.text is not None

    def tap(self) -> None:
        self.app.tap(self.identifier)


class LaunchedApp:
    def __init__(self, arguments: Tuple[str, ...], view_model: AppViewModel) -> None:
        self.arguments = arguments
        self.view_model = view_model

    @property
    def screen(self) -> Screen:
        return self.view_model.screen

    def element(self, identifying: Identifier) -> Element:
        identifier = identifier_of(identifying)
        for spec in self.screen.elements:
            if spec.identifier == identifier:
                return Element(self, identifier, spec.text, spec.actionable)
        return Element(self, identifier)

    def __getitem__(self, identifying: Identifier) -> Element:
        return self.element(identifying)

    def tap(self, identifying: Identifier) -> None:
        element = self.element(identifying)
        if not element.exists:
            raise AssertionError(f"No element '{element.identifier}' on the {self.screen.value} screen")
        if not element.actionable:
            raise AssertionError(f"Element '{element.identifier}' cannot be tapped")
        if element.identifier == Automation.OnboardingScreen.COMPLETE.id:
            self.view_model.complete_onboarding()

    def terminate(self) -> None:
        self.view_model.close()


class UITestHarness:
    """Base harness for UI tests.

    Args:
        setting_store: Store the launched app reads and writes. Defaults to a
            fresh :class:`~firstrun.store.MemorySettingStore`.
        launch_arguments: Arguments to start from; duplicates are dropped.
    """

    def __init__(
        self,
        setting_store: Optional[SettingStorage] = None,
        launch_arguments: Iterable[str] = (),
    ) -> None:
        self.setting_store: SettingStorage = (
            setting_store if setting_store is not None else MemorySettingStore()
        )
        self._builder = LaunchArgumentBuilder(launch_arguments)
        self.app: Optional[LaunchedApp] = None

    @property
    def launch_arguments(self) -> Tuple[str, ...]:
        return self._builder.build()

    def add_arguments(self, *arguments: str) -> "UITestHarness":
        self._builder.add(*arguments)
        return self

    def skip_onboarding(self) -> "UITestHarness":
        self._builder.skip_onboarding()
        return self

    def launch(self) -> LaunchedApp:
        arguments = self._builder.build()
        debug_logger.info("harness_launch", tags=["testing"], arguments=list(arguments))
        context = AutomationContext(self.setting_store)
        self.app = LaunchedApp(arguments, AppLauncher.main(arguments, context=context))
        return self.app

    def tear_down(self) -> None:
        if self.app is not None:
            self.app.terminate()
            self.app = None


class PageObject:
    key_element: AutomationIdentifying

    def __init__(self, app: LaunchedApp) -> None:
        self.app = app

    def is_on_screen(self: PageT) -> PageT:
        element = self.app[self.key_element]
        if not element.exists:
            raise AssertionError(
                f"Expected '{element.identifier}' on screen, "
                f"but the {self.app.screen.value} screen is showing"
            )
        return self


class ContentScreen(PageObject):
    key_element = Automation.ContentScreen.TITLE

    @property
    def title(self) -> Element:
        return self.app[Automation.ContentScreen.TITLE]


class OnboardingScreen(PageObject):
    key_element = Automation.OnboardingScreen.COMPLETE

    @property
    def complete_button(self) -> Element:
        return self.app[Automation.OnboardingScreen.COMPLETE]

    def complete(self) -> ContentScreen:
        self.complete_button.tap()
        return ContentScreen(self.app)


__all__ = [
    "ContentScreen",
    "Element",
    "LaunchedApp",
    "OnboardingScreen",
    "PageObject",
    "UITestHarness",
]
