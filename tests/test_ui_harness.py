"""Tests for the UI-test harness and page objects."""

from __future__ import annotations

import pytest

from firstrun.app import Screen
from firstrun.automation import Automation
from firstrun.store import MemorySettingStore, SettingStore
from firstrun.testing import ContentScreen, OnboardingScreen, UITestHarness


@pytest.fixture
def harness():
    harness = UITestHarness(MemorySettingStore(initial=True))
    yield harness
    harness.tear_down()


def test_skip_onboarding_shows_content(harness):
    app = harness.skip_onboarding().launch()

    assert app.arguments == ("-skipOnboarding",)
    ContentScreen(app).is_on_screen()
    assert harness.setting_store.read() is False


def test_without_skip_onboarding_is_shown(harness):
    app = harness.launch()

    OnboardingScreen(app).is_on_screen()
    with pytest.raises(AssertionError, match="automation.content.title"):
        ContentScreen(app).is_on_screen()


def test_completing_onboarding_switches_screen(harness):
    app = harness.launch()

    content = OnboardingScreen(app).is_on_screen().complete()

    content.is_on_screen()
    assert content.title.text == "Our main app flow"
    assert harness.setting_store.read() is False


def test_launch_arguments_are_deduplicated():
    harness = UITestHarness(launch_arguments=["-uiTesting", "-uiTesting"])
    harness.skip_onboarding().skip_onboarding().add_arguments("-uiTesting")

    assert sorted(harness.launch_arguments) == ["-skipOnboarding", "-uiTesting"]


def test_element_lookup(harness):
    app = harness.launch()

    assert app[Automation.OnboardingScreen.COMPLETE].exists
    assert app["automation.onboarding.complete"].exists
    assert not app[Automation.ContentScreen.TITLE].exists


def test_tap_missing_element_fails(harness):
    app = harness.skip_onboarding().launch()

    with pytest.raises(AssertionError, match="No element"):
        app.tap(Automation.OnboardingScreen.COMPLETE)


def test_tap_non_actionable_element_fails(harness):
    app = harness.skip_onboarding().launch()

    with pytest.raises(AssertionError, match="cannot be tapped"):
        app[Automation.ContentScreen.TITLE].tap()


def test_harness_with_file_store(write_defaults):
    write_defaults({"hasOnboardingBeenShown": True})
    harness = UITestHarness(SettingStore())

    app = harness.skip_onboarding().launch()

    assert app.screen is Screen.CONTENT
    assert SettingStore().read() is False
    harness.tear_down()
    assert harness.app is None


def test_is_on_screen_returns_the_page(harness):
    app = harness.skip_onboarding().launch()

    page = ContentScreen(app)
    assert page.is_on_screen() is page
