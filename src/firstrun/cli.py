# Copyright (c) 2025 Rémy Olson
"""
Click-based CLI entry point for firstrun.

Commands included:
- firstrun launch [ARGS...]
- firstrun args [--skip-onboarding] [--json] [ARGS...]
- firstrun flag show
- firstrun flag set true|false
- firstrun flag reset
- firstrun ids
"""

from __future__ import annotations

import json
from typing import Tuple

import click

from . import __version__
from .app import AppLauncher
from .automation import Automation
from .config import load_config
from .context import AutomationContext
from .debug import debug_logger, enable_debug_logging
from .formatting import print_dim, print_identifier_table, print_info, print_screen, print_success
from .launch import LaunchArgumentBuilder
from .store import ONBOARDING_KEY, SettingsError, SettingStore


@click.group()
@click.option("--debug", is_flag=True, help="Write structured debug logs to ~/.firstrun/debug.log.")
@click.version_option(__version__, prog_name="firstrun")
def cli(debug: bool) -> None:
    """Onboarding flag and launch-argument tooling."""
    if debug or load_config().debug.enabled:
        enable_debug_logging()
        debug_logger.info("cli_started", debug_flag=debug)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
def launch(arguments: Tuple[str, ...]) -> None:
    """Launch the app headlessly with ARGUMENTS and show the resulting screen."""
    try:
        context = AutomationContext(SettingStore())
        view_model = AppLauncher.main(list(arguments), context=context)
    except SettingsError as exc:
        raise click.ClickException(str(exc)) from exc

    screen = view_model.screen
    print_screen(screen.value, screen.text, [element.identifier for element in screen.elements])
    view_model.close()


@cli.command(context_settings={"ignore_unknown_options": True})
@click.option("--skip-onboarding", is_flag=True, help="Add the -skipOnboarding token.")
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON array.")
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
def args(skip_onboarding: bool, as_json: bool, arguments: Tuple[str, ...]) -> None:
    """Print deduplicated launch arguments."""
    builder = LaunchArgumentBuilder(arguments)
    if skip_onboarding:
        builder.skip_onboarding()
    built = builder.build()

    if as_json:
        click.echo(json.dumps(list(built)))
        return
    for argument in built:
        click.echo(argument)


@cli.group()
def flag() -> None:
    """Inspect or change the persisted onboarding flag."""


@flag.command("show")
def flag_show() -> None:
    store = SettingStore()
    try:
        value = store.read()
    except SettingsError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"{ONBOARDING_KEY}={str(value).lower()}")
    print_dim(f"stored in {store.path}")


@flag.command("set")
@click.argument("value", type=click.BOOL)
def flag_set(value: bool) -> None:
    store = SettingStore()
    try:
        store.write(value)
    except SettingsError as exc:
        raise click.ClickException(str(exc)) from exc
    print_success(f"{ONBOARDING_KEY} set to {str(value).lower()}")


@flag.command("reset")
def flag_reset() -> None:
    store = SettingStore()
    try:
        store.reset()
    except SettingsError as exc:
        raise click.ClickException(str(exc)) from exc
    print_info(f"{ONBOARDING_KEY} cleared; it now reads as false")


@cli.command()
def ids() -> None:
    """List automation identifiers."""
    rows = []
    for screen in Automation.SCREENS:
        for member in screen:
            rows.append((screen.__name__, member.name.lower(), member.id))
    print_identifier_table(rows)


def main() -> None:  # pragma: no cover
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
