"""profilemgr command line.

One-shot commands load the profile registry, apply a change and save it.
``select`` runs the startup resolution and falls back to the interactive
chooser; ``chooser`` opens the chooser directly.
"""

import contextlib
import logging
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import click

from profile_library.config import ManagerSettings
from profile_library.config import load_config
from profile_library.errors import ProfileError
from profile_library.errors import RangeError
from profile_library.models import LaunchRequest
from profile_library.profiles import ChooserSession
from profile_library.profiles import ProfileRegistry
from profile_library.profiles import registry_for_intent
from profile_library.profiles import try_select_profile

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

CHOOSER_ACTIONS = ["select", "create", "rename", "delete", "default", "clear", "start", "ok", "cancel"]


@dataclass
class CliState:
    """Objects shared by all commands of one invocation."""

    settings: ManagerSettings
    profile_context: str | None = None

    def registry(self, intent: LaunchRequest | None = None) -> ProfileRegistry:
        if intent is None:
            intent = LaunchRequest(profile_name=self.profile_context)
        return registry_for_intent(intent, self.settings)

    def load_registry(self) -> ProfileRegistry:
        registry = self.registry()
        if not registry.read_settings():
            logger.debug(f"No profile settings at {registry.paths.registry_file}, starting empty")
        return registry


def configure_logging(level: str) -> None:
    """Configure root logging for the command line."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )


@contextlib.contextmanager
def handle_errors() -> Iterator[None]:
    """Report registry failures as a one-line error and exit 1."""
    try:
        yield
    except ProfileError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except RangeError:
        click.echo("Error: The reserved profile cannot be changed", err=True)
        sys.exit(1)


def find_index(registry: ProfileRegistry, name: str) -> int:
    index = registry.index_of(name)
    if index is None:
        click.echo(f"Error: No profile named '{name}'", err=True)
        sys.exit(1)
    return index


def save(registry: ProfileRegistry) -> None:
    if not registry.write_settings():
        click.echo(f"Error: Failed to save {registry.paths.registry_file}", err=True)
        sys.exit(1)


def print_rows(registry: ProfileRegistry, current_index: int | None = None) -> None:
    for entry in registry.entries():
        marker = ">" if entry.index == current_index else " "
        click.echo(f"{marker}{entry.index:>3}  {entry.label}")


def run_chooser(session: ChooserSession) -> str | None:
    """Drive a chooser session with terminal prompts.

    Returns:
        Chosen profile ("" for the reserved one), or None if cancelled
    """
    language = session.open()
    if language is not None:
        click.echo(f"Language resource: {language}")

    while True:
        print_rows(session.registry, session.current_index)
        start = "on" if session.start_after_close else "off"
        click.echo(f"Start with selection by default: {start}")
        action = click.prompt("Action", type=click.Choice(CHOOSER_ACTIONS))

        try:
            if action == "select":
                session.select(click.prompt("Index", type=int))
            elif action == "create":
                session.create(click.prompt("New profile name", default="", show_default=False))
            elif action == "rename":
                if session.can_modify:
                    session.rename(click.prompt("New name", default="", show_default=False))
            elif action == "delete":
                session.delete()
            elif action == "default":
                session.set_default()
            elif action == "clear":
                session.clear_default()
            elif action == "start":
                session.start_after_close = not session.start_after_close
            elif action == "ok":
                return session.confirm()
            else:
                return None
        except ProfileError as e:
            click.echo(f"Error: {e.message}", err=True)
        except RangeError as e:
            click.echo(f"Error: {e}", err=True)


@click.group()
@click.option("--profile-context", default=None, help="Named profile the application is running with")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, profile_context: str | None, verbose: bool):
    """profilemgr - Manage application profiles."""
    settings = load_config()
    configure_logging("debug" if verbose else settings.log_level)
    ctx.obj = CliState(settings=settings, profile_context=profile_context)


@cli.command("list")
@click.pass_obj
def list_profiles(state: CliState):
    """List profiles; the default one is marked with *."""
    registry = state.load_registry()
    print_rows(registry)


@cli.command()
@click.argument("name")
@click.option("--at", "index", default=0, help="Insert position (default: append)")
@click.pass_obj
def create(state: CliState, name: str, index: int):
    """Create a profile."""
    registry = state.load_registry()
    with handle_errors():
        inserted = registry.add(index, name)
    save(registry)
    click.echo(f"Created profile '{name}' at {inserted}")


@cli.command()
@click.argument("old")
@click.argument("new")
@click.pass_obj
def rename(state: CliState, old: str, new: str):
    """Rename a profile and its settings directory."""
    registry = state.load_registry()
    index = find_index(registry, old)
    with handle_errors():
        registry.rename(index, new)
    save(registry)
    click.echo(f"Renamed profile '{old}' to '{new}'")


@cli.command()
@click.argument("name")
@click.pass_obj
def delete(state: CliState, name: str):
    """Remove a profile from the list (its directory is kept)."""
    registry = state.load_registry()
    index = find_index(registry, name)
    with handle_errors():
        registry.delete(index)
    save(registry)
    click.echo(f"Deleted profile '{name}'")


@cli.command("set-default")
@click.argument("name")
@click.pass_obj
def set_default(state: CliState, name: str):
    """Start NAME when no profile is given on the command line."""
    registry = state.load_registry()
    index = find_index(registry, name)
    with handle_errors():
        registry.set_default(index)
    save(registry)
    click.echo(f"Default profile: {name}")


@cli.command("clear-default")
@click.pass_obj
def clear_default(state: CliState):
    """Show the chooser at startup again."""
    registry = state.load_registry()
    registry.clear_default()
    save(registry)
    click.echo("Default profile cleared")


@cli.command()
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option("--clear", is_flag=True, help="Remove the language resource")
@click.pass_obj
def language(state: CliState, path: Path | None, clear: bool):
    """Show or set the alternate language resource."""
    registry = state.load_registry()
    if path is None and not clear:
        current = registry.get_language_resource()
        click.echo(str(current) if current else "(none)")
        return

    registry.set_language_resource(None if clear else path)
    save(registry)
    click.echo(f"Language resource: {registry.get_language_resource() or '(none)'}")


@cli.command()
@click.option("-p", "--profile", "profile_name", default=None, help="Profile to start with")
@click.option("--profmgr", is_flag=True, help="Always show the profile chooser")
@click.pass_obj
def select(state: CliState, profile_name: str | None, profmgr: bool):
    """Resolve the startup profile, asking only when needed."""
    intent = LaunchRequest(show_profile_manager=profmgr, profile_name=profile_name)
    registry = state.registry(intent)

    if try_select_profile(intent, registry):
        click.echo(intent.profile_name or "")
        return

    chosen = run_chooser(ChooserSession(registry))
    if chosen is None:
        click.echo("Cancelled", err=True)
        sys.exit(1)
    click.echo(chosen)


@cli.command()
@click.pass_obj
def chooser(state: CliState):
    """Open the interactive profile chooser."""
    chosen = run_chooser(ChooserSession(state.registry()))
    if chosen is None:
        click.echo("Cancelled", err=True)
        sys.exit(1)
    click.echo(chosen)


def main():
    """Entry point for profilemgr command."""
    cli()


if __name__ == "__main__":
    main()
