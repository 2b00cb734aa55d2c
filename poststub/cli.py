"""Command-line interface for poststub.

This module defines the CLI commands using Click framework.

Commands:
- new: Create a dated post stub, from an argument or interactively.
- publish: Stage, commit and push changes with git.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import click
import questionary

from . import __version__
from .config import ConfigError, content_dir, load_config, parse_policy
from .stub import InvalidInput, PostStubError, make_stub
from .utils import today_string
from .vcs import PublishError
from .vcs import publish as publish_changes
from .writer import ExistsPolicy, target_path, write_stub


@click.group()
@click.version_option(version=__version__, prog_name="poststub")
def cli():
    """Scaffold and publish blog posts."""


@cli.command()
@click.argument("filename", required=False)
@click.option(
    "--dir",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    required=False,
    help="Directory to write the post into (overrides poststub.yaml content_dir)",
)
@click.option(
    "--on-exists",
    type=click.Choice(ExistsPolicy.choices(), case_sensitive=False),
    required=False,
    help="What to do if the file already exists (overrides poststub.yaml)",
)
@click.option("--pause", is_flag=True, help="Wait for a keypress before exiting")
@click.option("--verbose", "-v", is_flag=True, help="Show each step")
def new(
    filename: str | None,
    directory: Path | None,
    on_exists: str | None,
    pause: bool,
    verbose: bool,
):
    """Create a new post stub.

    Prompts for FILENAME when it is not given.
    """
    project_root = Path.cwd()
    config = _load_config(project_root)
    policy = parse_policy(on_exists) if on_exists else config["on_exists"]
    target_dir = directory if directory is not None else content_dir(project_root, config)
    today = date.today()

    if filename is None:
        filename = _prompt_filename(today_string(today))

    try:
        stub = make_stub(filename, now=today)
        if verbose:
            click.echo(f"Target: {target_path(target_dir, stub)} (on exists: {policy.value})")
            if not target_dir.is_dir():
                click.echo(f"Creating directory {target_dir}")
        path = write_stub(target_dir, stub, on_exists=policy)
    except PostStubError as exc:
        _report_error(exc)
        _maybe_pause(pause)
        raise SystemExit(1) from None

    click.echo(f"Created {path.resolve()}")
    _maybe_pause(pause)


@cli.command()
@click.option("--message", "-m", required=False, help="Commit message")
def publish(message: str | None):
    """Stage, commit and push all changes with git."""
    project_root = Path.cwd()
    config = _load_config(project_root)

    if message is None:
        message = questionary.text(
            "Commit message:",
            validate=lambda x: len(x.strip()) > 0 or "Commit message cannot be empty",
            style=_questionary_style(),
        ).ask()
        if message is None:
            raise click.Abort()

    try:
        steps = publish_changes(
            project_root,
            message,
            remote=config.get("git_remote"),
            branch=config.get("git_branch"),
        )
    except PostStubError as exc:
        _report_error(exc)
        raise SystemExit(1) from None
    click.echo(f"Published ({', '.join(steps)})")


def _prompt_filename(today: str) -> str:
    """Ask for a filename, showing the date that will be used."""
    click.echo(f"Date: {today}")
    name = questionary.text(
        "Filename (without .md extension):",
        validate=lambda x: len(x.strip()) > 0 or "Filename cannot be empty",
        style=_questionary_style(),
    ).ask()
    if name is None:
        raise click.Abort()
    return name


def _load_config(project_root: Path) -> dict:
    try:
        return load_config(project_root)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from None


def _report_error(exc: PostStubError) -> None:
    """Print a poststub error to stderr."""
    if isinstance(exc, InvalidInput):
        label = "Invalid input:"
    elif isinstance(exc, PublishError):
        label = "Publish failed:"
    else:
        label = "Write failed:"
    click.echo(click.style(label, fg="red", bold=True), err=True)
    path = getattr(exc, "path", None)
    if path is not None:
        click.echo(click.style(f"  File: {path}", fg="yellow"), err=True)
    click.echo(click.style(f"  Error: {getattr(exc, 'message', exc)}", fg="white"), err=True)


def _maybe_pause(pause: bool) -> None:
    if pause:
        click.pause()


def _questionary_style():
    """Return consistent questionary style."""
    return questionary.Style(
        [
            ("qmark", "fg:cyan bold"),
            ("question", "bold"),
            ("answer", "fg:cyan"),
            ("pointer", "fg:cyan bold"),
            ("highlighted", "fg:cyan bold"),
            ("selected", "fg:cyan"),
        ]
    )


def main():
    """Entry point for the CLI application."""
    cli()
