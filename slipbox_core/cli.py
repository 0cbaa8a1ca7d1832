"""
Command line entry point for slipbox.

A collection of personal desktop shortcuts:

  List notes (relative to the notes root, without journal entries):
      slipbox notes --relative list --exclude-journal

  Pick a note with fzf and open it in $EDITOR:
      slipbox notes --relative find

  Create a sub-page link from the title on the clipboard:
      slipbox notes subpage --source /path/to/source.md

  Take a screenshot and copy it to the clipboard:
      slipbox wm screenshot --clipboard
"""

import os
import logging
from pathlib import Path
from typing import Optional

import typer

from slipbox_core.config import Settings, setup_logging
from slipbox_core.constants import APP_NAME, APP_VERSION
from slipbox_core.errors import SlipboxError
from slipbox_core.notes import exclude_journal, list_notes, open_in_editor, pick_note
from slipbox_core.screenshot import capture
from slipbox_core.subpage import make_subpage

logger = logging.getLogger(__name__)

app = typer.Typer(help="A collection of scripts to do amazing things.")
wm_app = typer.Typer(help="Window manager helpers.")
notes_app = typer.Typer(help="Find, list and link notes.")
app.add_typer(wm_app, name="wm")
app.add_typer(notes_app, name="notes")

DEBUG_MESSAGES = {
    0: "Debug mode is off",
    1: "Debug mode is kind of on",
    2: "Debug mode is on",
}


def debug_message(debug: int) -> str:
    return DEBUG_MESSAGES.get(debug, "Don't be crazy")


def get_settings(ctx: typer.Context) -> Settings:
    """Read the environment once per invocation and share it between commands."""
    if ctx.obj.get("settings") is None:
        ctx.obj["settings"] = Settings.from_environ()
    return ctx.obj["settings"]


def fail(error: SlipboxError) -> None:
    logger.error(str(error))
    raise typer.Exit(1)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name", help="Optional name to operate on."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", metavar="FILE", help="Sets a custom config file."),
    debug: int = typer.Option(0, "--debug", "-d", count=True, help="Turn debugging information on."),
    version: bool = typer.Option(False, "--version", callback=version_callback, is_eager=True,
                                 help="Print the version and exit."),
) -> None:
    """A collection of scripts to do amazing things."""
    setup_logging(debug)
    ctx.obj = {"settings": None}

    if name is not None:
        typer.echo(f"Value for name: {name}")
    if config is not None:
        typer.echo(f"Value for config: {config}")
    typer.echo(debug_message(debug))


@app.command(name="test")
def run_test(list_: bool = typer.Option(False, "--list", "-l", help="Lists test values.")) -> None:
    """Does testing things."""
    if list_:
        typer.echo("Printing testing lists...")
    else:
        typer.echo("Not printing testing lists...")


# --- wm ---

@wm_app.callback(invoke_without_command=True)
def wm() -> None:
    """Window manager helpers."""


@wm_app.command(name="screenshot")
def screenshot(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(None, "--output", "-o", help="The name of the output file."),
    clipboard: bool = typer.Option(False, "--clipboard", "-c", help="Copies the screenshot to the clipboard."),
) -> None:
    """Take a screenshot."""
    try:
        capture(get_settings(ctx), output=output, clipboard=clipboard)
    except SlipboxError as e:
        fail(e)


# --- notes ---

@notes_app.callback(invoke_without_command=True)
def notes(
    ctx: typer.Context,
    relative: bool = typer.Option(False, "--relative", "-r", help="Print paths relative to the notes directory."),
    editor: Optional[str] = typer.Option(None, "--editor", "-e", help="The name of the executable to use as the editor."),
) -> None:
    """Find, list and link notes."""
    ctx.obj["relative"] = relative
    ctx.obj["editor"] = editor


@notes_app.command(name="list")
def list_command(
    ctx: typer.Context,
    exclude_journal_notes: bool = typer.Option(False, "--exclude-journal", "-e", help="Exclude journal notes."),
) -> None:
    """List notes."""
    try:
        files = list_notes(get_settings(ctx).notes_dir, ctx.obj["relative"])
    except SlipboxError as e:
        fail(e)
    if exclude_journal_notes:
        files = exclude_journal(files)
    for file in files:
        typer.echo(file)


@notes_app.command(name="find")
def find_command(ctx: typer.Context) -> None:
    """Use fzf to select a note and open it in $EDITOR."""
    try:
        settings = get_settings(ctx)
        editor = settings.resolve_editor(ctx.obj["editor"])
        selected = pick_note(settings.notes_dir, ctx.obj["relative"])
        if selected is None:
            return
        path = selected if os.path.isabs(selected) else f"{settings.notes_dir}/{selected}"
        typer.echo(path)
        open_in_editor(editor, path)
    except SlipboxError as e:
        fail(e)


@notes_app.command(name="subpage")
def subpage_command(
    ctx: typer.Context,
    source: str = typer.Option(..., "--source", "-s", help="The note the link will be inserted to."),
) -> None:
    """
    Create a sub-page under source from a title in the clipboard.

    If the clipboard contains "Title of the Page" and the source is
    /path/to/source.md, the link points at /path/to/source.title-of-the-page.md.
    """
    try:
        make_subpage(source, get_settings(ctx).display_server())
    except SlipboxError as e:
        fail(e)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
