"""
Sub-page creation.

Turns a title on the clipboard into a note path next to a source note, e.g.
"Title of the Page" with source /path/to/source.md gives
/path/to/source.title-of-the-page.md, and puts a markdown link to it back on
the clipboard.
"""

import os
import re
import logging
from pathlib import Path

import typer

from slipbox_core.clipboard import read_clipboard, write_clipboard
from slipbox_core.constants import SLUG_DASH_CHARS, SLUG_SEPARATOR
from slipbox_core.display import DisplayServer
from slipbox_core.errors import ClipboardError, SubPageError

logger = logging.getLogger(__name__)

DASH_RUN_RE = re.compile(r'-+')


def title_to_filename(title: str, ext: str) -> str:
    """
    Turn a title into a filename.

    The substitution order is fixed: " / " first, then the dash characters,
    then any remaining "/".

    Args:
        title: Free-form title text
        ext: Extension without the leading dot

    Returns:
        The slug with ".{ext}" appended
    """
    # Narrow " / " to "/" so the period rule below leaves it alone
    filename = title.replace(SLUG_SEPARATOR, "/")
    for bad in SLUG_DASH_CHARS:
        filename = filename.replace(bad, "-")
    filename = DASH_RUN_RE.sub("-", filename)
    filename = filename.replace("/", ".")
    return f"{filename.lower()}.{ext}"


def subpage_link(title: str, source: str) -> str:
    """
    Build the markdown link for a sub-page of source.

    Raises:
        SubPageError: If source has no file name or no extension
    """
    source_file = Path(source)
    if not source_file.name:
        raise SubPageError(f"Failed to get file name of {source!r}")
    ext = source_file.suffix[1:]
    if not ext:
        raise SubPageError(f"Failed to get extension of {source!r}")
    root = source_file.stem
    if not root:
        raise SubPageError(f"Failed to get file stem of {source!r}")

    filename = f"{root}.{title_to_filename(title, ext)}"
    # Joined as given, so a leading ./ survives
    path = os.path.join(os.path.dirname(source), filename)
    return f"[{title}]({path})"


def make_subpage(source: str, display: DisplayServer) -> str:
    """
    Create a sub-page link from the title on the clipboard.

    The link replaces the clipboard contents and is printed. Failing to write
    the clipboard is reported but not fatal.

    Args:
        source: The note the link will be inserted into
        display: Display server used for clipboard access

    Returns:
        The markdown link

    Raises:
        ClipboardError: If the clipboard is empty or unreadable
        UnsupportedDisplayServerError: If the display server is unsupported
        SubPageError: If source has no usable file name or extension
    """
    title = read_clipboard(display)
    if not title:
        raise ClipboardError("Failed to get clipboard contents")
    link = subpage_link(title, source)
    logger.debug(f"Sub-page link for {source}: {link}")

    try:
        write_clipboard(link, display)
    except ClipboardError as e:
        typer.echo("Failed to set clipboard contents", err=True)
        typer.echo(str(e), err=True)

    typer.echo(link)
    return link
