"""
Note discovery and selection.

Lists every file under the notes root, optionally filters out journal
entries, and lets the user pick one with fzf before opening it in an editor.
"""

import os
import logging
from typing import List, Optional

from slipbox_core.commands import CommandExecutor
from slipbox_core.constants import JOURNAL_MARKERS, PREVIEW_COMMAND_TEMPLATE
from slipbox_core.errors import CommandError, EditorError
from slipbox_core.fzf_manager import FzfManager

logger = logging.getLogger(__name__)


def scandir_recursive(root: str) -> List[str]:
    """
    Recursively scan a directory and return the paths of all regular files.

    Entries are visited depth-first in name order. Symlinked directories are
    not followed.

    Args:
        root: Root directory to scan

    Returns:
        File paths, each starting with root
    """
    paths: List[str] = []
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except PermissionError as e:
        logger.warning(f"Permission error accessing directory: {root}. Skipping. Error: {e}")
        return paths
    except OSError as e:
        logger.warning(f"Could not scan directory: {root}. Skipping. Error: {e}")
        return paths

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            paths.extend(scandir_recursive(entry.path))
        elif entry.is_file():
            paths.append(entry.path)
    return paths


def list_notes(notes_dir: str, relative: bool = False) -> List[str]:
    """
    List every note under notes_dir.

    Args:
        notes_dir: The notes root
        relative: Render paths relative to notes_dir instead of absolute

    Returns:
        Note paths in walk order
    """
    files = scandir_recursive(notes_dir)
    logger.debug(f"Found {len(files)} notes under {notes_dir}")
    if relative:
        return [os.path.relpath(path, notes_dir) for path in files]
    return files


def exclude_journal(paths: List[str]) -> List[str]:
    """Drop any path containing /journal or .journal (plain substring match)."""
    return [p for p in paths if not any(marker in p for marker in JOURNAL_MARKERS)]


def pick_note(notes_dir: str, relative: bool = True, fzf: Optional[FzfManager] = None) -> Optional[str]:
    """
    Let the user choose a note with fzf.

    Args:
        notes_dir: The notes root
        relative: Feed fzf paths relative to notes_dir
        fzf: FzfManager to use; one with a bat preview is built if omitted

    Returns:
        The first selected line, or None if nothing was chosen
    """
    notes = list_notes(notes_dir, relative)
    if fzf is None:
        # fzf substitutes {} with the highlighted line
        preview_path = f"{notes_dir}/{{}}" if relative else "{}"
        fzf = FzfManager(preview_command=PREVIEW_COMMAND_TEMPLATE.format(path=preview_path))
    selected = fzf.run(notes)
    if not selected:
        logger.info("No note selected")
        return None
    return selected[0]


def open_in_editor(editor: str, path: str) -> None:
    """
    Open path in editor and wait for it to exit.

    Raises:
        EditorError: If the editor cannot be started or exits with an error
    """
    try:
        CommandExecutor.run_interactive([editor, path])
    except CommandError as e:
        raise EditorError(f"Failed to open editor '{editor}': {e}") from e
