"""Pick the folder a new project is created in."""

import os
from pathlib import Path

from nextplus.errors import PathError
from nextplus.prompts import CANCELLED, Resolved, ask_text, is_cancelled

NOT_FOUND = "Configured default location not found"
NOT_A_FOLDER = "Configured default location is not a folder"
PICKER_TITLE = "Select a directory for the new Next.js project"


def check_default_location(location) -> Path:
    """Return the absolute directory for *location* or raise PathError."""
    resolved = Path(location).expanduser().resolve()
    if not resolved.exists():
        raise PathError(resolved, NOT_FOUND)
    if not resolved.is_dir():
        raise PathError(resolved, NOT_A_FOLDER)
    return resolved


def _validate_directory(value):
    if not value:
        return "A directory is required"
    if not os.path.isdir(os.path.expanduser(value)):
        return f"Not an existing directory: {value}"
    return None


def pick_folder(title, prompt_config=None):
    """Ask for an existing directory, defaulting to the current one.

    Returns:
        Resolved(Path) or CANCELLED.
    """
    outcome = ask_text(
        title,
        default=os.getcwd(),
        validate=_validate_directory,
        config=prompt_config,
    )
    if is_cancelled(outcome):
        return CANCELLED
    return Resolved(Path(outcome.value).expanduser().resolve())


def resolve_target_folder(default_location, *, prompt_config=None, warn=None):
    """Use the configured default location when valid, else the folder picker.

    Args:
        default_location: Stored location string; blank means none configured.
        prompt_config: PromptConfig for the picker.
        warn: Callable receiving a warning message when the default is unusable.

    Returns:
        Resolved(Path) or CANCELLED.
    """
    location = (default_location or "").strip()
    if location:
        try:
            return Resolved(check_default_location(location))
        except PathError as exc:
            if warn is not None:
                warn(f"{exc}. Please update your settings.")

    return pick_folder(PICKER_TITLE, prompt_config)
