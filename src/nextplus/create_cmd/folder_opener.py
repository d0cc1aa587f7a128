"""Open a generated project in the configured editor."""

import shutil
import subprocess

from nextplus.errors import ProcessExitError, ProcessLaunchError


def build_open_command(editor, path, new_window):
    window_flag = "--new-window" if new_window else "--reuse-window"
    return [editor, window_flag, str(path)]


def open_folder(path, *, new_window, editor="code", runner=subprocess.run):
    """Open *path* as a project root, replacing or adding an editor window."""
    cmd = build_open_command(editor, path, new_window)
    executable = shutil.which(editor)
    if executable is None:
        raise ProcessLaunchError(
            " ".join(cmd), FileNotFoundError(f"editor not found on PATH: {editor}"),
        )
    try:
        result = runner([executable, *cmd[1:]])
    except OSError as exc:
        raise ProcessLaunchError(" ".join(cmd), exc) from exc
    if result.returncode != 0:
        raise ProcessExitError(editor, result.returncode)
