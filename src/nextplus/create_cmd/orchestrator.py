"""Project creation pipeline: prompts, folder checks, generator runs, folder opening."""

import os
import re
import shutil
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from nextplus.create_cmd.command_builder import (
    build_component_invocations,
    build_scaffold_invocation,
)
from nextplus.create_cmd.folder_opener import open_folder
from nextplus.create_cmd.options import resolve_project_options
from nextplus.create_cmd.target_folder import resolve_target_folder
from nextplus.errors import NextPlusError, ValidationError
from nextplus.process.command_runner import CommandRunner, LogSink
from nextplus.prompts import PromptConfig, Resolved, ask_text, choose, is_cancelled

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")
NAME_REQUIRED = "Project name is required"
NAME_CHARACTERS = "Use letters, numbers, dots, underscores or dashes"

OVERWRITE = "Overwrite"
CANCEL = "Cancel"
OPEN_HERE = "Open Here"
OPEN_IN_NEW_WINDOW = "Open in New Window"
DO_NOTHING = "Do Nothing"


class RunState(Enum):
    IDLE = "idle"
    NAME_ENTRY = "name_entry"
    OPTION_RESOLUTION = "option_resolution"
    FOLDER_RESOLUTION = "folder_resolution"
    CONFLICT_CHECK = "conflict_check"
    SCAFFOLDING = "scaffolding"
    COMPONENT_INSTALL = "component_install"
    POST_CREATE_ACTION = "post_create_action"
    DONE = "done"
    ABORTED = "aborted"


def validate_project_name(value):
    """Return an error message for an unusable project name, else None."""
    name = value.strip()
    if not name:
        return NAME_REQUIRED
    if not PROJECT_NAME_PATTERN.match(name):
        return NAME_CHARACTERS
    return None


def _remove_existing(path):
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


@dataclass
class RunResult:
    state: RunState
    project_path: Optional[Path] = None


@dataclass
class OrchestratorDeps:
    """Injectable dependencies for the orchestrator."""

    prompt_config: PromptConfig = field(default_factory=PromptConfig)
    output: TextIO = None
    command_runner: object = None
    open_folder_fn: Callable = None
    remove_tree_fn: Callable = None

    def __post_init__(self):
        if self.output is None:
            self.output = sys.stderr
        if self.command_runner is None:
            self.command_runner = CommandRunner(LogSink(self.output))
        if self.open_folder_fn is None:
            self.open_folder_fn = open_folder
        if self.remove_tree_fn is None:
            self.remove_tree_fn = _remove_existing


class ProjectOrchestrator:
    """Runs one project creation from name entry to the post-create action.

    Args:
        config: Configuration snapshot for this run.
        deps: OrchestratorDeps; defaults talk to the terminal and real processes.
        open_in_new_window: Overrides the persisted ``open_in_new_window`` setting
            for this run when not None.
    """

    def __init__(self, config, *, deps=None, open_in_new_window=None):
        self._config = config
        self._deps = deps if deps is not None else OrchestratorDeps()
        self._open_in_new_window = open_in_new_window
        self.state = RunState.IDLE
        self.history: List[RunState] = [RunState.IDLE]

    def _enter(self, state):
        self.state = state
        self.history.append(state)

    def _abort(self):
        self._enter(RunState.ABORTED)
        return RunResult(RunState.ABORTED)

    def _say(self, message):
        print(message, file=self._deps.output)

    def _warn(self, message):
        self._say(f"Warning: {message}")

    def run(self, project_name=None) -> RunResult:
        """Create a project, returning the terminal state.

        Generator and validation failures propagate as NextPlusError after the
        pipeline stops; cancellation returns a RunResult in ABORTED.
        """
        self._enter(RunState.NAME_ENTRY)
        name = self._resolve_name(project_name)
        if is_cancelled(name):
            return self._abort()
        name = name.value

        self._enter(RunState.OPTION_RESOLUTION)
        options = resolve_project_options(self._config, self._deps.prompt_config)
        if is_cancelled(options):
            return self._abort()
        options = options.value

        self._enter(RunState.FOLDER_RESOLUTION)
        folder = resolve_target_folder(
            self._config.get("default_location"),
            prompt_config=self._deps.prompt_config,
            warn=self._warn,
        )
        if is_cancelled(folder):
            return self._abort()
        folder = folder.value

        self._enter(RunState.CONFLICT_CHECK)
        project_path = folder / name
        if not self._clear_conflict(name, project_path):
            return self._abort()

        self._create(name, options, folder, project_path)

        self._enter(RunState.POST_CREATE_ACTION)
        self._post_create(name, project_path)

        self._enter(RunState.DONE)
        return RunResult(RunState.DONE, project_path)

    def _resolve_name(self, project_name):
        if project_name is not None:
            error = validate_project_name(project_name)
            if error:
                raise ValidationError(f"Invalid project name '{project_name}': {error}")
            return Resolved(project_name.strip())
        return ask_text(
            "Enter a name for the new Next.js project",
            validate=validate_project_name,
            config=self._deps.prompt_config,
        )

    def _clear_conflict(self, name, project_path):
        """Return False when an existing folder must be kept."""
        if not os.path.lexists(project_path):
            return True
        choice = choose(
            f'Folder "{name}" already exists. Overwrite?', 2, [OVERWRITE, CANCEL],
            config=self._deps.prompt_config,
        )
        if is_cancelled(choice) or choice.value != 1:
            return False
        self._deps.remove_tree_fn(project_path)
        return True

    def _create(self, name, options, folder, project_path):
        runner_name = self._config.get("package_runner")
        runner = self._deps.command_runner

        self._enter(RunState.SCAFFOLDING)
        self._say(f'Creating Next.js project "{name}"')
        self._say("Running create-next-app...")
        runner.run(build_scaffold_invocation(name, options, folder, runner=runner_name))

        if options.wants_component_setup:
            self._enter(RunState.COMPONENT_INSTALL)
            self._say("Setting up shadcn/ui...")
            for invocation in build_component_invocations(options, project_path, runner=runner_name):
                runner.run(invocation)

    def _wants_new_window(self):
        if self._open_in_new_window is not None:
            return self._open_in_new_window
        return self._config.get("open_in_new_window")

    def _open(self, project_path, new_window):
        """Open the project; a failure here leaves the created project intact."""
        try:
            self._deps.open_folder_fn(
                project_path,
                new_window=new_window,
                editor=self._config.get("editor_command"),
            )
        except NextPlusError as exc:
            self._warn(f"Could not open {project_path}: {exc}")

    def _post_create(self, name, project_path):
        if self._wants_new_window():
            self._say(
                f'Next.js project "{name}" created successfully. Opening in new window...'
            )
            self._open(project_path, new_window=True)
            return

        self._say(f'Next.js project "{name}" created successfully.')
        choice = choose(
            "What would you like to do with the new project?", 3,
            [OPEN_HERE, OPEN_IN_NEW_WINDOW, DO_NOTHING],
            config=self._deps.prompt_config,
        )
        if is_cancelled(choice) or choice.value == 3:
            return
        self._open(project_path, new_window=choice.value == 2)
