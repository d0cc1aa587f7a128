"""Build the create-next-app and shadcn/ui invocations for a project.

Everything here is a pure function of ProjectOptions and paths; nothing
is executed.
"""

from typing import List

from nextplus.process.command_runner import CommandInvocation

SCAFFOLDER_PACKAGE = "create-next-app@latest"
UI_LIBRARY_PACKAGE = "shadcn@latest"
BASE_COLOR = "zinc"

# (ProjectOptions attribute, flag name without dashes)
_TOGGLE_FLAGS = (
    ("use_typescript", "typescript"),
    ("include_tailwind", "tailwind"),
    ("include_eslint", "eslint"),
    ("use_app_router", "app"),
    ("use_src_directory", "src-dir"),
    ("enable_experimental_app", "experimental-app"),
    ("enable_turbopack", "turbopack"),
    ("enable_react_compiler", "react-compiler"),
)


def build_scaffold_flags(options) -> List[str]:
    flags = []
    for attribute, name in _TOGGLE_FLAGS:
        flags.append(f"--{name}" if getattr(options, attribute) else f"--no-{name}")
    flags.extend(["--import-alias", options.import_alias.strip()])
    flags.append("--use-npm")
    return flags


def build_scaffold_invocation(project_name, options, cwd, runner="npx") -> CommandInvocation:
    return CommandInvocation(
        executable=runner,
        args=["--yes", SCAFFOLDER_PACKAGE, project_name, *build_scaffold_flags(options)],
        cwd=str(cwd),
        label="create-next-app",
    )


def build_component_invocations(options, project_path, runner="npx") -> List[CommandInvocation]:
    """Return the shadcn/ui steps in run order: init first, then add --all."""
    invocations = []
    if options.init_shadcn:
        invocations.append(CommandInvocation(
            executable=runner,
            args=[UI_LIBRARY_PACKAGE, "init", "-y", f"--base-color={BASE_COLOR}"],
            cwd=str(project_path),
            label="shadcn init",
        ))
    if options.install_all_shadcn_components:
        invocations.append(CommandInvocation(
            executable=runner,
            args=[UI_LIBRARY_PACKAGE, "add", "--all"],
            cwd=str(project_path),
            label="shadcn add --all",
        ))
    return invocations
