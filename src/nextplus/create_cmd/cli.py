"""Click command for creating a Next.js project."""

import sys

import click

from nextplus.create_cmd.orchestrator import (
    OrchestratorDeps,
    ProjectOrchestrator,
    RunState,
)
from nextplus.errors import NextPlusError
from nextplus.process.command_runner import CommandRunner, LogSink


@click.command("create")
@click.argument("name", required=False)
@click.option(
    "--log-file", type=click.File("a", encoding="utf-8"),
    help="Also append generator output to this file.",
)
@click.option(
    "--new-window/--no-new-window", "new_window", default=None,
    help="Open the new project in a new editor window (overrides open_in_new_window).",
)
@click.pass_obj
def create_cmd(store, name, log_file, new_window):
    """Create a new Next.js project using the stored defaults."""
    try:
        config = store.snapshot()
        deps = OrchestratorDeps(
            command_runner=CommandRunner(LogSink(sys.stderr, log_file)),
        )
        orchestrator = ProjectOrchestrator(config, deps=deps, open_in_new_window=new_window)
        result = orchestrator.run(name)
    except NextPlusError as exc:
        click.echo(f"Error: Failed to create Next.js project: {exc}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("", err=True)
        click.echo("Interrupted.", err=True)
        sys.exit(130)

    if result.state is RunState.ABORTED:
        click.echo("Project creation cancelled.", err=True)
