"""Command line for running the actions outside the composite wrappers."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from .. import run_postprocess, run_prepare
from ..core.repository_scanner import MAX_BRANCHES, RepositoryScanner
from ..utils.action_logging import setup_action_logging


console = Console()


@click.group()
@click.version_option(package_name="delino-actions")
def cli():
    """Delino Actions - link GitHub workflow runs to AutoDev / DevBird tasks.

    Action inputs are read from INPUT_* environment variables, exactly as the
    runner passes them.
    """


@cli.command()
def prepare():
    """Exchange the OIDC token, publish outputs and link the run (AutoDev)."""
    sys.exit(run_prepare.run())


@cli.command()
@click.option(
    "--workspace", "-w",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory to scan (defaults to GITHUB_WORKSPACE or cwd)",
)
def postprocess(workspace):
    """Link the run and upload branches or plan files (DevBird)."""
    sys.exit(run_postprocess.run(working_dir=workspace))


@cli.command()
@click.option(
    "--workspace", "-w",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Directory to scan",
)
@click.option("--base-branch", "-b", default="", help="Branch to exclude (default: main)")
@click.option("--verbose", "-v", is_flag=True, help="Show scanner log lines")
def scan(workspace, base_branch, verbose):
    """Show what postprocess would upload, without contacting the backend."""
    setup_action_logging("INFO" if verbose else "ERROR", use_workflow_commands=False)
    scanner = RepositoryScanner(workspace)

    branches = scanner.detect_branches(base_branch)
    branch_table = Table(title=f"Branches (excluding {base_branch or 'main'}, max {MAX_BRANCHES})")
    branch_table.add_column("#", justify="right")
    branch_table.add_column("Branch")
    for index, name in enumerate(branches, start=1):
        branch_table.add_row(str(index), name)
    console.print(branch_table)

    plans = scanner.detect_plan_files()
    plan_table = Table(title="Plan files")
    plan_table.add_column("File")
    plan_table.add_column("Lines", justify="right")
    plan_table.add_column("Bytes", justify="right")
    for plan in plans:
        plan_table.add_row(
            plan.filename,
            str(len(plan.content.splitlines())),
            str(len(plan.content.encode("utf-8"))),
        )
    console.print(plan_table)

    if not branches and not plans:
        console.print("[yellow]Nothing to upload[/]")


if __name__ == "__main__":
    cli()
