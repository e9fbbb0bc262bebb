"""Command-line interface for batgpt."""

import sys
from typing import Optional, Tuple

import click

from . import __version__
from .config import GlobalConfig
from .exceptions import BatGptError, SubmissionError
from .solver import DEFAULT_MODEL, DispatchReport, solve as run_pipeline
from .utils.terminal import configure_logging, console, create_table, format_outcome_color


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable verbose output")
def cli(verbose: bool):
    """batgpt - solve CodingBat problems with OpenAI for every saved student."""
    configure_logging(verbose)


def _load_config() -> GlobalConfig:
    try:
        return GlobalConfig.load()
    except BatGptError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


def _save_config(config: GlobalConfig) -> None:
    try:
        config.save()
    except BatGptError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


@cli.command()
@click.argument("cuname")
@click.argument("password", metavar="PASS")
def add(cuname: str, password: str):
    """Add a student."""
    config = _load_config()
    config.add_student(cuname, password)
    _save_config(config)
    console.print(f"[green]Added student {cuname}[/green]")


@cli.command()
@click.argument("cuname")
def remove(cuname: str):
    """Remove a student."""
    config = _load_config()
    removed = config.remove_student(cuname)
    _save_config(config)

    if removed:
        console.print(f"[green]Removed student {cuname}[/green]")
    else:
        console.print(f"[yellow]No student named {cuname}[/yellow]")


@cli.command(name="list")
def list_students():
    """List all students."""
    config = _load_config()

    if not config.students:
        console.print("[yellow]No students saved.[/yellow]")
        console.print("Run 'batgpt add CUNAME PASS' to add one.")
        return

    table = create_table("Students", ["Cuname", "Password"])
    for student in config.students:
        table.add_row(student.cuname, student.password)
    console.print(table)


@cli.command()
@click.argument("key")
def setkey(key: str):
    """Set the OpenAI API key."""
    config = _load_config()
    config.set_key(key)
    _save_config(config)
    console.print("[green]API key saved[/green]")


def print_report(report: DispatchReport):
    """Display one row per (student, problem) submission."""
    table = create_table("Submissions", ["Student", "Problem", "Result", "Error"])
    for outcome in report.outcomes:
        table.add_row(
            outcome.account.cuname,
            outcome.exercise_id,
            format_outcome_color(outcome.ok),
            "" if outcome.ok else str(outcome.error),
        )
    console.print(table)


@cli.command()
@click.argument("prob", nargs=-1, required=True)
@click.option("-j", "--jobs", type=click.IntRange(min=1), help="Maximum concurrent submissions (default: unbounded)")
@click.option("--timeout", type=float, help="Per-request timeout in seconds (default: none)")
@click.option("--model", default=DEFAULT_MODEL, show_default=True, help="OpenAI chat model")
def solve(prob: Tuple[str, ...], jobs: Optional[int], timeout: Optional[float], model: str):
    """Solve problems and submit them for every student."""
    config = _load_config()

    if not config.has_key():
        console.print("[red]No OpenAI API key set.[/red]")
        console.print("Run 'batgpt setkey KEY' first.")
        sys.exit(1)
    if not config.students:
        console.print("[yellow]No students saved, nothing to submit.[/yellow]")
        sys.exit(1)

    console.print(
        f"[cyan]Solving {len(set(prob))} problem(s) for {len(config.students)} student(s)...[/cyan]"
    )
    try:
        report = run_pipeline(
            prob,
            config.students,
            api_key=config.openai_key,
            model=model,
            max_workers=jobs,
            timeout=timeout,
        )
    except SubmissionError as e:
        if e.report is not None:
            print_report(e.report)
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    except BatGptError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    print_report(report)
    console.print(f"[green]Submitted {len(report.outcomes)} solution(s)[/green]")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
