"""Typer-based CLI to explore the pumping lemma on the built-in languages."""

from __future__ import annotations

from pathlib import Path
from typing import List, NoReturn, Optional
import random

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .analyzer import analyze as run_analysis
from .catalog import default_catalog
from .cli_utils import build_decomposition, parse_int_list
from .commands.batch import BatchHandler
from .config import Settings, load_settings
from .decomposition import check_shape, suggest_decomposition
from .exceptions import PumpingLabError
from .generator import generate_sample, random_sample
from .logging_config import setup_logging
from .membership import test_membership
from .models import ConstraintReport, Decomposition, FormalType, LanguageDefinition
from .pumper import pump as pump_string
from .report_manager import ReportManager, verdict_to_dict
from .validator import validate_decomposition

app = typer.Typer(help="PumpingLab CLI - decompose, pump and test strings against formal languages")
console = Console()

SEGMENTS_HELP = "Comma-separated segments: x,y,z (regular) or u,v,w,x,y (context-free)"
LENGTHS_HELP = "Comma-separated lengths: |x|,|y| (regular) or |u|,|v|,|w|,|x| (context-free)"


def _settings(ctx: typer.Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return Settings()


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _language(language_id: str) -> LanguageDefinition:
    try:
        return default_catalog().lookup(language_id)
    except PumpingLabError as exc:
        _fail(exc)


def _decomposition(language: LanguageDefinition, source: str, segments: Optional[str], lengths: Optional[str]) -> Decomposition:
    try:
        return check_shape(language, build_decomposition(language, source, segments, lengths))
    except PumpingLabError as exc:
        _fail(exc)


def _print_decomposition(decomposition: Decomposition) -> None:
    parts = [f"{name} = [bold]{escape(repr(value))}[/bold]" for name, value in decomposition.segments()]
    console.print("Decomposition: " + ", ".join(parts))


def _print_constraints(report: ConstraintReport) -> None:
    table = Table(title=f"Constraints (p = {report.pumping_length})")
    table.add_column("Constraint")
    table.add_column("Value")
    table.add_column("Status")
    table.add_column("Meaning")
    for constraint in report.constraints:
        status = "[green]satisfied[/green]" if constraint.satisfied else "[red]violated[/red]"
        table.add_row(constraint.name, constraint.value_text, status, constraint.description)
    console.print(table)
    for error in report.errors:
        console.print(f"[red]{escape(error)}[/red]")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to a JSON config file"),
    config_tag: str = typer.Option("default", "--config-tag", help="Tagged entry to use from the config file"),
) -> None:
    """Load settings and configure logging for every command."""

    try:
        settings = load_settings(config, tag=config_tag)
    except (FileNotFoundError, PumpingLabError) as exc:
        _fail(exc)
    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@app.command()
def languages(
    formal_type: Optional[FormalType] = typer.Option(None, "--type", "-t", help="Only list languages of this type"),
) -> None:
    """List the languages in the catalog."""

    table = Table(title="Languages")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("p", justify="right")
    table.add_column("Description")
    for language in default_catalog().list_by_type(formal_type):
        table.add_row(
            escape(language.language_id),
            escape(language.name),
            language.formal_type.display_name,
            str(language.pumping_length),
            escape(language.description),
        )
    console.print(table)


@app.command()
def show(language_id: str = typer.Argument(..., help="Language id, e.g. 'a^nb^n'")) -> None:
    """Show one language with its sample strings."""

    language = _language(language_id)
    console.rule(escape(language.name))
    console.print(f"Type: [bold]{language.formal_type.display_name}[/bold]")
    console.print(f"Description: {escape(language.description)}")
    console.print(f"Pumping length: {language.pumping_length}")
    console.print("Samples: " + ", ".join(escape(repr(s)) for s in language.sample_strings))
    if language.counter_examples:
        console.print("Not in language: " + ", ".join(escape(repr(s)) for s in language.counter_examples))


@app.command()
def generate(
    language_id: str = typer.Argument(...),
    length: int = typer.Argument(..., min=0, help="Length of the string to generate"),
) -> None:
    """Generate the canonical string of a given length."""

    try:
        console.print(generate_sample(language_id, length), markup=False, highlight=False)
    except PumpingLabError as exc:
        _fail(exc)


@app.command()
def sample(
    language_id: str = typer.Argument(...),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible picks"),
) -> None:
    """Pick a random example string from the language."""

    try:
        console.print(random_sample(language_id, random.Random(seed)), markup=False, highlight=False)
    except PumpingLabError as exc:
        _fail(exc)


@app.command()
def validate(
    language_id: str = typer.Argument(...),
    source: str = typer.Argument(..., help="The string to decompose"),
    segments: Optional[str] = typer.Option(None, "--segments", "-s", help=SEGMENTS_HELP),
    lengths: Optional[str] = typer.Option(None, "--lengths", "-l", help=LENGTHS_HELP),
) -> None:
    """Check a decomposition against the pumping-lemma constraints."""

    language = _language(language_id)
    decomposition = _decomposition(language, source, segments, lengths)
    report = validate_decomposition(source, decomposition, language.pumping_length)
    _print_decomposition(decomposition)
    _print_constraints(report)
    if report.valid:
        console.print("[bold green]All constraints satisfied.[/bold green]")
    else:
        console.print("[bold red]Decomposition is not valid for the pumping lemma.[/bold red]")
        raise typer.Exit(code=1)


@app.command()
def pump(
    ctx: typer.Context,
    language_id: str = typer.Argument(...),
    source: str = typer.Argument(...),
    segments: Optional[str] = typer.Option(None, "--segments", "-s", help=SEGMENTS_HELP),
    lengths: Optional[str] = typer.Option(None, "--lengths", "-l", help=LENGTHS_HELP),
    count: int = typer.Option(2, "--count", "-i", help="Pump count i"),
) -> None:
    """Pump a decomposition once and test the result."""

    settings = _settings(ctx)
    language = _language(language_id)
    decomposition = _decomposition(language, source, segments, lengths)
    if count > settings.max_pump_count:
        _fail(ValueError(f"Pump count {count} exceeds the configured maximum {settings.max_pump_count}"))
    try:
        pumped = pump_string(decomposition, count)
    except PumpingLabError as exc:
        _fail(exc)
    outcome = test_membership(language_id, pumped)
    console.print(f"i = {count}: [bold]{escape(repr(pumped))}[/bold]")
    if outcome.error:
        console.print(f"[yellow]Recognizer error:[/yellow] {escape(outcome.error)}")
    elif outcome.accepted:
        console.print("[green]Accepted[/green]")
    else:
        console.print("[red]Rejected[/red]")


@app.command("test")
def membership(
    language_id: str = typer.Argument(...),
    candidate: str = typer.Argument(..., help="String to test"),
) -> None:
    """Test whether a string belongs to a language."""

    try:
        outcome = test_membership(language_id, candidate)
    except PumpingLabError as exc:
        _fail(exc)
    if outcome.error:
        console.print(f"[yellow]Recognizer error:[/yellow] {escape(outcome.error)}")
        raise typer.Exit(code=1)
    verdict = "[green]accepted[/green]" if outcome.accepted else "[red]rejected[/red]"
    console.print(f"{escape(repr(candidate))} is {verdict} by {escape(language_id)}")


@app.command()
def analyze(
    ctx: typer.Context,
    language_id: str = typer.Argument(...),
    source: str = typer.Argument(...),
    segments: Optional[str] = typer.Option(None, "--segments", "-s", help=SEGMENTS_HELP),
    lengths: Optional[str] = typer.Option(None, "--lengths", "-l", help=LENGTHS_HELP),
    counts: Optional[str] = typer.Option(None, "--counts", "-c", help="Comma-separated pump counts, e.g. 0,1,2,3"),
    save: bool = typer.Option(False, "--save", help="Persist a JSON report and a log"),
) -> None:
    """Pump a decomposition over several counts and report violations."""

    settings = _settings(ctx)
    language = _language(language_id)
    decomposition = _decomposition(language, source, segments, lengths)
    pump_counts: List[int] = parse_int_list(counts, "--counts") if counts else list(settings.default_pump_counts)
    if any(n > settings.max_pump_count for n in pump_counts):
        _fail(ValueError(f"Pump counts may not exceed the configured maximum {settings.max_pump_count}"))

    report = validate_decomposition(source, decomposition, language.pumping_length)
    try:
        verdict = run_analysis(language_id, decomposition, pump_counts)
    except (PumpingLabError, ValueError) as exc:
        _fail(exc)

    _print_decomposition(decomposition)
    _print_constraints(report)

    table = Table(title="Pumped strings")
    table.add_column("i", justify="right")
    table.add_column("String")
    table.add_column("Result")
    for result in verdict.results:
        if result.recognizer_error:
            status = "[yellow]error[/yellow]"
        elif result.accepted:
            status = "[green]accepted[/green]"
        else:
            status = "[red]rejected[/red]"
        table.add_row(str(result.pump_count), escape(repr(result.produced_string)), status)
    console.print(table)

    color = "red" if verdict.has_violation else "green"
    console.rule("Analysis")
    console.print(f"[bold {color}]{verdict.conclusion_text}[/bold {color}]")
    console.print(escape(verdict.explanation_text))
    if verdict.violation_details:
        console.print(escape(verdict.violation_details))

    if save:
        manager = ReportManager(settings.reports_dir)
        report_path, log_path = manager.save(verdict_to_dict(verdict, source, decomposition, report))
        console.print(f"Report saved at: {report_path}")
        console.print(f"Log saved at: {log_path}")


@app.command()
def suggest(
    language_id: str = typer.Argument(...),
    source: str = typer.Argument(...),
) -> None:
    """Suggest a decomposition that pumps cleanly, when one is known."""

    language = _language(language_id)
    decomposition = suggest_decomposition(language_id, source)
    if decomposition is None:
        console.print(f"[yellow]No suggestion for {escape(repr(source))} in {escape(language.name)}.[/yellow]")
        raise typer.Exit(code=1)
    _print_decomposition(decomposition)
    segments = ",".join(value for _, value in decomposition.segments())
    console.print(f"Use with: --segments '{escape(segments)}'")


@app.command()
def batch(
    ctx: typer.Context,
    case_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="YAML or JSON batch file"),
    csv_out: Optional[Path] = typer.Option(None, "--csv", help="Write one CSV row per case"),
) -> None:
    """Analyse every case in a batch file."""

    settings = _settings(ctx)
    handler = BatchHandler(
        default_pump_counts=settings.default_pump_counts,
        max_pump_count=settings.max_pump_count,
    )
    try:
        results = handler.run(case_file, csv_out)
    except PumpingLabError as exc:
        _fail(exc)
    if any(result.error for result in results):
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
