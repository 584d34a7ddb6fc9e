"""CLI entry point — Typer app for callqa commands.

Usage:
    python cli/main.py questions transcripts/ --format xlsx --output exports/msft_questions.xlsx
    python cli/main.py statements transcripts/msft_q1.json --format docx
    python cli/main.py attributions transcripts/
    python cli/main.py summarize transcripts/ --llm openai
    python cli/main.py status
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="callqa",
    help="Earnings-call analyst questions — extract, attribute, consolidate, export.",
    no_args_is_help=True,
)

console = Console()

_PATHS = typer.Argument(..., help="Transcript files or directories (.json, .yaml)")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _run(paths: list[Path]):
    from callqa.config import load_settings
    from callqa.pipeline.extract import ExtractionPipeline
    from callqa.transcripts.loader import TranscriptLoader

    settings = load_settings()
    transcripts = TranscriptLoader().load_paths(paths)
    result = ExtractionPipeline.from_settings(settings).run(transcripts)
    for w in result.warnings:
        console.print(f"[yellow]Warning:[/] {w}")
    return settings, result


def _output_path(output: Path | None, output_dir: str, stem: str, extension: str) -> Path:
    if output is not None:
        return output
    return Path(output_dir) / f"{stem}.{extension}"


@app.command()
def questions(
    paths: Annotated[list[Path], _PATHS],
    fmt: str | None = typer.Option(None, "--format", "-f", help="csv, txt, xlsx, docx or pdf"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file"),
) -> None:
    """Extract consolidated analyst questions and export them."""
    from callqa.export.factory import get_exporter

    settings, result = _run(paths)
    exporter = get_exporter(fmt or settings.export.default_format)
    out = _output_path(output, settings.export.output_dir, "analyst_questions", exporter.extension)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(exporter.export_questions(result.questions))

    table = Table(title=f"Analyst Questions ({len(result.questions)})")
    table.add_column("Symbol", style="cyan")
    table.add_column("Period")
    table.add_column("Analyst")
    table.add_column("Institution")
    table.add_column("Question")
    for q in result.questions:
        table.add_row(q.symbol, f"{q.quarter} {q.year}", q.analyst_name, q.analyst_company, q.question[:60])
    console.print(table)
    console.print(f"\n[bold green]Wrote:[/] {out}")


@app.command()
def statements(
    paths: Annotated[list[Path], _PATHS],
    fmt: str | None = typer.Option(None, "--format", "-f", help="csv, txt, xlsx, docx or pdf"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file"),
) -> None:
    """Extract executive prepared statements and export them."""
    from callqa.export.factory import get_exporter

    settings, result = _run(paths)
    exporter = get_exporter(fmt or settings.export.default_format)
    out = _output_path(output, settings.export.output_dir, "prepared_statements", exporter.extension)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(exporter.export_statements(result.statements))

    console.print(f"\n[bold green]Prepared statements:[/] {len(result.statements)}")
    for s in result.statements:
        console.print(f"  {s.symbol} {s.quarter} {s.year}  {s.speaker_name} [dim]({s.speaker_title})[/]")
    console.print(f"\n[bold green]Wrote:[/] {out}")


@app.command()
def attributions(
    paths: Annotated[list[Path], _PATHS],
) -> None:
    """Show the operator-introduction attributions found across transcripts."""
    from callqa.attribution.normalize import normalize_company

    _, result = _run(paths)

    table = Table(title="Operator Attributions")
    table.add_column("Analyst", style="cyan")
    table.add_column("Introduced as")
    table.add_column("Institution", style="green")
    for name, company in result.attributions.items():
        table.add_row(name, company, normalize_company(company))
    console.print(table)


@app.command()
def summarize(
    paths: Annotated[list[Path], _PATHS],
    llm_provider: str | None = typer.Option(None, "--llm", "-l", help="LLM provider"),
    profiles: bool = typer.Option(False, "--profiles", help="Also generate analyst profiles"),
) -> None:
    """Summarize analyst questions per symbol with an LLM."""
    from callqa.llm.factory import profile_params, provider_from_settings, summary_params
    from callqa.summaries.profiles import AnalystProfiler
    from callqa.summaries.summarizer import QuestionSummarizer

    settings, result = _run(paths)
    if not result.questions:
        console.print("[yellow]No analyst questions found.[/]")
        raise typer.Exit(code=1)

    llm = provider_from_settings(settings.llm, llm_provider)
    summary = QuestionSummarizer(llm, params=summary_params(settings.llm)).summarize(result.questions)

    console.print(f"\n{summary.summary}\n")
    for insight in summary.key_insights:
        console.print(f"  [cyan]•[/] {insight}")

    if profiles:
        profiler = AnalystProfiler(llm, params=profile_params(settings.llm))
        for profile in profiler.generate_all(result.questions):
            console.print(f"\n[bold]{profile.name}[/] ({profile.company}) [dim]{profile.identity}[/]")
            console.print(profile.profile)


@app.command()
def status() -> None:
    """Show available exporters, LLM providers and active settings."""
    from callqa import __version__
    from callqa.config import load_settings
    from callqa.export.factory import available_formats
    from callqa.llm.factory import available_providers

    settings = load_settings()
    console.print(f"\n[bold green]earnings-call-qa[/] v{__version__}\n")

    table = Table(title="Available Components")
    table.add_column("Layer", style="cyan")
    table.add_column("Available")
    table.add_row("Export Formats", ", ".join(available_formats()))
    table.add_row("LLM Providers", ", ".join(available_providers()))
    table.add_row("Attribution Policy", settings.extraction.attribution_policy)
    table.add_row("LLM", f"{settings.llm.provider} / {settings.llm.model}")
    console.print(table)


if __name__ == "__main__":
    app()
