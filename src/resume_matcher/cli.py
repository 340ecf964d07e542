"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from resume_matcher.config import AppConfig, load_config
from resume_matcher.matching.heuristic import match_keywords
from resume_matcher.models.analysis import AnalysisResult
from resume_matcher.models.errors import AnalysisError, ErrorCategory
from resume_matcher.parsers.resume_parser import load_document
from resume_matcher.pipeline.orchestrator import AnalysisOrchestrator, build_orchestrator
from resume_matcher.resources.loader import load_lexicon

app = typer.Typer(
    name="resume-matcher",
    help="Match a resume against a job description and suggest ATS optimizations.",
    no_args_is_help=True,
)
console = Console()

CATEGORY_HINTS: dict[ErrorCategory, str] = {
    ErrorCategory.FIX_SETUP: "Check your input files and configuration.",
    ErrorCategory.RETRY_SOON: "This is temporary; try again shortly.",
    ErrorCategory.UNEXPECTED: "Something unexpected happened; retrying may help.",
}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _read_input(path: Path, config: AppConfig, label: str) -> str:
    if not path.exists():
        console.print(f"[red]{label} file not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return load_document(path, max_size=config.extraction.max_bytes)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, AnalysisError) and exc.kind.retryable


def _wait_for(retry_state) -> float:
    """Honor the error's retry hint, else back off exponentially."""
    exc = retry_state.outcome.exception()
    if isinstance(exc, AnalysisError) and exc.retry_after is not None:
        return exc.retry_after
    return wait_exponential(min=1, max=10)(retry_state)


async def run_with_retries(
    orchestrator: AnalysisOrchestrator,
    resume_text: str,
    job_text: str,
    retries: int,
) -> AnalysisResult:
    """Call the orchestrator, retrying retryable failures up to ``retries`` times."""
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(retries + 1),
        wait=_wait_for,
        retry=retry_if_exception(_is_retryable),
        reraise=True,
    ):
        with attempt:
            return await orchestrator.analyze(resume_text, job_text)


def _print_report(result: AnalysisResult) -> None:
    score = result.match_score
    score_color = "green" if score >= 75 else "yellow" if score >= 60 else "red"
    console.print(
        Panel(
            f"[bold {score_color}]Match score: {score}/100[/bold {score_color}]\n"
            f"Found: {', '.join(result.keywords_found) or '-'}\n"
            f"Missing: {', '.join(result.keywords_missing) or '-'}",
            title="ATS Match",
        )
    )

    if result.suggestions:
        table = Table(title="Suggestions", show_lines=True)
        table.add_column("Section", style="bold")
        table.add_column("Original")
        table.add_column("Improved")
        table.add_column("Reason", style="dim")
        for s in result.suggestions:
            table.add_row(s.section, s.original, s.improved, s.reason)
        console.print(table)

    sections = result.optimized_sections
    body = [f"[bold]Summary[/bold]\n{sections.summary}"]
    for label, items in (
        ("Experience", sections.experience),
        ("Skills", sections.skills),
        ("Education", sections.education),
    ):
        if items:
            body.append(f"[bold]{label}[/bold]\n" + "\n".join(f"  - {i}" for i in items))
    console.print(Panel("\n\n".join(body), title="Optimized Resume"))

    if result.warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  - {warning}")
    if result.learning_recommendations:
        console.print("\n[cyan]Learning recommendations:[/cyan]")
        for rec in result.learning_recommendations:
            console.print(f"  - {rec}")


@app.command()
def analyze(
    resume: Path = typer.Option(..., "--resume", "-r", help="Resume file (PDF/DOCX/TXT/MD)"),
    job: Path = typer.Option(..., "--job", "-j", help="Job description file (PDF/DOCX/TXT/MD)"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    output: Path = typer.Option(None, "--output", "-o", help="Also write the JSON report here"),
    retries: int = typer.Option(0, "--retries", min=0, max=5, help="Retry transient failures"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Analyze a resume against a job description."""
    _setup_logging(verbose)
    config = load_config(config_path)
    resume_text = _read_input(resume, config, "Resume")
    job_text = _read_input(job, config, "Job description")

    orchestrator = build_orchestrator(config)
    try:
        with console.status("Analyzing resume..."):
            result = asyncio.run(run_with_retries(orchestrator, resume_text, job_text, retries))
    except AnalysisError as e:
        if as_json:
            console.print_json(json.dumps(e.to_wire()))
        else:
            console.print(f"[red]{e.message}[/red]")
            hint = CATEGORY_HINTS[e.kind.category]
            if e.retry_after is not None:
                hint += f" Suggested wait: {int(e.retry_after)}s."
            console.print(f"[dim]{hint}[/dim]")
        raise typer.Exit(2)

    report = result.to_wire()
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
        console.print(f"[green]Report saved: {output}[/green]")

    if as_json:
        console.print_json(json.dumps(report, ensure_ascii=False))
    else:
        _print_report(result)


@app.command()
def keywords(
    resume: Path = typer.Option(..., "--resume", "-r", help="Resume file"),
    job: Path = typer.Option(..., "--job", "-j", help="Job description file"),
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """Run the offline keyword matcher only."""
    config = load_config(config_path)
    resume_text = _read_input(resume, config, "Resume")
    job_text = _read_input(job, config, "Job description")

    outcome = match_keywords(
        resume_text,
        job_text,
        load_lexicon(config.analysis.lexicon_path),
        found_limit=config.analysis.found_limit,
        missing_limit=config.analysis.missing_limit,
    )
    console.print(
        Panel(
            f"Score: [bold]{outcome.match_score}[/bold] "
            f"({outcome.found_total} shared keywords)\n"
            f"Found: {', '.join(outcome.found_keywords) or '-'}\n"
            f"Missing: {', '.join(outcome.missing_keywords) or '-'}",
            title="Keyword Match",
        )
    )


@app.command()
def lexicon(
    config_path: Path = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """List the keyword lexicon terms."""
    config = load_config(config_path)
    terms = load_lexicon(config.analysis.lexicon_path)
    console.print(f"[bold]{len(terms)} terms[/bold]: {', '.join(terms)}")


if __name__ == "__main__":
    app()
