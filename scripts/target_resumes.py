#!/usr/bin/env python3
"""
Resume Targeting CLI

Ranks content-bank lines against job descriptions and renders tailored Typst resumes.

Commands:
    generate - Target every job description in a directory and write resumes
    rank     - Show the per-signal ranking of all lines for one job description

Examples:\n

    target_resumes.py generate                                   # Paths from .env

    target_resumes.py generate --jobs data/jobs --output outs/resumes

    target_resumes.py rank data/jobs/AcmeCorp-SoftwareEngineer.txt --top 15
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from quiver.contexts.intake import (
    ContentBank,
    ContentBankError,
    JobDescriptionError,
    JobPosting,
    discover_job_postings,
)
from quiver.contexts.targeting import (
    CollaboratorError,
    ResumeTargeter,
    SentenceTransformerEmbedder,
    SpacyEntityExtractor,
    TargetingConfigError,
    load_targeting_config,
)
from quiver.contexts.targeting.logger import setup_targeting_logger
from quiver.contexts.templating import (
    ProfileError,
    TypstRenderer,
    load_resume_profile,
)
from quiver.utils.text_processing import truncate_display

load_dotenv()
CONTENT_BANK_PATH = Path(os.getenv("CONTENT_BANK_PATH", "resume-lines.json"))
JOBS_PATH = Path(os.getenv("JOBS_PATH", "job_descriptions"))
OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "output"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Rank resume lines against job descriptions and render targeted resumes",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def build_targeter(bank_path: Path, config_path: Optional[Path]) -> ResumeTargeter:
    """Load config, content bank and models, exiting with code 1 on bad input."""
    try:
        config = load_targeting_config(config_path)
        bank = ContentBank.from_file(bank_path)
    except (TargetingConfigError, ContentBankError) as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    log_dir = LOGS_PATH / f"target_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    log_file = setup_targeting_logger(log_dir, config=config)
    typer.echo(f"Log: {log_file}")

    try:
        embedder = SentenceTransformerEmbedder(config.embedding_model)
        extractor = SpacyEntityExtractor(config.ner_model)
        return ResumeTargeter(bank, embedder, extractor, config)
    except CollaboratorError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


@app.command("generate")
def generate_command(
    jobs: Annotated[
        Path, typer.Option("--jobs", "-j", help="Directory of Company-Role.txt job descriptions")
    ] = JOBS_PATH,
    bank: Annotated[Path, typer.Option("--bank", "-b", help="Content bank JSON/YAML")] = CONTENT_BANK_PATH,
    output: Annotated[Path, typer.Option("--output", "-o", help="Output directory")] = OUTPUT_PATH,
    config: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="Targeting config YAML")
    ] = None,
    profile: Annotated[
        Optional[Path], typer.Option("--profile", "-p", help="Resume profile YAML")
    ] = None,
):
    """Target every job description and write a Typst resume for each."""
    try:
        paths = discover_job_postings(jobs)
    except JobDescriptionError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    try:
        resume_profile = load_resume_profile(profile)
    except ProfileError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    targeter = build_targeter(bank, config)
    renderer = TypstRenderer()

    report = targeter.target_all(paths)
    rendered = renderer.write_all(
        report.results, output, resume_profile, category_order=targeter.bank.categories
    )
    for identifier, output_path in rendered.written.items():
        typer.echo(f"  {identifier} -> {output_path}")

    failures = {**report.failures, **rendered.failures}
    typer.echo(f"\n{len(rendered.written)} generated, {len(failures)} failed")
    for identifier, error in failures.items():
        typer.secho(f"  ✗ {identifier}: {str(error).splitlines()[0]}", fg=typer.colors.RED)

    if failures:
        raise typer.Exit(1)
    typer.secho("✓ Resume generation complete", fg=typer.colors.GREEN)


@app.command("rank")
def rank_command(
    job_file: Annotated[Path, typer.Argument(help="Job description file (Company-Role.txt)")],
    bank: Annotated[Path, typer.Option("--bank", "-b", help="Content bank JSON/YAML")] = CONTENT_BANK_PATH,
    config: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="Targeting config YAML")
    ] = None,
    top: Annotated[int, typer.Option("--top", "-n", help="Lines to show", min=1)] = 20,
):
    """Show the per-signal score breakdown for one job description."""
    try:
        posting = JobPosting.from_file(job_file)
    except JobDescriptionError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    targeter = build_targeter(bank, config)
    try:
        result = targeter.target(posting)
    except CollaboratorError as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    threshold = targeter.config.minimum_relevance_score
    typer.echo(f"\n=== {result.company} / {result.role} ===")
    typer.echo(f"{'total':>7} {'sem':>6} {'lex':>6} {'graph':>6}  category | line")
    for scored in result.scored_lines[:top]:
        s = scored.signals
        color = typer.colors.GREEN if scored.score >= threshold else None
        typer.secho(
            f"{s.total:7.3f} {s.semantic:6.3f} {s.lexical:6.3f} {s.graph:6.3f}  "
            f"{truncate_display(scored.category, 24)} | {truncate_display(scored.text, 70)}",
            fg=color,
        )

    typer.echo(f"\nRelevant skills: {', '.join(result.relevant_skills) or '(none)'}")


if __name__ == "__main__":
    app()
