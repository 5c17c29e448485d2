"""
Reelforge CLI - Command line interface for the content pipeline.

Usage:
    reelforge --help                      Show all commands
    reelforge generate --topic "..."      Run the full pipeline once
    reelforge trends technology           Show ranked topics for a niche
    reelforge run-job trendDiscovery      Run a scheduled job now
    reelforge serve                       Start the API server
"""

import asyncio
import json

import typer

app = typer.Typer(
    name="reelforge",
    help="Reelforge CLI - short-form video content automation",
    no_args_is_help=True,
)


def _print_success(message: str) -> None:
    """Print a success message."""
    typer.echo(f"  ✅ {message}")


def _print_error(message: str) -> None:
    """Print an error message to stderr."""
    typer.echo(f"❌ {message}", err=True)


@app.command()
def generate(
    topic: str | None = typer.Option(None, "--topic", "-t", help="Video topic"),
    niche: str | None = typer.Option(None, "--niche", "-n", help="Content niche"),
    duration: int | None = typer.Option(None, "--duration", "-d", help="Length in seconds"),
    discover: bool = typer.Option(
        True, "--discover/--no-discover", help="Discover a trending topic when none is given"
    ),
):
    """Run the full content pipeline and print the artifact as JSON."""
    from reelforge.core.exceptions import ReelforgeError
    from reelforge.core.logging import setup_logging
    from reelforge.pipeline.orchestrator import ContentOrchestrator

    setup_logging()

    async def run():
        orchestrator = ContentOrchestrator()
        try:
            return await orchestrator.generate_complete_content(
                topic=topic,
                niche=niche,
                duration=duration,
                auto_discover_trend=discover,
            )
        finally:
            await orchestrator.drain_background_tasks()

    try:
        artifact = asyncio.run(run())
    except ReelforgeError as e:
        _print_error(e.message)
        raise typer.Exit(1) from e

    typer.echo(artifact.model_dump_json(indent=2))
    _print_success(f"Generated content {artifact.id}")


@app.command()
def trends(
    niche: str = typer.Argument("technology", help="Content niche"),
):
    """Show the top ranked trending topics for a niche."""
    from reelforge.core.exceptions import ReelforgeError
    from reelforge.core.logging import setup_logging
    from reelforge.trends.discovery import TrendDiscoveryService

    setup_logging()

    try:
        records = asyncio.run(TrendDiscoveryService().get_trending_topics_for_niche(niche))
    except ReelforgeError as e:
        _print_error(e.message)
        raise typer.Exit(1) from e

    for i, record in enumerate(records, 1):
        typer.echo(f"{i:>2}. [{record.trend_score:>6}] {record.title}")


@app.command("run-job")
def run_job(
    job_name: str = typer.Argument(
        ..., help="trendDiscovery, contentGeneration or contentPosting"
    ),
):
    """Run one of the scheduled jobs now."""
    from pydantic import BaseModel

    from reelforge.core.exceptions import ReelforgeError
    from reelforge.core.logging import setup_logging
    from reelforge.core.scheduler import JobScheduler

    setup_logging()

    async def run():
        scheduler = JobScheduler()
        try:
            return await scheduler.run_job_manually(job_name)
        finally:
            await scheduler.stop()

    try:
        result = asyncio.run(run())
    except ReelforgeError as e:
        _print_error(e.message)
        raise typer.Exit(1) from e

    if isinstance(result, BaseModel):
        typer.echo(result.model_dump_json(indent=2))
    elif isinstance(result, list):
        typer.echo(json.dumps([r.model_dump(mode="json") for r in result], indent=2))
    _print_success(f"Job {job_name} executed successfully")


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable hot reload"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to run on"),
):
    """Start the API server."""
    import subprocess

    from reelforge.config import get_settings

    port = port or get_settings().port
    cmd = ["uvicorn", "reelforge.main:app", "--host", "0.0.0.0", "--port", str(port)]
    if reload:
        cmd.append("--reload")

    subprocess.run(cmd, check=False)


if __name__ == "__main__":
    app()
