"""Stitch Prompt Optimizer CLI"""

import asyncio
import json

import typer

from stitch_server.config import get_remote_config, settings
from stitch_server.core.optimizer import OptimizationEngine, RemoteOptimizer

app = typer.Typer(
    name="stitch",
    help="Stitch Prompt Optimizer - rewrite UI-generation prompts against the Stitch prompt guide",
    no_args_is_help=True,
)


def _build_engine(local_only: bool) -> OptimizationEngine:
    remote = None
    if not local_only:
        remote_config = get_remote_config()
        if remote_config is not None:
            remote = RemoteOptimizer.from_credentials(
                endpoint=remote_config.endpoint,
                api_key=remote_config.api_key,
                timeout=settings.request_timeout_seconds,
            )
    return OptimizationEngine(
        remote=remote,
        on_fallback=lambda reason: typer.secho(
            f"Model call failed, used local rules instead: {reason}",
            fg=typer.colors.YELLOW,
            err=True,
        ),
        reason_max_chars=settings.fallback_reason_max_chars,
    )


@app.command()
def optimize(
    prompt: str = typer.Argument(..., help="Prompt to optimize"),
    local: bool = typer.Option(False, "--local", help="Skip the model and use local rules only"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Optimize a prompt"""
    if not prompt.strip():
        typer.secho("Error: prompt is required", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1)

    outcome = asyncio.run(_build_engine(local).optimize(prompt))
    result = outcome.result

    if as_json:
        typer.echo(json.dumps(result.model_dump(), ensure_ascii=False, indent=2))
        return

    typer.secho(f"Optimized ({outcome.source}, {result.category}):", bold=True)
    typer.echo(result.optimized)
    typer.echo("")
    typer.secho("Improvements:", bold=True)
    for improvement in result.improvements:
        typer.echo(f"  - {improvement}")


@app.command()
def config():
    """Show remote optimizer configuration"""
    remote_config = get_remote_config()
    if remote_config is None:
        typer.echo("NVIDIA_API_KEY not set (local rules only)")
        return

    typer.secho("✓ NVIDIA_API_KEY", fg=typer.colors.GREEN)
    typer.echo(f"  - Endpoint: {remote_config.endpoint}")
    typer.echo(f"  - Key: {remote_config.masked_key}")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API server"""
    import uvicorn

    typer.echo(f"Local API server listening on http://{host}:{port}")
    uvicorn.run("stitch_server.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
