"""Click CLI with analyze, cycles, and serve subcommands."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from codeviz import __version__
from codeviz.models import AnalysisConfig, AnalysisError, CycleMode
from codeviz.pipeline import run_analysis
from codeviz.analysis.cycles import find_cycle_paths

_CYCLE_MODE_CHOICES = [mode.value for mode in CycleMode]
_DEFAULTS = AnalysisConfig()


def _config_options(func):
    """Options shared by every command that runs an analysis."""
    options = [
        click.option("--ext", "extensions", multiple=True,
                     help=f"Source extension to include (repeatable, default: {' '.join(_DEFAULTS.source_extensions)})"),
        click.option("--exclude", multiple=True,
                     help=f"Directory name/pattern to skip (repeatable, default: {' '.join(_DEFAULTS.excluded_dir_names)})"),
        click.option("--index", "index_names", multiple=True,
                     help="Index file base name tried for directory imports (repeatable, default: index)"),
        click.option("--cycle-mode", type=click.Choice(_CYCLE_MODE_CHOICES), default=_DEFAULTS.cycle_mode.value,
                     show_default=True, help="back_edge: flag both ends of each back edge; scc: exact cycle membership"),
        click.option("--workers", "-w", type=click.IntRange(min=1), default=None,
                     help="Extraction threads (default: CPU count)"),
        click.option("--max-depth", type=click.IntRange(min=0), default=_DEFAULTS.max_depth,
                     show_default=True, help="Maximum directory depth to descend"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(extensions, exclude, index_names, cycle_mode, workers, max_depth) -> AnalysisConfig:
    return AnalysisConfig(
        source_extensions=extensions or _DEFAULTS.source_extensions,
        excluded_dir_names=exclude or _DEFAULTS.excluded_dir_names,
        index_base_names=index_names or _DEFAULTS.index_base_names,
        cycle_mode=CycleMode(cycle_mode),
        workers=workers,
        max_depth=max_depth,
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """codeviz: Visualize file-level import dependencies and cycles."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("source_dir", type=click.Path(file_okay=False, path_type=Path), default=".")
@click.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, path_type=Path),
              help="Write graph JSON to this file instead of stdout")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
@_config_options
def analyze(
    source_dir: Path,
    output_file: Path | None,
    indent: int,
    extensions: tuple[str, ...],
    exclude: tuple[str, ...],
    index_names: tuple[str, ...],
    cycle_mode: str,
    workers: int | None,
    max_depth: int,
):
    """Analyze a project directory and emit its dependency graph as JSON."""
    config = _build_config(extensions, exclude, index_names, cycle_mode, workers, max_depth)

    try:
        result = run_analysis(source_dir, config)
    except AnalysisError as e:
        raise click.ClickException(str(e))

    payload = json.dumps(result.to_dict(), indent=indent or None)
    if output_file:
        output_file.write_text(payload + "\n", encoding="utf-8")
        click.echo(f"Wrote {output_file}", err=True)
    else:
        click.echo(payload)

    in_cycle = len(result.cycles)
    click.echo(
        click.style(result.presentation.message, fg="green")
        + (click.style(f" {in_cycle} file(s) in import cycles.", fg="red") if in_cycle else ""),
        err=True,
    )


@cli.command()
@click.argument("source_dir", type=click.Path(file_okay=False, path_type=Path), default=".")
@_config_options
def cycles(
    source_dir: Path,
    extensions: tuple[str, ...],
    exclude: tuple[str, ...],
    index_names: tuple[str, ...],
    cycle_mode: str,
    workers: int | None,
    max_depth: int,
):
    """List the import cycles found in a project directory."""
    config = _build_config(extensions, exclude, index_names, cycle_mode, workers, max_depth)

    try:
        result = run_analysis(source_dir, config)
    except AnalysisError as e:
        raise click.ClickException(str(e))

    chains = find_cycle_paths(result.graph)
    if not chains:
        click.echo(f"No import cycles found in {len(result.graph)} file(s).")
        return

    click.echo(f"\nFound {len(chains)} import cycle(s):\n")
    for chain in chains:
        click.echo("  " + click.style(" -> ".join(chain), fg="red"))

    click.echo(f"\nFiles flagged ({config.cycle_mode.value}):")
    for key in result.graph.nodes:
        if key in result.cycles:
            click.echo(f"  {click.style(key, fg='cyan')}")


@cli.command()
@click.option("--port", "-p", default=8420, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
@click.option("--root", "allowed_root", type=click.Path(exists=True, file_okay=False, path_type=Path),
              default=None, help="Only allow analyzing directories under this path")
def serve(port: int, host: str, allowed_root: Path | None):
    """Start the analysis API server."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the API server. "
            "Install with: pip install 'codeviz[web]'"
        )

    from codeviz.web import create_app

    click.echo(f"Starting codeviz API at http://{host}:{port}")
    uvicorn.run(create_app(allowed_root=allowed_root), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
