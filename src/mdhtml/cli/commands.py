"""CLI command implementations"""

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdhtml.config import Settings, load_config
from mdhtml.core.pipeline import OutputWriteError, SourceReadError, run_convert


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, config_path: str = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides, config_path=config_path)
    except ValueError as e:
        _fail(str(e))


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            current = version("mdhtml")
        except PackageNotFoundError:
            current = "unknown"
        typer.echo(f"mdhtml {current}")
        raise typer.Exit()


def convert_cmd(
    source: Annotated[Optional[str], typer.Option("--input", "-i", help="Markdown file to convert [default: input/in.md]")] = None,
    out: Annotated[Optional[str], typer.Option("--output", "-o", help="Output directory [default: ./output]")] = None,
    config: Annotated[Optional[str], typer.Option("--config", "-c", help="YAML settings file [default: ./config.yaml]")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    show_version: Annotated[Optional[bool], typer.Option(
        "--version", "-V", callback=_version_callback, is_eager=True, help="Print version and exit",
    )] = None,
    ):
    """Convert a Markdown file and write <output>/out.html."""
    settings = _settings(overrides={"input_path": source, "output_dir": out}, config_path=config)
    _setup_logging("DEBUG" if verbose else settings.log_level)

    input_path = Path(settings.input_path)
    typer.echo(f"Converting {input_path}")
    try:
        out_file, written = run_convert(input_path, Path(settings.output_dir), settings.output_file)
    except SourceReadError as e:
        _fail("Could not read input", e)
    except OutputWriteError as e:
        _fail("Could not write output", e)
    typer.echo(f"Wrote {written} bytes to {out_file}")
