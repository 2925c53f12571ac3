"""Output handling shared by the net-generating commands."""

from __future__ import annotations

from pathlib import Path

import typer

from boxnets.application import GenerateNetCommand, NetOutput
from boxnets.application.config import BoxConfiguration
from boxnets.infrastructure.exporters import ExporterRegistry, ExportManager

__all__ = ["parse_formats", "run_and_export"]


def parse_formats(output_formats_str: str | None) -> list[str] | None:
    """Parse a comma-separated format list, or "all".

    Returns:
        The requested formats, or None when the option was not given.

    Raises:
        typer.Exit: If any format is unknown.
    """
    if output_formats_str is None:
        return None

    if output_formats_str.strip().lower() == "all":
        return ExporterRegistry.available_formats()

    formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]
    _check_formats(formats)
    return formats


def _check_formats(formats: list[str]) -> None:
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)


def _display_errors(result: NetOutput) -> None:
    typer.echo("Errors:", err=True)
    for error in result.errors:
        typer.echo(f"  {error}", err=True)


def run_and_export(config: BoxConfiguration, output_dir: Path | None) -> dict[str, Path]:
    """Lay out the configured net and write every requested format.

    Without ``--output-dir`` files go next to the SVG file name, which is
    relative to the current directory.

    Raises:
        typer.Exit: With code 1 if the net could not be laid out.
    """
    _check_formats(config.output.formats)

    result = GenerateNetCommand().execute(config)

    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)

    if not result.is_valid:
        _display_errors(result)
        raise typer.Exit(code=1)

    target = Path(config.output.file or result.default_file_name)
    if config.output.file is None:
        typer.echo(f"Using default file name {result.default_file_name}")

    sheet = result.sheet_size
    typer.echo(f"Sheet size: {sheet.x:g} x {sheet.y:g} mm")

    manager = ExportManager(output_dir if output_dir is not None else target.parent)
    return manager.export_all(config.output.formats, result, target.name)
