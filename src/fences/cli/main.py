"""Typer CLI for glass pool-fence layout and pricing."""

from pathlib import Path
from typing import Annotated

import typer

from fences.application import CalculatorOutput
from fences.application.config import (
    ConfigError,
    FenceConfiguration,
    config_to_input,
    load_config,
    merge_config_with_cli,
)
from fences.application.factory import get_factory
from fences.cli.commands import display_load_error, validate_command
from fences.infrastructure import CatalogueFormatter
from fences.infrastructure.exporters import BomExporter, ExporterRegistry, ExportManager

app = typer.Typer(
    name="fences",
    help="Lay out and price frameless glass pool fences.",
)

app.command(name="validate")(validate_command)


def _export_files(
    formats: list[str],
    output_dir: Path,
    project_name: str,
    result: CalculatorOutput,
) -> None:
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(formats, result, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def calculate(
    config_file: Annotated[
        Path | None,
        typer.Argument(help="Path to JSON configuration file"),
    ] = None,
    shape: Annotated[
        str | None,
        typer.Option("--shape", "-s", help="Shape: inline, l-shape, rectangle"),
    ] = None,
    length: Annotated[
        float | None,
        typer.Option("--length", "-l", help="Inline run length in mm"),
    ] = None,
    side1: Annotated[
        float | None,
        typer.Option("--side1", help="L-shape first side length in mm"),
    ] = None,
    side2: Annotated[
        float | None,
        typer.Option("--side2", help="L-shape second side length in mm"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Rectangle width in mm"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Rectangle height in mm"),
    ] = None,
    gate_position: Annotated[
        float | None,
        typer.Option("--gate-position", help="Gate offset from the run start in mm"),
    ] = None,
    gate_width: Annotated[
        float | None,
        typer.Option("--gate-width", help="Gate opening width in mm"),
    ] = None,
    gate_side: Annotated[
        int | None,
        typer.Option("--gate-side", help="Side the gate is on (L-shape, rectangle)"),
    ] = None,
    include_posts: Annotated[
        bool | None,
        typer.Option("--posts/--no-posts", help="Include spigots in the BOM"),
    ] = None,
    post_width: Annotated[
        float | None,
        typer.Option("--post-width", help="Spigot body width in mm"),
    ] = None,
    max_gap: Annotated[
        float | None,
        typer.Option("--max-gap", help="Maximum gap between panels in mm"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="BOM format: text, json, csv"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: bom,json (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for exported files"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Base name for exported files"),
    ] = None,
) -> None:
    """Calculate the panel layout and bill of materials for a fence.

    Reads a configuration file, inline options, or both (options override
    the file).

    Exit codes:
        0 - Every run is compliant
        1 - Configuration error or unknown format
        2 - Calculated, but at least one run is not compliant

    Examples:
        fences calculate --length 5000 --gate-position 2000 --gate-width 900
        fences calculate backyard.json --posts --format csv
    """
    if config_file is None and shape is None and all(
        v is None for v in (length, side1, side2, width, height)
    ):
        typer.echo("Provide a configuration file or shape dimensions.", err=True)
        raise typer.Exit(code=1)

    try:
        base: FenceConfiguration | None = (
            load_config(config_file) if config_file is not None else None
        )
        config = merge_config_with_cli(
            base,
            shape=shape,
            length=length,
            side1=side1,
            side2=side2,
            width=width,
            height=height,
            gate_position=gate_position,
            gate_width=gate_width,
            gate_side=gate_side,
            include_posts=include_posts,
            post_width=post_width,
            max_gap_width=max_gap,
            output_format=output_format,
            output_dir=str(output_dir) if output_dir is not None else None,
            project_name=project_name,
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    factory = get_factory()
    command = factory.create_calculate_command()
    result = command.execute(config_to_input(config))

    output = config.output
    if output.include_layout and output.format == "text":
        typer.echo(factory.get_layout_formatter().format(result))
        typer.echo()
    typer.echo(BomExporter(output_format=output.format).export_string(result))

    formats_str = output_formats or ",".join(output.formats)
    if formats_str:
        if formats_str.lower() == "all":
            formats = ExporterRegistry.available_formats()
        else:
            formats = [f.strip().lower() for f in formats_str.split(",") if f.strip()]
        _export_files(
            formats,
            Path(output.output_dir or "."),
            output.project_name,
            result,
        )

    if not result.success:
        typer.echo(
            f"Non-compliant runs: {', '.join(result.failed_runs)}", err=True
        )
        raise typer.Exit(code=2)


@app.command()
def catalogue() -> None:
    """List the panels and spigots available for layouts."""
    typer.echo(CatalogueFormatter().format(get_factory().catalogue))


if __name__ == "__main__":
    app()
