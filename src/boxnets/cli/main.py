"""Typer CLI for laser-cut box nets."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from boxnets.application.config import (
    DEFAULT_CUBE_LID_HEIGHT,
    DEFAULT_GLUE_FLAP,
    DEFAULT_LID_HEIGHT,
    DEFAULT_THICKNESS,
    BoxConfiguration,
    ConfigError,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from boxnets.cli.commands import (
    display_load_error,
    parse_formats,
    run_and_export,
    validate_command,
)
from boxnets.domain import LidType

app = typer.Typer(
    name="boxnets",
    help="Generate flat foldable nets of cardboard boxes for laser cutting.",
)

app.command(name="validate")(validate_command)


ThicknessOption = Annotated[
    float,
    typer.Option("--thickness", "-t", help="Cardboard thickness in mm"),
]
GlueFlapOption = Annotated[
    float,
    typer.Option("--glue-flap", help="Glue flap length in mm"),
]
FileOption = Annotated[
    str | None,
    typer.Option(
        "--file",
        "-f",
        help="SVG output file; other formats use the same name. "
        "Defaults to the variant's file name in the current folder.",
    ),
]
OutputFormatsOption = Annotated[
    str | None,
    typer.Option(
        "--output-formats",
        help="Comma-separated export formats: svg,dxf,json (or 'all')",
    ),
]
OutputDirOption = Annotated[
    Path | None,
    typer.Option("--output-dir", help="Directory for the exported files"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output"),
    ] = False,
) -> None:
    """Generate flat foldable nets of cardboard boxes for laser cutting."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )


def _build_config(
    box: dict[str, Any], file: str | None, output_formats: str | None
) -> BoxConfiguration:
    output: dict[str, Any] = {"file": file}
    formats = parse_formats(output_formats)
    if formats is not None:
        output["formats"] = formats
    try:
        return load_config_from_dict({"box": box, "output": output})
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


@app.command(name="box-cuboid")
def box_cuboid(
    length: Annotated[
        float, typer.Option("--length", "-l", help="Outer length (longer side) in mm")
    ],
    width: Annotated[
        float, typer.Option("--width", "-w", help="Outer width (shorter side) in mm")
    ],
    height: Annotated[float, typer.Option("--height", "-h", help="Outer height in mm")],
    lid_height: Annotated[
        float, typer.Option("--lid-height", help="Lid rim height in mm")
    ] = DEFAULT_LID_HEIGHT,
    thickness: ThicknessOption = DEFAULT_THICKNESS,
    glue_flap: GlueFlapOption = DEFAULT_GLUE_FLAP,
    file: FileOption = None,
    output_formats: OutputFormatsOption = None,
    output_dir: OutputDirOption = None,
) -> None:
    """Cuboid box with a telescoping lid."""
    config = _build_config(
        {
            "type": "box-cuboid",
            "length": length,
            "width": width,
            "height": height,
            "lid_height": lid_height,
            "thickness": thickness,
            "glue_flap": glue_flap,
        },
        file,
        output_formats,
    )
    run_and_export(config, output_dir)


@app.command(name="box-cube")
def box_cube(
    length: Annotated[
        float, typer.Option("--length", "-l", help="Outer length (longer side) in mm")
    ],
    width: Annotated[
        float, typer.Option("--width", "-w", help="Outer width (shorter side) in mm")
    ],
    height: Annotated[float, typer.Option("--height", "-h", help="Outer height in mm")],
    lid_height: Annotated[
        float, typer.Option("--lid-height", help="Lid rim height in mm")
    ] = DEFAULT_CUBE_LID_HEIGHT,
    thickness: ThicknessOption = DEFAULT_THICKNESS,
    glue_flap: GlueFlapOption = DEFAULT_GLUE_FLAP,
    file: FileOption = None,
    output_formats: OutputFormatsOption = None,
    output_dir: OutputDirOption = None,
) -> None:
    """Box with the lid hinged on the back wall."""
    config = _build_config(
        {
            "type": "box-cube",
            "length": length,
            "width": width,
            "height": height,
            "lid_height": lid_height,
            "thickness": thickness,
            "glue_flap": glue_flap,
        },
        file,
        output_formats,
    )
    run_and_export(config, output_dir)


@app.command()
def lid(
    length: Annotated[
        float, typer.Option("--length", "-l", help="Outer length of the box in mm")
    ],
    width: Annotated[
        float, typer.Option("--width", "-w", help="Outer width of the box in mm")
    ],
    height: Annotated[
        float, typer.Option("--height", "-h", help="Lid rim height in mm")
    ] = DEFAULT_LID_HEIGHT,
    fat: Annotated[bool, typer.Option("--fat", help="Double rim walls")] = False,
    lid_type: Annotated[
        LidType, typer.Option("--lid-type", help="How the lid attaches to the box")
    ] = LidType.SEPARATED,
    thickness: ThicknessOption = DEFAULT_THICKNESS,
    glue_flap: GlueFlapOption = DEFAULT_GLUE_FLAP,
    file: FileOption = None,
    output_formats: OutputFormatsOption = None,
    output_dir: OutputDirOption = None,
) -> None:
    """Lid for an existing box."""
    config = _build_config(
        {
            "type": "lid",
            "length": length,
            "width": width,
            "height": height,
            "fat": fat,
            "lid_type": lid_type.value,
            "thickness": thickness,
            "glue_flap": glue_flap,
        },
        file,
        output_formats,
    )
    run_and_export(config, output_dir)


@app.command()
def vinyl(
    width: Annotated[float, typer.Option("--width", "-w", help="Outer width in mm")],
    lid_height: Annotated[
        float, typer.Option("--lid-height", help="Lid rim height in mm")
    ] = DEFAULT_LID_HEIGHT,
    thickness: ThicknessOption = DEFAULT_THICKNESS,
    glue_flap: GlueFlapOption = DEFAULT_GLUE_FLAP,
    file: FileOption = None,
    output_formats: OutputFormatsOption = None,
    output_dir: OutputDirOption = None,
) -> None:
    """Box for 12" records. Length and height are fixed, only the width varies."""
    config = _build_config(
        {
            "type": "vinyl",
            "width": width,
            "lid_height": lid_height,
            "thickness": thickness,
            "glue_flap": glue_flap,
        },
        file,
        output_formats,
    )
    run_and_export(config, output_dir)


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ],
    thickness: Annotated[
        float | None,
        typer.Option("--thickness", "-t", help="Override cardboard thickness in mm"),
    ] = None,
    glue_flap: Annotated[
        float | None,
        typer.Option("--glue-flap", help="Override glue flap length in mm"),
    ] = None,
    file: FileOption = None,
    output_formats: OutputFormatsOption = None,
    output_dir: OutputDirOption = None,
) -> None:
    """Generate a net from a JSON configuration file.

    Command line options override the values in the file.
    """
    try:
        config = load_config(config_file)
        config = merge_config_with_cli(
            config,
            thickness=thickness,
            glue_flap=glue_flap,
            file=file,
            formats=parse_formats(output_formats),
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except ValueError as e:
        # Overrides are re-validated against the schema
        typer.echo(f"Invalid override: {e}", err=True)
        raise typer.Exit(code=1)

    run_and_export(config, output_dir)


if __name__ == "__main__":
    app()
