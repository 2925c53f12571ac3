"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from pathlib import Path
from typing import Any

from boxnets.application.config.schema import BoxConfiguration, OutputConfig


def merge_config_with_cli(
    config: BoxConfiguration,
    *,
    thickness: float | None = None,
    glue_flap: float | None = None,
    file: str | Path | None = None,
    formats: list[str] | None = None,
) -> BoxConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base BoxConfiguration to merge with
        thickness: Override for box.thickness (if not None)
        glue_flap: Override for box.glue_flap (if not None)
        file: Override for output.file (if not None)
        formats: Override for output.formats (if not None)

    Returns:
        A new, re-validated BoxConfiguration

    Example:
        >>> config = load_config(Path("shoebox.json"))
        >>> merged = merge_config_with_cli(config, thickness=3.0)
        >>> merged.box.thickness
        3.0
    """
    box_data = config.box.model_dump()
    if thickness is not None:
        box_data["thickness"] = thickness
    if glue_flap is not None:
        box_data["glue_flap"] = glue_flap

    return BoxConfiguration.model_validate(
        {
            "schema_version": config.schema_version,
            "box": box_data,
            "output": _build_output_data(config.output, file, formats),
        }
    )


def _build_output_data(
    output: OutputConfig,
    file: str | Path | None,
    formats: list[str] | None,
) -> dict[str, Any]:
    output_data = output.model_dump()
    if file is not None:
        output_data["file"] = str(file) if isinstance(file, Path) else file
    if formats is not None:
        output_data["formats"] = formats
    return output_data
