"""Load box configurations from JSON files or dictionaries.

File system problems, JSON syntax errors and schema violations all surface
as ``ConfigError`` with an ``error_type`` the CLI can report on.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from boxnets.application.config.schema import BoxConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration cannot be loaded.

    Attributes:
        message: Primary error message.
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse, validation.
        path: Configuration file, if the configuration came from a file.
        details: Per-problem details (JSON path, message, offending value).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as ``box.width`` or ``output.formats[0]``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path = f"{path}.{segment}" if path else str(segment)
    return path


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        if detail.get("value") is not None:
            line += f" (got: {detail['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> BoxConfiguration:
    """Validate a configuration given as a dictionary.

    Args:
        data: Parsed configuration data.
        path: Source file, used in error reports.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    try:
        return BoxConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> BoxConfiguration:
    """Load and validate a box configuration file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does not
            match the schema.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    logger.debug(f"Loaded config file {path}")
    return load_config_from_dict(data, path=path)
