"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from boxnets.application.dtos import NetOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a NetOutput to a specific file format.

    Attributes:
        format_name: Name of the export format (e.g., "svg", "dxf").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: NetOutput, path: Path) -> None:
        """Export a net to a file.

        Args:
            output: The net to export.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, output: NetOutput) -> str:
        """Export a net as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("json")
        class JsonNetExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters. Used by tests."""
        cls._exporters.clear()


class ExportManager:
    """Writes one net to one or more formats side by side.

    Every format gets the same file stem; only the extension differs, so
    ``LaserCutLid.svg`` is accompanied by ``LaserCutLid.dxf``.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: NetOutput,
        file_name: str | None = None,
    ) -> dict[str, Path]:
        """Export a net to multiple formats.

        Args:
            formats: List of format names to export (e.g., ["svg", "dxf"]).
            output: The net to export.
            file_name: SVG file name whose stem names every output. Defaults
                to the variant's default file name.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        stem = Path(file_name or output.default_file_name).stem

        results: dict[str, Path] = {}

        for format_name in formats:
            exporter_class = ExporterRegistry.get(format_name)
            exporter = exporter_class()

            filepath = self.output_dir / f"{stem}.{exporter.file_extension}"
            if filepath.exists():
                logger.warning(f"Overwriting existing file {filepath}")

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: NetOutput,
        file_name: str | None = None,
    ) -> Path:
        """Export a net to a single format."""
        results = self.export_all([format_name], output, file_name)
        return results[format_name]
