"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ledwall.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a LayoutOutput into a file format. Each exporter
    defines its format name and file extension.

    Attributes:
        format_name: Name used to select the exporter (e.g., "json", "bom").
        file_extension: File extension without leading dot (e.g., "csv").
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: LayoutOutput, path: Path) -> None:
        """Export layout output to a file.

        Args:
            output: The layout output to export.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, output: LayoutOutput) -> str:
        """Export layout output as a string.

        Args:
            output: The layout output to export.

        Returns:
            String representation of the exported data.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("json")
        class JsonLayoutExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class.

        Args:
            format_name: The format name to register (e.g., "bom").

        Returns:
            Decorator function that registers the class.
        """

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
        """Sorted list of registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports layout output to one or more formats.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory for exported files, created on first export.
        """
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: LayoutOutput,
        project_name: str = "ledwall",
    ) -> dict[str, Path]:
        """Export layout output to multiple formats.

        Args:
            formats: Format names to export (e.g., ["json", "bom"]).
            output: The layout output to export.
            project_name: Base name for output files.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        # Resolve every exporter before writing anything
        exporter_classes = {name: ExporterRegistry.get(name) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes.items():
            exporter = exporter_class()

            # {project_name}_{format}.{ext}
            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: LayoutOutput,
        project_name: str = "ledwall",
    ) -> Path:
        """Export layout output to a single format.

        Returns:
            Path to the exported file.
        """
        results = self.export_all([format_name], output, project_name)
        return results[format_name]
