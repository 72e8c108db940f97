"""JSON exporter with the calculation result, tile grid and cable routes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ledwall.infrastructure.exporters.base import ExporterRegistry
from ledwall.infrastructure.formatters import JsonExporter

if TYPE_CHECKING:
    from ledwall.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("json")
class LayoutJsonExporter:
    """Writes the JSON produced by JsonExporter to a file.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self) -> None:
        self._exporter = JsonExporter()

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output))
        logger.info(f"Exported JSON layout to {path}")

    def export_string(self, output: LayoutOutput) -> str:
        return self._exporter.export(output)
