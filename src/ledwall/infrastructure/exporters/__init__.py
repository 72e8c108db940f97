"""Exporter framework for video wall layouts.

Registered exporters:
- bom: Bill of materials as CSV (or text)
- json: Calculation result with tile grid and cable routes
- report: Markdown project report

Usage:
    from ledwall.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["json", "bom"], layout_output, project_name="stage")
"""

from ledwall.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from ledwall.infrastructure.exporters.bom import BomGenerator, BomItem
from ledwall.infrastructure.exporters.layout_json import LayoutJsonExporter
from ledwall.infrastructure.exporters.report import ProjectReportGenerator

__all__ = [
    "BomGenerator",
    "BomItem",
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
    "LayoutJsonExporter",
    "ProjectReportGenerator",
]
