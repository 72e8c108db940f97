"""Infrastructure layer: formatters, exporters and LLM integration."""

from ledwall.infrastructure.formatters import (
    JsonExporter,
    LogisticsFormatter,
    PowerReportFormatter,
    RiggingReportFormatter,
    RouteDiagramFormatter,
    SummaryFormatter,
)

__all__ = [
    "JsonExporter",
    "LogisticsFormatter",
    "PowerReportFormatter",
    "RiggingReportFormatter",
    "RouteDiagramFormatter",
    "SummaryFormatter",
]
