"""Bill of materials for a video wall.

Lists LED modules by class, the rigging, truss, stacking and cabling
hardware, flight cases and, when configured, the PDU and video chain.

Output formats: csv, text
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ledwall.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ledwall.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BomItem:
    """One line of the bill of materials.

    Attributes:
        category: Grouping (modules, rigging, truss, stacking, cabling,
            cases, power, video).
        item: Item description.
        quantity: Number of pieces.
        notes: Optional extra information.
    """

    category: str
    item: str
    quantity: int
    notes: str = ""


@ExporterRegistry.register("bom")  # type: ignore[arg-type]
class BomGenerator:
    """Bill of materials generator for video wall layouts.

    Attributes:
        format_name: "bom"
        file_extension: "csv" or "txt" based on output_format
    """

    format_name: ClassVar[str] = "bom"

    def __init__(self, output_format: str = "csv") -> None:
        """Initialize the BOM generator.

        Args:
            output_format: Output format - "csv" or "text".
        """
        self.output_format = output_format
        self._file_extension = {"csv": "csv", "text": "txt"}.get(output_format, "csv")

    @property
    def file_extension(self) -> str:
        return self._file_extension

    def generate(self, output: LayoutOutput) -> list[BomItem]:
        """Collect BOM lines from a calculated layout.

        Returns:
            Items in report order, or an empty list for invalid output.
        """
        if not output.is_valid:
            return []

        result = output.result
        module = output.module
        project = output.project
        items: list[BomItem] = []

        def add(category: str, item: str, quantity: int, notes: str = "") -> None:
            if quantity > 0:
                items.append(BomItem(category, item, int(quantity), notes))

        add("modules", f"{module.name} full", result.modules_full)
        add("modules", f"{module.name} half", result.modules_half)
        add("modules", f"{module.name} quarter", result.modules_quarter)
        add("modules", "Corner module (left)", project.corner_left)
        add("modules", "Corner module (right)", project.corner_right)
        add("modules", "Flex module", project.flex)

        for hw in result.hardware:
            add(hw.category, hw.name, hw.quantity, hw.notes)

        pdu = project.pdu
        if pdu.name:
            add(
                "power",
                pdu.name,
                pdu.count,
                f"{pdu.connector}, {pdu.cable_length_m:g} m cable",
            )

        video = project.video
        if video.processor:
            add("video", video.processor, video.processor_qty)
        if video.server:
            add("video", video.server, video.server_qty)
        if video.processor or video.server:
            add(
                "video",
                f"{video.interconnect_type} {video.interconnect_length_m:g} m",
                video.interconnect_qty,
            )
            add(
                "video",
                f"{video.distribution_type} {video.distribution_length_m:g} m",
                video.distribution_qty,
            )
            if video.accessories:
                items.append(BomItem("video", "Accessories", 1, video.accessories))

        return items

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output))
        logger.info(f"Exported BOM to {path}")

    def export_string(self, output: LayoutOutput) -> str:
        """Generate the BOM in the configured output format."""
        items = self.generate(output)
        if self.output_format == "text":
            return self.format_text(items)
        return self.format_csv(items)

    def format_csv(self, items: list[BomItem]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(["Category", "Item", "Quantity", "Notes"])
        for item in items:
            writer.writerow([item.category, item.item, item.quantity, item.notes])
        return buffer.getvalue()

    def format_text(self, items: list[BomItem]) -> str:
        lines = [
            "BILL OF MATERIALS",
            "=" * 60,
        ]
        current = None
        for item in items:
            if item.category != current:
                current = item.category
                lines.append(f"\n{current.upper()}")
            lines.append(f"  {item.item:<40} {item.quantity:>8}")
            if item.notes:
                lines.append(f"    ({item.notes})")
        return "\n".join(lines)
