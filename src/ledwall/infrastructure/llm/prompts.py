"""Prompts for the rigging safety advisor and the module spec lookup."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ledwall.domain import CalculationResult, ProjectConfig


# =============================================================================
# System Prompts
# =============================================================================

SAFETY_SYSTEM_PROMPT = """You are a certified rigger reviewing an LED video wall installation.

## Your Role
Assess the safety of the installation from the figures provided. You are
talking to the production crew who will build the wall.

## Output Requirements
- Give exactly three key safety recommendations
- Warn clearly about any dangerous parameter (overloaded motors, missing
  safety factor, too few rigging points, unstable ground support)
- Keep the answer short and practical, plain text without tables
"""

MODULE_SPEC_SYSTEM_PROMPT = """You are an LED technician with access to manufacturer datasheets.

When asked about an LED tile, return ONLY a JSON object with these keys:
{"width_mm": number, "height_mm": number, "weight_kg": number,
 "max_power_w": number, "pixels_h": number, "pixels_v": number}

Do not add markdown code blocks or any other text.
"""

_FENCE_PATTERN = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?```$", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    text = text.strip()
    match = _FENCE_PATTERN.match(text)
    if match:
        return match.group(1).strip()
    return text


def build_safety_summary(result: CalculationResult, project: ProjectConfig) -> str:
    """Summarize a calculation for the safety advisor.

    Args:
        result: Calculation to summarize.
        project: Project the calculation was made for.

    Returns:
        One line per figure: weights, motors, installation and dimensions.
    """
    lines = [
        f"Installation: {project.installation.value}",
        f"Dimensions: {result.real_width_m:g} x {result.real_height_m:g} m "
        f"({result.total_modules} modules)",
        f"Screen weight: {result.weight_screen:.1f} kg",
        f"Suspended weight: {result.weight_suspended:.1f} kg",
        f"Total weight: {result.weight_total:.1f} kg",
        f"Safety factor: {project.safety_factor:g}",
    ]
    if project.is_flown:
        lines.append(f"Truss: {project.truss_model.value}")
        lines.append(
            f"Motors: {len(result.motor_loads)} x {project.motor_capacity_kg:g} kg"
        )
        for load in result.motor_loads:
            lines.append(
                f"  Motor {load.index}: {load.lift_kg:.1f} kg lift "
                f"({load.utilization:.0%} of capacity)"
            )
    else:
        lines.append(f"Base plates: {project.stack_base_plates}")
    lines.append(f"Power: {result.power_total_w:.0f} W, {result.amps_total:.1f} A")
    return "\n".join(lines)


def build_safety_prompt(summary: str, language: str = "English") -> str:
    return (
        f"Analyze the safety of this LED installation and answer in {language}.\n\n"
        f"{summary}"
    )


def build_module_spec_prompt(brand: str, model: str) -> str:
    return f"Provide the technical specs for the LED tile: {brand} {model}."
