"""Unit tests for LLM prompts and the installation summary."""

from __future__ import annotations

from ledwall.domain import (
    InstallationType,
    LayoutCalculationEngine,
    LedModule,
    ProjectConfig,
)
from ledwall.infrastructure.llm import (
    MODULE_SPEC_SYSTEM_PROMPT,
    SAFETY_SYSTEM_PROMPT,
    build_module_spec_prompt,
    build_safety_prompt,
    build_safety_summary,
    strip_code_fences,
)


class TestSystemPrompts:
    def test_safety_prompt_asks_for_three_recommendations(self) -> None:
        assert "three key safety recommendations" in SAFETY_SYSTEM_PROMPT

    def test_spec_prompt_lists_all_fields(self) -> None:
        for name in (
            "width_mm",
            "height_mm",
            "weight_kg",
            "max_power_w",
            "pixels_h",
            "pixels_v",
        ):
            assert name in MODULE_SPEC_SYSTEM_PROMPT


class TestStripCodeFences:
    def test_plain_text_unchanged(self) -> None:
        assert strip_code_fences('  {"a": 1} ') == '{"a": 1}'

    def test_json_fence(self) -> None:
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self) -> None:
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'


class TestBuildSafetySummary:
    """Tests for the summary sent to the safety advisor."""

    def test_flown(
        self, engine: LayoutCalculationEngine, project: ProjectConfig, module: LedModule
    ) -> None:
        result = engine.calculate(project, module)

        summary = build_safety_summary(result, project)
        lines = summary.splitlines()

        assert lines[0] == "Installation: flown"
        assert "Dimensions: 4 x 2.5 m (40 modules)" in lines
        assert "Total weight: 502.0 kg" in lines
        assert "Motors: 2 x 1000 kg" in lines
        assert "  Motor 1: 201.0 kg lift (20% of capacity)" in lines
        assert lines[-1] == "Power: 5200 W, 22.6 A"

    def test_stacked(
        self, engine: LayoutCalculationEngine, project: ProjectConfig, module: LedModule
    ) -> None:
        config = project.with_changes(
            installation=InstallationType.STACKED, stack_base_plates=8
        )
        result = engine.calculate(config, module)

        summary = build_safety_summary(result, config)

        assert summary.startswith("Installation: stacked")
        assert "Base plates: 8" in summary
        assert "Motors" not in summary


class TestPromptBuilders:
    def test_safety_prompt(self) -> None:
        prompt = build_safety_prompt("Installation: flown", "French")

        assert "answer in French" in prompt
        assert prompt.endswith("\n\nInstallation: flown")

    def test_module_spec_prompt(self) -> None:
        assert build_module_spec_prompt("ROE", "Carbon CB3") == (
            "Provide the technical specs for the LED tile: ROE Carbon CB3."
        )
