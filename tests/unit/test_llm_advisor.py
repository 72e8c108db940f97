"""Unit tests for the safety advisor and the module spec lookup.

The LLM agent is replaced by an AsyncMock; the Ollama health check is
patched per test.
"""

from __future__ import annotations

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ledwall.infrastructure.llm import (
    AdvisoryError,
    ModuleLookupError,
    ModuleSpecLookup,
    ModuleSpecs,
    SafetyAdvisor,
)

SPEC_JSON = (
    '{"width_mm": 500, "height_mm": 500, "weight_kg": 7.5, '
    '"max_power_w": 130, "pixels_h": 200, "pixels_v": 200}'
)


def make_agent(output: str = "") -> MagicMock:
    agent = MagicMock()
    agent.run = AsyncMock(return_value=SimpleNamespace(output=output))
    return agent


# =============================================================================
# ModuleSpecLookup.parse()
# =============================================================================


class TestModuleSpecParse:
    """Tests for validation of raw spec responses."""

    def test_plain_json(self) -> None:
        specs = ModuleSpecLookup.parse(SPEC_JSON)

        assert specs == ModuleSpecs(
            width_mm=500,
            height_mm=500,
            weight_kg=7.5,
            max_power_w=130,
            pixels_h=200,
            pixels_v=200,
        )

    def test_code_fence(self) -> None:
        specs = ModuleSpecLookup.parse(f"```json\n{SPEC_JSON}\n```")
        assert specs.pixels_h == 200

    def test_invalid_json(self) -> None:
        with pytest.raises(ModuleLookupError) as exc_info:
            ModuleSpecLookup.parse("The module weighs 7.5 kg", "Absen", "PL2.5 Pro")

        error = exc_info.value
        assert str(error).startswith("Response is not valid JSON")
        assert (error.brand, error.model) == ("Absen", "PL2.5 Pro")
        assert error.raw_response == "The module weighs 7.5 kg"

    def test_not_an_object(self) -> None:
        with pytest.raises(ModuleLookupError, match="not a JSON object"):
            ModuleSpecLookup.parse("[500, 500]")

    def test_missing_field(self) -> None:
        with pytest.raises(ModuleLookupError) as exc_info:
            ModuleSpecLookup.parse('{"width_mm": 500, "height_mm": 500}')

        message = str(exc_info.value)
        assert message.startswith("Response has missing or invalid fields:")
        assert "weight_kg" in message
        assert "pixels_v" in message

    def test_zero_value_rejected(self) -> None:
        with pytest.raises(ModuleLookupError, match="weight_kg"):
            ModuleSpecLookup.parse(SPEC_JSON.replace("7.5", "0"))

    def test_extra_fields_ignored(self) -> None:
        specs = ModuleSpecLookup.parse(SPEC_JSON[:-1] + ', "ip_rating": "IP65"}')
        assert specs.max_power_w == 130


# =============================================================================
# Readiness checks
# =============================================================================


class TestReadiness:
    """Tests for the health check run before each request."""

    @pytest.mark.asyncio
    async def test_server_unavailable(self) -> None:
        advisor = SafetyAdvisor(agent=make_agent("unused"))
        with patch.object(
            advisor.health_check, "is_available", new_callable=AsyncMock
        ) as mock_available:
            mock_available.return_value = False

            with pytest.raises(AdvisoryError) as exc_info:
                await advisor.analyze("Installation: flown")

        assert str(exc_info.value) == (
            "Ollama server not available at http://localhost:11434"
        )
        advisor.agent.run.assert_not_called()

    @pytest.mark.asyncio
    async def test_model_missing(self) -> None:
        lookup = ModuleSpecLookup(model="mistral", agent=make_agent(SPEC_JSON))
        with (
            patch.object(
                lookup.health_check, "is_available", new_callable=AsyncMock
            ) as mock_available,
            patch.object(
                lookup.health_check, "has_model", new_callable=AsyncMock
            ) as mock_has_model,
        ):
            mock_available.return_value = True
            mock_has_model.return_value = False

            with pytest.raises(ModuleLookupError) as exc_info:
                await lookup.lookup("Absen", "PL2.5 Pro")

        assert str(exc_info.value) == (
            "Model 'mistral' not available. Run: ollama pull mistral"
        )

    @pytest.mark.asyncio
    async def test_health_check_disabled(self) -> None:
        advisor = SafetyAdvisor(agent=make_agent("Check the shackles."), check_health=False)
        with patch.object(
            advisor.health_check, "is_available", new_callable=AsyncMock
        ) as mock_available:
            await advisor.analyze("Installation: flown")

        mock_available.assert_not_called()


# =============================================================================
# SafetyAdvisor
# =============================================================================


class TestSafetyAdvisor:
    """Tests for SafetyAdvisor.analyze()."""

    @pytest.mark.asyncio
    async def test_returns_stripped_text(self) -> None:
        agent = make_agent("  1. Use secondary safeties.\n")
        advisor = SafetyAdvisor(agent=agent, check_health=False)

        text = await advisor.analyze("Installation: flown")

        assert text == "1. Use secondary safeties."
        prompt = agent.run.call_args.args[0]
        assert "answer in English" in prompt
        assert prompt.endswith("Installation: flown")

    @pytest.mark.asyncio
    async def test_language(self) -> None:
        agent = make_agent("ok")
        advisor = SafetyAdvisor(agent=agent, check_health=False, language="Spanish")

        await advisor.analyze("summary")
        assert "answer in Spanish" in agent.run.call_args.args[0]

        await advisor.analyze("summary", language="German")
        assert "answer in German" in agent.run.call_args.args[0]

    @pytest.mark.asyncio
    async def test_empty_response(self) -> None:
        advisor = SafetyAdvisor(agent=make_agent("   "), check_health=False)

        with pytest.raises(AdvisoryError, match="empty response"):
            await advisor.analyze("summary")

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        agent = MagicMock()
        agent.run = AsyncMock(side_effect=asyncio.TimeoutError())
        advisor = SafetyAdvisor(agent=agent, check_health=False, timeout=5.0)

        with pytest.raises(AdvisoryError, match="timed out after 5.0s"):
            await advisor.analyze("summary")

    @pytest.mark.asyncio
    async def test_agent_error(self) -> None:
        agent = MagicMock()
        agent.run = AsyncMock(side_effect=RuntimeError("connection reset"))
        advisor = SafetyAdvisor(agent=agent, check_health=False)

        with pytest.raises(AdvisoryError, match="Failed to analyze safety: connection reset"):
            await advisor.analyze("summary")

    def test_analyze_sync(self) -> None:
        advisor = SafetyAdvisor(agent=make_agent("Looks fine."), check_health=False)
        assert advisor.analyze_sync("summary") == "Looks fine."

    def test_agent_created_lazily(self) -> None:
        with patch(
            "ledwall.infrastructure.llm.advisor.create_safety_agent"
        ) as mock_create:
            advisor = SafetyAdvisor(model="mistral", ollama_url="http://rigbox:11434")
            mock_create.assert_not_called()

            agent = advisor.agent
            assert advisor.agent is agent

        mock_create.assert_called_once_with("ollama:mistral", "http://rigbox:11434")


# =============================================================================
# ModuleSpecLookup
# =============================================================================


class TestModuleSpecLookup:
    """Tests for ModuleSpecLookup.lookup()."""

    @pytest.mark.asyncio
    async def test_lookup(self) -> None:
        agent = make_agent(f"```\n{SPEC_JSON}\n```")
        lookup = ModuleSpecLookup(agent=agent, check_health=False)

        specs = await lookup.lookup("Absen", "PL2.5 Pro")

        assert specs.weight_kg == 7.5
        assert "Absen PL2.5 Pro" in agent.run.call_args.args[0]

    @pytest.mark.asyncio
    async def test_malformed_answer(self) -> None:
        lookup = ModuleSpecLookup(agent=make_agent("{}"), check_health=False)

        with pytest.raises(ModuleLookupError) as exc_info:
            await lookup.lookup("Absen", "PL2.5 Pro")

        assert exc_info.value.raw_response == "{}"

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        agent = MagicMock()
        agent.run = AsyncMock(side_effect=asyncio.TimeoutError())
        lookup = ModuleSpecLookup(agent=agent, check_health=False, timeout=2.0)

        with pytest.raises(ModuleLookupError, match="timed out after 2.0s"):
            await lookup.lookup("Absen", "PL2.5 Pro")

    def test_lookup_sync(self) -> None:
        lookup = ModuleSpecLookup(agent=make_agent(SPEC_JSON), check_health=False)
        assert lookup.lookup_sync("Absen", "PL2.5 Pro").pixels_v == 200
