"""Safety advisor and module spec lookup backed by a local LLM.

Neither service takes part in a layout calculation. Failures surface as
AdvisoryError or ModuleLookupError so callers can report them and carry on
with the numbers they already have.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from pydantic import ValidationError
from pydantic_ai import Agent

from ledwall.infrastructure.llm.advisory_agent import (
    DEFAULT_OLLAMA_URL,
    create_module_spec_agent,
    create_safety_agent,
)
from ledwall.infrastructure.llm.models import ModuleSpecs
from ledwall.infrastructure.llm.ollama_client import OllamaHealthCheck
from ledwall.infrastructure.llm.prompts import (
    build_module_spec_prompt,
    build_safety_prompt,
    strip_code_fences,
)

logger = logging.getLogger(__name__)


class AdvisoryError(Exception):
    """Raised when the safety analysis cannot be produced."""


class ModuleLookupError(Exception):
    """Raised when module specs cannot be fetched or are malformed.

    Attributes:
        brand: Requested brand.
        model: Requested model.
        raw_response: Text returned by the LLM, if any.
    """

    def __init__(
        self, message: str, brand: str, model: str, raw_response: str | None = None
    ) -> None:
        super().__init__(message)
        self.brand = brand
        self.model = model
        self.raw_response = raw_response


class _OllamaService:
    """Shared health check and timeout handling."""

    def __init__(
        self,
        ollama_url: str = DEFAULT_OLLAMA_URL,
        model: str = "llama3.2",
        timeout: float = 30.0,
        agent: Agent[None, str] | None = None,
        check_health: bool = True,
    ) -> None:
        """Initialize the service.

        Args:
            ollama_url: Ollama server URL.
            model: Ollama model name without prefix.
            timeout: Request timeout in seconds.
            agent: Pre-configured agent, created lazily when omitted.
            check_health: Verify server and model before each request.
        """
        self.ollama_url = ollama_url
        self.model = model
        self.timeout = timeout
        self.check_health = check_health
        self.health_check = OllamaHealthCheck(ollama_url)
        self._agent = agent

    async def _ensure_ready(self) -> str | None:
        """Return a failure reason, or None when Ollama is ready."""
        if not self.check_health:
            return None
        if not await self.health_check.is_available():
            return f"Ollama server not available at {self.ollama_url}"
        if not await self.health_check.has_model(self.model):
            return f"Model '{self.model}' not available. Run: ollama pull {self.model}"
        return None

    async def _run(self, agent: Agent[None, str], prompt: str) -> str:
        result = await asyncio.wait_for(agent.run(prompt), timeout=self.timeout)
        return result.output


class SafetyAdvisor(_OllamaService):
    """Free-text rigging safety analysis.

    Example:
        >>> advisor = SafetyAdvisor()
        >>> text = advisor.analyze_sync(build_safety_summary(result, project))
    """

    def __init__(self, *args: Any, language: str = "English", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.language = language

    @property
    def agent(self) -> Agent[None, str]:
        if self._agent is None:
            self._agent = create_safety_agent(f"ollama:{self.model}", self.ollama_url)
        return self._agent

    async def analyze(self, summary: str, language: str | None = None) -> str:
        """Ask for safety recommendations on an installation summary.

        Args:
            summary: Plain text with weights, motors, mode and dimensions.
            language: Language of the answer, the advisor default when omitted.

        Returns:
            The advisor's answer.

        Raises:
            AdvisoryError: If the service is unavailable, times out or fails.
        """
        reason = await self._ensure_ready()
        if reason:
            raise AdvisoryError(reason)

        try:
            prompt = build_safety_prompt(summary, language or self.language)
            text = await self._run(self.agent, prompt)
        except asyncio.TimeoutError as e:
            logger.warning(f"Safety analysis timed out after {self.timeout}s")
            raise AdvisoryError(f"Safety analysis timed out after {self.timeout}s") from e
        except Exception as e:
            logger.error(f"Safety analysis failed: {e}")
            raise AdvisoryError(f"Failed to analyze safety: {e}") from e

        if not text.strip():
            raise AdvisoryError("Safety analysis returned an empty response")
        logger.info(f"Safety analysis received ({len(text)} chars)")
        return text.strip()

    def analyze_sync(self, summary: str, language: str | None = None) -> str:
        return asyncio.run(self.analyze(summary, language))


class ModuleSpecLookup(_OllamaService):
    """Looks up LED module technical data by brand and model."""

    @property
    def agent(self) -> Agent[None, str]:
        if self._agent is None:
            self._agent = create_module_spec_agent(
                f"ollama:{self.model}", self.ollama_url
            )
        return self._agent

    @staticmethod
    def parse(text: str, brand: str = "", model: str = "") -> ModuleSpecs:
        """Validate a raw LLM response.

        Args:
            text: Response text, optionally wrapped in a markdown code fence.
            brand: Requested brand, for error reporting.
            model: Requested model, for error reporting.

        Raises:
            ModuleLookupError: If the text is not a JSON object with all six
                positive numeric fields.
        """
        payload = strip_code_fences(text)
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ModuleLookupError(
                f"Response is not valid JSON: {e.msg}", brand, model, text
            ) from e
        if not isinstance(data, dict):
            raise ModuleLookupError("Response is not a JSON object", brand, model, text)

        try:
            return ModuleSpecs.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            raise ModuleLookupError(
                f"Response has missing or invalid fields: {fields}", brand, model, text
            ) from e

    async def lookup(self, brand: str, model: str) -> ModuleSpecs:
        """Fetch specs for a module.

        Raises:
            ModuleLookupError: If the service fails or the answer is malformed.
        """
        reason = await self._ensure_ready()
        if reason:
            raise ModuleLookupError(reason, brand, model)

        try:
            text = await self._run(self.agent, build_module_spec_prompt(brand, model))
        except asyncio.TimeoutError as e:
            logger.warning(f"Spec lookup timed out after {self.timeout}s")
            raise ModuleLookupError(
                f"Spec lookup timed out after {self.timeout}s", brand, model
            ) from e
        except Exception as e:
            logger.error(f"Spec lookup failed: {e}")
            raise ModuleLookupError(
                f"Failed to fetch module specs: {e}", brand, model
            ) from e

        specs = self.parse(text, brand, model)
        logger.info(f"Fetched specs for {brand} {model}")
        return specs

    def lookup_sync(self, brand: str, model: str) -> ModuleSpecs:
        return asyncio.run(self.lookup(brand, model))
