"""pydantic-ai agents for safety advice and module spec lookup.

Both agents talk to Ollama through its OpenAI-compatible API and return
plain text; the caller parses and validates the text.
"""

from __future__ import annotations

import logging

from pydantic_ai import Agent
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from ledwall.infrastructure.llm.prompts import (
    MODULE_SPEC_SYSTEM_PROMPT,
    SAFETY_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "ollama:llama3.2"
DEFAULT_OLLAMA_URL = "http://localhost:11434"


def _create_ollama_model(model_name: str, ollama_url: str) -> OpenAIChatModel:
    """Create an Ollama model using the OpenAI-compatible API.

    Args:
        model_name: Model name, with or without the "ollama:" prefix.
        ollama_url: Ollama server URL, with or without the /v1 suffix.
    """
    if model_name.startswith("ollama:"):
        model_name = model_name[7:]

    base_url = ollama_url.rstrip("/")
    if not base_url.endswith("/v1"):
        base_url = f"{base_url}/v1"

    # Ollama ignores the key but the provider requires one
    provider = OpenAIProvider(base_url=base_url, api_key="ollama")
    logger.debug(f"Using Ollama model {model_name} at {base_url}")
    return OpenAIChatModel(model_name, provider=provider)


def create_safety_agent(
    model: str = DEFAULT_MODEL,
    ollama_url: str = DEFAULT_OLLAMA_URL,
) -> Agent[None, str]:
    """Create the rigging safety advisory agent."""
    return Agent(
        _create_ollama_model(model, ollama_url),
        output_type=str,
        system_prompt=SAFETY_SYSTEM_PROMPT,
    )


def create_module_spec_agent(
    model: str = DEFAULT_MODEL,
    ollama_url: str = DEFAULT_OLLAMA_URL,
) -> Agent[None, str]:
    """Create the module spec lookup agent."""
    return Agent(
        _create_ollama_model(model, ollama_url),
        output_type=str,
        system_prompt=MODULE_SPEC_SYSTEM_PROMPT,
    )

