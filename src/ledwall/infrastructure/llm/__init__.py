"""LLM integration for rigging safety advice and module spec lookup.

Uses pydantic-ai with Ollama as the local inference backend.

Submodules:
    models: Pydantic schema for module spec responses
    ollama_client: Health check for the Ollama server
    prompts: System prompts and summary builders
    advisory_agent: pydantic-ai agent factories
    advisor: SafetyAdvisor and ModuleSpecLookup services
"""

from __future__ import annotations

from .advisor import AdvisoryError, ModuleLookupError, ModuleSpecLookup, SafetyAdvisor
from .advisory_agent import (
    create_module_spec_agent,
    create_safety_agent,
)
from .models import ModuleSpecs
from .ollama_client import OllamaHealthCheck, check_ollama_sync
from .prompts import (
    MODULE_SPEC_SYSTEM_PROMPT,
    SAFETY_SYSTEM_PROMPT,
    build_module_spec_prompt,
    build_safety_prompt,
    build_safety_summary,
    strip_code_fences,
)

__all__ = [
    # Services
    "AdvisoryError",
    "ModuleLookupError",
    "ModuleSpecLookup",
    "SafetyAdvisor",
    "ModuleSpecs",
    # Ollama client
    "OllamaHealthCheck",
    "check_ollama_sync",
    # Prompts
    "MODULE_SPEC_SYSTEM_PROMPT",
    "SAFETY_SYSTEM_PROMPT",
    "build_module_spec_prompt",
    "build_safety_prompt",
    "build_safety_summary",
    "strip_code_fences",
    # Agents
    "create_module_spec_agent",
    "create_safety_agent",
]
