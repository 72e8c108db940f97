"""Ollama health check.

Checks that the Ollama server is up and that the advisory model is
installed before an advisory request is sent.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

logger = logging.getLogger(__name__)


class OllamaHealthCheck:
    """Check Ollama server availability and model presence.

    Attributes:
        base_url: Base URL of the Ollama server.
        timeout: Request timeout in seconds.

    Example:
        >>> health = OllamaHealthCheck()
        >>> if await health.is_available():
        ...     ready = await health.has_model("llama3.2")
    """

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        timeout: float = 5.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _get_tags(self) -> httpx.Response:
        async with httpx.AsyncClient() as client:
            return await client.get(f"{self.base_url}/api/tags", timeout=self.timeout)

    async def is_available(self) -> bool:
        """Check if the Ollama server is responding.

        Returns:
            True if /api/tags answers with 200, False on any failure.
        """
        try:
            response = await self._get_tags()
        except httpx.ConnectError:
            logger.debug(f"Could not connect to Ollama at {self.base_url}")
            return False
        except httpx.TimeoutException:
            logger.debug(f"Timeout connecting to Ollama at {self.base_url}")
            return False
        except httpx.RequestError as e:
            logger.debug(f"Request error checking Ollama: {e}")
            return False

        if response.status_code != 200:
            logger.debug(f"Ollama server returned status {response.status_code}")
            return False
        logger.debug(f"Ollama server available at {self.base_url}")
        return True

    async def get_available_models(self) -> list[str]:
        """Names of all installed models, empty on any failure."""
        try:
            response = await self._get_tags()
            if response.status_code != 200:
                return []
            models = response.json().get("models", [])
        except httpx.RequestError as e:
            logger.debug(f"Request error listing models: {e}")
            return []
        except (ValueError, AttributeError) as e:
            logger.debug(f"Error parsing model list: {e}")
            return []
        return [model.get("name", "") for model in models if model.get("name")]

    async def has_model(self, model_name: str) -> bool:
        """Check if a model is installed.

        Args:
            model_name: Model name; "llama3.2" also matches "llama3.2:latest".
        """
        for name in await self.get_available_models():
            if name == model_name or name.startswith(f"{model_name}:"):
                logger.debug(f"Found model: {name}")
                return True
        logger.debug(f"Model '{model_name}' not found in available models")
        return False


def check_ollama_sync(
    base_url: str = "http://localhost:11434",
    model_name: str | None = None,
) -> tuple[bool, str]:
    """Synchronous health check for the CLI.

    Args:
        base_url: Ollama server URL.
        model_name: Optional model name to check.

    Returns:
        Tuple of (ready, message).
    """

    async def _check() -> tuple[bool, str]:
        health = OllamaHealthCheck(base_url=base_url)

        if not await health.is_available():
            return False, f"Ollama server not available at {base_url}"

        if model_name and not await health.has_model(model_name):
            models = await health.get_available_models()
            if models:
                return False, (
                    f"Model '{model_name}' not found. "
                    f"Available models: {', '.join(models)}. "
                    f"Run: ollama pull {model_name}"
                )
            return False, f"Model '{model_name}' not found. Run: ollama pull {model_name}"

        return True, "Ollama ready"

    return asyncio.run(_check())
