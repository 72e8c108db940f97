"""Bundled project templates."""

from ledwall.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = ["TEMPLATE_METADATA", "TemplateManager", "TemplateNotFoundError"]
