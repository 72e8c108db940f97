"""Template endpoints."""

import json

from fastapi import APIRouter

from ledwall.application.templates.manager import TEMPLATE_METADATA
from ledwall.web.dependencies import TemplateManagerDep
from ledwall.web.schemas.responses import (
    TemplateContentSchema,
    TemplateListItemSchema,
    TemplateListSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_templates(manager: TemplateManagerDep) -> TemplateListSchema:
    """List bundled project templates."""
    return TemplateListSchema(
        templates=[
            TemplateListItemSchema(name=name, description=desc)
            for name, desc in manager.list_templates()
        ]
    )


@router.get("/{name}", response_model=TemplateContentSchema)
async def get_template(name: str, manager: TemplateManagerDep) -> TemplateContentSchema:
    """Get a template's project content.

    Raises:
        TemplateNotFoundError: If template does not exist (handled by exception handler).
    """
    content = json.loads(manager.get_template(name))
    return TemplateContentSchema(
        name=name,
        description=TEMPLATE_METADATA.get(name, ""),
        content=content,
    )
