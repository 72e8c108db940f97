"""API routers for the REST API."""

from ledwall.web.routers.advise import router as advise_router
from ledwall.web.routers.calculate import router as calculate_router
from ledwall.web.routers.modules import router as modules_router
from ledwall.web.routers.templates import router as templates_router
from ledwall.web.routers.validate import router as validate_router

__all__ = [
    "advise_router",
    "calculate_router",
    "modules_router",
    "templates_router",
    "validate_router",
]
