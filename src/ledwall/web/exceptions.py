"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ledwall.application import ModuleNotFoundError
from ledwall.application.config import ConfigError
from ledwall.application.templates import TemplateNotFoundError
from ledwall.infrastructure.llm import AdvisoryError, ModuleLookupError


class CalculationError(Exception):
    """Raised when a calculation cannot run on the given inputs."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Calculation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(CalculationError)
    async def calculation_error_handler(
        request: Request, exc: CalculationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Calculation failed",
                "error_type": "calculation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(ModuleNotFoundError)
    async def module_not_found_handler(
        request: Request, exc: ModuleNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"module_id": exc.module_id},
            },
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Template not found: {exc.name}",
                "error_type": "not_found",
                "details": None,
            },
        )

    @app.exception_handler(AdvisoryError)
    async def advisory_error_handler(request: Request, exc: AdvisoryError) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={
                "error": str(exc),
                "error_type": "advisory",
                "details": None,
            },
        )

    @app.exception_handler(ModuleLookupError)
    async def lookup_error_handler(
        request: Request, exc: ModuleLookupError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={
                "error": str(exc),
                "error_type": "module_lookup",
                "details": {"brand": exc.brand, "model": exc.model},
            },
        )
