"""Rigging safety advisory endpoint."""

from fastapi import APIRouter

from ledwall.infrastructure.llm import build_safety_summary
from ledwall.web.dependencies import SafetyAdvisorDep
from ledwall.web.exceptions import CalculationError
from ledwall.web.routers.calculate import calculate_config
from ledwall.web.schemas.requests import AdviseRequest, ConfigRequest
from ledwall.web.schemas.responses import AdviceSchema

router = APIRouter(prefix="/advise", tags=["advise"])


@router.post("", response_model=AdviceSchema)
async def advise(request: AdviseRequest, advisor: SafetyAdvisorDep) -> AdviceSchema:
    """Calculate a project and ask the local LLM for a safety analysis.

    Raises:
        AdvisoryError: If the advisor is unavailable (handled as 502).
    """
    output = calculate_config(ConfigRequest(config=request.config))
    if not output.is_valid:
        raise CalculationError(output.errors)

    summary = build_safety_summary(output.result, output.project)
    analysis = await advisor.analyze(summary, language=request.language)
    return AdviceSchema(summary=summary, analysis=analysis)
