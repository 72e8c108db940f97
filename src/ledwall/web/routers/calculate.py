"""Layout calculation and cable routing endpoints."""

from dataclasses import fields

from fastapi import APIRouter, HTTPException

from ledwall.application import LayoutOutput, ScreenInput
from ledwall.application.config import (
    config_to_catalog,
    config_to_project,
    load_config_from_dict,
)
from ledwall.application.commands import CalculateLayoutCommand
from ledwall.domain import CableRoute, CalculationResult, ProjectConfig
from ledwall.web.dependencies import CalculateCommandDep
from ledwall.web.exceptions import CalculationError
from ledwall.web.routers.modules import module_to_schema
from ledwall.web.schemas.requests import CalculateRequest, ConfigRequest
from ledwall.web.schemas.responses import (
    CableRouteSchema,
    CalculationResponse,
    CalculationResultSchema,
    HardwareItemSchema,
    MotorLoadSchema,
    RoutedTileSchema,
    RoutesResponse,
)

router = APIRouter(prefix="/calculate", tags=["calculate"])

_NESTED_FIELDS = ("motor_loads", "hardware", "warnings")


def _result_to_schema(result: CalculationResult) -> CalculationResultSchema:
    scalars = {
        f.name: getattr(result, f.name)
        for f in fields(result)
        if f.name not in _NESTED_FIELDS
    }
    return CalculationResultSchema(
        **scalars,
        motor_loads=[
            MotorLoadSchema(
                index=load.index,
                share=load.share,
                lift_kg=load.lift_kg,
                self_kg=load.self_kg,
                total_kg=load.total_kg,
                capacity_kg=load.capacity_kg,
                utilization=load.utilization,
                status=load.status.value,
            )
            for load in result.motor_loads
        ],
        hardware=[
            HardwareItemSchema(
                name=item.name,
                quantity=item.quantity,
                category=item.category,
                notes=item.notes,
            )
            for item in result.hardware
        ],
        warnings=list(result.warnings),
    )


def _route_to_schema(route: CableRoute) -> CableRouteSchema:
    return CableRouteSchema(
        kind=route.kind.value,
        pattern=route.config.pattern.value,
        axis=route.config.axis.value,
        start=route.config.start.value,
        interval=route.interval,
        lines=route.group_count,
        tiles=[
            RoutedTileSchema(
                order=tile.order,
                col=tile.cell.col,
                row=tile.cell.row,
                kind=tile.cell.kind.value,
                x=tile.cell.x,
                y=tile.cell.y,
                width=tile.cell.width,
                height=tile.cell.height,
                group=tile.group,
                label=tile.label,
                color=tile.color,
                is_feed=tile.is_feed,
            )
            for tile in route.tiles
        ],
    )


def _to_response(output: LayoutOutput) -> CalculationResponse:
    if not output.is_valid:
        raise CalculationError(output.errors)
    return CalculationResponse(
        module=module_to_schema(output.module),
        result=_result_to_schema(output.result),
    )


def calculate_config(request: ConfigRequest) -> LayoutOutput:
    """Load a project file body and calculate it with its own catalog.

    Raises:
        ConfigError: If the project file is invalid (handled by exception handler).
    """
    config = load_config_from_dict(request.config)
    try:
        catalog = config_to_catalog(config)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "catalog"},
        ) from e
    return CalculateLayoutCommand(catalog=catalog).execute(config_to_project(config))


@router.post("", response_model=CalculationResponse)
async def calculate_layout(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> CalculationResponse:
    """Calculate a screen from its size, module and rigging basics."""
    base = ProjectConfig(
        installation=request.installation,
        motor_count=request.motor_count,
        motor_capacity_kg=request.motor_capacity,
        safety_factor=request.safety_factor,
    )
    screen = ScreenInput(
        width=request.width, height=request.height, module_id=request.module_id
    )
    return _to_response(command.execute_screen(screen, base=base))


@router.post("/from-config", response_model=CalculationResponse)
async def calculate_from_config(request: ConfigRequest) -> CalculationResponse:
    """Calculate a full project file."""
    return _to_response(calculate_config(request))


@router.post("/routes", response_model=RoutesResponse)
async def calculate_routes(request: ConfigRequest) -> RoutesResponse:
    """Tile geometry and data/power cable routes for a project file."""
    output = calculate_config(request)
    if not output.is_valid:
        raise CalculationError(output.errors)

    plan = output.plan
    return RoutesResponse(
        cols=plan.grid.cols,
        rows=plan.grid.rows,
        width_m=plan.grid.snapped_width_m,
        height_m=plan.grid.snapped_height_m,
        data=_route_to_schema(plan.data_route),
        power=_route_to_schema(plan.power_route),
    )
