"""Region router.

Endpoints:
    GET  /region - List regions (public)
    POST /region - Create region (ADMIN)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers import CreateRegionHandler
from src.application.commands.region_commands import CreateRegion
from src.application.queries.handlers import ListRegionsHandler
from src.application.queries.region_queries import ListRegions
from src.core.container import get_create_region_handler, get_list_regions_handler
from src.core.result import Failure, Success
from src.core.trace_context import get_trace_id
from src.domain.enums import AccountRole
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    require_roles,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.region_schemas import RegionCreateRequest, RegionResponse

router = APIRouter(prefix="/region", tags=["Regions"])


@router.get("", response_model=list[RegionResponse], summary="List regions")
async def list_regions(
    request: Request,
    handler: ListRegionsHandler = Depends(get_list_regions_handler),
) -> list[RegionResponse] | JSONResponse:
    match await handler.handle(ListRegions()):
        case Success(value=regions):
            return [RegionResponse.from_entity(region) for region in regions]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=RegionResponse,
    responses={
        400: {"description": "Region already exists", "model": ProblemDetails},
        401: {"description": "Token missing, invalid or expired", "model": ProblemDetails},
        403: {"description": "Role not allowed", "model": ProblemDetails},
    },
    summary="Create region",
)
async def create_region(
    request: Request,
    data: RegionCreateRequest,
    current_user: CurrentUser = Depends(require_roles(AccountRole.ADMIN)),
    handler: CreateRegionHandler = Depends(get_create_region_handler),
) -> RegionResponse | JSONResponse:
    match await handler.handle(CreateRegion(name=data.name)):
        case Success(value=region):
            return RegionResponse.from_entity(region)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error, request=request, trace_id=get_trace_id()
            )
