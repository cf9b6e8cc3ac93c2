import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_route_service
from app.domain.errors import CommandError, RouteConfigParseError
from app.domain.services.route_service import RouteService
from app.schemas.errors import ErrorResponse
from app.schemas.routes import RoutesResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["proxy"])


@router.get("/routes", response_model=RoutesResponse, responses={500: {"model": ErrorResponse}})
async def list_routes(service: RouteService = Depends(get_route_service)):
    """Reverse proxy route table, as reported by its admin API."""
    try:
        routes = await service.list_routes()
    except CommandError as e:
        logger.error(f"❌ Failed to fetch routes: {e.message}")
        error = ErrorResponse.from_command_error("Failed to fetch routes", e)
        return JSONResponse(status_code=500, content=error.to_content())
    except RouteConfigParseError as e:
        logger.error(f"❌ Failed to parse routes: {e}")
        error = ErrorResponse(error="Failed to fetch routes", details=str(e))
        return JSONResponse(status_code=500, content=error.to_content())
    return RoutesResponse(routes=routes)
