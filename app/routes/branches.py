import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_branch_service
from app.domain.errors import CommandError
from app.domain.services.branch_service import BranchService
from app.schemas.branches import BranchesResponse
from app.schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["branches"])


@router.get("/branches", response_model=BranchesResponse, responses={500: {"model": ErrorResponse}})
async def list_branches(service: BranchService = Depends(get_branch_service)):
    """Remote branches of the application repository, fetched fresh on every call."""
    try:
        branches = await service.list_branches()
    except CommandError as e:
        logger.error(f"❌ Failed to fetch branches: {e.message}")
        error = ErrorResponse.from_command_error("Failed to fetch branches", e)
        return JSONResponse(status_code=500, content=error.to_content())
    return BranchesResponse(branches=branches)
