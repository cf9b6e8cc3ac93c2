"""
Deployment endpoints.

Handles:
- GET    /deployments       - running branch containers
- POST   /deploy            - run the deploy script for a branch
- DELETE /cleanup/{branch}  - run the cleanup script for a branch

The cleanup path takes the rest of the URL so that names containing "/"
reach branch validation instead of failing to route.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_deploy_service
from app.domain.errors import BranchValidationError, CommandError
from app.domain.services.deploy_service import DeployService
from app.schemas.deploy import DeploymentsResponse, DeployRequest, ScriptRunResponse
from app.schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["deployments"])

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _error(status_code: int, response: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=response.to_content())


@router.get(
    "/deployments",
    response_model=DeploymentsResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_deployments(service: DeployService = Depends(get_deploy_service)):
    try:
        deployments = await service.list_deployments()
    except CommandError as e:
        logger.error(f"❌ Failed to fetch deployments: {e.message}")
        return _error(500, ErrorResponse.from_command_error("Failed to fetch deployments", e))
    return DeploymentsResponse(deployments=deployments)


@router.post("/deploy", response_model=ScriptRunResponse, responses=ERROR_RESPONSES)
async def deploy_branch(
    request: Optional[DeployRequest] = None,
    service: DeployService = Depends(get_deploy_service),
):
    branch = request.branch if request else None
    try:
        result = await service.deploy(branch)
    except BranchValidationError as e:
        logger.warning(f"⚠️ Rejected deploy request: {e.message}")
        return _error(400, ErrorResponse(error=e.message))
    except CommandError as e:
        logger.error(f"❌ Deployment failed for {branch}: {e.message}")
        return _error(500, ErrorResponse.from_command_error(f"Failed to deploy {branch}", e))

    return ScriptRunResponse(
        message=f"Successfully deployed {branch}",
        branch=branch,
        output=result.stdout,
        warnings=result.stderr,
    )


@router.delete("/cleanup/{branch:path}", response_model=ScriptRunResponse, responses=ERROR_RESPONSES)
async def cleanup_branch(branch: str, service: DeployService = Depends(get_deploy_service)):
    try:
        result = await service.cleanup(branch)
    except BranchValidationError as e:
        logger.warning(f"⚠️ Rejected cleanup request: {e.message}")
        return _error(400, ErrorResponse(error=e.message))
    except CommandError as e:
        logger.error(f"❌ Cleanup failed for {branch}: {e.message}")
        return _error(500, ErrorResponse.from_command_error(f"Failed to cleanup {branch}", e))

    return ScriptRunResponse(
        message=f"Successfully cleaned up {branch}",
        branch=branch,
        output=result.stdout,
        warnings=result.stderr,
    )
