from typing import Any, List, Optional

from pydantic import BaseModel

from app.domain.entities.deployment import Deployment


class DeployRequest(BaseModel):
    # Left untyped so a missing or malformed value is reported as a 400 by
    # branch validation rather than as a schema error.
    branch: Optional[Any] = None


class ScriptRunResponse(BaseModel):
    success: bool = True
    message: str
    branch: str
    output: str
    warnings: str


class DeploymentsResponse(BaseModel):
    success: bool = True
    deployments: List[Deployment]
