"""
Error envelope shared by every route.

Validation failures carry only `error`; failed commands add `details`
(captured stdout, or the failure message when there was none) and the
captured `stderr`.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from app.domain.errors import CommandError


class ErrorResponse(BaseModel):
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Command output or failure message")
    stderr: Optional[str] = Field(None, description="Captured standard error")

    @classmethod
    def from_command_error(cls, error: str, exc: CommandError) -> "ErrorResponse":
        return cls(error=error, details=exc.details, stderr=exc.stderr)

    def to_content(self) -> dict:
        return self.model_dump(exclude_none=True)
