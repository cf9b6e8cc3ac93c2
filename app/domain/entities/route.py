from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Route(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    index: int
    path: str
    upstream: str
    type: str
    strip_prefix: Optional[str] = Field(None, alias="stripPrefix")
