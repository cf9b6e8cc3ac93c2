from typing import List

from pydantic import BaseModel


class BranchesResponse(BaseModel):
    success: bool = True
    branches: List[str]
