from typing import List

from pydantic import BaseModel

from app.domain.entities.route import Route


class RoutesResponse(BaseModel):
    success: bool = True
    routes: List[Route]
