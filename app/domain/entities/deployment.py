from pydantic import BaseModel


class Deployment(BaseModel):
    branch: str
    container: str
    port: str
    status: str
    url: str
