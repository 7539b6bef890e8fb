from pydantic import BaseModel, ConfigDict


class StuffPublic(BaseModel):
    id: int
    name: str
    description: str = ""
    model_config = ConfigDict(from_attributes=True)


class HealthStatus(BaseModel):
    status: str
    service: str
