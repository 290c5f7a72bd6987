from datetime import datetime
from pydantic import BaseModel


class AboutUpdate(BaseModel):
    content: str


class AboutResponse(BaseModel):
    id: int
    content: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
