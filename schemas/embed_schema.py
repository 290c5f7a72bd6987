from pydantic import BaseModel, Field


class EmbedValidateRequest(BaseModel):
    url: str


class EmbedResponse(BaseModel):
    is_valid: bool = Field(alias="isValid")
    embed_url: str | None = Field(default=None, alias="embedUrl")
    type: str | None = None
    original_url: str | None = Field(default=None, alias="originalUrl")
    error: str | None = None

    model_config = {"populate_by_name": True, "from_attributes": True}
