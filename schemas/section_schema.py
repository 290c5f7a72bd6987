from datetime import datetime
from pydantic import BaseModel, Field


class ElementCreate(BaseModel):
    type: str
    column_index: int = 0
    content: str = ""
    media_url: str | None = None
    embed_url: str | None = None
    alt_text: str = ""
    caption: str = ""


class ElementUpdate(BaseModel):
    type: str | None = None
    column_index: int | None = None
    order_index: int | None = None
    content: str | None = None
    media_url: str | None = None
    embed_url: str | None = None
    alt_text: str | None = None
    caption: str | None = None


class ElementResponse(BaseModel):
    id: int
    section_id: int
    type: str
    column_index: int
    order_index: int
    content: str = ""
    media_url: str | None = None
    embed_url: str | None = None
    embed_type: str | None = None
    alt_text: str = ""
    caption: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class SectionCreate(BaseModel):
    project_id: int
    title: str | None = None
    columns: int = 1


class SectionUpdate(BaseModel):
    title: str | None = None
    columns: int | None = None
    order_index: int | None = None


class SectionResponse(BaseModel):
    id: int
    project_id: int
    title: str
    columns: int
    order_index: int
    elements: list[ElementResponse] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class SectionOrder(BaseModel):
    id: int
    order_index: int


class SectionReorderRequest(BaseModel):
    section_orders: list[SectionOrder] = Field(alias="sectionOrders")

    model_config = {"populate_by_name": True}


class ElementOrder(BaseModel):
    id: int
    order_index: int
    column_index: int = 0


class ElementReorderRequest(BaseModel):
    element_orders: list[ElementOrder] = Field(alias="elementOrders")

    model_config = {"populate_by_name": True}
