from datetime import datetime
from pydantic import BaseModel, Field

from schemas.section_schema import SectionResponse


class ProjectBase(BaseModel):
    title: str
    subtitle: str | None = None
    year: int | None = None
    category: str = "works"
    coming_soon: bool = False


class ProjectCreate(ProjectBase):
    """Form payload for a new project. Slug and order are derived server-side."""
    pass


class ProjectUpdate(BaseModel):
    title: str | None = None
    subtitle: str | None = None
    year: int | None = None
    category: str | None = None
    coming_soon: bool | None = None
    order_index: int | None = None
    remove_main_image: bool = False


class ProjectResponse(ProjectBase):
    id: int
    slug: str
    main_image_url: str | None = None
    main_image_key: str | None = None
    order_index: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class ProjectDetailResponse(ProjectResponse):
    sections: list[SectionResponse] = []


class ProjectOrder(BaseModel):
    id: int
    order_index: int
    category: str | None = None


class ProjectReorderRequest(BaseModel):
    project_orders: list[ProjectOrder] = Field(alias="projectOrders")

    model_config = {"populate_by_name": True}
