from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope every endpoint answers with."""
    success: bool = True
    data: T | None = None
    message: str | None = None
    error: str | None = None


class ReorderFailure(BaseModel):
    id: int
    error: str


class ReorderResult(BaseModel):
    updated: list[int] = []
    failed: list[ReorderFailure] = []
