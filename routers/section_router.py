from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from core.auth import require_admin
from core.database import get_db
from crud.element_crud import create_element, reorder_elements
from crud.project_crud import get_project
from crud.section_crud import get_section, create_section, update_section, delete_section
from schemas.common_schema import ApiResponse, ReorderResult
from schemas.section_schema import (
    ElementCreate, ElementReorderRequest, ElementResponse, SectionCreate, SectionResponse, SectionUpdate,
)


router = APIRouter(prefix="/api/sections", tags=["Sections"])


@router.get("/{section_id}", response_model=ApiResponse[SectionResponse])
def read_one(section_id: int, db: Session = Depends(get_db)):
    s = get_section(db, section_id)
    if not s:
        raise HTTPException(status_code=404, detail="Section not found")
    return ApiResponse(data=SectionResponse.model_validate(s))


@router.post("", response_model=ApiResponse[SectionResponse], status_code=201, dependencies=[Depends(require_admin)])
def create(payload: SectionCreate, db: Session = Depends(get_db)):
    if not get_project(db, payload.project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    s = create_section(db, payload)
    return ApiResponse(data=SectionResponse.model_validate(s))


@router.put("/{section_id}", response_model=ApiResponse[SectionResponse], dependencies=[Depends(require_admin)])
def update(section_id: int, payload: SectionUpdate, db: Session = Depends(get_db)):
    s = update_section(db, section_id, payload)
    if not s:
        raise HTTPException(status_code=404, detail="Section not found")
    return ApiResponse(data=SectionResponse.model_validate(s))


@router.delete("/{section_id}", response_model=ApiResponse[None], dependencies=[Depends(require_admin)])
def delete(section_id: int, db: Session = Depends(get_db)):
    ok = delete_section(db, section_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Section not found")
    return ApiResponse(message="Section deleted successfully")


@router.post(
    "/{section_id}/elements",
    response_model=ApiResponse[ElementResponse],
    status_code=201,
    dependencies=[Depends(require_admin)],
)
def add_element(section_id: int, payload: ElementCreate, db: Session = Depends(get_db)):
    s = get_section(db, section_id)
    if not s:
        raise HTTPException(status_code=404, detail="Section not found")
    el = create_element(db, s, payload)
    return ApiResponse(data=ElementResponse.model_validate(el))


@router.post("/{section_id}/reorder", response_model=ApiResponse[ReorderResult], dependencies=[Depends(require_admin)])
def reorder(section_id: int, payload: ElementReorderRequest, db: Session = Depends(get_db)):
    s = get_section(db, section_id)
    if not s:
        raise HTTPException(status_code=404, detail="Section not found")
    outcome = reorder_elements(db, s, payload.element_orders)
    if outcome.ok:
        return ApiResponse(data=outcome.as_dict(), message="Element order updated successfully")
    return ApiResponse(success=False, data=outcome.as_dict(), error="Some elements could not be reordered")
