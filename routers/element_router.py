from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from core.auth import require_admin
from core.database import get_db
from crud.element_crud import get_element, update_element, delete_element
from schemas.common_schema import ApiResponse
from schemas.section_schema import ElementResponse, ElementUpdate


router = APIRouter(prefix="/api/elements", tags=["Elements"])


@router.get("/{element_id}", response_model=ApiResponse[ElementResponse])
def read_one(element_id: int, db: Session = Depends(get_db)):
    el = get_element(db, element_id)
    if not el:
        raise HTTPException(status_code=404, detail="Element not found")
    return ApiResponse(data=ElementResponse.model_validate(el))


@router.put("/{element_id}", response_model=ApiResponse[ElementResponse], dependencies=[Depends(require_admin)])
def update(element_id: int, payload: ElementUpdate, db: Session = Depends(get_db)):
    el = update_element(db, element_id, payload)
    if not el:
        raise HTTPException(status_code=404, detail="Element not found")
    return ApiResponse(data=ElementResponse.model_validate(el))


@router.delete("/{element_id}", response_model=ApiResponse[None], dependencies=[Depends(require_admin)])
def delete(element_id: int, db: Session = Depends(get_db)):
    ok = delete_element(db, element_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Element not found")
    return ApiResponse(message="Element deleted successfully")
