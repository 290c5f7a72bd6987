from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from core.auth import require_admin
from core.database import get_db
from crud.about_crud import get_about, upsert_about
from schemas.about_schema import AboutResponse, AboutUpdate
from schemas.common_schema import ApiResponse


router = APIRouter(prefix="/api/about", tags=["About"])


@router.get("", response_model=ApiResponse[AboutResponse])
def read(db: Session = Depends(get_db)):
    return ApiResponse(data=AboutResponse.model_validate(get_about(db)))


@router.put("", response_model=ApiResponse[AboutResponse], dependencies=[Depends(require_admin)])
def update(payload: AboutUpdate, db: Session = Depends(get_db)):
    return ApiResponse(data=AboutResponse.model_validate(upsert_about(db, payload.content)))
