from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session
from core.auth import require_admin
from core.config import settings
from core.database import get_db
from core.errors import ContentValidationError
from crud.project_crud import (
    list_projects, get_project, get_project_by_slug, create_project, update_project, delete_project, reorder_projects,
)
from crud.section_crud import list_sections, reorder_sections
from schemas.common_schema import ApiResponse, ReorderResult
from schemas.project_schema import (
    ProjectCreate, ProjectDetailResponse, ProjectReorderRequest, ProjectResponse, ProjectUpdate,
)
from schemas.section_schema import SectionReorderRequest, SectionResponse
from services.storage import R2Storage, get_storage, read_upload


router = APIRouter(prefix="/api/projects", tags=["Projects"])


def _parse_year(year: str | None) -> int | None:
    if year is None or not year.strip():
        return None
    try:
        return int(year)
    except ValueError:
        raise ContentValidationError(f"Invalid year: {year}")


def _store_main_image(main_image: UploadFile | None, storage: R2Storage):
    if main_image is None or not main_image.filename:
        return None
    data = read_upload(main_image, settings.MAX_UPLOAD_BYTES)
    return storage.upload(data, main_image.filename, main_image.content_type, folder="projects")


def _discard(image, storage: R2Storage) -> None:
    # The row was never written, so nothing else references the object
    if image is not None:
        storage.delete(image.key)


@router.get("", response_model=ApiResponse[list[ProjectResponse]])
def list_all(category: str | None = None, db: Session = Depends(get_db)):
    projects = list_projects(db, category=category)
    return ApiResponse(data=[ProjectResponse.model_validate(p) for p in projects])


@router.post("/reorder", response_model=ApiResponse[ReorderResult], dependencies=[Depends(require_admin)])
def reorder(payload: ProjectReorderRequest, db: Session = Depends(get_db)):
    outcome = reorder_projects(db, payload.project_orders)
    if outcome.ok:
        return ApiResponse(data=outcome.as_dict(), message="Project order updated successfully")
    return ApiResponse(success=False, data=outcome.as_dict(), error="Some projects could not be reordered")


@router.get("/slug/{slug}", response_model=ApiResponse[ProjectDetailResponse])
def read_by_slug(slug: str, db: Session = Depends(get_db)):
    proj = get_project_by_slug(db, slug)
    if not proj:
        raise HTTPException(status_code=404, detail="Project not found")
    return ApiResponse(data=ProjectDetailResponse.model_validate(proj))


@router.get("/{project_id}", response_model=ApiResponse[ProjectDetailResponse])
def read_one(project_id: int, db: Session = Depends(get_db)):
    proj = get_project(db, project_id)
    if not proj:
        raise HTTPException(status_code=404, detail="Project not found")
    return ApiResponse(data=ProjectDetailResponse.model_validate(proj))


@router.post("", response_model=ApiResponse[ProjectResponse], status_code=201, dependencies=[Depends(require_admin)])
def create(
    title: str = Form(...),
    subtitle: str | None = Form(None),
    year: str | None = Form(None),
    category: str = Form("works"),
    coming_soon: bool = Form(False),
    main_image: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    storage: R2Storage = Depends(get_storage),
):
    payload = ProjectCreate(
        title=title,
        subtitle=subtitle,
        year=_parse_year(year),
        category=category,
        coming_soon=coming_soon,
    )
    image = _store_main_image(main_image, storage)
    try:
        proj = create_project(db, payload, image=image)
    except Exception:
        _discard(image, storage)
        raise
    return ApiResponse(data=ProjectResponse.model_validate(proj))


@router.put("/{project_id}", response_model=ApiResponse[ProjectResponse], dependencies=[Depends(require_admin)])
def update(
    project_id: int,
    title: str | None = Form(None),
    subtitle: str | None = Form(None),
    year: str | None = Form(None),
    category: str | None = Form(None),
    coming_soon: bool | None = Form(None),
    order_index: int | None = Form(None),
    remove_main_image: bool = Form(False),
    main_image: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    storage: R2Storage = Depends(get_storage),
):
    if not get_project(db, project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    payload = ProjectUpdate(
        title=title,
        subtitle=subtitle,
        year=_parse_year(year),
        category=category,
        coming_soon=coming_soon,
        order_index=order_index,
        remove_main_image=remove_main_image,
    )
    image = _store_main_image(main_image, storage)
    try:
        proj = update_project(db, project_id, payload, image=image)
    except Exception:
        _discard(image, storage)
        raise
    return ApiResponse(data=ProjectResponse.model_validate(proj))


@router.delete("/{project_id}", response_model=ApiResponse[None], dependencies=[Depends(require_admin)])
def delete(project_id: int, db: Session = Depends(get_db)):
    ok = delete_project(db, project_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Project not found")
    return ApiResponse(message="Project deleted successfully")


@router.get("/{project_id}/sections", response_model=ApiResponse[list[SectionResponse]])
def read_sections(project_id: int, db: Session = Depends(get_db)):
    if not get_project(db, project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    return ApiResponse(data=[SectionResponse.model_validate(s) for s in list_sections(db, project_id)])


@router.post(
    "/{project_id}/sections/reorder",
    response_model=ApiResponse[ReorderResult],
    dependencies=[Depends(require_admin)],
)
def reorder_project_sections(project_id: int, payload: SectionReorderRequest, db: Session = Depends(get_db)):
    if not get_project(db, project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    outcome = reorder_sections(db, project_id, payload.section_orders)
    if outcome.ok:
        return ApiResponse(data=outcome.as_dict(), message="Section order updated successfully")
    return ApiResponse(success=False, data=outcome.as_dict(), error="Some sections could not be reordered")
