# tutorhub/api/v1/endpoints/resources.py
from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from tutorhub.api.deps import get_app_settings, get_current_teacher
from tutorhub.core.config import Settings
from tutorhub.db.deps import get_db
from tutorhub.models.enums import ResourceType
from tutorhub.models.user import User
from tutorhub.schemas.common import CreatedResponse
from tutorhub.schemas.resource import ResourcePublic
from tutorhub.services import resource_service

router = APIRouter(prefix="/resources", tags=["resources"])


@router.get("", response_model=List[ResourcePublic])
def list_resources(
    db: Session = Depends(get_db),
    current_teacher: User = Depends(get_current_teacher),
):
    return [resource_service.resource_to_public(r) for r in resource_service.list_resources(db)]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_resource(
    title: str = Form(..., min_length=1),
    resource_type: ResourceType = Form(..., alias="type"),
    description: str | None = Form(None),
    level: str | None = Form(None),
    file: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    current_teacher: User = Depends(get_current_teacher),
):
    """
    Multipart form. The file is optional; when present it is written to the
    uploads directory before the row is inserted.
    """
    file_path = None
    if file is not None and file.filename:
        file_path = resource_service.store_upload(
            file.file,
            file.filename,
            uploads_dir=Path(settings.UPLOADS_DIR),
            url_path=settings.UPLOADS_URL_PATH,
        )

    resource = resource_service.create_resource(
        db,
        title=title,
        resource_type=resource_type.value,
        description=description,
        level=level,
        file_path=file_path,
    )
    return CreatedResponse(id=resource.id, message="Resource added successfully")
