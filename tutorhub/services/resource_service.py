# tutorhub/services/resource_service.py
import logging
import shutil
import uuid
from pathlib import Path
from typing import BinaryIO, List

from sqlalchemy.orm import Session

from tutorhub.db.session import storage_errors
from tutorhub.models.resource import Resource
from tutorhub.schemas.resource import ResourcePublic

logger = logging.getLogger(__name__)


def resource_to_public(r: Resource) -> ResourcePublic:
    return ResourcePublic(
        id=r.id,
        title=r.title,
        type=r.type,
        file_path=r.file_path,
        file_url=f"/{r.file_path}" if r.file_path else None,
        description=r.description,
        level=r.level,
        created_at=r.created_at,
    )


def store_upload(
    fileobj: BinaryIO,
    filename: str,
    *,
    uploads_dir: Path,
    url_path: str,
) -> str:
    """
    Write the uploaded bytes under a fresh UUID name, keeping the original
    suffix, and return the path relative to the public uploads mount.
    """
    uploads_dir.mkdir(parents=True, exist_ok=True)
    suffix = Path(filename).suffix.lower()
    stored_name = f"{uuid.uuid4().hex}{suffix}"

    with open(uploads_dir / stored_name, "wb") as out:
        shutil.copyfileobj(fileobj, out)

    logger.info(f"Stored upload {filename!r} as {stored_name}")
    return f"{url_path.strip('/')}/{stored_name}"


def list_resources(db: Session) -> List[Resource]:
    with storage_errors(db, "listing resources"):
        return (
            db.query(Resource)
            .order_by(Resource.created_at.desc(), Resource.id.desc())
            .all()
        )


def create_resource(
    db: Session,
    *,
    title: str,
    resource_type: str,
    description: str | None = None,
    level: str | None = None,
    file_path: str | None = None,
) -> Resource:
    # the file, if any, is already on disk; a failed insert leaves it orphaned
    with storage_errors(db, "creating a resource"):
        db_obj = Resource(
            title=title,
            type=resource_type,
            file_path=file_path,
            description=description,
            level=level,
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)

    logger.info(f"Created resource {db_obj.id} ({resource_type})")
    return db_obj
