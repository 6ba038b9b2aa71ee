# tutorhub/api/v1/endpoints/health.py
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from tutorhub.db.deps import get_db
from tutorhub.db.session import storage_errors

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/live")
def liveness_probe():
    return {"status": "ok"}


@router.get("/db")
def db_health(db: Session = Depends(get_db)):
    with storage_errors(db, "running the health check query"):
        db.execute(text("SELECT 1"))
    return {"status": "ok"}
