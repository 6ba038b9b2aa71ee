# tutorhub/api/v1/endpoints/dashboard.py
from fastapi import APIRouter, Depends

from tutorhub.api.deps import get_current_teacher
from tutorhub.db.deps import get_database
from tutorhub.db.session import Database
from tutorhub.models.user import User
from tutorhub.schemas.dashboard import DashboardStats
from tutorhub.services import dashboard_service

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(
    database: Database = Depends(get_database),
    current_teacher: User = Depends(get_current_teacher),
):
    """
    Student, active student, lesson and pending assignment counts, gathered
    concurrently.
    """
    return await dashboard_service.get_dashboard_stats(database)
