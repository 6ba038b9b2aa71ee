# tutorhub/schemas/dashboard.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tutorhub.schemas.assignment import AssignmentPublic
from tutorhub.schemas.class_session import ClassPublic


class CamelModel(BaseModel):
    """Dashboard payloads are exposed with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DashboardStats(CamelModel):
    total_students: int = 0
    active_students: int = 0
    total_lessons: int = 0
    pending_assignments: int = 0


class StudentStats(CamelModel):
    total_assignments: int = 0
    pending_assignments: int = 0
    completed_assignments: int = 0
    graded_assignments: int = 0
    average_grade: int = 0
    upcoming_classes: int = 0


class StudentDashboard(CamelModel):
    stats: StudentStats
    recent_assignments: list[AssignmentPublic]
    upcoming_classes: list[ClassPublic]
