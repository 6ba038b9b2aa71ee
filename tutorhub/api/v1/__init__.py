# tutorhub/api/v1/__init__.py
from fastapi import APIRouter

from tutorhub.api.v1.endpoints import (
    assignments,
    auth,
    classes,
    dashboard,
    health,
    lessons,
    resources,
    student_portal,
    students,
)

api_router = APIRouter()
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(students.router)
api_router.include_router(lessons.router)
api_router.include_router(assignments.router)
api_router.include_router(classes.router)
api_router.include_router(resources.router)
api_router.include_router(dashboard.router)
api_router.include_router(student_portal.router)
api_router.include_router(health.router)
