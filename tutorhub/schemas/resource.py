# tutorhub/schemas/resource.py
from datetime import datetime

from pydantic import BaseModel


class ResourcePublic(BaseModel):
    id: int
    title: str
    type: str
    file_path: str | None = None
    file_url: str | None = None
    description: str | None = None
    level: str | None = None
    created_at: datetime | None = None
