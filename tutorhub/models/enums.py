"""
Model enums.

Values are stored as plain strings in the database.
"""
from enum import Enum


class StudentLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class StudentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    GRADUATED = "graduated"


class AssignmentStatus(str, Enum):
    """Stored assignment states. "overdue" is derived at read time, never stored."""
    PENDING = "pending"
    COMPLETED = "completed"
    GRADED = "graded"


class ClassStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ResourceType(str, Enum):
    DOCUMENT = "document"
    VIDEO = "video"
    AUDIO = "audio"
    WORKSHEET = "worksheet"
