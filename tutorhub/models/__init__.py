from tutorhub.models.user import User
from tutorhub.models.student import Student
from tutorhub.models.lesson import Lesson
from tutorhub.models.assignment import Assignment
from tutorhub.models.class_session import ClassSession
from tutorhub.models.resource import Resource

__all__ = ["User", "Student", "Lesson", "Assignment", "ClassSession", "Resource"]
