"""
SQLAlchemy models - Import all for Alembic autogenerate
"""
from study_planner.models.base import Base, TimestampMixin

# Import all models
from study_planner.models.course import Course, Subject
from study_planner.models.checklist import ChecklistTemplate, ChecklistTemplateItem
from study_planner.models.lesson import LessonPlan, LessonChecklistItem
from study_planner.models.tracking import StudySession, ExamResult

# Export all for easy imports
__all__ = [
    "Base",
    "TimestampMixin",
    "Course",
    "Subject",
    "ChecklistTemplate",
    "ChecklistTemplateItem",
    "LessonPlan",
    "LessonChecklistItem",
    "StudySession",
    "ExamResult",
]
