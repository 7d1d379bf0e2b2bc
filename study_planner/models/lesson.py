"""
Lesson plan models
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, Date, ForeignKey
from sqlalchemy.orm import relationship

from study_planner.models.base import Base, TimestampMixin


class LessonPlan(Base, TimestampMixin):
    """
    Scheduled unit of study for a subject.

    is_completed follows the checklist (all items done) whenever an item is
    toggled, and can also be set directly through the manual completion endpoint.
    """
    __tablename__ = "lesson_plans"

    id = Column(Integer, primary_key=True, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=True)
    planned_date = Column(Date, nullable=False, index=True)
    is_completed = Column(Boolean, default=False, nullable=False)

    # Relationships
    subject = relationship("Subject", back_populates="lesson_plans")
    checklist = relationship(
        "LessonChecklistItem",
        back_populates="lesson",
        cascade="all, delete-orphan",
        order_by="LessonChecklistItem.order",
    )
    study_sessions = relationship("StudySession", back_populates="lesson_plan")

    @property
    def checklist_progress(self) -> float:
        """Fraction of completed checklist items, 0.0 for an empty checklist"""
        if not self.checklist:
            return 0.0
        done = sum(1 for item in self.checklist if item.is_completed)
        return round(done / len(self.checklist), 4)


class LessonChecklistItem(Base, TimestampMixin):
    """
    Lesson-scoped checklist step.
    Snapshot of a template item taken when the lesson was created; no link back to the template.
    """
    __tablename__ = "lesson_checklist_items"

    id = Column(Integer, primary_key=True, index=True)
    lesson_id = Column(Integer, ForeignKey("lesson_plans.id", ondelete="CASCADE"), nullable=False, index=True)

    text = Column(String(500), nullable=False)
    is_completed = Column(Boolean, default=False, nullable=False)
    order = Column(Integer, nullable=False)

    # Relationships
    lesson = relationship("LessonPlan", back_populates="checklist")
