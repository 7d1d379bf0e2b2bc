"""
Study session log and exam result models
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from study_planner.models.base import Base, TimestampMixin


class StudySession(Base, TimestampMixin):
    """Time actually spent studying a subject, optionally against a lesson plan"""
    __tablename__ = "study_sessions"

    id = Column(Integer, primary_key=True, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True)
    lesson_plan_id = Column(Integer, ForeignKey("lesson_plans.id", ondelete="SET NULL"), nullable=True)

    topic = Column(String(255), nullable=False)
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=False)
    is_review = Column(Boolean, default=False, nullable=False)
    notes = Column(Text, nullable=True)

    # Relationships
    subject = relationship("Subject", back_populates="study_sessions")
    lesson_plan = relationship("LessonPlan", back_populates="study_sessions")

    @property
    def duration_hours(self) -> float:
        return (self.end_time - self.start_time).total_seconds() / 3600


class ExamResult(Base, TimestampMixin):
    """Score obtained on an exam or test"""
    __tablename__ = "exam_results"

    id = Column(Integer, primary_key=True, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id", ondelete="CASCADE"), nullable=False, index=True)

    score = Column(Float, nullable=False)
    max_score = Column(Float, nullable=False)
    date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)

    # Relationships
    subject = relationship("Subject", back_populates="exam_results")

    @property
    def percentage(self) -> float:
        return self.score / self.max_score * 100
