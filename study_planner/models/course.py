"""
Course and Subject models
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from study_planner.models.base import Base, TimestampMixin


class Course(Base, TimestampMixin):
    """A course groups related subjects (e.g. a degree programme or a certification)"""
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Relationships
    subjects = relationship("Subject", back_populates="course", order_by="Subject.name")


class Subject(Base, TimestampMixin):
    """
    Subject studied within a course.
    Lesson plans, study sessions and exam results all hang off a subject.
    """
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="SET NULL"), nullable=True, index=True)

    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    color = Column(String(7), nullable=False, default="#4f46e5")  # Hex color used by the calendar

    # Relationships
    course = relationship("Course", back_populates="subjects")
    lesson_plans = relationship(
        "LessonPlan",
        back_populates="subject",
        cascade="all, delete-orphan",
        order_by="LessonPlan.planned_date",
    )
    study_sessions = relationship("StudySession", back_populates="subject", cascade="all, delete-orphan")
    exam_results = relationship("ExamResult", back_populates="subject", cascade="all, delete-orphan")
