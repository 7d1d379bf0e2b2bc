"""
Pydantic schemas for Course and Subject endpoints
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import date, datetime

from study_planner.schemas.common import empty_to_none


class CourseCreate(BaseModel):
    """Schema for creating a course"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class CourseBrief(BaseModel):
    """Course without nested subjects"""
    id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class SubjectBrief(BaseModel):
    """Subject without nested relations"""
    id: int
    name: str
    description: Optional[str] = None
    color: str
    course_id: Optional[int] = None

    class Config:
        from_attributes = True


class CourseResponse(CourseBrief):
    """Course with its subjects"""
    subjects: List[SubjectBrief] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SubjectCreate(BaseModel):
    """
    Schema for creating or updating a subject.
    course_id is optional here so the endpoint can answer with a
    readable "Course is mandatory" instead of a generic validation error.
    """
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    color: Optional[str] = Field(None, pattern="^#[0-9A-Fa-f]{6}$")
    course_id: Optional[int] = None

    @field_validator("course_id", "color", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        return empty_to_none(value)


class SubjectUpdate(SubjectCreate):
    """Schema for updating a subject"""
    pass


class LessonSummary(BaseModel):
    """Lesson plan without nested relations"""
    id: int
    title: str
    subject_id: int
    planned_date: date
    is_completed: bool

    class Config:
        from_attributes = True


class SubjectResponse(SubjectBrief):
    """Subject with its course and lesson plans"""
    course: Optional[CourseBrief] = None
    lesson_plans: List[LessonSummary] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
