"""
Pydantic schemas for Lesson plan endpoints
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import date, datetime

from study_planner.schemas.common import parse_calendar_date, empty_to_none
from study_planner.schemas.course import SubjectBrief


class LessonCreate(BaseModel):
    """Schema for creating a lesson plan"""
    title: str = Field(..., min_length=1, max_length=255)
    subject_id: int
    content: Optional[str] = None
    planned_date: date
    template_id: Optional[int] = None

    @field_validator("planned_date", mode="before")
    @classmethod
    def calendar_day(cls, value):
        return parse_calendar_date(value)

    @field_validator("template_id", mode="before")
    @classmethod
    def blank_template(cls, value):
        return empty_to_none(value)


class LessonUpdate(BaseModel):
    """Schema for editing or rescheduling a lesson plan"""
    title: str = Field(..., min_length=1, max_length=255)
    subject_id: int
    content: Optional[str] = None
    planned_date: date

    @field_validator("planned_date", mode="before")
    @classmethod
    def calendar_day(cls, value):
        return parse_calendar_date(value)


class LessonCompletionUpdate(BaseModel):
    """Manual completion override"""
    is_completed: bool


class ChecklistItemResponse(BaseModel):
    """Response schema for lesson checklist items"""
    id: int
    lesson_id: int
    text: str
    is_completed: bool
    order: int

    class Config:
        from_attributes = True


class LessonResponse(BaseModel):
    """Lesson plan with subject, checklist and computed progress"""
    id: int
    title: str
    subject_id: int
    content: Optional[str] = None
    planned_date: date
    is_completed: bool
    subject: SubjectBrief
    checklist: List[ChecklistItemResponse] = []
    checklist_progress: float = 0.0
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
