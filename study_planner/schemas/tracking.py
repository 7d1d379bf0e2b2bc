"""
Pydantic schemas for study sessions and exam results
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from datetime import date, datetime

from study_planner.schemas.common import parse_calendar_date, to_naive_utc, empty_to_none
from study_planner.schemas.course import SubjectBrief, LessonSummary


class StudySessionCreate(BaseModel):
    """Schema for logging a study session"""
    subject_id: int
    lesson_plan_id: Optional[int] = None
    topic: str = Field(..., min_length=1, max_length=255)
    start_time: datetime
    end_time: datetime
    is_review: bool = False
    notes: Optional[str] = None

    @field_validator("lesson_plan_id", mode="before")
    @classmethod
    def blank_lesson(cls, value):
        return empty_to_none(value)

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_timestamps(cls, value: datetime) -> datetime:
        return to_naive_utc(value)

    @model_validator(mode="after")
    def check_time_range(self):
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class StudySessionResponse(BaseModel):
    """Response schema for study sessions"""
    id: int
    subject_id: int
    lesson_plan_id: Optional[int] = None
    topic: str
    start_time: datetime
    end_time: datetime
    is_review: bool
    notes: Optional[str] = None
    duration_hours: float
    subject: SubjectBrief
    lesson_plan: Optional[LessonSummary] = None

    class Config:
        from_attributes = True


class ExamResultCreate(BaseModel):
    """Schema for recording an exam result"""
    subject_id: int
    score: float = Field(..., ge=0)
    max_score: float = Field(..., gt=0)
    date: date
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def calendar_day(cls, value):
        return parse_calendar_date(value)


class ExamResultResponse(BaseModel):
    """Response schema for exam results"""
    id: int
    subject_id: int
    score: float
    max_score: float
    date: date
    notes: Optional[str] = None
    percentage: float
    subject: SubjectBrief

    class Config:
        from_attributes = True
