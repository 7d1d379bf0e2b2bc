"""
Pydantic schemas for statistics endpoints
"""
from pydantic import BaseModel
from typing import Optional, List


class StatsSummary(BaseModel):
    """Headline numbers for the dashboard"""
    total_sessions: int
    total_hours: float
    average_score: float


class ProgressStats(BaseModel):
    """Lesson plan progress"""
    overdue_lessons: int


class SubjectStats(BaseModel):
    """Per-subject study hours and exam performance"""
    subject_id: int
    subject_name: str
    color: str
    total_hours: float
    exam_count: int
    average_percentage: Optional[float] = None
    lesson_count: int
    completed_lessons: int


class SubjectBreakdown(BaseModel):
    subjects: List[SubjectStats]
