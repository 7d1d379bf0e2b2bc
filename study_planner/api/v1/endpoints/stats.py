"""
Statistics API endpoints
"""
from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from study_planner.db.session import get_db
from study_planner.schemas.stats import StatsSummary, ProgressStats, SubjectBreakdown
from study_planner.services.stats_service import get_stats_service

router = APIRouter()
stats_service = get_stats_service()


@router.get("/summary", response_model=StatsSummary)
async def get_summary(
    db: AsyncSession = Depends(get_db)
):
    """
    Total sessions, total hours studied and average exam score.
    """
    return StatsSummary(**await stats_service.summary(db))


@router.get("/progress", response_model=ProgressStats)
async def get_progress(
    db: AsyncSession = Depends(get_db)
):
    """
    Number of incomplete lessons planned before today.
    """
    return ProgressStats(**await stats_service.progress(db, today=date.today()))


@router.get("/subjects", response_model=SubjectBreakdown)
async def get_subject_breakdown(
    db: AsyncSession = Depends(get_db)
):
    """
    Study hours, exam percentages and lesson completion per subject.
    """
    return SubjectBreakdown(subjects=await stats_service.subject_breakdown(db))
