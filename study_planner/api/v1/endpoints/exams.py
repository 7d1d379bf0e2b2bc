"""
Exam result API endpoints
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import List

from study_planner.db.session import get_db
from study_planner.models import ExamResult, Subject
from study_planner.schemas.common import DeleteResponse
from study_planner.schemas.tracking import ExamResultCreate, ExamResultResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[ExamResultResponse])
async def list_exam_results(
    db: AsyncSession = Depends(get_db)
):
    """
    Get all exam results, most recent first.
    """
    result = await db.execute(
        select(ExamResult)
        .options(selectinload(ExamResult.subject))
        .order_by(ExamResult.date.desc(), ExamResult.id.desc())
        .execution_options(populate_existing=True)
    )
    exams = result.scalars().all()

    return [ExamResultResponse.model_validate(exam) for exam in exams]


@router.post("", response_model=ExamResultResponse, status_code=status.HTTP_201_CREATED)
async def create_exam_result(
    exam_data: ExamResultCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Record an exam result for a subject.
    """
    subject_result = await db.execute(
        select(Subject.id).where(Subject.id == exam_data.subject_id)
    )
    if subject_result.scalar_one_or_none() is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Subject with id {exam_data.subject_id} not found"
        )

    exam = ExamResult(
        subject_id=exam_data.subject_id,
        score=exam_data.score,
        max_score=exam_data.max_score,
        date=exam_data.date,
        notes=exam_data.notes,
    )

    db.add(exam)
    await db.commit()

    result = await db.execute(
        select(ExamResult)
        .where(ExamResult.id == exam.id)
        .options(selectinload(ExamResult.subject))
        .execution_options(populate_existing=True)
    )
    exam = result.scalar_one()

    logger.info(f"Recorded exam {exam.id}: {exam.score}/{exam.max_score} for subject {exam.subject_id}")
    return ExamResultResponse.model_validate(exam)


@router.delete("/{exam_id}", response_model=DeleteResponse)
async def delete_exam_result(
    exam_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Delete an exam result.
    """
    result = await db.execute(
        select(ExamResult).where(ExamResult.id == exam_id)
    )
    exam = result.scalar_one_or_none()

    if not exam:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Exam result with id {exam_id} not found"
        )

    await db.delete(exam)
    await db.commit()

    logger.info(f"Deleted exam result {exam_id}")
    return DeleteResponse()
