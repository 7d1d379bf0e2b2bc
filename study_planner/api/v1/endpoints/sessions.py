"""
Study session API endpoints
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import List

from study_planner.db.session import get_db
from study_planner.models import StudySession, Subject, LessonPlan
from study_planner.schemas.common import DeleteResponse
from study_planner.schemas.tracking import StudySessionCreate, StudySessionResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _session_query():
    return select(StudySession).options(
        selectinload(StudySession.subject),
        selectinload(StudySession.lesson_plan),
    ).execution_options(populate_existing=True)


@router.get("", response_model=List[StudySessionResponse])
async def list_study_sessions(
    db: AsyncSession = Depends(get_db)
):
    """
    Get all study sessions, most recent first.
    """
    result = await db.execute(
        _session_query().order_by(StudySession.start_time.desc())
    )
    sessions = result.scalars().all()

    return [StudySessionResponse.model_validate(s) for s in sessions]


@router.post("", response_model=StudySessionResponse, status_code=status.HTTP_201_CREATED)
async def create_study_session(
    session_data: StudySessionCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Log a study session, optionally linked to a lesson plan.
    """
    subject_result = await db.execute(
        select(Subject.id).where(Subject.id == session_data.subject_id)
    )
    if subject_result.scalar_one_or_none() is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Subject with id {session_data.subject_id} not found"
        )

    if session_data.lesson_plan_id is not None:
        lesson_result = await db.execute(
            select(LessonPlan.id).where(LessonPlan.id == session_data.lesson_plan_id)
        )
        if lesson_result.scalar_one_or_none() is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Lesson with id {session_data.lesson_plan_id} not found"
            )

    study_session = StudySession(
        subject_id=session_data.subject_id,
        lesson_plan_id=session_data.lesson_plan_id,
        topic=session_data.topic,
        start_time=session_data.start_time,
        end_time=session_data.end_time,
        is_review=session_data.is_review,
        notes=session_data.notes,
    )

    db.add(study_session)
    await db.commit()

    result = await db.execute(
        _session_query().where(StudySession.id == study_session.id)
    )
    study_session = result.scalar_one()

    logger.info(
        f"Logged study session {study_session.id} for subject {study_session.subject_id} "
        f"({study_session.duration_hours:.2f}h)"
    )
    return StudySessionResponse.model_validate(study_session)


@router.delete("/{session_id}", response_model=DeleteResponse)
async def delete_study_session(
    session_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a study session.
    """
    result = await db.execute(
        select(StudySession).where(StudySession.id == session_id)
    )
    study_session = result.scalar_one_or_none()

    if not study_session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Study session with id {session_id} not found"
        )

    await db.delete(study_session)
    await db.commit()

    logger.info(f"Deleted study session {session_id}")
    return DeleteResponse()
