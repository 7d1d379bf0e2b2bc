"""
Subject API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import List

from study_planner.core.exceptions import NotFoundError, InvalidReferenceError, ConflictError
from study_planner.db.session import get_db
from study_planner.models import Subject
from study_planner.schemas.common import DeleteResponse
from study_planner.schemas.course import SubjectCreate, SubjectUpdate, SubjectResponse, SubjectBrief
from study_planner.services.subject_service import get_subject_service

router = APIRouter()
subject_service = get_subject_service()


@router.get("", response_model=List[SubjectResponse])
async def list_subjects(
    db: AsyncSession = Depends(get_db)
):
    """
    Get all subjects ordered by name, with their course and lesson plans.
    """
    result = await db.execute(
        select(Subject)
        .options(
            selectinload(Subject.course),
            selectinload(Subject.lesson_plans),
        )
        .order_by(Subject.name)
        .execution_options(populate_existing=True)
    )
    subjects = result.scalars().all()

    return [SubjectResponse.model_validate(subject) for subject in subjects]


@router.post("", response_model=SubjectResponse, status_code=status.HTTP_201_CREATED)
async def create_subject(
    subject_data: SubjectCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a new subject inside a course.
    Color defaults to the planner's indigo when omitted.
    """
    try:
        subject = await subject_service.create_subject(
            db=db,
            name=subject_data.name,
            course_id=subject_data.course_id,
            description=subject_data.description,
            color=subject_data.color,
        )
        return SubjectResponse.model_validate(subject)

    except InvalidReferenceError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message
        )


@router.put("/{subject_id}", response_model=SubjectBrief)
async def update_subject(
    subject_id: int,
    subject_data: SubjectUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Update a subject's name, description, color and course.
    """
    try:
        subject = await subject_service.update_subject(
            db=db,
            subject_id=subject_id,
            name=subject_data.name,
            course_id=subject_data.course_id,
            description=subject_data.description,
            color=subject_data.color,
        )
        return SubjectBrief.model_validate(subject)

    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    except InvalidReferenceError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message
        )


@router.delete("/{subject_id}", response_model=DeleteResponse)
async def delete_subject(
    subject_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a subject with its lesson plans, study sessions and exam results.
    """
    try:
        await subject_service.delete_subject(db, subject_id)
        return DeleteResponse()

    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
