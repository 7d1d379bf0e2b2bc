"""
Course API endpoints
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import List

from study_planner.db.session import get_db
from study_planner.models import Course
from study_planner.schemas.common import DeleteResponse
from study_planner.schemas.course import CourseCreate, CourseResponse

logger = logging.getLogger(__name__)

router = APIRouter()


async def _load_course(db: AsyncSession, course_id: int) -> Course:
    result = await db.execute(
        select(Course)
        .where(Course.id == course_id)
        .options(selectinload(Course.subjects))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


@router.get("", response_model=List[CourseResponse])
async def list_courses(
    db: AsyncSession = Depends(get_db)
):
    """
    Get all courses ordered by name, each with its subjects.
    """
    result = await db.execute(
        select(Course)
        .options(selectinload(Course.subjects))
        .order_by(Course.name)
        .execution_options(populate_existing=True)
    )
    courses = result.scalars().all()

    return [CourseResponse.model_validate(course) for course in courses]


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(
    course_data: CourseCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a new course.
    """
    course = Course(
        name=course_data.name,
        description=course_data.description,
    )

    db.add(course)
    await db.commit()

    logger.info(f"Created course {course.id} '{course.name}'")
    return CourseResponse.model_validate(await _load_course(db, course.id))


@router.delete("/{course_id}", response_model=DeleteResponse)
async def delete_course(
    course_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a course. Its subjects are kept and detached from the course.
    """
    course = await _load_course(db, course_id)

    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Course with id {course_id} not found"
        )

    await db.delete(course)
    await db.commit()

    logger.info(f"Deleted course {course_id}")
    return DeleteResponse()
