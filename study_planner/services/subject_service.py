"""
Subject Service
Subjects must belong to an existing course and carry a unique name
"""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from study_planner.core.config import settings
from study_planner.core.exceptions import NotFoundError, InvalidReferenceError, ConflictError
from study_planner.models import Course, Subject

logger = logging.getLogger(__name__)


class SubjectService:
    """Service for subjects"""

    async def get_subject(self, db: AsyncSession, subject_id: int) -> Subject:
        """
        Load a subject with its course and lesson plans.

        Raises:
            NotFoundError: If the subject does not exist
        """
        result = await db.execute(
            select(Subject)
            .where(Subject.id == subject_id)
            .options(
                selectinload(Subject.course),
                selectinload(Subject.lesson_plans),
            )
            .execution_options(populate_existing=True)
        )
        subject = result.scalar_one_or_none()

        if not subject:
            raise NotFoundError(f"Subject with id {subject_id} not found")

        return subject

    async def _validate(
        self,
        db: AsyncSession,
        name: str,
        course_id: Optional[int],
        subject_id: Optional[int] = None
    ) -> None:
        """
        Raises:
            InvalidReferenceError: If course_id is missing or unknown
            ConflictError: If another subject already uses the name
        """
        if course_id is None:
            raise InvalidReferenceError("Course is mandatory")

        course_result = await db.execute(
            select(Course.id).where(Course.id == course_id)
        )
        if course_result.scalar_one_or_none() is None:
            logger.warning(f"Rejected subject write: course {course_id} does not exist")
            raise InvalidReferenceError(f"Course with id {course_id} not found")

        name_query = select(Subject.id).where(Subject.name == name)
        if subject_id is not None:
            name_query = name_query.where(Subject.id != subject_id)

        name_result = await db.execute(name_query)
        if name_result.first() is not None:
            raise ConflictError(f"Subject '{name}' already exists")

    async def create_subject(
        self,
        db: AsyncSession,
        name: str,
        course_id: Optional[int],
        description: Optional[str] = None,
        color: Optional[str] = None
    ) -> Subject:
        """Create a subject; color falls back to the configured default"""
        await self._validate(db, name, course_id)

        subject = Subject(
            name=name,
            description=description,
            color=color or settings.DEFAULT_SUBJECT_COLOR,
            course_id=course_id,
        )

        db.add(subject)
        await db.commit()

        logger.info(f"Created subject {subject.id} '{name}' in course {course_id}")
        return await self.get_subject(db, subject.id)

    async def update_subject(
        self,
        db: AsyncSession,
        subject_id: int,
        name: str,
        course_id: Optional[int],
        description: Optional[str] = None,
        color: Optional[str] = None
    ) -> Subject:
        """Update a subject. An omitted color keeps the current one."""
        subject = await self.get_subject(db, subject_id)
        await self._validate(db, name, course_id, subject_id=subject_id)

        subject.name = name
        subject.description = description
        if color:
            subject.color = color
        subject.course_id = course_id

        await db.commit()

        logger.info(f"Updated subject {subject_id}")
        return await self.get_subject(db, subject_id)

    async def delete_subject(self, db: AsyncSession, subject_id: int) -> None:
        """Delete a subject with its lesson plans, study sessions and exam results"""
        result = await db.execute(
            select(Subject).where(Subject.id == subject_id)
        )
        subject = result.scalar_one_or_none()

        if not subject:
            raise NotFoundError(f"Subject with id {subject_id} not found")

        await db.delete(subject)
        await db.commit()
        logger.info(f"Deleted subject {subject_id}")


# Singleton instance
_subject_service: Optional[SubjectService] = None


def get_subject_service() -> SubjectService:
    """Get or create the subject service singleton"""
    global _subject_service
    if _subject_service is None:
        _subject_service = SubjectService()
    return _subject_service
