"""
Checklist Lesson Service
Creates lesson plans (optionally from a checklist template) and keeps the
lesson's completion flag in step with its checklist
"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import select, update, not_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from study_planner.core.config import settings
from study_planner.core.exceptions import NotFoundError, InvalidReferenceError
from study_planner.models import ChecklistTemplate, LessonPlan, LessonChecklistItem, Subject

logger = logging.getLogger(__name__)


class ChecklistLessonService:
    """Service for lesson plans and their lesson-scoped checklists"""

    def _lesson_query(self):
        return select(LessonPlan).options(
            selectinload(LessonPlan.subject),
            selectinload(LessonPlan.checklist),
        ).execution_options(populate_existing=True)

    async def _ensure_subject_exists(self, db: AsyncSession, subject_id: int) -> None:
        result = await db.execute(
            select(Subject.id).where(Subject.id == subject_id)
        )
        if result.scalar_one_or_none() is None:
            logger.warning(f"Rejected lesson write: subject {subject_id} does not exist")
            raise InvalidReferenceError(f"Subject with id {subject_id} not found")

    async def get_lesson(self, db: AsyncSession, lesson_id: int) -> LessonPlan:
        """
        Load a lesson with its subject and ordered checklist.
        Always re-reads the row so flags written with bulk UPDATEs are visible.

        Raises:
            NotFoundError: If the lesson does not exist
        """
        result = await db.execute(
            self._lesson_query().where(LessonPlan.id == lesson_id)
        )
        lesson = result.scalar_one_or_none()

        if not lesson:
            raise NotFoundError(f"Lesson with id {lesson_id} not found")

        return lesson

    async def list_lessons(self, db: AsyncSession) -> List[LessonPlan]:
        """All lessons, earliest planned date first"""
        result = await db.execute(
            self._lesson_query().order_by(LessonPlan.planned_date, LessonPlan.id)
        )
        return list(result.scalars().all())

    async def list_upcoming_lessons(
        self,
        db: AsyncSession,
        today: date,
        limit: Optional[int] = None
    ) -> List[LessonPlan]:
        """Next incomplete lessons planned for today or later"""
        result = await db.execute(
            self._lesson_query()
            .where(
                LessonPlan.planned_date >= today,
                LessonPlan.is_completed.is_(False)
            )
            .order_by(LessonPlan.planned_date, LessonPlan.id)
            .limit(limit or settings.UPCOMING_LESSONS_LIMIT)
        )
        return list(result.scalars().all())

    async def create_lesson(
        self,
        db: AsyncSession,
        title: str,
        subject_id: int,
        planned_date: date,
        content: Optional[str] = None,
        template_id: Optional[int] = None
    ) -> LessonPlan:
        """
        Create a lesson plan, copying the template's items into its checklist.

        The lesson and its checklist items are written in a single commit.
        An unknown template_id is not an error: the lesson simply gets an
        empty checklist.

        Args:
            db: Database session
            title: Lesson title
            subject_id: Subject the lesson belongs to
            planned_date: Calendar day the lesson is planned for
            content: Optional free-text notes
            template_id: Optional checklist template to copy

        Returns:
            Created LessonPlan with subject and checklist loaded

        Raises:
            InvalidReferenceError: If the subject does not exist
        """
        await self._ensure_subject_exists(db, subject_id)

        checklist: List[LessonChecklistItem] = []
        if template_id is not None:
            template_result = await db.execute(
                select(ChecklistTemplate)
                .where(ChecklistTemplate.id == template_id)
                .options(selectinload(ChecklistTemplate.items))
            )
            template = template_result.scalar_one_or_none()

            if template:
                checklist = [
                    LessonChecklistItem(
                        text=item.text,
                        order=item.order,
                        is_completed=False,
                    )
                    for item in template.items
                ]
            else:
                logger.info(f"Template {template_id} not found, creating lesson without checklist")

        lesson = LessonPlan(
            title=title,
            subject_id=subject_id,
            content=content,
            planned_date=planned_date,
            is_completed=False,
            checklist=checklist,
        )

        db.add(lesson)
        await db.commit()

        logger.info(f"Created lesson {lesson.id} '{title}' with {len(checklist)} checklist items")
        return await self.get_lesson(db, lesson.id)

    async def update_lesson(
        self,
        db: AsyncSession,
        lesson_id: int,
        title: str,
        subject_id: int,
        planned_date: date,
        content: Optional[str] = None
    ) -> LessonPlan:
        """Edit or reschedule a lesson. The checklist is left untouched."""
        lesson = await self.get_lesson(db, lesson_id)
        await self._ensure_subject_exists(db, subject_id)

        lesson.title = title
        lesson.subject_id = subject_id
        lesson.content = content
        lesson.planned_date = planned_date

        await db.commit()

        logger.info(f"Updated lesson {lesson_id} (planned for {planned_date})")
        return await self.get_lesson(db, lesson_id)

    async def delete_lesson(self, db: AsyncSession, lesson_id: int) -> None:
        """Delete a lesson together with its checklist items"""
        result = await db.execute(
            select(LessonPlan).where(LessonPlan.id == lesson_id)
        )
        lesson = result.scalar_one_or_none()

        if not lesson:
            raise NotFoundError(f"Lesson with id {lesson_id} not found")

        await db.delete(lesson)
        await db.commit()
        logger.info(f"Deleted lesson {lesson_id}")

    async def toggle_checklist_item(self, db: AsyncSession, item_id: int) -> LessonChecklistItem:
        """
        Flip a checklist item and recompute its lesson's completion flag.

        Flip, sibling check and lesson write run in one transaction that first
        locks the parent lesson row, so concurrent toggles on the same lesson
        are applied one after the other and the flag always matches the
        checklist. On failure nothing is written.

        Returns:
            The toggled item (post-toggle state)

        Raises:
            NotFoundError: If the item does not exist
        """
        result = await db.execute(
            select(LessonChecklistItem).where(LessonChecklistItem.id == item_id)
        )
        item = result.scalar_one_or_none()

        if not item:
            raise NotFoundError("Item not found")

        lesson_id = item.lesson_id

        try:
            # Row lock on the parent lesson (no-op on SQLite, which locks the whole database on write)
            await db.execute(
                select(LessonPlan.id)
                .where(LessonPlan.id == lesson_id)
                .with_for_update()
            )

            flipped = await db.execute(
                update(LessonChecklistItem)
                .where(LessonChecklistItem.id == item_id)
                .values(is_completed=not_(LessonChecklistItem.is_completed))
                .execution_options(synchronize_session=False)
            )
            if flipped.rowcount == 0:
                # Removed with its lesson after the first read
                raise NotFoundError("Item not found")

            incomplete_items = (
                select(LessonChecklistItem.id)
                .where(
                    LessonChecklistItem.lesson_id == lesson_id,
                    LessonChecklistItem.is_completed.is_(False)
                )
            )
            await db.execute(
                update(LessonPlan)
                .where(LessonPlan.id == lesson_id)
                .values(is_completed=~incomplete_items.exists())
                .execution_options(synchronize_session=False)
            )

            await db.commit()
        except NotFoundError:
            await db.rollback()
            logger.warning(f"Checklist item {item_id} disappeared before it could be toggled")
            raise
        except Exception:
            await db.rollback()
            logger.error(f"Failed to toggle checklist item {item_id}", exc_info=True)
            raise

        result = await db.execute(
            select(LessonChecklistItem)
            .where(LessonChecklistItem.id == item_id)
            .execution_options(populate_existing=True)
        )
        item = result.scalar_one_or_none()
        if not item:
            raise NotFoundError("Item not found")

        logger.info(f"Toggled checklist item {item_id} of lesson {lesson_id} -> {item.is_completed}")
        return item

    async def set_lesson_completion(
        self,
        db: AsyncSession,
        lesson_id: int,
        is_completed: bool
    ) -> LessonPlan:
        """
        Manually set a lesson's completion flag.

        Overrides whatever the checklist says; the next checklist toggle
        recomputes the flag from the items again.
        """
        lesson = await self.get_lesson(db, lesson_id)
        lesson.is_completed = is_completed

        await db.commit()

        logger.info(f"Lesson {lesson_id} completion manually set to {is_completed}")
        return await self.get_lesson(db, lesson_id)


# Singleton instance
_lesson_service: Optional[ChecklistLessonService] = None


def get_lesson_service() -> ChecklistLessonService:
    """Get or create the lesson service singleton"""
    global _lesson_service
    if _lesson_service is None:
        _lesson_service = ChecklistLessonService()
    return _lesson_service
