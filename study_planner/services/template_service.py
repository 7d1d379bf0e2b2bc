"""
Checklist Template Service
Manages reusable checklist templates and their ordered items
"""
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from study_planner.core.exceptions import NotFoundError
from study_planner.models import ChecklistTemplate, ChecklistTemplateItem

logger = logging.getLogger(__name__)


def build_items(texts: List[str]) -> List[ChecklistTemplateItem]:
    """Turn plain texts into template items; list position becomes the order"""
    return [
        ChecklistTemplateItem(text=text, order=index)
        for index, text in enumerate(texts)
    ]


class TemplateService:
    """Service for checklist templates"""

    async def get_template(self, db: AsyncSession, template_id: int) -> ChecklistTemplate:
        """
        Raises:
            NotFoundError: If the template does not exist
        """
        result = await db.execute(
            select(ChecklistTemplate)
            .where(ChecklistTemplate.id == template_id)
            .options(selectinload(ChecklistTemplate.items))
            .execution_options(populate_existing=True)
        )
        template = result.scalar_one_or_none()

        if not template:
            raise NotFoundError(f"Template with id {template_id} not found")

        return template

    async def list_templates(self, db: AsyncSession) -> List[ChecklistTemplate]:
        result = await db.execute(
            select(ChecklistTemplate)
            .options(selectinload(ChecklistTemplate.items))
            .order_by(ChecklistTemplate.name, ChecklistTemplate.id)
        )
        return list(result.scalars().all())

    async def create_template(
        self,
        db: AsyncSession,
        name: str,
        items: List[str],
        description: Optional[str] = None
    ) -> ChecklistTemplate:
        """Create a template with its items in one commit"""
        template = ChecklistTemplate(
            name=name,
            description=description,
            items=build_items(items),
        )

        db.add(template)
        await db.commit()

        logger.info(f"Created template {template.id} '{name}' with {len(items)} items")
        return await self.get_template(db, template.id)

    async def update_template(
        self,
        db: AsyncSession,
        template_id: int,
        name: str,
        items: List[str],
        description: Optional[str] = None
    ) -> ChecklistTemplate:
        """
        Replace a template's name, description and full item list.

        Old items are deleted and new ones numbered from zero. Lesson
        checklists copied from this template earlier stay as they are.
        """
        template = await self.get_template(db, template_id)

        template.name = name
        template.description = description
        template.items = build_items(items)

        await db.commit()

        logger.info(f"Replaced template {template_id}: now {len(items)} items")
        return await self.get_template(db, template_id)

    async def delete_template(self, db: AsyncSession, template_id: int) -> None:
        template = await self.get_template(db, template_id)

        await db.delete(template)
        await db.commit()
        logger.info(f"Deleted template {template_id}")


# Singleton instance
_template_service: Optional[TemplateService] = None


def get_template_service() -> TemplateService:
    """Get or create the template service singleton"""
    global _template_service
    if _template_service is None:
        _template_service = TemplateService()
    return _template_service
