"""
Checklist template API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from study_planner.core.exceptions import NotFoundError
from study_planner.db.session import get_db
from study_planner.schemas.common import DeleteResponse
from study_planner.schemas.checklist import TemplateCreate, TemplateUpdate, TemplateResponse
from study_planner.services.template_service import get_template_service

router = APIRouter()
template_service = get_template_service()


@router.get("", response_model=List[TemplateResponse])
async def list_templates(
    db: AsyncSession = Depends(get_db)
):
    """
    Get all checklist templates with their items in order.
    """
    templates = await template_service.list_templates(db)
    return [TemplateResponse.model_validate(t) for t in templates]


@router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    template_data: TemplateCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a checklist template. Item order follows the submitted list.
    """
    template = await template_service.create_template(
        db=db,
        name=template_data.name,
        description=template_data.description,
        items=template_data.items,
    )
    return TemplateResponse.model_validate(template)


@router.put("/{template_id}", response_model=TemplateResponse)
async def update_template(
    template_id: int,
    template_data: TemplateUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Replace a template's name, description and items.
    Lessons already created from it keep their own checklist.
    """
    try:
        template = await template_service.update_template(
            db=db,
            template_id=template_id,
            name=template_data.name,
            description=template_data.description,
            items=template_data.items,
        )
        return TemplateResponse.model_validate(template)

    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )


@router.delete("/{template_id}", response_model=DeleteResponse)
async def delete_template(
    template_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a template and its items.
    """
    try:
        await template_service.delete_template(db, template_id)
        return DeleteResponse()

    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
