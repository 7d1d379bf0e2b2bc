"""
Lesson plan API endpoints
"""
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from study_planner.core.exceptions import NotFoundError, InvalidReferenceError
from study_planner.db.session import get_db
from study_planner.schemas.common import DeleteResponse
from study_planner.schemas.lesson import (
    LessonCreate,
    LessonUpdate,
    LessonCompletionUpdate,
    LessonResponse,
    ChecklistItemResponse,
)
from study_planner.services.lesson_service import get_lesson_service

router = APIRouter()
lesson_service = get_lesson_service()


@router.get("", response_model=List[LessonResponse])
async def list_lessons(
    db: AsyncSession = Depends(get_db)
):
    """
    Get all lesson plans ordered by planned date, with subject and checklist.
    """
    lessons = await lesson_service.list_lessons(db)
    return [LessonResponse.model_validate(lesson) for lesson in lessons]


@router.get("/upcoming", response_model=List[LessonResponse])
async def list_upcoming_lessons(
    db: AsyncSession = Depends(get_db)
):
    """
    Get the next incomplete lessons planned for today or later.
    """
    lessons = await lesson_service.list_upcoming_lessons(db, today=date.today())
    return [LessonResponse.model_validate(lesson) for lesson in lessons]


@router.post("", response_model=LessonResponse, status_code=status.HTTP_201_CREATED)
async def create_lesson(
    lesson_data: LessonCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a lesson plan.

    When template_id points to an existing template its items are copied
    into the lesson's checklist; an unknown template gives an empty checklist.
    """
    try:
        lesson = await lesson_service.create_lesson(
            db=db,
            title=lesson_data.title,
            subject_id=lesson_data.subject_id,
            content=lesson_data.content,
            planned_date=lesson_data.planned_date,
            template_id=lesson_data.template_id,
        )
        return LessonResponse.model_validate(lesson)

    except InvalidReferenceError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )


@router.put("/checklist-items/{item_id}/toggle", response_model=ChecklistItemResponse)
async def toggle_checklist_item(
    item_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Toggle a checklist item.

    The parent lesson is marked completed when every item is done and
    incomplete otherwise. Only the item is returned; re-fetch the lesson
    to read its new state.
    """
    try:
        item = await lesson_service.toggle_checklist_item(db, item_id)
        return ChecklistItemResponse.model_validate(item)

    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )


@router.get("/{lesson_id}", response_model=LessonResponse)
async def get_lesson(
    lesson_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Get a single lesson plan with subject and checklist.
    """
    try:
        lesson = await lesson_service.get_lesson(db, lesson_id)
        return LessonResponse.model_validate(lesson)

    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )


@router.put("/{lesson_id}/complete", response_model=LessonResponse)
async def set_lesson_completion(
    lesson_id: int,
    completion: LessonCompletionUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Manually mark a lesson as completed or not, regardless of its checklist.
    """
    try:
        lesson = await lesson_service.set_lesson_completion(db, lesson_id, completion.is_completed)
        return LessonResponse.model_validate(lesson)

    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )


@router.put("/{lesson_id}", response_model=LessonResponse)
async def update_lesson(
    lesson_id: int,
    lesson_data: LessonUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Edit a lesson plan. Also used by the calendar to move a lesson to another day.
    """
    try:
        lesson = await lesson_service.update_lesson(
            db=db,
            lesson_id=lesson_id,
            title=lesson_data.title,
            subject_id=lesson_data.subject_id,
            content=lesson_data.content,
            planned_date=lesson_data.planned_date,
        )
        return LessonResponse.model_validate(lesson)

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


@router.delete("/{lesson_id}", response_model=DeleteResponse)
async def delete_lesson(
    lesson_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a lesson plan and its checklist.
    """
    try:
        await lesson_service.delete_lesson(db, lesson_id)
        return DeleteResponse()

    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
