"""
Pydantic schemas for checklist template endpoints
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class TemplateItemResponse(BaseModel):
    """Response schema for a template item"""
    id: int
    template_id: int
    text: str
    order: int

    class Config:
        from_attributes = True


class TemplateCreate(BaseModel):
    """
    Schema for creating a template.
    items are plain texts; their position becomes the item order.
    """
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    items: List[str] = Field(..., description="Ordered checklist step texts")


class TemplateUpdate(TemplateCreate):
    """Schema for replacing a template (name, description and full item list)"""
    pass


class TemplateResponse(BaseModel):
    """Response schema for templates"""
    id: int
    name: str
    description: Optional[str] = None
    items: List[TemplateItemResponse] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
