"""
Checklist template models - reusable blueprints copied into lesson plans
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from study_planner.models.base import Base, TimestampMixin


class ChecklistTemplate(Base, TimestampMixin):
    """
    Named, ordered list of checklist steps.
    Editing or deleting a template never touches lesson checklists created from it.
    """
    __tablename__ = "checklist_templates"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Relationships
    items = relationship(
        "ChecklistTemplateItem",
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="ChecklistTemplateItem.order",
    )


class ChecklistTemplateItem(Base, TimestampMixin):
    """Single step of a template"""
    __tablename__ = "checklist_template_items"

    id = Column(Integer, primary_key=True, index=True)
    template_id = Column(Integer, ForeignKey("checklist_templates.id", ondelete="CASCADE"), nullable=False, index=True)

    text = Column(String(500), nullable=False)
    order = Column(Integer, nullable=False)  # Zero-based position in the template

    # Relationships
    template = relationship("ChecklistTemplate", back_populates="items")
