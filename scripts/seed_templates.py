"""
Seed database with default checklist templates

Usage:
    python scripts/seed_templates.py

Templates that already exist (matched by name) are left untouched, so the
script can be run repeatedly.
"""
import asyncio
import sys
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from study_planner.db.session import AsyncSessionLocal
from study_planner.models import ChecklistTemplate
from study_planner.services.template_service import get_template_service


DEFAULT_TEMPLATES = [
    {
        "name": "Basics",
        "description": "First pass over new material",
        "items": ["Read", "Summarize", "Quiz"],
    },
    {
        "name": "Deep Dive",
        "description": "Working through a hard topic",
        "items": [
            "Skim the chapter",
            "Take detailed notes",
            "Work through examples",
            "Solve practice problems",
            "Explain it in your own words",
        ],
    },
    {
        "name": "Exam Review",
        "description": "Revision before an exam",
        "items": [
            "Review notes",
            "Redo marked exercises",
            "Write a past paper under time",
            "List weak spots",
        ],
    },
]


async def seed_templates(db: AsyncSession) -> int:
    """Create missing default templates, returns how many were created"""
    print("\n🌱 Seeding checklist templates...")

    service = get_template_service()
    created = 0
    for template_data in DEFAULT_TEMPLATES:
        result = await db.execute(
            select(ChecklistTemplate.id).where(ChecklistTemplate.name == template_data["name"])
        )
        if result.scalar_one_or_none() is not None:
            print(f"  ⏭️  Template '{template_data['name']}' already exists")
            continue

        await service.create_template(
            db,
            name=template_data["name"],
            description=template_data["description"],
            items=template_data["items"],
        )
        created += 1
        print(f"  ✅ Created template: {template_data['name']} ({len(template_data['items'])} items)")

    return created


async def main():
    """Main seed function"""
    print("\n" + "=" * 60)
    print("🌱 SEEDING DATABASE: Study Planner")
    print("=" * 60)

    async with AsyncSessionLocal() as db:
        try:
            created = await seed_templates(db)

            print("\n" + "=" * 60)
            print("✅ DATABASE SEEDING COMPLETED!")
            print("=" * 60)
            print(f"  • {created} checklist templates created")
            print(f"  • {len(DEFAULT_TEMPLATES) - created} already present")

        except Exception as e:
            print(f"\n❌ ERROR: {e}")
            await db.rollback()
            sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
