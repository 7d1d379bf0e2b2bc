"""
Initialize database - create all tables
Run this script to set up a local database from scratch (drops existing data)
"""
import asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from study_planner.core.config import settings
from study_planner.db.session import enable_sqlite_foreign_keys
from study_planner.models import Base


async def init_database():
    """Drop and recreate all database tables"""
    print("Connecting to database...")
    print(f"Database URL: {settings.DATABASE_URL[:50]}...")

    engine = enable_sqlite_foreign_keys(
        create_async_engine(
            settings.DATABASE_URL,
            echo=True,
        )
    )

    async with engine.begin() as conn:
        print("Dropping all tables...")
        await conn.run_sync(Base.metadata.drop_all)

        print("Creating all tables...")
        await conn.run_sync(Base.metadata.create_all)

    await engine.dispose()
    print("✅ Database initialized successfully!")
    print(f"Tables: {', '.join(sorted(Base.metadata.tables))}")

if __name__ == "__main__":
    asyncio.run(init_database())
