"""
PyTest configuration and fixtures for Study Planner backend tests
"""
from datetime import date

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from study_planner.main import app
from study_planner.db.session import get_db, enable_sqlite_foreign_keys
from study_planner.models import Base, Course, Subject
from study_planner.services.template_service import get_template_service


# Test database setup - Using async SQLite with aiosqlite
SQLALCHEMY_TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def engine():
    """
    Fresh in-memory database per test, with foreign keys enforced.
    """
    test_engine = enable_sqlite_foreign_keys(
        create_async_engine(
            SQLALCHEMY_TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(engine):
    """
    Async session bound to the per-test database.
    """
    TestingSessionLocal = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with TestingSessionLocal() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session):
    """
    HTTP client against the app with the database dependency overridden.
    """
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def course(db_session):
    """
    Create a test course in the database.
    """
    course = Course(name="Computer Science", description="BSc programme")
    db_session.add(course)
    await db_session.commit()
    await db_session.refresh(course)
    return course


@pytest_asyncio.fixture
async def subject(db_session, course):
    """
    Create a test subject in the database.
    """
    subject = Subject(name="Algorithms", color="#ff0000", course_id=course.id)
    db_session.add(subject)
    await db_session.commit()
    await db_session.refresh(subject)
    return subject


@pytest_asyncio.fixture
async def basics_template(db_session):
    """
    Three-step template: Read, Summarize, Quiz.
    """
    return await get_template_service().create_template(
        db_session,
        name="Basics",
        items=["Read", "Summarize", "Quiz"],
    )


@pytest.fixture
def lesson_payload(subject):
    """
    Minimal body for POST /lessons.
    """
    return {
        "title": "Sorting",
        "subject_id": subject.id,
        "content": "Merge sort and quicksort",
        "planned_date": date(2026, 3, 1).isoformat(),
    }
