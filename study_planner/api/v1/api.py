"""
API v1 router
"""
from fastapi import APIRouter

from study_planner.api.v1.endpoints import (
    courses,
    subjects,
    sessions,
    templates,
    lessons,
    exams,
    stats,
)

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(courses.router, prefix="/courses", tags=["Courses"])
api_router.include_router(subjects.router, prefix="/subjects", tags=["Subjects"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["Study Sessions"])
api_router.include_router(templates.router, prefix="/templates", tags=["Checklist Templates"])
api_router.include_router(lessons.router, prefix="/lessons", tags=["Lesson Plans"])
api_router.include_router(exams.router, prefix="/exams", tags=["Exam Results"])
api_router.include_router(stats.router, prefix="/stats", tags=["Statistics"])


@api_router.get("/")
async def api_root():
    """API v1 root endpoint"""
    return {
        "message": "Study Planner API v1",
        "status": "active",
        "version": "1.0.0",
        "endpoints": {
            "courses": "/courses",
            "subjects": "/subjects",
            "sessions": "/sessions",
            "templates": "/templates",
            "lessons": "/lessons",
            "exams": "/exams",
            "stats": "/stats",
            "docs": "/docs",
            "health": "/health"
        }
    }
