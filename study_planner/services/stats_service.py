"""
Statistics Service
Aggregates study sessions, exam results and lesson plans for the dashboard
and analytics pages
"""
from datetime import date
from typing import Dict, Any, List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from study_planner.models import LessonPlan, StudySession, ExamResult, Subject


def round_hours(hours: float) -> float:
    return round(hours * 10) / 10


class StatsService:
    """Read-only aggregations over the planner data"""

    async def summary(self, db: AsyncSession) -> Dict[str, Any]:
        """
        Total logged sessions, total hours studied (one decimal) and the
        mean raw exam score (0 when no exams are recorded).
        """
        sessions_result = await db.execute(
            select(StudySession.start_time, StudySession.end_time)
        )
        sessions = sessions_result.all()

        # Durations are summed in Python so the query works the same on SQLite and PostgreSQL
        total_hours = sum(
            (end_time - start_time).total_seconds() / 3600
            for start_time, end_time in sessions
        )

        average_result = await db.execute(select(func.avg(ExamResult.score)))
        average_score = average_result.scalar()

        return {
            "total_sessions": len(sessions),
            "total_hours": round_hours(total_hours),
            "average_score": float(average_score or 0),
        }

    async def progress(self, db: AsyncSession, today: date) -> Dict[str, Any]:
        """Count incomplete lessons whose planned date has passed"""
        result = await db.execute(
            select(func.count(LessonPlan.id)).where(
                LessonPlan.planned_date < today,
                LessonPlan.is_completed.is_(False)
            )
        )
        return {"overdue_lessons": result.scalar_one()}

    async def subject_breakdown(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """
        Per-subject study hours, exam performance and lesson completion.

        average_percentage is the mean of score / max_score * 100, rounded to
        one decimal, or None for subjects without exams.
        """
        result = await db.execute(
            select(Subject)
            .options(
                selectinload(Subject.study_sessions),
                selectinload(Subject.exam_results),
                selectinload(Subject.lesson_plans),
            )
            .order_by(Subject.name)
            .execution_options(populate_existing=True)
        )
        subjects = result.scalars().all()

        breakdown = []
        for subject in subjects:
            hours = sum(s.duration_hours for s in subject.study_sessions)

            average_percentage: Optional[float] = None
            if subject.exam_results:
                percentages = [exam.percentage for exam in subject.exam_results]
                average_percentage = round(sum(percentages) / len(percentages), 1)

            breakdown.append({
                "subject_id": subject.id,
                "subject_name": subject.name,
                "color": subject.color,
                "total_hours": round_hours(hours),
                "exam_count": len(subject.exam_results),
                "average_percentage": average_percentage,
                "lesson_count": len(subject.lesson_plans),
                "completed_lessons": sum(1 for lesson in subject.lesson_plans if lesson.is_completed),
            })

        return breakdown


# Singleton instance
_stats_service: Optional[StatsService] = None


def get_stats_service() -> StatsService:
    """Get or create the stats service singleton"""
    global _stats_service
    if _stats_service is None:
        _stats_service = StatsService()
    return _stats_service
