"""
Study session and exam result endpoint tests
"""
import pytest


def _session_body(subject_id, **overrides):
    body = {
        "subject_id": subject_id,
        "topic": "Recursion",
        "start_time": "2026-01-10T10:00:00Z",
        "end_time": "2026-01-10T11:30:00Z",
        "is_review": False,
    }
    body.update(overrides)
    return body


@pytest.mark.tracking
class TestStudySessions:
    """Logging and deleting study sessions"""

    @pytest.mark.asyncio
    async def test_create_session(self, client, subject):
        response = await client.post("/api/v1/sessions", json=_session_body(subject.id))

        assert response.status_code == 201
        data = response.json()
        assert data["topic"] == "Recursion"
        assert data["start_time"].startswith("2026-01-10T10:00:00")
        assert data["duration_hours"] == 1.5
        assert data["lesson_plan_id"] is None
        assert data["subject"]["name"] == "Algorithms"

    @pytest.mark.asyncio
    async def test_create_session_blank_lesson_is_null(self, client, subject):
        response = await client.post(
            "/api/v1/sessions",
            json=_session_body(subject.id, lesson_plan_id="")
        )

        assert response.status_code == 201
        assert response.json()["lesson_plan_id"] is None

    @pytest.mark.asyncio
    async def test_create_session_linked_to_lesson(self, client, subject, lesson_payload):
        lesson = await client.post("/api/v1/lessons", json=lesson_payload)

        response = await client.post(
            "/api/v1/sessions",
            json=_session_body(subject.id, lesson_plan_id=lesson.json()["id"], is_review=True)
        )

        assert response.status_code == 201
        data = response.json()
        assert data["lesson_plan_id"] == lesson.json()["id"]
        assert data["lesson_plan"]["title"] == "Sorting"
        assert data["is_review"] is True

    @pytest.mark.asyncio
    async def test_deleting_lesson_unlinks_session(self, client, subject, lesson_payload):
        lesson = await client.post("/api/v1/lessons", json=lesson_payload)
        await client.post(
            "/api/v1/sessions",
            json=_session_body(subject.id, lesson_plan_id=lesson.json()["id"])
        )

        await client.delete(f"/api/v1/lessons/{lesson.json()['id']}")

        sessions = (await client.get("/api/v1/sessions")).json()
        assert len(sessions) == 1
        assert sessions[0]["lesson_plan_id"] is None

    @pytest.mark.asyncio
    async def test_create_session_unknown_subject(self, client):
        response = await client.post("/api/v1/sessions", json=_session_body(999999))

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_session_unknown_lesson(self, client, subject):
        response = await client.post(
            "/api/v1/sessions",
            json=_session_body(subject.id, lesson_plan_id=999999)
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_session_end_before_start(self, client, subject):
        response = await client.post(
            "/api/v1/sessions",
            json=_session_body(subject.id, end_time="2026-01-10T09:00:00Z")
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_list_sessions_most_recent_first(self, client, subject):
        await client.post("/api/v1/sessions", json=_session_body(subject.id, topic="Older"))
        await client.post(
            "/api/v1/sessions",
            json=_session_body(
                subject.id,
                topic="Newer",
                start_time="2026-01-12T08:00:00Z",
                end_time="2026-01-12T09:00:00Z",
            )
        )

        response = await client.get("/api/v1/sessions")

        assert [s["topic"] for s in response.json()] == ["Newer", "Older"]

    @pytest.mark.asyncio
    async def test_delete_session(self, client, subject):
        created = await client.post("/api/v1/sessions", json=_session_body(subject.id))

        response = await client.delete(f"/api/v1/sessions/{created.json()['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert (await client.get("/api/v1/sessions")).json() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_session(self, client):
        response = await client.delete("/api/v1/sessions/999999")

        assert response.status_code == 404


@pytest.mark.tracking
class TestExamResults:
    """Recording and deleting exam results"""

    @pytest.mark.asyncio
    async def test_create_exam(self, client, subject):
        response = await client.post(
            "/api/v1/exams",
            json={"subject_id": subject.id, "score": 42, "max_score": 50, "date": "2026-01-20"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["score"] == 42
        assert data["max_score"] == 50
        assert data["date"] == "2026-01-20"
        assert data["percentage"] == 84.0
        assert data["subject"]["id"] == subject.id

    @pytest.mark.asyncio
    async def test_create_exam_timestamp_date_is_utc_day(self, client, subject):
        response = await client.post(
            "/api/v1/exams",
            json={"subject_id": subject.id, "score": 7, "max_score": 10, "date": "2026-01-20T01:00:00+02:00"}
        )

        assert response.status_code == 201
        assert response.json()["date"] == "2026-01-19"

    @pytest.mark.asyncio
    async def test_create_exam_unknown_subject(self, client):
        response = await client.post(
            "/api/v1/exams",
            json={"subject_id": 999999, "score": 10, "max_score": 20, "date": "2026-01-20"}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_exam_rejects_zero_max_score(self, client, subject):
        response = await client.post(
            "/api/v1/exams",
            json={"subject_id": subject.id, "score": 10, "max_score": 0, "date": "2026-01-20"}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_delete_exam(self, client, subject):
        created = await client.post(
            "/api/v1/exams",
            json={"subject_id": subject.id, "score": 10, "max_score": 20, "date": "2026-01-20"}
        )

        response = await client.delete(f"/api/v1/exams/{created.json()['id']}")

        assert response.status_code == 200
        assert (await client.get("/api/v1/exams")).json() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_exam(self, client):
        response = await client.delete("/api/v1/exams/999999")

        assert response.status_code == 404
