"""
Course and subject endpoint tests
"""
import pytest


@pytest.mark.asyncio
async def test_create_and_list_courses(client):
    response = await client.post(
        "/api/v1/courses",
        json={"name": "Test Course", "description": "Test desc"}
    )
    assert response.status_code == 201
    assert response.json()["name"] == "Test Course"
    assert response.json()["subjects"] == []

    courses = await client.get("/api/v1/courses")
    assert courses.status_code == 200
    assert [c["name"] for c in courses.json()] == ["Test Course"]


@pytest.mark.asyncio
async def test_create_course_requires_name(client):
    response = await client.post("/api/v1/courses", json={})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_course_lists_its_subjects(client, course, subject):
    courses = await client.get("/api/v1/courses")

    assert [s["name"] for s in courses.json()[0]["subjects"]] == ["Algorithms"]


@pytest.mark.asyncio
async def test_delete_course_keeps_subjects(client, course, subject):
    response = await client.delete(f"/api/v1/courses/{course.id}")
    assert response.status_code == 200
    assert response.json() == {"success": True}

    subjects = (await client.get("/api/v1/subjects")).json()
    assert subjects[0]["name"] == "Algorithms"
    assert subjects[0]["course_id"] is None


@pytest.mark.asyncio
async def test_delete_unknown_course(client):
    response = await client.delete("/api/v1/courses/999999")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_subject_with_default_color(client, course):
    response = await client.post(
        "/api/v1/subjects",
        json={"name": "Databases", "course_id": course.id}
    )

    assert response.status_code == 201
    data = response.json()
    assert data["color"] == "#4f46e5"
    assert data["course_id"] == course.id
    assert data["course"]["name"] == "Computer Science"
    assert data["lesson_plans"] == []


@pytest.mark.asyncio
async def test_create_subject_requires_course(client):
    response = await client.post("/api/v1/subjects", json={"name": "No Course Subject"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Course is mandatory"


@pytest.mark.asyncio
async def test_create_subject_unknown_course(client):
    response = await client.post(
        "/api/v1/subjects",
        json={"name": "Lost", "course_id": 999999}
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_subject_duplicate_name(client, course, subject):
    response = await client.post(
        "/api/v1/subjects",
        json={"name": "Algorithms", "course_id": course.id}
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_subject(client, course, subject):
    response = await client.put(
        f"/api/v1/subjects/{subject.id}",
        json={
            "name": "Advanced Algorithms",
            "description": "Updated",
            "color": "#00ff00",
            "course_id": course.id,
        }
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Advanced Algorithms"
    assert data["color"] == "#00ff00"
    assert data["course_id"] == course.id


@pytest.mark.asyncio
async def test_update_subject_blank_course(client, subject):
    """An empty course_id from the form counts as missing"""
    response = await client.put(
        f"/api/v1/subjects/{subject.id}",
        json={"name": "Algorithms", "course_id": ""}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Course is mandatory"


@pytest.mark.asyncio
async def test_update_unknown_subject(client, course):
    response = await client.put(
        "/api/v1/subjects/999999",
        json={"name": "X", "course_id": course.id}
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_subject_cascades(client, subject, lesson_payload, basics_template):
    lesson = await client.post(
        "/api/v1/lessons",
        json={**lesson_payload, "template_id": basics_template.id}
    )
    await client.post(
        "/api/v1/exams",
        json={"subject_id": subject.id, "score": 80, "max_score": 100, "date": "2026-01-20"}
    )

    response = await client.delete(f"/api/v1/subjects/{subject.id}")
    assert response.status_code == 200

    assert (await client.get(f"/api/v1/lessons/{lesson.json()['id']}")).status_code == 404
    assert (await client.get("/api/v1/exams")).json() == []


@pytest.mark.asyncio
async def test_delete_unknown_subject(client):
    response = await client.delete("/api/v1/subjects/999999")

    assert response.status_code == 404
