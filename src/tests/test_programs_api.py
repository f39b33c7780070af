"""Tests for the program endpoints and the program store."""
import uuid

import pytest
from sqlalchemy.exc import OperationalError

from db.client_utils import create_client
from db.models import WorkoutProgram
from db.program_utils import create_workout_program, list_client_programs


@pytest.fixture
def client_id(api_client, client_payload):
    return api_client.post("/api/clients", json=client_payload).json()["id"]


def _store_program(db_session, client_id, structure):
    program = WorkoutProgram(
        client_id=uuid.UUID(client_id),
        program_name="Legacy program",
        duration_weeks=8,
        split_type="Full Body",
        program_structure=structure,
    )
    db_session.add(program)
    db_session.commit()
    return str(program.id)


def test_generate_program_for_strength_client(api_client, client_id):
    response = api_client.post(f"/api/clients/{client_id}/generate-program")

    assert response.status_code == 201
    data = response.json()
    assert data["client_id"] == client_id
    assert data["program_name"] == "John Doe - Strength (8w)"
    assert data["split_type"] == "Upper/Lower"
    assert data["duration_weeks"] == 8
    assert data["created_at"]

    phases = data["program_structure"]["phases"]
    assert len(phases) == 1
    assert len(phases[0]["weeks"]) == 8
    assert all(len(week["workoutDays"]) == 4 for week in phases[0]["weeks"])


def test_generate_program_for_unknown_client(api_client):
    response = api_client.post(f"/api/clients/{uuid.uuid4()}/generate-program")

    assert response.status_code == 404
    assert response.json()["detail"] == "Client not found"


def test_generate_program_clamps_stored_frequency(api_client, db_session, client_payload):
    client = create_client(db_session, **dict(client_payload, training_frequency=9, goals="Hypertrophy"))

    response = api_client.post(f"/api/clients/{client.id}/generate-program")

    assert response.status_code == 201
    data = response.json()
    assert data["split_type"] == "Push/Pull/Legs/Upper/Lower"
    assert all(len(week["workoutDays"]) == 6 for week in data["program_structure"]["phases"][0]["weeks"])


def test_store_failure_returns_retryable_error(api_client, client_id, monkeypatch):
    def failing_store(*args, **kwargs):
        raise OperationalError("INSERT INTO workout_programs", {}, Exception("database is locked"))

    monkeypatch.setattr("api.routers.programs.create_workout_program", failing_store)

    response = api_client.post(f"/api/clients/{client_id}/generate-program")

    assert response.status_code == 503
    assert response.headers["Retry-After"] == "5"
    assert api_client.get(f"/api/clients/{client_id}/programs").json() == []


def test_failed_commit_leaves_nothing_behind(db_session, client_payload, monkeypatch):
    client = create_client(db_session, **client_payload)

    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("connection lost"))

    monkeypatch.setattr(db_session, "commit", failing_commit)

    with pytest.raises(OperationalError):
        create_workout_program(
            db_session,
            client_id=client.id,
            program_name="Doomed",
            duration_weeks=8,
            split_type="Full Body",
            program_structure={"phases": []},
        )

    monkeypatch.undo()
    assert list_client_programs(db_session, client.id) == []


def test_list_client_programs(api_client, client_id):
    api_client.post(f"/api/clients/{client_id}/generate-program")
    api_client.post(f"/api/clients/{client_id}/generate-program")

    response = api_client.get(f"/api/clients/{client_id}/programs")

    assert response.status_code == 200
    programs = response.json()
    assert len(programs) == 2
    assert set(programs[0]) == {"id", "program_name", "duration_weeks", "split_type", "created_at"}


def test_list_programs_for_unknown_client(api_client):
    response = api_client.get(f"/api/clients/{uuid.uuid4()}/programs")

    assert response.status_code == 404


def test_get_program(api_client, client_id):
    created = api_client.post(f"/api/clients/{client_id}/generate-program").json()

    response = api_client.get(f"/api/programs/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_program(api_client):
    response = api_client.get(f"/api/programs/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["detail"] == "Program not found"


def test_program_view(api_client, client_id):
    program_id = api_client.post(f"/api/clients/{client_id}/generate-program").json()["id"]

    response = api_client.get(f"/api/programs/{program_id}/view")

    assert response.status_code == 200
    data = response.json()
    assert data["program_name"] == "John Doe - Strength (8w)"
    view = data["view"]
    assert view["kind"] == "structured"
    assert len(view["phases"][0]["weeks"]) == 8
    assert view["phases"][0]["weeks"][0]["days"][0]["exercises"][0]["reps"] == "8-10"


@pytest.mark.parametrize(
    "structure, kind",
    [
        ({}, "placeholder"),
        ({"phases": []}, "placeholder"),
        ({"phases": "not-an-array"}, "raw"),
        ({"sessions": [{"day": "Monday", "workout": [{"exercise": "Squat"}]}]}, "structured"),
    ],
)
def test_program_view_of_legacy_records(api_client, db_session, client_id, structure, kind):
    program_id = _store_program(db_session, client_id, structure)

    response = api_client.get(f"/api/programs/{program_id}/view")

    assert response.status_code == 200
    assert response.json()["view"]["kind"] == kind


def test_view_of_unknown_program(api_client):
    response = api_client.get(f"/api/programs/{uuid.uuid4()}/view")

    assert response.status_code == 404


def test_delete_program(api_client, client_id):
    program_id = api_client.post(f"/api/clients/{client_id}/generate-program").json()["id"]

    response = api_client.delete(f"/api/programs/{program_id}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Program deleted successfully"}
    assert api_client.get(f"/api/programs/{program_id}").status_code == 404
    assert api_client.delete(f"/api/programs/{program_id}").status_code == 404


def test_health_and_root(api_client):
    assert api_client.get("/api/health").json()["status"] == "healthy"
    assert api_client.get("/").json()["docs"] == "/docs"
