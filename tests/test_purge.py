from fastapi.testclient import TestClient
from app.main import app
from app.db import SessionLocal
from app.models import ExerciseSet
from app.repositories.workout_repo import WorkoutRepository
from sqlalchemy import select, func
import logging
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"

def auth_headers():
    name = f"u_{uuid.uuid4().hex[:10]}"
    client.post("/api/auth/sign-up", json={"username": name, "password": PWD})
    tok = client.post("/api/auth/sign-in", json={"username": name, "password": PWD}).json()["token"]
    return {"Authorization": f"Bearer {tok}"}

def workout(h, exercise_id, complete=False):
    wid = client.post("/api/new-workout", headers=h, json={}).json()["workoutId"]
    client.post("/api/workout/new-exercises", headers=h, json={"workoutId": wid, "exerciseIds": [exercise_id]})
    if complete:
        client.patch(f"/api/workout/{wid}/completed", headers=h, json={"workoutName": "done"})
    return wid

def set_count(wid):
    with SessionLocal() as db:
        return db.execute(select(func.count()).select_from(ExerciseSet).where(ExerciseSet.workout_id == wid)).scalar_one()

def test_purge_only_touches_callers_unfinished_workouts(exercises):
    bench = exercises["Bench Press"]
    me, other = auth_headers(), auth_headers()
    abandoned_1 = workout(me, bench)
    abandoned_2 = workout(me, bench)
    finished = workout(me, bench, complete=True)
    theirs = workout(other, bench)

    r = client.delete("/api/user/empty-workouts", headers=me)
    assert r.status_code == 204

    with SessionLocal() as db:
        repo = WorkoutRepository(db)
        assert repo.get(abandoned_1) is None
        assert repo.get(abandoned_2) is None
        assert repo.get(finished) is not None
        assert repo.get(theirs) is not None
    assert set_count(abandoned_1) == 0
    assert set_count(abandoned_2) == 0
    assert set_count(finished) == 1
    assert set_count(theirs) == 1

    done = client.get("/api/user/all-workouts", headers=me).json()
    assert [w["workoutId"] for w in done] == [finished]

def test_purge_with_nothing_to_delete():
    h = auth_headers()
    assert client.delete("/api/user/empty-workouts", headers=h).status_code == 204

def test_purge_count_is_logged(caplog):
    h = auth_headers()
    for _ in range(2):
        client.post("/api/new-workout", headers=h, json={})
    with caplog.at_level(logging.INFO, logger="app"):
        assert client.delete("/api/user/empty-workouts", headers=h).status_code == 204
    assert "purged 2 unfinished workouts" in caplog.text

def test_app_loggers_have_their_own_handler():
    # uvicorn's logging config leaves the root logger without handlers
    app_log = logging.getLogger("app")
    assert app_log.handlers
    assert logging.getLogger("app.routers.users").getEffectiveLevel() <= logging.INFO
