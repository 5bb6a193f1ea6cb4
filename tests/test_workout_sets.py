from fastapi.testclient import TestClient
from app.main import app
from app.db import SessionLocal
from app.repositories.set_repo import SetRepository
from app.repositories.workout_repo import WorkoutRepository
from app.models import ExerciseSet
from sqlalchemy import select
import uuid

client = TestClient(app)
PWD = "StrongPassw0rd!"

def auth_headers():
    name = f"u_{uuid.uuid4().hex[:10]}"
    client.post("/api/auth/sign-up", json={"username": name, "password": PWD})
    tok = client.post("/api/auth/sign-in", json={"username": name, "password": PWD}).json()["token"]
    return {"Authorization": f"Bearer {tok}"}

def workout_with(h, *exercise_ids):
    wid = client.post("/api/new-workout", headers=h, json={"workoutName": "w"}).json()["workoutId"]
    if exercise_ids:
        r = client.post("/api/workout/new-exercises", headers=h,
                        json={"workoutId": wid, "exerciseIds": list(exercise_ids)})
        assert r.status_code == 201
    return wid

def patch_sets(h, wid, exercise_id, sets, **extra):
    return client.patch(f"/api/workout/{wid}", headers=h,
                        json={"exercises": [{"exerciseId": exercise_id, "sets": sets}], **extra})

def rows(wid, exercise_id, set_order=None):
    with SessionLocal() as db:
        found = db.execute(
            select(ExerciseSet)
            .where(ExerciseSet.workout_id == wid, ExerciseSet.exercise_id == exercise_id)
            .order_by(ExerciseSet.set_order, ExerciseSet.set_id)
        ).scalars().all()
        return [(s.set_order, s.reps, s.weight) for s in found if set_order in (None, s.set_order)]

def test_first_set_updated_in_place(exercises):
    h = auth_headers()
    bench = exercises["Bench Press"]
    wid = workout_with(h, bench)
    assert len(rows(wid, bench, 1)) == 1

    r = patch_sets(h, wid, bench, [{"setOrder": 1, "reps": 10, "weight": 50}])
    assert r.status_code == 204
    assert rows(wid, bench, 1) == [(1, 10, 50.0)]

    patch_sets(h, wid, bench, [{"setOrder": 1, "reps": 8, "weight": 55.5}])
    assert rows(wid, bench, 1) == [(1, 8, 55.5)]

def test_later_sets_always_append(exercises):
    h = auth_headers()
    bench = exercises["Bench Press"]
    wid = workout_with(h, bench)
    body = [{"setOrder": 2, "reps": 6, "weight": 60}]
    assert patch_sets(h, wid, bench, body).status_code == 204
    assert patch_sets(h, wid, bench, body).status_code == 204
    assert rows(wid, bench, 2) == [(2, 6, 60.0), (2, 6, 60.0)]
    assert rows(wid, bench, 1) == [(1, None, None)]

def test_missing_first_set_is_inserted(exercises):
    h = auth_headers()
    squat = exercises["Back Squat"]
    wid = workout_with(h)
    r = patch_sets(h, wid, squat, [{"setOrder": 1, "reps": 5, "weight": 100}])
    assert r.status_code == 204
    assert rows(wid, squat) == [(1, 5, 100.0)]

def test_workout_name_updated_with_sets(exercises):
    h = auth_headers()
    bench = exercises["Bench Press"]
    wid = workout_with(h, bench)
    patch_sets(h, wid, bench, [{"setOrder": 1, "reps": 1, "weight": 100}], workoutName="Max out")
    with SessionLocal() as db:
        assert WorkoutRepository(db).get(wid).workout_name == "Max out"

def test_missing_exercises_rejected(exercises):
    h = auth_headers()
    wid = workout_with(h)
    r = client.patch(f"/api/workout/{wid}", headers=h, json={"workoutName": "x"})
    assert r.status_code == 400

def test_bad_set_values_rejected(exercises):
    h = auth_headers()
    bench = exercises["Bench Press"]
    wid = workout_with(h, bench)
    assert patch_sets(h, wid, bench, [{"setOrder": 0, "reps": 1, "weight": 1}]).status_code == 400
    assert patch_sets(h, wid, bench, [{"setOrder": 2, "reps": -1, "weight": 1}]).status_code == 400
    assert rows(wid, bench) == [(1, None, None)]

def test_partial_failure_keeps_earlier_writes(exercises):
    h = auth_headers()
    bench = exercises["Bench Press"]
    wid = workout_with(h, bench)
    r = client.patch(f"/api/workout/{wid}", headers=h, json={"exercises": [
        {"exerciseId": bench, "sets": [{"setOrder": 1, "reps": 5, "weight": 70}, {"setOrder": 2, "reps": 5, "weight": 72}]},
        {"exerciseId": 777777, "sets": [{"setOrder": 2, "reps": 1, "weight": 1}]},
    ]})
    assert r.status_code == 409
    assert rows(wid, bench) == [(1, 5, 70.0), (2, 5, 72.0)]

def test_duplicate_first_sets_updated_together(exercises):
    h = auth_headers()
    bench = exercises["Bench Press"]
    wid = workout_with(h, bench)
    with SessionLocal() as db:
        SetRepository(db).add_set(wid, bench, set_order=1, reps=None, weight=None)
    assert len(rows(wid, bench, 1)) == 2

    assert patch_sets(h, wid, bench, [{"setOrder": 1, "reps": 4, "weight": 90}]).status_code == 204
    assert rows(wid, bench, 1) == [(1, 4, 90.0), (1, 4, 90.0)]

def test_weight_rounded_to_cents(exercises):
    h = auth_headers()
    bench = exercises["Bench Press"]
    wid = workout_with(h, bench)
    patch_sets(h, wid, bench, [
        {"setOrder": 1, "reps": 5, "weight": 82.555},
        {"setOrder": 2, "reps": 5, "weight": 100.004},
    ])
    assert rows(wid, bench) == [(1, 5, 82.56), (2, 5, 100.0)]

def test_weight_over_limit_rejected(exercises):
    h = auth_headers()
    bench = exercises["Bench Press"]
    wid = workout_with(h, bench)
    assert patch_sets(h, wid, bench, [{"setOrder": 2, "reps": 1, "weight": 10000.5}]).status_code == 400
    assert rows(wid, bench) == [(1, None, None)]

def test_out_of_range_integers_are_invalid_input(exercises):
    h = auth_headers()
    bench = exercises["Bench Press"]
    wid = workout_with(h, bench)
    too_big = 2**31

    for sets in (
        [{"setOrder": 2, "reps": too_big, "weight": 1}],
        [{"setOrder": too_big, "reps": 1, "weight": 1}],
        [{"setOrder": 2, "reps": 2**64, "weight": 1}],
    ):
        r = patch_sets(h, wid, bench, sets)
        assert r.status_code == 400, r.text
        assert r.json()["message"] == "Invalid input"
    assert patch_sets(h, wid, too_big, [{"setOrder": 2, "reps": 1, "weight": 1}]).status_code == 400

    r = client.post("/api/workout/new-exercises", headers=h, json={"workoutId": wid, "exerciseIds": [2**64]})
    assert r.status_code == 400
    r = client.post("/api/workout/new-exercises", headers=h, json={"workoutId": too_big, "exerciseIds": [bench]})
    assert r.status_code == 400
    assert client.get(f"/api/workout/{2**64}", headers=h).status_code == 400
    assert client.get(f"/api/workout/{too_big}", headers=h).status_code == 400
    assert client.delete(f"/api/workout/{wid}/exercise/{too_big}", headers=h).status_code == 400
    assert client.patch(f"/api/workout/{wid}/exercise/{bench}", headers=h,
                        json={"newExerciseId": too_big}).status_code == 400
    assert rows(wid, bench) == [(1, None, None)]

def test_largest_ids_are_accepted_and_not_found(exercises):
    h = auth_headers()
    assert client.get(f"/api/workout/{2**31 - 1}", headers=h).status_code == 404
