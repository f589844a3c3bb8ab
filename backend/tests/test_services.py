from datetime import datetime, timedelta, timezone
import itertools
import pytest

from liftlog.errors import PersistenceError
from liftlog.repositories import ExerciseRepository, SetRepository, WorkoutRepository
from liftlog.schemas import SetUpdate, WorkoutSet
from liftlog.services import build_services

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)

class Clock:
    def __init__(self, start=T0):
        self.now = start
    def __call__(self):
        return self.now
    def advance(self, **kw):
        self.now += timedelta(**kw)

@pytest.fixture
def clock():
    return Clock()

@pytest.fixture
def svc(db, clock):
    counter = itertools.count(1)
    return build_services(db, id_factory=lambda: f"id-{next(counter)}", clock=clock)

def test_create_set_is_persisted_blank(svc, db):
    ex = svc.exercises.create("Bench", "w1")
    s = svc.sets.create(ex.id)
    assert (s.reps, s.weight, s.one_rm) == (None, None, None)
    row = SetRepository(db).get(s.id)
    assert row is not None and row.exercise_id == ex.id

def test_update_recomputes_and_persists(svc, db):
    ex = svc.exercises.create("Squat", "w1")
    s = svc.sets.create(ex.id)
    updated = svc.sets.update(s, SetUpdate(reps=5, weight=100))
    assert updated.one_rm == pytest.approx(112.5)
    assert s.one_rm is None
    assert SetRepository(db).get(s.id).one_rm == pytest.approx(112.5)

def test_filter_complete_deletes_incomplete(svc, db):
    ex = svc.exercises.create("Row", "w1")
    done = svc.sets.update(svc.sets.create(ex.id), SetUpdate(reps=8, weight=40))
    blank = svc.sets.create(ex.id)
    zero = svc.sets.update(svc.sets.create(ex.id), SetUpdate(reps=0))
    kept = svc.sets.filter_complete([done, blank, zero])
    assert [s.id for s in kept] == [done.id]
    assert [r.id for r in SetRepository(db).list_by_exercise(ex.id)] == [done.id]

def test_filter_complete_swallows_delete_failures(svc, monkeypatch):
    def fail(set_id):
        raise PersistenceError("delete exercise_sets", set_id)
    monkeypatch.setattr(svc.sets.repo, "delete", fail)
    sets = [WorkoutSet(id="a", exercise_id="e", reps=5), WorkoutSet(id="b", exercise_id="e")]
    assert [s.id for s in svc.sets.filter_complete(sets)] == ["a"]

def test_create_set_survives_save_failure(svc, monkeypatch):
    def fail(s):
        raise PersistenceError("save exercise_sets", s.id)
    monkeypatch.setattr(svc.sets.repo, "save", fail)
    s = svc.sets.create("e1")
    assert s.exercise_id == "e1"

def test_start_is_not_persisted_by_default(svc, db):
    w = svc.workouts.start()
    assert w.finished_at is None and w.exercises == ()
    assert WorkoutRepository(db).get(w.id) is None
    assert svc.workouts.load_current() is None

def test_persist_on_start_allows_resume(db, clock):
    svc = build_services(db, clock=clock, persist_on_start=True)
    w = svc.workouts.start()
    ex = svc.exercises.create("Deadlift", w.id)
    svc.sets.create(ex.id)
    current = svc.workouts.load_current()
    assert current.id == w.id
    assert [e.name for e in current.exercises] == ["Deadlift"]
    assert len(current.exercises[0].sets) == 1
    assert current.created_at == T0

def test_finish_prunes_and_stamps(svc, db, clock):
    w = svc.workouts.start()
    bench = svc.exercises.create("Bench", w.id)
    squat = svc.exercises.create("Squat", w.id)
    b1 = svc.sets.create(bench.id)
    s1 = svc.sets.update(svc.sets.create(squat.id), SetUpdate(reps=5, weight=100))
    s2 = svc.sets.create(squat.id)
    w = w.model_copy(update={"exercises": (
        bench.model_copy(update={"sets": (b1,)}),
        squat.model_copy(update={"sets": (s1, s2)}),
    )})
    clock.advance(minutes=45)

    done = svc.workouts.finish(w)
    assert done.finished_at == T0 + timedelta(minutes=45)
    assert [e.name for e in done.exercises] == ["Squat"]
    assert [s.id for s in done.exercises[0].sets] == [s1.id]
    # empty exercise and incomplete sets are gone from storage too
    assert ExerciseRepository(db).get(bench.id) is None
    assert SetRepository(db).get(s2.id) is None

    (loaded,) = svc.workouts.load_all()
    assert loaded.id == w.id
    assert loaded.exercises[0].sets[0].one_rm == pytest.approx(112.5)

def test_finish_never_precedes_start(svc, clock):
    w = svc.workouts.start()
    clock.now = T0 - timedelta(minutes=5)
    assert svc.workouts.finish(w).finished_at == T0

def test_load_history_newest_first(svc, clock):
    first = svc.workouts.finish(svc.workouts.start())
    clock.advance(days=1)
    second = svc.workouts.finish(svc.workouts.start())
    assert [w.id for w in svc.workouts.load_all()] == [second.id, first.id]

def test_reads_degrade_on_failure(svc, monkeypatch):
    def fail(*a):
        raise PersistenceError("query workouts")
    monkeypatch.setattr(svc.workouts.workouts, "get_current", fail)
    monkeypatch.setattr(svc.workouts.workouts, "get_finished", fail)
    assert svc.workouts.load_current() is None
    assert svc.workouts.load_all() == []

def test_summary_uses_best_set_and_volume(svc):
    w = svc.workouts.start()
    ex = svc.exercises.create("Press", w.id)
    a = svc.sets.update(svc.sets.create(ex.id), SetUpdate(reps=5, weight=50))
    b = svc.sets.update(svc.sets.create(ex.id), SetUpdate(reps=3, weight=60))
    w = w.model_copy(update={"exercises": (ex.model_copy(update={"sets": (a, b)}),)})
    summary = svc.workouts.summarize(w)
    (press,) = summary.exercises
    assert press.best_set.id == b.id
    assert press.volume == 5 * 50 + 3 * 60
    assert summary.total_volume == press.volume
