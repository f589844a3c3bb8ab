import pytest
from liftlog.schemas.exercise_set import SetUpdate, WorkoutSet
from liftlog.services.set_calculator import (
    apply_set_update, best_set, compute_one_rm, is_complete,
    partition_sets, total_volume, total_weight,
)

def mk(set_id="s1", **kw):
    return WorkoutSet(id=set_id, exercise_id="e1", **kw)

def test_one_rm_formula():
    assert compute_one_rm(100, 5) == pytest.approx(112.5)
    assert compute_one_rm(100, 1) == pytest.approx(100.0)
    assert compute_one_rm(50, 36) == pytest.approx(1800.0)

def test_one_rm_rejects_reps_at_singularity():
    with pytest.raises(ValueError):
        compute_one_rm(100, 37)
    with pytest.raises(ValueError):
        compute_one_rm(100, 40)

def test_total_weight_treats_missing_as_zero():
    assert total_weight(mk(reps=5, weight=100)) == 500
    assert total_weight(mk(reps=5)) == 0
    assert total_weight(mk(weight=80)) == 0
    assert total_volume([mk("a", reps=5, weight=100), mk("b", reps=3, weight=50), mk("c")]) == 650

def test_best_set_ties_keep_first():
    sets = [mk("a", one_rm=80), mk("b", one_rm=120), mk("c", one_rm=120)]
    assert best_set(sets).id == "b"

def test_best_set_empty_and_missing_one_rm():
    assert best_set([]) is None
    assert best_set([mk("a"), mk("b")]).id == "a"
    assert best_set([mk("a"), mk("b", one_rm=10)]).id == "b"

@pytest.mark.parametrize("reps_list", [
    [],
    [None, None],
    [0, 1, None, 5],
    [3, 3, 3],
])
def test_partition_covers_input(reps_list):
    sets = [mk(f"s{i}", reps=r) for i, r in enumerate(reps_list)]
    complete, incomplete = partition_sets(sets)
    assert len(complete) + len(incomplete) == len(sets)
    assert all(s.reps is not None and s.reps > 0 for s in complete)
    assert not any(is_complete(s) for s in incomplete)

def test_apply_update_only_overwrites_supplied_fields():
    s = mk(reps=5, weight=100, one_rm=112.5)
    out = apply_set_update(s, SetUpdate(weight=120))
    assert out.reps == 5 and out.weight == 120
    assert out.one_rm == pytest.approx(120 * 36 / 32)
    # the original value is untouched
    assert s.weight == 100 and s.one_rm == 112.5

def test_apply_update_waits_for_both_fields():
    out = apply_set_update(mk(), SetUpdate(reps=5))
    assert out.reps == 5 and out.weight is None and out.one_rm is None

@pytest.mark.parametrize("reps", [1, 5, 12, 36])
def test_apply_update_is_idempotent(reps):
    fields = SetUpdate(reps=reps, weight=60)
    once = apply_set_update(mk(), fields)
    twice = apply_set_update(once, fields)
    assert once.one_rm == pytest.approx(60 * 36 / (37 - reps))
    assert twice == once

def test_apply_update_past_formula_range_clears_one_rm():
    out = apply_set_update(mk(reps=5, weight=100, one_rm=112.5), SetUpdate(reps=40))
    assert out.reps == 40
    assert out.one_rm is None

def test_set_update_rejects_negative_values():
    with pytest.raises(ValueError):
        SetUpdate(reps=-1)
    with pytest.raises(ValueError):
        SetUpdate(weight=-5)
