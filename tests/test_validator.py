"""Tests for raw plan shape validation."""
import copy

from tandadj.core.validator import plan_problems, validate_plan

from conftest import make_catalog, make_raw_plan


def _plan():
    return make_raw_plan(make_catalog())


def test_accepts_well_formed_plan():
    assert validate_plan(_plan()) is True


def test_accepts_empty_track_ids():
    plan = _plan()
    for tanda in plan["tandas"]:
        tanda["trackIds"] = []
    assert validate_plan(plan) is True


def test_does_not_check_resolvability():
    plan = _plan()
    plan["tandas"][0]["trackIds"] = ["not-in-library"]
    assert validate_plan(plan) is True


def test_rejects_wrong_tanda_count():
    plan = _plan()
    plan["tandas"].pop()
    assert validate_plan(plan) is False
    plan = _plan()
    plan["tandas"].append(copy.deepcopy(plan["tandas"][0]))
    assert validate_plan(plan) is False


def test_rejects_style_mismatch_at_any_position():
    for i in range(6):
        plan = _plan()
        plan["tandas"][i]["type"] = "milonga" if plan["tandas"][i]["type"] != "milonga" else "tango"
        assert validate_plan(plan) is False


def test_rejects_reordered_pattern():
    plan = _plan()
    plan["tandas"][1], plan["tandas"][2] = plan["tandas"][2], plan["tandas"][1]
    assert validate_plan(plan) is False


def test_rejects_missing_or_non_list_track_ids():
    plan = _plan()
    del plan["tandas"][3]["trackIds"]
    assert validate_plan(plan) is False
    plan = _plan()
    plan["tandas"][3]["trackIds"] = "tango-8"
    assert validate_plan(plan) is False


def test_rejects_non_objects():
    assert validate_plan(None) is False
    assert validate_plan([]) is False
    assert validate_plan({"tandas": "nope"}) is False


def test_problems_name_the_position():
    plan = _plan()
    plan["tandas"][2]["type"] = "tango"
    problems = plan_problems(plan)
    assert len(problems) == 1
    assert "tanda 2" in problems[0]
