# FILE: tests/test_fairness.py
from team_core.fairness import compute_quotas, check_evenness, gender_quotas
from team_core.partition_test_helpers import make_roster

def test_compute_quotas():
    quotas = compute_quotas(10, 4)
    assert sum(quotas) == 10
    assert max(quotas) - min(quotas) <= 1
    assert quotas == [3, 3, 2, 2]

def test_compute_quotas_zero_teams():
    assert compute_quotas(5, 0) == []

def test_evenness_true_and_false():
    assert check_evenness([2, 2, 3, 2])
    assert not check_evenness([1, 5, 1, 1])
    assert check_evenness([])

def test_gender_quotas_for_scenario_roster():
    q = gender_quotas(make_roster(6, 8, 1), 3)
    assert q["Male"] == [2, 2, 2]
    assert q["Female"] == [3, 3, 2]
    assert q["Other"] == [1, 0, 0]

def test_gender_quotas_match_strict_fill():
    from team_core.partition import generate_teams
    roster = make_roster(6, 6, 2)
    q = gender_quotas(roster, 3)
    teams = generate_teams(roster, 3)
    for g in ("Male", "Female", "Other"):
        assert [sum(1 for p in t if p.gender == g) for t in teams] == q[g]
