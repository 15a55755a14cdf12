# FILE: tests/test_stats.py
from team_core.partition import generate_teams
from team_core.stats import summarize, stats_dataframe, balance_report
from team_core.partition_test_helpers import quick_participant, make_roster

def test_summarize_basic():
    team = [quick_participant("a", "Male", 10), quick_participant("b", "male", None)]
    s = summarize([team, []])
    assert s[0].count == 2
    assert s[0].average_age == 5.0
    assert s[0].gender_histogram == {"Male": 1, "male": 1}
    assert s[1].count == 0
    assert s[1].average_age == 0
    assert s[1].gender_histogram == {}

def test_summarize_is_repeatable():
    teams = generate_teams(make_roster(6, 8, 1), 3)
    assert summarize(teams) == summarize(teams)

def test_stats_dataframe_columns():
    teams = generate_teams(make_roster(2, 2, 1), 2)
    df = stats_dataframe(teams)
    assert list(df.columns) == ["team", "count", "average_age", "Female", "Male", "Other"]
    assert df["count"].sum() == 5
    assert df["team"].tolist() == ["Team 1", "Team 2"]

def test_balance_report():
    teams = generate_teams(make_roster(6, 8, 1), 3)
    rep = balance_report(teams)
    assert rep["teams"] == 3
    assert rep["participants"] == 15
    assert rep["size_spread"] == 0
    assert rep["sizes_even"] is True
    assert rep["age_spread"] <= 2.5

def test_balance_report_no_teams():
    rep = balance_report([])
    assert rep["size_spread"] == 0
    assert rep["age_spread"] == 0.0
