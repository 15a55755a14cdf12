# FILE: tests/test_io.py
import pandas as pd
import pytest

from team_core.io import (
    load_roster_csv, dataframe_to_participants, participants_to_dataframe,
    generate_template_csv_bytes, teams_to_csv_bytes, teams_to_snapshot,
    snapshot_to_json, load_snapshot_json, teams_from_snapshot,
)
from team_core.constants import CSV_HEADERS
from team_core.partition import generate_teams
from team_core.partition_test_helpers import make_roster

CSV = (
    "First Name,Last Name,Sex,Age,Leader\n"
    "ann,lee,F,14,no\n"
    "bob,ray,Male,abc,\n"
    ",,Male,20,\n"
    "cy,do,nonbinary,16,yes\n"
).encode("utf-8")

def test_load_roster_csv_aliases_and_normalizes():
    df = load_roster_csv(CSV)
    assert list(df.columns) == CSV_HEADERS
    assert len(df) == 3  # nameless row dropped
    assert df["first_name"].tolist() == ["Ann", "Bob", "Cy"]
    assert df["gender"].tolist() == ["Female", "Male", "nonbinary"]
    assert df["is_leader"].tolist() == [False, False, True]
    assert all(len(i) == 8 for i in df["id"])
    assert df["id"].is_unique

def test_dataframe_to_participants():
    people = dataframe_to_participants(load_roster_csv(CSV))
    assert [p.full_name for p in people] == ["Ann Lee", "Bob Ray", "Cy Do"]
    assert people[0].age == 14
    assert people[1].age is None
    assert people[2].is_leader

def test_participants_roundtrip_dataframe():
    roster = make_roster(1, 1, 0)
    df = participants_to_dataframe(roster)
    assert dataframe_to_participants(df) == roster

def test_missing_columns_raise():
    with pytest.raises(ValueError):
        load_roster_csv(b"name,age\nA,3\n")

def test_template_has_headers():
    assert generate_template_csv_bytes().decode().strip() == ",".join(CSV_HEADERS)

def test_teams_csv():
    teams = generate_teams(make_roster(2, 1, 0), 2)
    lines = teams_to_csv_bytes(teams).decode().strip().splitlines()
    assert lines[0] == "team,id,name,gender,age"
    assert len(lines) == 4

def test_snapshot_json_and_resolve():
    roster = make_roster(3, 3, 0)
    teams = generate_teams(roster, 2)
    snap = teams_to_snapshot(teams, saved_by="coach")
    loaded = load_snapshot_json(snapshot_to_json(snap))
    assert loaded.teams == [[p.id for p in t] for t in teams]
    assert loaded.saved_by == "coach"
    assert loaded.saved_at
    assert teams_from_snapshot(loaded, roster) == teams

def test_snapshot_unknown_id_raises():
    snap = load_snapshot_json('{"teams": [["nobody"]]}')
    with pytest.raises(ValueError):
        teams_from_snapshot(snap, make_roster(1, 0, 0))

def test_snapshot_bad_json_raises():
    with pytest.raises(ValueError):
        load_snapshot_json("not json")
    with pytest.raises(ValueError):
        load_snapshot_json('{"teams": 3}')

def _with_editor_rows(rows):
    df = load_roster_csv(CSV)
    return pd.concat([df, pd.DataFrame(rows, columns=df.columns)], ignore_index=True)

def test_blank_editor_row_is_dropped():
    df = _with_editor_rows([[None] * len(CSV_HEADERS)])
    people = dataframe_to_participants(df)
    assert len(people) == 3
    assert all(p.nickname != "nan" and p.congregation != "nan" for p in people)

def test_editor_rows_get_distinct_ids_and_clean_text():
    df = _with_editor_rows([
        [None, "dee", "ek", float("nan"), None, "Female", "15", False],
        [None, "eve", "fo", None, float("nan"), "Male", 17, None],
    ])
    people = dataframe_to_participants(df)
    added = people[-2:]
    assert [p.full_name for p in added] == ["Dee Ek", "Eve Fo"]
    assert added[0].id and added[1].id and added[0].id != added[1].id
    assert "None" not in [p.id for p in people]
    assert added[0].nickname == "" and added[1].congregation == ""

def test_snapshot_roundtrip_with_editor_rows():
    df = _with_editor_rows([
        [None, "dee", "ek", None, None, "Female", "15", False],
        [None, "eve", "fo", None, None, "Male", "17", False],
    ])
    roster = dataframe_to_participants(df)
    teams = generate_teams(roster, 2)
    back = teams_from_snapshot(load_snapshot_json(snapshot_to_json(teams_to_snapshot(teams))), roster)
    assert back == teams

def test_snapshot_rejects_roster_with_duplicate_ids():
    roster = make_roster(2, 0, 0)
    roster[1] = roster[1].model_copy(update={"id": roster[0].id})
    snap = load_snapshot_json('{"teams": [["%s"]]}' % roster[0].id)
    with pytest.raises(ValueError):
        teams_from_snapshot(snap, roster)
