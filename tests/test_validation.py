# FILE: tests/test_validation.py
import pandas as pd
from team_core.validation import validate_roster, check_team_count, run_self_test

def test_validate_roster_flags_problems():
    df = pd.DataFrame({
        "id": ["1", "1", "2"],
        "first_name": ["A", "B", "C"],
        "last_name": ["X", "Y", "Z"],
        "gender": ["Male", "Female", "other"],
        "age": ["12", "-4", ""],
    })
    errs = validate_roster(df)
    assert any("Duplicate id" in e for e in errs)
    assert any("Invalid age at rows: 3" in e for e in errs)
    assert any("Missing age at rows: 4" in e for e in errs)
    assert any("grouped as Other" in e for e in errs)

def test_validate_roster_missing_columns():
    errs = validate_roster(pd.DataFrame({"first_name": ["A"]}))
    assert len(errs) == 1 and "Missing required columns" in errs[0]

def test_validate_roster_clean():
    df = pd.DataFrame({
        "id": ["1", "2"], "first_name": ["A", "B"], "last_name": ["X", "Y"],
        "gender": ["Male", "Female"], "age": ["12", "13"],
    })
    assert validate_roster(df) == []

def test_check_team_count():
    assert check_team_count(0, 5)
    assert check_team_count(6, 5)
    assert check_team_count(3, 5) is None

def test_self_test_passes():
    results = run_self_test()
    assert all(ok for _, ok in results["tests"])
