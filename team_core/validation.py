# FILE: team_core/validation.py
from __future__ import annotations
from typing import List, Optional
import pandas as pd

from .constants import FEMALE, MALE, REQUIRED_COLUMNS, parse_age


def validate_roster(df: pd.DataFrame) -> List[str]:
    """Human-readable roster problems; an empty list means the roster is usable as-is."""
    errs = []
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        errs.append(f"Missing required columns: {missing}")
        return errs

    if "id" in df.columns:
        ids = df["id"].astype(str).str.strip()
        dupes = sorted(set(ids[ids.duplicated() & (ids != "")].tolist()))
        if dupes:
            errs.append(f"Duplicate id detected: {', '.join(dupes)}")

    bad_age = [
        i for i, v in df["age"].items()
        if str(v).strip() not in ("", "nan", "None") and parse_age(v) is None
    ]
    if bad_age:
        rows = ", ".join(str(i + 2) for i in bad_age)
        errs.append(f"Invalid age at rows: {rows} (treated as 0)")

    missing_age = [i for i, v in df["age"].items() if parse_age(v) is None and i not in bad_age]
    if missing_age:
        rows = ", ".join(str(i + 2) for i in missing_age)
        errs.append(f"Missing age at rows: {rows} (treated as 0)")

    other = df[~df["gender"].isin([MALE, FEMALE])]
    if not other.empty:
        labels = sorted({str(g) for g in other["gender"].tolist()})
        errs.append(f"{len(other)} participant(s) grouped as Other (labels: {', '.join(repr(g) for g in labels)})")

    return errs


def check_team_count(team_count: int, roster_size: int) -> Optional[str]:
    if team_count <= 0:
        return "Team count is 0: no teams will be generated."
    if team_count > roster_size:
        return (f"Warning: {team_count} teams for {roster_size} participants. "
                "Some teams will be empty.")
    return None


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from .fairness import compute_quotas, check_evenness
    quotas = compute_quotas(8, 3)
    results["tests"].append(("Quotas sum to 8", sum(quotas) == 8))
    results["tests"].append(("Quotas front-loaded", quotas == [3, 3, 2]))
    results["tests"].append(("Evenness check", check_evenness(quotas)))

    from .partition import generate_teams
    from .partition_test_helpers import make_roster
    roster = make_roster(6, 8, 1)
    teams = generate_teams(roster, 3)
    results["tests"].append(("Sizes 5/5/5", [len(t) for t in teams] == [5, 5, 5]))
    ids = sorted(p.id for t in teams for p in t)
    results["tests"].append(("No participant lost", ids == sorted(p.id for p in roster)))
    results["tests"].append(("Zero teams", generate_teams(roster, 0) == []))
    return results
