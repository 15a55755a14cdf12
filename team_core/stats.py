# team_core/stats.py
from __future__ import annotations
from typing import Dict, List, Sequence
import numpy as np
import pandas as pd

from .models import Participant, TeamSummary
from .partition import age_of


def summarize(teams: Sequence[Sequence[Participant]]) -> List[TeamSummary]:
    """Per-team count, mean age (missing ages count as 0) and raw gender histogram."""
    out: List[TeamSummary] = []
    for members in teams:
        n = len(members)
        avg = sum(age_of(p) for p in members) / n if n else 0.0
        hist: Dict[str, int] = {}
        for p in members:
            hist[p.gender] = hist.get(p.gender, 0) + 1
        out.append(TeamSummary(count=n, average_age=avg, gender_histogram=hist))
    return out


def stats_dataframe(teams: Sequence[Sequence[Participant]]) -> pd.DataFrame:
    summaries = summarize(teams)
    labels = sorted({g for s in summaries for g in s.gender_histogram})
    rows = []
    for idx, s in enumerate(summaries, start=1):
        row = {"team": f"Team {idx}", "count": s.count, "average_age": round(s.average_age, 2)}
        for g in labels:
            row[g or "(blank)"] = s.gender_histogram.get(g, 0)
        rows.append(row)
    return pd.DataFrame(rows, columns=["team", "count", "average_age"] + [g or "(blank)" for g in labels])


def balance_report(teams: Sequence[Sequence[Participant]]) -> Dict[str, object]:
    summaries = summarize(teams)
    sizes = np.array([s.count for s in summaries], dtype=int)
    ages = np.array([s.average_age for s in summaries if s.count], dtype=float)
    size_spread = int(sizes.max() - sizes.min()) if sizes.size else 0
    age_spread = float(ages.max() - ages.min()) if ages.size else 0.0
    return {
        "teams": len(summaries),
        "participants": int(sizes.sum()) if sizes.size else 0,
        "size_spread": size_spread,
        "age_spread": round(age_spread, 2),
        "sizes_even": size_spread <= 1,
    }
