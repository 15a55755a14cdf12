# FILE: team_core/fairness.py
from __future__ import annotations
from typing import Dict, List, Sequence

from .constants import GENDER_BUCKETS, normalize_gender


def compute_quotas(count: int, team_count: int) -> List[int]:
    """Even split of `count` over `team_count` teams; remainder goes to the lowest indices."""
    if team_count <= 0:
        return []
    base = count // team_count
    remainder = count % team_count
    quotas = [base] * team_count
    for i in range(remainder):
        quotas[i] += 1
    return quotas


def check_evenness(counts: List[int]) -> bool:
    return not counts or (max(counts) - min(counts) <= 1)


def gender_quotas(roster: Sequence, team_count: int) -> Dict[str, List[int]]:
    """Per-bucket quotas for a roster of participants."""
    totals = {g: 0 for g in GENDER_BUCKETS}
    for p in roster:
        totals[normalize_gender(p.gender)] += 1
    return {g: compute_quotas(n, team_count) for g, n in totals.items()}


def size_targets(teams: List[list]) -> List[int]:
    total = sum(len(t) for t in teams)
    return compute_quotas(total, len(teams))
