# team_core/partition.py
"""
Balanced team partitioning.

Participants are bucketed by gender, each bucket is ordered so that age
extremes alternate, and teams are filled from per-bucket quotas. A final pass
evens out team sizes, which always takes priority over gender balance.
"""
from __future__ import annotations
from collections import Counter, deque
from collections.abc import Mapping
from typing import Deque, Dict, Iterable, List, Sequence
import logging
import math

from .constants import GENDER_BUCKETS, PARITY_STRICT, normalize_gender
from .fairness import gender_quotas, size_targets
from .models import Participant

logger = logging.getLogger(__name__)

Team = List[Participant]


def age_of(p: Participant) -> float:
    return p.age if p.age is not None else 0.0


def coerce_team_count(team_count) -> int:
    """Truncate to a non-negative int; anything unusable becomes 0."""
    try:
        n = float(team_count)
    except (TypeError, ValueError):
        return 0
    if math.isnan(n) or math.isinf(n):
        return 0
    return max(0, int(n))


def _as_participant(item) -> Participant:
    if isinstance(item, Participant):
        return item
    if isinstance(item, Mapping):
        return Participant.model_validate(dict(item))
    return Participant.model_validate(item, from_attributes=True)


def interleave_ages(ordered: Sequence[Participant]) -> List[Participant]:
    """Given an age-ascending list, alternate lowest/highest towards the centre."""
    out: List[Participant] = []
    i, j = 0, len(ordered) - 1
    while i <= j:
        out.append(ordered[i])
        if i != j:
            out.append(ordered[j])
        i += 1
        j -= 1
    return out


def bucket_by_gender(roster: Iterable[Participant]) -> Dict[str, Deque[Participant]]:
    """Gender buckets as FIFO queues in interleaved age order."""
    buckets: Dict[str, List[Participant]] = {g: [] for g in GENDER_BUCKETS}
    for p in roster:
        buckets[normalize_gender(p.gender)].append(p)
    return {
        g: deque(interleave_ages(sorted(members, key=age_of)))
        for g, members in buckets.items()
    }


def _fill_strict(queues: Dict[str, Deque[Participant]], teams: List[Team],
                 quotas: Dict[str, List[int]]) -> None:
    n = len(teams)
    logger.debug("strict quotas: %s", quotas)

    for t in range(n):
        for g in GENDER_BUCKETS:
            q = queues[g]
            for _ in range(quotas[g][t]):
                if not q:
                    break
                teams[t].append(q.popleft())

    # quotas sum to bucket totals, so this only runs if that ever stops holding
    li = 0
    for g in GENDER_BUCKETS:
        q = queues[g]
        while q:
            teams[li % n].append(q.popleft())
            li += 1
    if li:
        logger.warning("strict fill left %d participants over; spread round-robin", li)


def _fill_loose(queues: Dict[str, Deque[Participant]], teams: List[Team]) -> None:
    merged: List[Participant] = []
    while any(queues[g] for g in GENDER_BUCKETS):
        for g in GENDER_BUCKETS:
            if queues[g]:
                merged.append(queues[g].popleft())
    n = len(teams)
    for i, p in enumerate(merged):
        teams[i % n].append(p)


def _pick_mover(src: Team, dst: Team) -> int:
    """Index of the oldest member of `src` whose gender is over-represented against `dst`."""
    src_counts = Counter(normalize_gender(p.gender) for p in src)
    dst_counts = Counter(normalize_gender(p.gender) for p in dst)
    for idx in range(len(src) - 1, -1, -1):
        g = normalize_gender(src[idx].gender)
        if src_counts[g] > dst_counts[g]:
            return idx
    return len(src) - 1


def rebalance_sizes(teams: List[Team]) -> int:
    """
    Move members from teams above their size target to teams below it until
    every team sits exactly on target. Overfull teams are drained from the
    highest index down; receivers are the lowest-index team still short.
    The member moved never makes a gender more uneven between the two teams.
    Returns the number of moves.
    """
    target = size_targets(teams)
    moves = 0
    changed = True
    while changed:
        changed = False
        for i in reversed(range(len(teams))):
            if len(teams[i]) <= target[i]:
                continue
            j = next((k for k, tm in enumerate(teams) if len(tm) < target[k]), -1)
            if j == -1:
                continue
            teams[j].append(teams[i].pop(_pick_mover(teams[i], teams[j])))
            teams[j].sort(key=age_of)
            moves += 1
            changed = True
    return moves


def generate_teams(roster: Iterable, team_count, parity: str = PARITY_STRICT) -> List[Team]:
    """
    Partition `roster` into `team_count` teams.

    - strict: every team gets exactly its per-gender quota (base or base+1,
      remainder to the lowest-index teams), filled Male, Female, Other.
    - anything else: genders are merged round-robin and dealt across teams.

    Members of each team come back sorted by ascending age. Sizes always
    differ by at most one. The caller's roster is never modified; leaders
    should already be filtered out.
    """
    n = coerce_team_count(team_count)
    if n == 0:
        return []
    teams: List[Team] = [[] for _ in range(n)]

    people = [_as_participant(x) for x in roster]
    queues = bucket_by_gender(people)
    logger.debug("bucket sizes: %s", {g: len(q) for g, q in queues.items()})

    if parity == PARITY_STRICT:
        _fill_strict(queues, teams, gender_quotas(people, n))
    else:
        _fill_loose(queues, teams)

    for tm in teams:
        tm.sort(key=age_of)

    moves = rebalance_sizes(teams)
    if moves:
        logger.debug("size correction moved %d participants", moves)
    return teams
