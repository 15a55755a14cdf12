"""
Internal helpers for tests and the self-test (not imported by app).
"""
from __future__ import annotations
from typing import List, Optional
from .models import Participant


def quick_participant(pid: str, gender: str, age: Optional[float], first: str = "", last: str = "",
                      leader: bool = False) -> Participant:
    return Participant(
        id=pid, first_name=first or pid.upper(), last_name=last,
        gender=gender, age=age, is_leader=leader,
    )


def make_roster(n_male: int = 6, n_female: int = 8, n_other: int = 1) -> List[Participant]:
    """Males aged 15.., females 14.., others 16.., ids m1/f7/o15 style."""
    res: List[Participant] = []
    pid = 1
    for i in range(n_male):
        res.append(quick_participant(f"m{pid}", "Male", 15 + i, "M", str(i)))
        pid += 1
    for i in range(n_female):
        res.append(quick_participant(f"f{pid}", "Female", 14 + i, "F", str(i)))
        pid += 1
    for i in range(n_other):
        res.append(quick_participant(f"o{pid}", "Other", 16 + i, "O", str(i)))
        pid += 1
    return res
