"""
Small, UI-agnostic helpers shared by app.py.
"""
from __future__ import annotations
from typing import Dict, List, Sequence, Tuple
from .models import Participant


def by_id(roster: Sequence[Participant]) -> Dict[str, Participant]:
    return {p.id: p for p in roster}


def display_name(p: Participant) -> str:
    name = p.full_name or p.id
    return f"{name} ({p.nickname})" if p.nickname else name


def split_leaders(roster: Sequence[Participant]) -> Tuple[List[Participant], List[Participant]]:
    """(leaders, non_leaders), both in roster order."""
    leaders = [p for p in roster if p.is_leader]
    others = [p for p in roster if not p.is_leader]
    return leaders, others
