# team_core/io.py
from __future__ import annotations
import hashlib
import io
import json
import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence
import pandas as pd

from .constants import (
    CSV_HEADERS, HEADER_ALIASES, REQUIRED_COLUMNS,
    normalize_gender_label, normalize_name, parse_age, parse_bool,
)
from .models import Participant, TeamsSnapshot
from .ui_helpers import by_id

logger = logging.getLogger(__name__)


def _header_map(cols: Iterable[str]) -> Dict[str, str]:
    """
    Build a mapping from provided column -> canonical header.
    Case-insensitive, uses HEADER_ALIASES, leaves unknown columns untouched.
    """
    canon = {c.lower(): c for c in CSV_HEADERS}
    out = {}
    for c in cols:
        lc = str(c).strip().lower()
        if lc in canon:
            out[c] = canon[lc]
            continue
        mapped = None
        for k, aliases in HEADER_ALIASES.items():
            if lc in aliases:
                mapped = k
                break
        out[c] = mapped if mapped else c
    return out


def _derive_id(first: str, last: str, id_counts: Dict[str, int]) -> str:
    base = hashlib.md5(f"{first} {last}".strip().lower().encode()).hexdigest()[:8]
    n = id_counts.get(base, 0)
    id_counts[base] = n + 1
    return base if n == 0 else f"{base}-{n}"


def load_roster_csv(file_like) -> pd.DataFrame:
    """Read a roster CSV (bytes or file-like) into a normalized DataFrame."""
    if isinstance(file_like, (bytes, bytearray)):
        df = pd.read_csv(io.BytesIO(file_like), dtype=str, keep_default_na=False)
    else:
        df = pd.read_csv(file_like, dtype=str, keep_default_na=False)

    df = df.rename(columns=_header_map(df.columns))
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    for c in CSV_HEADERS:
        if c not in df.columns:
            df[c] = ""
    df = df[CSV_HEADERS].copy()

    df["first_name"] = df["first_name"].map(normalize_name)
    df["last_name"] = df["last_name"].map(normalize_name)
    df["nickname"] = df["nickname"].fillna("").astype(str).str.strip()
    df["congregation"] = df["congregation"].fillna("").astype(str).str.strip()
    df["gender"] = df["gender"].map(normalize_gender_label)
    df["age"] = df["age"].astype(str).str.strip()  # parsed per participant; bad values kept for validation
    df["is_leader"] = df["is_leader"].map(parse_bool)

    # drop rows without any name
    df = df[(df["first_name"] != "") | (df["last_name"] != "")].reset_index(drop=True)

    id_counts: Dict[str, int] = {}
    ids = []
    for _, r in df.iterrows():
        pid = str(r["id"]).strip()
        ids.append(pid if pid else _derive_id(r["first_name"], r["last_name"], id_counts))
    df["id"] = ids

    logger.info("loaded roster with %d participants (%d leaders)", len(df), int(df["is_leader"].sum()))
    return df


def _cell(v) -> str:
    """Editor cells may be None/NaN for rows added in the UI."""
    if v is None or (not isinstance(v, (list, tuple, dict)) and pd.isna(v)):
        return ""
    return str(v).strip()


def dataframe_to_participants(df: pd.DataFrame) -> List[Participant]:
    players: List[Participant] = []
    id_counts: Dict[str, int] = {}
    for _, r in df.iterrows():
        first = normalize_name(_cell(r.get("first_name")))
        last = normalize_name(_cell(r.get("last_name")))
        if not first and not last:
            continue
        pid = _cell(r.get("id"))
        players.append(Participant(
            id=pid or _derive_id(first, last, id_counts),
            first_name=first,
            last_name=last,
            nickname=_cell(r.get("nickname")),
            congregation=_cell(r.get("congregation")),
            gender=normalize_gender_label(r.get("gender", "")),
            age=parse_age(r.get("age")),
            is_leader=parse_bool(r.get("is_leader", False)),
        ))
    return players


def participants_to_dataframe(participants: Sequence[Participant]) -> pd.DataFrame:
    rows = [p.model_dump() for p in participants]
    return pd.DataFrame(rows, columns=CSV_HEADERS)


def save_roster_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def generate_template_csv_bytes() -> bytes:
    empty = pd.DataFrame(columns=CSV_HEADERS)
    buf = io.StringIO()
    empty.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def teams_to_csv_bytes(teams: Sequence[Sequence[Participant]]) -> bytes:
    rows = []
    for t_idx, members in enumerate(teams, start=1):
        for p in members:
            rows.append({
                "team": t_idx,
                "id": p.id,
                "name": p.full_name,
                "gender": p.gender,
                "age": p.age if p.age is not None else "",
            })
    df = pd.DataFrame(rows, columns=["team", "id", "name", "gender", "age"])
    return save_roster_csv_bytes(df)


# ----- Saved teams (ids only) -----
def teams_to_snapshot(teams: Sequence[Sequence[Participant]], saved_by: Optional[str] = None) -> TeamsSnapshot:
    return TeamsSnapshot(
        teams=[[p.id for p in members] for members in teams],
        saved_at=datetime.now(timezone.utc).isoformat(timespec="seconds"),
        saved_by=saved_by,
    )


def snapshot_to_json(snapshot: TeamsSnapshot) -> str:
    return snapshot.model_dump_json(indent=2)


def load_snapshot_json(text) -> TeamsSnapshot:
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("utf-8")
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Snapshot is not valid JSON: {e}") from e
    if not isinstance(obj, dict) or not isinstance(obj.get("teams"), list):
        raise ValueError("Snapshot must be an object with a 'teams' list.")
    return TeamsSnapshot.model_validate(obj)


def teams_from_snapshot(snapshot: TeamsSnapshot, roster: Sequence[Participant]) -> List[List[Participant]]:
    """Resolve saved ids against the current roster."""
    counts = Counter(p.id for p in roster)
    dupes = sorted(pid for pid, n in counts.items() if n > 1)
    if dupes:
        raise ValueError(f"Roster has duplicate participant ids: {', '.join(dupes)}")
    lookup = by_id(roster)
    unknown = [pid for team in snapshot.teams for pid in team if pid not in lookup]
    if unknown:
        raise ValueError(f"Snapshot references unknown participant ids: {', '.join(unknown)}")
    return [[lookup[pid] for pid in team] for team in snapshot.teams]
