from __future__ import annotations
from typing import Dict, List, Optional

# -----------------------------
# Gender buckets (fill order)
# -----------------------------
MALE = "Male"
FEMALE = "Female"
OTHER = "Other"
GENDER_BUCKETS: List[str] = [MALE, FEMALE, OTHER]

# ---------------------
# Parity modes
# ---------------------
PARITY_STRICT = "strict"
PARITY_LOOSE = "loose"
PARITY_MODES: List[str] = [PARITY_STRICT, PARITY_LOOSE]

MAX_TEAMS = 100

# ---------------------
# Roster CSV
# ---------------------
REQUIRED_COLUMNS: List[str] = ["first_name", "last_name", "gender", "age"]
CSV_HEADERS: List[str] = [
    "id", "first_name", "last_name", "nickname", "congregation",
    "gender", "age", "is_leader",
]
HEADER_ALIASES: Dict[str, set] = {
    # canonical -> set of aliases (lowercase)
    "id": {"id", "participant_id", "attendee_id"},
    "first_name": {"first", "first name", "firstname", "given name"},
    "last_name": {"last", "last name", "lastname", "surname", "family name"},
    "nickname": {"nick", "nickname", "preferred name"},
    "congregation": {"congregation", "church", "group"},
    "gender": {"gender", "sex"},
    "age": {"age", "years"},
    "is_leader": {"leader", "is leader", "isleader", "is_leader"},
}

TRUTHY = {"1", "true", "yes", "y", "t", "x", "leader"}


# ---------------------
# Normalization helpers
# ---------------------
def normalize_name(s: Optional[str]) -> str:
    if s is None:
        return ""
    s = str(s).strip()
    if not s or s.lower() == "nan":
        return ""
    return " ".join(w[:1].upper() + w[1:] for w in s.split())


def normalize_gender_label(g: Optional[str]) -> str:
    """Tidy a raw gender label for storage; 'm'/'f' shorthands map to Male/Female."""
    if g is None:
        return ""
    s = str(g).strip()
    if s.lower() == "nan":
        return ""
    low = s.lower()
    if low in ("m", "male"):
        return MALE
    if low in ("f", "female"):
        return FEMALE
    return s


def parse_age(v) -> Optional[float]:
    """Non-negative number or None."""
    if v is None or isinstance(v, bool):
        return None
    try:
        age = float(v)
    except (TypeError, ValueError):
        return None
    if age != age or age < 0:  # NaN or negative
        return None
    return age


def parse_bool(v) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return False
    if isinstance(v, (int, float)):
        return v == v and v != 0
    return str(v).strip().lower() in TRUTHY


def normalize_gender(g) -> str:
    """Bucket for partitioning: exact 'Male'/'Female', everything else is 'Other'."""
    if g == MALE:
        return MALE
    if g == FEMALE:
        return FEMALE
    return OTHER
