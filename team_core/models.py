# team_core/models.py
from __future__ import annotations
from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import MAX_TEAMS, parse_age, parse_bool


class Participant(BaseModel):
    id: str = ""
    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    congregation: str = ""
    gender: str = ""          # raw label; bucketing happens in partition
    age: Optional[float] = None
    is_leader: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, v):
        return "" if v is None else str(v)

    @field_validator("first_name", "last_name", "nickname", "congregation", "gender", mode="before")
    @classmethod
    def _text(cls, v):
        return "" if v is None else str(v)

    @field_validator("age", mode="before")
    @classmethod
    def _age(cls, v):
        return parse_age(v)

    @field_validator("is_leader", mode="before")
    @classmethod
    def _leader(cls, v):
        return parse_bool(v)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class TeamSummary(BaseModel):
    count: int = 0
    average_age: float = 0.0
    gender_histogram: Dict[str, int] = Field(default_factory=dict)  # raw label -> count


class TeamsSnapshot(BaseModel):
    teams: List[List[str]] = Field(default_factory=list)  # team index -> [participant ids]
    saved_at: Optional[str] = None
    saved_by: Optional[str] = None


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    team_count: int = 4
    parity: Literal["strict", "loose"] = "strict"
    exclude_leaders: bool = True

    @field_validator("team_count")
    @classmethod
    def _team_count_range(cls, v):
        if v < 0 or v > MAX_TEAMS:
            raise ValueError(f"team_count must be between 0 and {MAX_TEAMS}")
        return v
