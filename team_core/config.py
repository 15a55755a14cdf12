# team_core/config.py
from __future__ import annotations
import os
import textwrap
from typing import Union
import yaml

from .models import AppConfig

# ===== App defaults =====
DEFAULT_CONFIG = {
    "team_count": 4,
    "parity": "strict",        # strict: exact per-team gender quotas; loose: merged round-robin
    "exclude_leaders": True,   # leaders are listed separately, never partitioned
}

SETTINGS_FILE = "settings.yaml"
SAMPLE_ROSTER_FILE = "sample_roster.csv"


def ensure_assets_exist(root: str = "assets"):
    os.makedirs(root, exist_ok=True)
    settings_path = os.path.join(root, SETTINGS_FILE)
    if not os.path.exists(settings_path):
        with open(settings_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SETTINGS_YAML)
    roster_path = os.path.join(root, SAMPLE_ROSTER_FILE)
    if not os.path.exists(roster_path):
        with open(roster_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SAMPLE_ROSTER_CSV)


def load_config_yaml(path: str) -> AppConfig:
    """Missing or empty file -> defaults. Unknown keys are a validation error."""
    if not os.path.exists(path):
        return AppConfig(**DEFAULT_CONFIG)
    with open(path, "r", encoding="utf-8") as f:
        obj = yaml.safe_load(f) or {}
    if not isinstance(obj, dict):
        raise ValueError(f"{path} must contain a mapping of settings.")
    merged = dict(DEFAULT_CONFIG)
    merged.update(obj)
    return AppConfig(**merged)


def save_config_yaml(path: str, config: Union[AppConfig, dict]):
    data = config.model_dump() if isinstance(config, AppConfig) else AppConfig(**config).model_dump()
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)


DEFAULT_SETTINGS_YAML = textwrap.dedent("""\
team_count: 4
parity: strict
exclude_leaders: true
""")

# ===== Sample roster =====
DEFAULT_SAMPLE_ROSTER_CSV = textwrap.dedent("""\
id,first_name,last_name,nickname,congregation,gender,age,is_leader
1,Alex,Carter,,North,Male,15,false
2,Blake,Diaz,,North,Female,14,false
3,Casey,Ellis,Case,South,Male,16,false
4,Drew,Fox,,South,Female,17,false
5,Emery,Gray,,East,Female,15,false
6,Fin,Hayes,,East,Male,18,false
7,Gabe,Irwin,,West,Male,17,false
8,Harper,Jones,,West,Female,16,false
9,Izzy,Kim,,North,Female,19,false
10,Jordan,Lee,,South,Other,16,false
11,Kai,Miller,,East,Male,20,false
12,Lane,Novak,,West,Female,18,false
13,Morgan,Ortiz,,North,Female,21,false
14,Nico,Park,,South,Male,19,false
15,Owen,Quinn,,East,Female,20,false
16,Parker,Reed,,West,Male,34,true
17,Quinn,Shaw,,North,Female,29,true
""")

# ===== Visual theme (wrapped in <style>) =====
def ui_css() -> str:
    return """
<style>
:root{
  --bg:#0b0e14;
  --surface: rgba(18, 22, 31, 0.78);
  --line:#2a3142;
  --text:#eaf1fb;
  --sub:#B7C2D3;
  --accent: hsl(210, 90%, 60%);
  --radius:16px;
}
.block-container { padding-top: 1rem; max-width: 1200px; }
.card{
  background: var(--surface) !important;
  border:1px solid rgba(255,255,255,.05);
  border-radius:var(--radius);
}
.section{padding:18px}
.small{color:var(--sub);font-size:12px}
.team-head{font-weight:600;margin-bottom:4px}
.chip{
  padding:6px 10px;border:1px solid var(--line);
  border-radius:999px;display:inline-block;margin-right:6px;
}
.chip.active{ background: var(--accent); color:#071423; }
</style>
"""
