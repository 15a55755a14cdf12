# app.py
import logging
from typing import List

import pandas as pd
import streamlit as st

from team_core.config import (
    DEFAULT_CONFIG,
    SETTINGS_FILE,
    SAMPLE_ROSTER_FILE,
    ensure_assets_exist,
    load_config_yaml,
    save_config_yaml,
    ui_css,
)
from team_core.constants import MAX_TEAMS, PARITY_MODES
from team_core.io import (
    load_roster_csv,
    save_roster_csv_bytes,
    generate_template_csv_bytes,
    dataframe_to_participants,
    teams_to_csv_bytes,
    teams_to_snapshot,
    snapshot_to_json,
    load_snapshot_json,
    teams_from_snapshot,
)
from team_core.models import AppConfig, Participant
from team_core.partition import generate_teams
from team_core.stats import stats_dataframe, balance_report
from team_core.validation import validate_roster, check_team_count
from team_core.ui_helpers import display_name, split_leaders
from team_core.export_pdf import render_teams_pdf

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ASSETS = "assets"
SETTINGS_PATH = f"{ASSETS}/{SETTINGS_FILE}"

# ---------- Page & Theme ----------
st.set_page_config(page_title="Balanced Team Builder", layout="wide")
st.markdown(ui_css(), unsafe_allow_html=True)

ensure_assets_exist(ASSETS)

# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    ss.setdefault("stage", 1)  # 1..3
    ss.setdefault("roster_df", None)
    if "app_config" not in ss:
        try:
            ss.app_config = load_config_yaml(SETTINGS_PATH)
        except ValueError as e:
            st.warning(f"Ignoring {SETTINGS_PATH}: {e}")
            ss.app_config = AppConfig(**DEFAULT_CONFIG)
    ss.setdefault("teams", [])          # list[list[Participant]]
    ss.setdefault("leaders", [])        # list[Participant]

_init_state()


def _participants() -> List[Participant]:
    df = st.session_state.roster_df
    return [] if df is None else dataframe_to_participants(df)


# ---------- Sidebar ----------
with st.sidebar:
    st.header("⚙️ Settings")
    cfg: AppConfig = st.session_state.app_config
    team_count = st.number_input("Number of teams", min_value=0, max_value=MAX_TEAMS, value=cfg.team_count, step=1)
    parity = st.radio(
        "Gender parity",
        PARITY_MODES,
        index=PARITY_MODES.index(cfg.parity),
        horizontal=True,
        help="strict: every team gets its exact share of each gender. loose: genders are dealt round-robin.",
    )
    exclude_leaders = st.checkbox("Keep leaders out of teams", value=cfg.exclude_leaders)

    cfg.team_count = int(team_count)
    cfg.parity = parity
    cfg.exclude_leaders = exclude_leaders

    if st.button("Save settings", use_container_width=True):
        save_config_yaml(SETTINGS_PATH, cfg)
        st.success(f"Saved to {SETTINGS_PATH}.")

    st.divider()
    st.subheader("📄 Files")
    colT, colS = st.columns(2)
    with colT:
        st.download_button(
            "template.csv",
            data=generate_template_csv_bytes(),
            file_name="template.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with colS:
        with open(f"{ASSETS}/{SAMPLE_ROSTER_FILE}", "rb") as f:
            st.download_button(
                "sample_roster.csv",
                data=f.read(),
                file_name="sample_roster.csv",
                mime="text/csv",
                use_container_width=True,
            )


# ---------- Header ----------
st.markdown(
    """
<div class="card section">
  <h2>Balanced Team Builder</h2>
  <div class="small">1) Import & edit roster → 2) Review leaders & settings → 3) Generate teams.
  Team sizes never differ by more than one; genders and ages are spread evenly.</div>
</div>
""",
    unsafe_allow_html=True,
)


def _chip_row():
    st.markdown(
        '<div style="margin:8px 0 12px">'
        + "".join(
            f'<span class="chip {"active" if st.session_state.stage == i else ""}">{label}</span>'
            for i, label in enumerate(["1) Import", "2) Review", "3) Teams"], start=1)
        )
        + "</div>",
        unsafe_allow_html=True,
    )


def _stage_nav(back_to=None, next_to=None, next_label="Next"):
    cols = st.columns([1, 1])
    with cols[0]:
        if back_to is not None and st.button("Back", key=f"back_{back_to}", use_container_width=True):
            st.session_state.stage = back_to
            st.rerun()
    with cols[1]:
        if next_to is not None and st.button(next_label, key=f"next_{next_to}", use_container_width=True):
            st.session_state.stage = next_to
            st.rerun()


_chip_row()

# ============================================================
# STAGE 1: Import roster (CSV) & live editor
# ============================================================
if st.session_state.stage == 1:
    st.markdown("### 1) Import roster (CSV) & live edit")
    up_col1, up_col2 = st.columns([2, 1])
    with up_col1:
        file = st.file_uploader("Drop CSV here or click to select", type=["csv"])
    with up_col2:
        st.caption("Load sample")
        if st.button("Load sample roster"):
            with open(f"{ASSETS}/{SAMPLE_ROSTER_FILE}", "rb") as f:
                st.session_state.roster_df = load_roster_csv(f)
            st.success("Sample loaded into live editor.")

    if file is not None:
        try:
            df = load_roster_csv(file)
            st.session_state.roster_df = df
            st.success(f"Imported {len(df)} participants.")
        except ValueError as e:
            st.error(f"Error loading CSV: {e}")

    if st.session_state.roster_df is None:
        st.info("No roster loaded yet. Use the buttons above.")
    else:
        st.caption("Live Editor")
        edited = st.data_editor(st.session_state.roster_df, num_rows="dynamic", use_container_width=True)
        st.session_state.roster_df = edited
        problems = validate_roster(edited)
        if problems:
            st.warning("Roster notes:")
            for p in problems:
                st.write("•", p)
        else:
            st.success("Roster looks valid ✅")
        st.download_button(
            "Download edited roster",
            data=save_roster_csv_bytes(edited),
            file_name="roster.csv",
            mime="text/csv",
        )

    _stage_nav(back_to=None, next_to=2, next_label="Next: Review")

# ============================================================
# STAGE 2: Leaders & settings review
# ============================================================
elif st.session_state.stage == 2:
    st.markdown("### 2) Review leaders & settings")
    roster = _participants()
    if not roster:
        st.info("Upload a roster in stage 1 first.")
        _stage_nav(back_to=1, next_to=None)
    else:
        cfg = st.session_state.app_config
        leaders, others = split_leaders(roster)
        pool = others if cfg.exclude_leaders else roster

        c1, c2 = st.columns(2)
        with c1:
            st.metric("Participants to place", len(pool))
            st.metric("Teams", cfg.team_count)
        with c2:
            st.markdown("**Leaders**")
            if leaders:
                for p in leaders:
                    st.write("•", display_name(p))
            else:
                st.caption("No leaders in roster.")

        msg = check_team_count(cfg.team_count, len(pool))
        if msg:
            st.warning(msg)
        _stage_nav(back_to=1, next_to=3, next_label="Next: Teams")

# ============================================================
# STAGE 3: Generate, inspect, export
# ============================================================
elif st.session_state.stage == 3:
    st.markdown("### 3) Teams")
    roster = _participants()
    cfg = st.session_state.app_config
    leaders, others = split_leaders(roster)
    pool = others if cfg.exclude_leaders else roster

    if st.button("Generate teams", type="primary", disabled=not pool):
        st.session_state.teams = generate_teams(pool, cfg.team_count, parity=cfg.parity)
        st.session_state.leaders = leaders if cfg.exclude_leaders else []
        logger.info("generated %d teams from %d participants (%s)", len(st.session_state.teams), len(pool), cfg.parity)

    with st.expander("Load saved teams (JSON)"):
        saved = st.file_uploader("Saved teams", type=["json"], key="snapshot_upload")
        if saved is not None:
            try:
                snap = load_snapshot_json(saved.getvalue())
                st.session_state.teams = teams_from_snapshot(snap, roster)
                st.session_state.leaders = leaders if cfg.exclude_leaders else []
                st.success(f"Loaded {len(snap.teams)} teams saved {snap.saved_at or 'at unknown time'}.")
            except ValueError as e:
                st.error(f"Could not load teams: {e}")

    teams = st.session_state.teams
    if not teams:
        st.info("No teams yet. Press Generate.")
    else:
        report = balance_report(teams)
        m1, m2, m3 = st.columns(3)
        m1.metric("Teams", report["teams"])
        m2.metric("Size spread", report["size_spread"])
        m3.metric("Average age spread", report["age_spread"])

        st.dataframe(stats_dataframe(teams), use_container_width=True, hide_index=True)

        cols = st.columns(min(len(teams), 4))
        for idx, members in enumerate(teams):
            with cols[idx % len(cols)]:
                st.markdown(f'<div class="team-head">Team {idx + 1} ({len(members)})</div>', unsafe_allow_html=True)
                st.dataframe(
                    pd.DataFrame(
                        [{"name": display_name(p), "gender": p.gender, "age": p.age} for p in members],
                        columns=["name", "gender", "age"],
                    ),
                    use_container_width=True,
                    hide_index=True,
                )

        if st.session_state.leaders:
            st.markdown("**Leaders** (not placed on teams)")
            st.write(", ".join(display_name(p) for p in st.session_state.leaders))

        st.subheader("Exports")
        e1, e2, e3 = st.columns(3)
        with e1:
            st.download_button("teams.csv", data=teams_to_csv_bytes(teams), file_name="teams.csv", mime="text/csv")
        with e2:
            st.download_button(
                "teams.json",
                data=snapshot_to_json(teams_to_snapshot(teams)),
                file_name="teams.json",
                mime="application/json",
            )
        with e3:
            st.download_button(
                "teams.pdf",
                data=render_teams_pdf(teams),
                file_name="teams.pdf",
                mime="application/pdf",
            )

    _stage_nav(back_to=2, next_to=None)
