# FILE: tests/test_export_pdf.py
from team_core.export_pdf import render_teams_pdf
from team_core.partition import generate_teams
from team_core.partition_test_helpers import make_roster

def test_render_teams_pdf():
    teams = generate_teams(make_roster(3, 3, 1), 3)
    pdf = render_teams_pdf(teams, title="Camp Teams")
    assert pdf.startswith(b"%PDF")

def test_render_with_empty_team():
    pdf = render_teams_pdf(generate_teams(make_roster(1, 0, 0), 2))
    assert pdf.startswith(b"%PDF")
