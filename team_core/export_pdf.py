# team_core/export_pdf.py
from __future__ import annotations
from typing import List, Sequence
import io
from reportlab.lib.pagesizes import letter, landscape
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .models import Participant
from .stats import summarize
from .ui_helpers import display_name


def _team_table(members: Sequence[Participant]) -> Table:
    data = [["Name", "Gender", "Age"]]
    for p in members:
        age = "" if p.age is None else f"{p.age:g}"
        data.append([display_name(p), p.gender, age])
    t = Table(data, repeatRows=1, colWidths=[260, 100, 60])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.lightgrey),
        ("TEXTCOLOR", (0,0), (-1,0), colors.black),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,-1), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
    ]))
    return t


def render_teams_pdf(teams: Sequence[Sequence[Participant]], title: str = "Teams") -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=landscape(letter), title=title,
                            leftMargin=40, rightMargin=40, topMargin=40, bottomMargin=40)
    styles = getSampleStyleSheet()
    story: List = [Paragraph(title, styles["Title"])]

    for idx, (members, s) in enumerate(zip(teams, summarize(teams)), start=1):
        genders = ", ".join(f"{g or '(blank)'}: {n}" for g, n in sorted(s.gender_histogram.items()))
        story.append(Paragraph(f"Team {idx}", styles["Heading2"]))
        story.append(Paragraph(
            f"{s.count} members | average age {s.average_age:.1f}" + (f" | {genders}" if genders else ""),
            styles["Normal"],
        ))
        story.append(Spacer(1, 6))
        story.append(_team_table(members))
        story.append(Spacer(1, 14))

    doc.build(story)
    return buf.getvalue()
