# FILE: tests/test_models.py
from team_core.models import Participant
from team_core.ui_helpers import display_name, split_leaders, by_id

def test_participant_normalizes_loose_values():
    p = Participant(id=5, first_name="Ann", last_name=None, gender=None, age="-1", is_leader="yes")
    assert p.id == "5"
    assert p.last_name == ""
    assert p.gender == ""
    assert p.age is None
    assert p.is_leader is True
    assert p.full_name == "Ann"

def test_display_name_and_split():
    a = Participant(id="a", first_name="Ann", last_name="Lee", nickname="Annie")
    b = Participant(id="b", first_name="Bo", is_leader=True)
    assert display_name(a) == "Ann Lee (Annie)"
    leaders, others = split_leaders([a, b])
    assert leaders == [b] and others == [a]
    assert by_id([a, b])["b"] is b
