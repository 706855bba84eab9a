import logging

import pytest
from pydantic import ValidationError

from timetable_rules.core.exceptions import ConfigurationError
from timetable_rules.schemas.resources import Activity, Room
from timetable_rules.schemas.verdict import Violation
from timetable_rules.services.compatibility import (
    RoomRequirements,
    check_resource_compatibility,
    is_resource_compatible,
)


def test_capacity_is_checked():
    room = Room(capacity=20, category="standard")
    activity = Activity(headcount=25, category="td")
    verdict = check_resource_compatibility(room, activity)
    assert not verdict
    assert verdict.violation == Violation.incompatible_resource
    assert verdict.details["reason"] == "capacity"

    assert is_resource_compatible(Room(capacity=25, category="standard"), activity)


def test_laboratory_hosts_practical_work():
    assert is_resource_compatible({"capacite": 30, "type_salle": "laboratoire"}, {"effectif_estime": 20, "type_cours": "tp"})


@pytest.mark.parametrize(
    "activity_category, room_category, expected",
    [
        ("tp", "informatique", True),
        ("tp", "atelier", True),
        ("tp", "standard", False),
        ("atelier", "musique", True),
        ("atelier", "laboratoire", False),
        ("cours_magistral", "amphitheatre", True),
        ("cours_magistral", "standard", True),
        ("td", "amphitheatre", False),
        ("soutien", "standard", True),
        ("soutien", "gymnase", False),
    ],
)
def test_category_table(activity_category, room_category, expected):
    room = Room(capacity=100, category=room_category)
    activity = Activity(headcount=10, category=activity_category)
    assert is_resource_compatible(room, activity) is expected


def test_category_mismatch_reason():
    verdict = check_resource_compatibility(Room(capacity=100, category="gymnase"), Activity(headcount=10, category="td"))
    assert verdict.details["reason"] == "category"
    assert verdict.details["accepted"] == ["standard"]


def test_missing_headcount_defaults_to_zero():
    assert is_resource_compatible({"capacity": 1, "category": "standard"}, {"category": "td", "headcount": None})


def test_injected_requirements():
    requirements = RoomRequirements.from_settings().extended({"sport": ["gymnase"]})
    room = Room(capacity=40, category="gymnase")
    assert is_resource_compatible(room, Activity(headcount=30, category="sport"), requirements)
    assert not is_resource_compatible(room, Activity(headcount=30, category="sport"))
    assert requirements.as_dict()["td"] == ["standard"]


def test_requirements_from_environment(monkeypatch):
    monkeypatch.setenv("TIMETABLE_RULES_ROOM_REQUIREMENTS", '{"td": ["standard", "amphitheatre"]}')
    requirements = RoomRequirements.from_settings()
    assert requirements.required_categories("td") == frozenset({"standard", "amphitheatre"})
    assert requirements.required_categories("tp") == frozenset({"standard"})


def test_requirements_reject_bad_tables():
    with pytest.raises(ConfigurationError):
        RoomRequirements({"td": "standard"})
    with pytest.raises(ConfigurationError):
        RoomRequirements({"td": []})
    with pytest.raises(ConfigurationError):
        RoomRequirements({}, default=())


def test_large_rooms_and_groups_get_a_verdict():
    assert is_resource_compatible(
        {"capacity": 1200, "category": "amphitheatre"},
        {"headcount": 30, "category": "cours_magistral"},
    )
    assert not is_resource_compatible(
        {"capacity": 300, "category": "amphitheatre"},
        {"headcount": 600, "category": "cours_magistral"},
    )
    assert is_resource_compatible(
        {"capacity": 800, "category": "amphitheatre"},
        {"headcount": 600, "category": "cours_magistral"},
    )


def test_zero_capacity_room_is_rejected_not_raised():
    verdict = check_resource_compatibility({"capacity": 0, "category": "standard"}, {"headcount": 1, "category": "td"})
    assert not verdict
    assert verdict.details["reason"] == "capacity"


def test_non_integer_capacity_is_malformed():
    with pytest.raises(ValidationError):
        is_resource_compatible({"capacity": "lots", "category": "standard"}, {"headcount": 1, "category": "td"})


def test_bad_table_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="timetable_rules.services.compatibility"):
        with pytest.raises(ConfigurationError):
            RoomRequirements({"td": []})
    assert "accepts no room category" in caplog.text
