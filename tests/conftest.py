import pytest

from timetable_rules.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear() # settings are cached per process; env changes in a test must not leak
    yield
    get_settings.cache_clear()


@pytest.fixture
def monday_teacher():
    return {
        "id": "t1",
        "disponibilites": [
            {"jour_semaine": "lundi", "heure_debut": "08:00", "heure_fin": "12:00", "type": "disponible"},
        ],
        "heures_actuelles": 10,
        "heures_contractuelles": 18,
    }
