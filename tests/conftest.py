from pathlib import Path

import pytest

from dynamic_form import FormStateStore, load_form_config

FIXTURES = Path(__file__).parent / "fixtures"
EVENT_FORM = FIXTURES / "event_registration.json"


@pytest.fixture
def event_fields():
    return load_form_config(EVENT_FORM)


@pytest.fixture
def store(event_fields):
    return FormStateStore(event_fields)