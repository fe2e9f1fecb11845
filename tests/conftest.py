from __future__ import annotations

import pytest

from casebook import create_app, db
from config import TestConfig

SAMPLE_TEXT = """\
//// What is the diagnosis? | რა არის დიაგნოზი?
???? Look at the ST segment | შეხედეთ ST სეგმენტს
// STEMI ## Correct, ST elevation | სწორია, ST ელევაცია
/// Pericarditis | პერიკარდიტი
/// Normal ECG

//// First drug? | პირველი წამალი?
// Aspirin | ასპირინი
/// Warfarin ## Not in the acute phase | არა მწვავე ფაზაში
"""


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    res = client.post('/login', json={'login': 'admin', 'password': 'admin-pass'})
    assert res.status_code == 200
    return client


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT
