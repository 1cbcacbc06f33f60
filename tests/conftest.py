"""Shared fixtures: a Flask app on a throwaway SQLite file and helpers to seed it."""

import json
from datetime import datetime

import pytest
import requests

from app import create_app
from models.models import db, ScholarshipApplication


class TrackerTestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    TRACKING_API_URL = 'http://tracker.test'
    TRACKING_TIMEOUT = 10
    LOG_LEVEL = 'DEBUG'


def application_row(**overrides):
    row = dict(
        id=7,
        name='Asha Patil',
        course_name='B.Sc. Computer Science',
        year_of_study=2,
        created_at=datetime(2024, 3, 5, 10, 30),
        updated_at=datetime(2024, 3, 9, 16, 0),
        student_salaried=0,
        father_alive=1,
        father_working=1,
        father_occupation='Farmer',
        mother_alive=1,
        mother_working=0,
        mother_occupation=None,
        marksheet_upload='uploads/marksheets/7.pdf',
        aadhar_no='123412341234',
        cap_id='CAP2024007',
    )
    row.update(overrides)
    return row


@pytest.fixture
def app(tmp_path):
    class Config(TrackerTestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'scholarship.db'}"

    flask_app = create_app(Config)
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_application(app):
    def _add(**overrides):
        application = ScholarshipApplication(**application_row(**overrides))
        db.session.add(application)
        db.session.commit()
        return application.id
    return _add


class FlaskSession:
    """Stands in for requests.Session, answering from a Flask test client."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None, stream=False):
        self.calls.append({'url': url, 'params': params, 'headers': headers, 'timeout': timeout})
        path = '/' + url.split('/', 3)[3]
        resp = self.test_client.get(path, query_string=params, headers=headers)
        return make_response(resp.status_code, resp.get_data(as_text=True))

    def close(self):
        pass


def make_response(status_code, body):
    r = requests.Response()
    r.status_code = status_code
    r._content = (body if isinstance(body, str) else json.dumps(body)).encode('utf-8')
    r._content_consumed = True
    r.headers['Content-Type'] = 'application/json'
    return r


@pytest.fixture
def api_session(client):
    return FlaskSession(client)
