import os
from datetime import datetime

import pytest

os.environ['DATABASE_URI'] = 'sqlite://'
os.environ['ADMIN_EMAILS'] = 'admin@example.com'
os.environ['DASHBOARD_TIMEZONE'] = 'UTC'
os.environ['SECRET_KEY'] = 'test-secret-key'

from app import app as flask_app  # noqa: E402
from models.models import db, Application, ContactMessage  # noqa: E402
from models.analytics_event import AnalyticsEvent  # noqa: E402

ADMIN_EMAIL = 'admin@example.com'


@pytest.fixture
def app():
    flask_app.config.update(
        TESTING=True,
        ADMIN_EMAILS=[ADMIN_EMAIL],
        DASHBOARD_TIMEZONE='UTC',
        GOOGLE_CLIENT_ID='test-client-id',
        GOOGLE_CLIENT_SECRET='test-client-secret',
    )
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess['_user_id'] = ADMIN_EMAIL
        sess['_fresh'] = True
    return client


@pytest.fixture
def make_application(app):
    def _make(**overrides):
        fields = {
            'name': 'Asha Rao',
            'email': 'asha@example.com',
            'whatsapp': '+91 98765 43210',
            'college': 'Example Institute of Technology',
            'specialization': 'Computer Science',
            'year_of_grad': '2025',
            'cgpa': 8.4,
            'backlogs': '0',
            'job_title': 'Software Engineer Intern',
            'resume_url': 'https://example.com/resume.pdf',
            'uploaded_at': datetime(2025, 3, 1, 10, 0),
        }
        fields.update(overrides)
        application = Application(**fields)
        db.session.add(application)
        db.session.commit()
        return application
    return _make


@pytest.fixture
def make_message(app):
    def _make(**overrides):
        fields = {
            'name': 'Ravi Kumar',
            'email': 'ravi@example.com',
            'subject': 'Internship question',
            'message': 'Are you hiring interns this summer?',
            'created_at': datetime(2025, 3, 2, 9, 30),
        }
        fields.update(overrides)
        message = ContactMessage(**fields)
        db.session.add(message)
        db.session.commit()
        return message
    return _make


@pytest.fixture
def make_event(app):
    def _make(event_name, created_at=None, event_value=None, event_category=None):
        event = AnalyticsEvent(
            event_name=event_name,
            event_value=event_value,
            event_category=event_category,
            created_at=created_at or datetime.utcnow(),
        )
        db.session.add(event)
        db.session.commit()
        return event
    return _make
