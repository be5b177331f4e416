from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import SQLAlchemyError

from models.models import db, Application, ContactMessage


@pytest.mark.parametrize('path', ['/', '/applications', '/messages', '/analytics', '/applications/export.csv'])
def test_pages_redirect_to_login(client, path):
    response = client.get(path)

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/login')


def test_removed_admin_loses_access(client, app):
    with client.session_transaction() as sess:
        sess['_user_id'] = 'former@example.com'

    assert client.get('/api/applications').status_code == 401


class TestDashboard:
    def test_counts_and_chart(self, admin_client, make_application, make_message, make_event):
        make_application(email='a@x.com')
        make_application(email='b@x.com', is_read=True)
        make_message()
        make_event('application_form_submit')

        response = admin_client.get('/')

        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert 'Applications Overview' in html
        assert 'monthly-chart' in html
        assert 'Analytics data is currently unavailable' not in html

    def test_analytics_failure_shows_notice(self, admin_client, monkeypatch):
        def broken(now):
            raise SQLAlchemyError('no such table: analytics_events')
        monkeypatch.setattr('routes.dashboard.load_monthly_submissions', broken)

        response = admin_client.get('/')

        assert response.status_code == 200
        assert 'Analytics data is currently unavailable' in response.get_data(as_text=True)


class TestDetailPages:
    def test_application_detail_marks_read(self, admin_client, make_application):
        application = make_application(name='Meera Iyer')

        response = admin_client.get(f'/applications/{application.id}')

        assert response.status_code == 200
        assert 'Meera Iyer' in response.get_data(as_text=True)
        db.session.expire_all()
        assert Application.query.filter_by(id=application.id).one().is_read is True

    def test_message_detail_marks_read(self, admin_client, make_message):
        message = make_message()

        response = admin_client.get(f'/messages/{message.id}')

        assert response.status_code == 200
        db.session.expire_all()
        assert ContactMessage.query.filter_by(id=message.id).one().is_read is True

    @pytest.mark.parametrize('path', ['/applications/missing', '/messages/missing'])
    def test_missing_record_is_404_page(self, admin_client, path):
        response = admin_client.get(path)

        assert response.status_code == 404
        assert 'Not found' in response.get_data(as_text=True)


def test_applications_page_lists_and_counts_unread(admin_client, make_application):
    make_application(name='Unread One', email='u@x.com')
    make_application(name='Read One', email='r@x.com', is_read=True)

    html = admin_client.get('/applications').get_data(as_text=True)

    assert 'Unread One' in html
    assert 'Read One' in html
    assert '1 unread application' in html


def test_messages_page_unread_filter(admin_client, make_message):
    make_message(subject='Needs reply')
    make_message(subject='Already seen', email='seen@example.com', is_read=True)

    html = admin_client.get('/messages?unread=1').get_data(as_text=True)

    assert 'Needs reply' in html
    assert 'Already seen' not in html


class TestAnalytics:
    def test_summary_json(self, admin_client, make_event):
        now = datetime.utcnow()
        for _ in range(4):
            make_event('session_start', now - timedelta(days=1))
        make_event('return_visit', now - timedelta(days=1))
        make_event('contact_form_submit', now - timedelta(days=2))
        make_event('application_form_submit', now - timedelta(days=20))
        make_event('careers_page_view', now, event_value='linkedin')

        response = admin_client.get('/api/analytics')

        assert response.status_code == 200
        summary = response.get_json()
        assert summary['retention_rate'] == '25.0'
        assert summary['total_sessions'] == 4
        assert summary['new_sessions'] == 3
        assert summary['recent_total'] == 1
        assert summary['careers_by_source'] == [{'value': 'linkedin', 'label': 'linkedin', 'count': 1}]
        assert len(summary['daily_trend']) == 30

    def test_window_parameter(self, admin_client, make_event):
        make_event('application_form_submit', datetime.utcnow() - timedelta(days=20))

        assert admin_client.get('/api/analytics?window=30').get_json()['recent_applications'] == 1
        assert admin_client.get('/api/analytics?window=7').get_json()['recent_applications'] == 0
        assert admin_client.get('/api/analytics?window=99').get_json()['window_days'] == 7

    def test_page_renders_without_events(self, admin_client):
        response = admin_client.get('/analytics')

        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert 'No events tracked yet' in html
        assert '0%' in html
