from app import app
from models.models import db, Application, ContactMessage
from models.analytics_event import AnalyticsEvent
from datetime import datetime, timedelta
import random

JOB_TITLES = ['Software Engineer Intern', 'Data Analyst', 'Frontend Developer', None]
SPECIALIZATIONS = ['Computer Science', 'Electronics', 'Information Technology', 'Mechanical']
SOURCES = ['linkedin', 'instagram', 'direct_link', 'college_portal']

with app.app_context():
    db.create_all()
    now = datetime.utcnow()
    rng = random.Random(42)

    # Applications
    for i in range(1, 21):
        email = f"applicant{i}@example.com"
        if not Application.query.filter_by(email=email).first():
            db.session.add(Application(
                name=f"Applicant {i}",
                email=email,
                whatsapp=f"+91 98765 4{i:04d}",
                college='Example Institute of Technology',
                specialization=rng.choice(SPECIALIZATIONS),
                year_of_grad=str(rng.choice([2024, 2025, 2026])),
                cgpa=round(rng.uniform(6.5, 10.0), 2),
                backlogs=str(rng.choice([0, 0, 0, 1, 2])),
                job_title=rng.choice(JOB_TITLES),
                resume_url=f"https://example.com/resumes/applicant{i}.pdf",
                uploaded_at=now - timedelta(days=rng.randint(0, 300)),
            ))
    db.session.commit()

    # Contact messages
    for i in range(1, 11):
        email = f"visitor{i}@example.com"
        if not ContactMessage.query.filter_by(email=email).first():
            db.session.add(ContactMessage(
                name=f"Visitor {i}",
                email=email,
                subject=f"Question #{i}",
                message='Hello, I would like to know more about your open positions.',
                created_at=now - timedelta(days=rng.randint(0, 60)),
            ))
    db.session.commit()

    # Analytics events, only on an empty table
    if AnalyticsEvent.query.count() == 0:
        for _ in range(400):
            created_at = now - timedelta(days=rng.randint(0, 360), minutes=rng.randint(0, 1440))
            name = rng.choice(['session_start', 'session_start', 'return_visit', 'application_form_submit',
                               'contact_form_submit', 'careers_page_view'])
            value = rng.choice(SOURCES) if 'careers' in name else None
            db.session.add(AnalyticsEvent(event_name=name, event_category='engagement', event_value=value, created_at=created_at))
        db.session.commit()

    print('Seed data inserted successfully!')
