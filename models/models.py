from flask_sqlalchemy import SQLAlchemy
from datetime import datetime
import uuid

db = SQLAlchemy()


def new_id():
    return uuid.uuid4().hex


def isoformat(value):
    return value.isoformat() if value else None


# Job applications submitted through the careers page
class Application(db.Model):
    __tablename__ = 'applications'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(128), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    whatsapp = db.Column(db.String(32), nullable=False)
    college = db.Column(db.String(256), nullable=False)
    specialization = db.Column(db.String(128), nullable=False)
    year_of_grad = db.Column(db.String(8), nullable=False)
    cgpa = db.Column(db.Float, nullable=True)
    backlogs = db.Column(db.String(16), nullable=False, default='0')
    job_title = db.Column(db.String(256), nullable=True)
    resume_url = db.Column(db.String(512), nullable=False)
    uploaded_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    is_read = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'whatsapp': self.whatsapp,
            'college': self.college,
            'specialization': self.specialization,
            'yearOfGrad': self.year_of_grad,
            'cgpa': self.cgpa,
            'backlogs': self.backlogs,
            'jobTitle': self.job_title,
            'resumeUrl': self.resume_url,
            'uploadedAt': isoformat(self.uploaded_at),
            'isRead': self.is_read,
        }

    def __repr__(self):
        return f"<Application {self.id} {self.name}>"


# Contact form messages
class ContactMessage(db.Model):
    __tablename__ = 'contact_messages'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    name = db.Column(db.String(128), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    subject = db.Column(db.String(256), nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    is_read = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'subject': self.subject,
            'message': self.message,
            'createdAt': isoformat(self.created_at),
            'isRead': self.is_read,
        }

    def __repr__(self):
        return f"<ContactMessage {self.id} from {self.email}>"
