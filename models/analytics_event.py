from models.models import db, new_id, isoformat
from datetime import datetime


class AnalyticsEvent(db.Model):
    __tablename__ = 'analytics_events'
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    event_name = db.Column(db.String(128), nullable=False, index=True)
    event_category = db.Column(db.String(128), nullable=True)
    event_value = db.Column(db.String(256), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'eventName': self.event_name,
            'eventCategory': self.event_category,
            'eventValue': self.event_value,
            'createdAt': isoformat(self.created_at),
        }

    def __repr__(self):
        return f"<AnalyticsEvent {self.event_name} at {self.created_at}>"
