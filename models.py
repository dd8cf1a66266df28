from extensions import db
from datetime import datetime
from sqlalchemy import JSON
import uuid


# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


def _isoformat(value):
    return value.isoformat() if value else None


CONTACT_STATUSES = ('NEW', 'READ', 'REPLIED', 'ARCHIVED')
ATTENDING_CHOICES = ('YES', 'NO', 'MAYBE')


class ContactSubmission(db.Model):
    __tablename__ = 'contact_submissions'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(255))
    message = db.Column(db.Text, nullable=False)
    ip_address = db.Column(db.String(255))
    status = db.Column(db.String(20), default='NEW', nullable=False)  # NEW, READ, REPLIED, ARCHIVED
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.Index('idx_contact_created', 'created_at'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'subject': self.subject,
            'message': self.message,
            'ipAddress': self.ip_address,
            'status': self.status,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }


class NewsletterSubscription(db.Model):
    __tablename__ = 'newsletter_subscriptions'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = db.Column(db.String(255), unique=True, nullable=False)
    name = db.Column(db.String(255))
    preferences = db.Column(SafeJSON, default=lambda: ['new_work'])  # ["new_work", ...]
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    subscribed_at = db.Column(db.DateTime, default=datetime.utcnow)
    unsubscribed_at = db.Column(db.DateTime)
    unsubscribe_reason = db.Column(db.Text)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'preferences': self.preferences or [],
            'isActive': self.is_active,
            'subscribedAt': _isoformat(self.subscribed_at),
            'unsubscribedAt': _isoformat(self.unsubscribed_at),
            'unsubscribeReason': self.unsubscribe_reason,
        }


class EventRSVP(db.Model):
    __tablename__ = 'event_rsvps'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50))
    guest_count = db.Column(db.Integer, default=1, nullable=False)
    attending = db.Column(db.String(10), nullable=False)  # YES, NO, MAYBE
    dietary_restrictions = db.Column(db.Text)
    message = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # One RSVP per guest email per event
    __table_args__ = (
        db.UniqueConstraint('event_id', 'email', name='uq_rsvp_event_email'),
        db.Index('idx_rsvp_event_attending', 'event_id', 'attending'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'eventId': self.event_id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'guestCount': self.guest_count,
            'attending': self.attending,
            'dietaryRestrictions': self.dietary_restrictions,
            'message': self.message,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at),
        }
