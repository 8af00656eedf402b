from __future__ import annotations
from .extensions import db
from .scheduler import is_due, utcnow


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)


class Card(db.Model):
    __tablename__ = 'flashcards'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    question = db.Column(db.Text, nullable=False)
    answer = db.Column(db.Text, nullable=False)
    box = db.Column(db.Integer, nullable=False, default=1)
    next_review_date = db.Column(db.DateTime, nullable=False, default=utcnow)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    __table_args__ = (db.CheckConstraint('box >= 1', name='ck_flashcards_box_positive'),)

    def to_dict(self, now=None) -> dict:
        return {
            'id': self.id,
            'question': self.question,
            'answer': self.answer,
            'box': self.box,
            'nextReviewDate': self.next_review_date.isoformat() + 'Z' if self.next_review_date else None,
            'due': is_due(self.next_review_date, now or utcnow()),
            'user': self.user_id,
        }
