from datetime import datetime

from ..utils.db import db


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.String(255), primary_key=True)
    email = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    devices = db.relationship('Device', backref='owner', cascade='all, delete-orphan', passive_deletes=True)

    def to_dict(self):
        return {'id': self.id, 'email': self.email, 'name': self.name}
