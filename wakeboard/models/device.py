import uuid
from datetime import datetime

from ..utils.db import db


def _new_id():
    return uuid.uuid4().hex


class Device(db.Model):
    __tablename__ = 'devices'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'mac_address', name='uq_devices_user_mac'),
    )
    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    user_id = db.Column(db.String(255), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(128), nullable=False)
    mac_address = db.Column(db.String(17), nullable=False)
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'name': self.name,
            'macAddress': self.mac_address,
            'description': self.description,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }
