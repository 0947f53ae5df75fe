import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import ConflictError, NotFoundOrForbidden, UpstreamFailure, ValidationError
from ..models import Device
from ..utils.db import db
from ..utils.mac import normalize_mac
from .user_service import get_user

logger = logging.getLogger(__name__)


def _owned(device_id, user_id):
    return Device.query.filter_by(id=device_id, user_id=user_id).one_or_none()


def _mac_taken(user_id, mac_address, exclude_id=None):
    query = Device.query.filter_by(user_id=user_id, mac_address=mac_address)
    if exclude_id is not None:
        query = query.filter(Device.id != exclude_id)
    return query.first() is not None


def _commit(action):
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise UpstreamFailure(f'Failed to {action}: {exc.__class__.__name__}') from exc


def add_device(name, mac_address, user_id, description=None):
    if not name or not user_id:
        raise ValidationError('Device name and user id are required')
    mac_address = normalize_mac(mac_address)

    if _mac_taken(user_id, mac_address):
        raise ConflictError()

    device = Device(name=name, mac_address=mac_address, user_id=user_id, description=description)
    db.session.add(device)
    try:
        _commit('add device')
    except IntegrityError as exc:
        # a concurrent insert won the unique index, or the owner is unknown
        if _mac_taken(user_id, mac_address):
            raise ConflictError() from exc
        if get_user(user_id) is None:
            raise NotFoundOrForbidden('User is not registered') from exc
        raise UpstreamFailure('Failed to add device') from exc

    logger.info('Added device %s (%s) for user %s', device.id, mac_address, user_id)
    return device


def update_device(device_id, user_id, name, mac_address):
    if not device_id or not name:
        raise ValidationError('Device id and name are required')
    mac_address = normalize_mac(mac_address)

    device = _owned(device_id, user_id)
    if device is None:
        raise NotFoundOrForbidden()
    if _mac_taken(user_id, mac_address, exclude_id=device_id):
        raise ConflictError()

    device.name = name
    device.mac_address = mac_address
    try:
        _commit('update device')
    except IntegrityError as exc:
        raise ConflictError() from exc

    logger.info('Updated device %s for user %s', device_id, user_id)
    return device


def delete_device(device_id, user_id):
    try:
        deleted = Device.query.filter_by(id=device_id, user_id=user_id).delete()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise UpstreamFailure(f'Failed to delete device: {exc.__class__.__name__}') from exc

    if deleted == 0:
        db.session.rollback()
        raise NotFoundOrForbidden()
    _commit('delete device')
    logger.info('Deleted device %s for user %s', device_id, user_id)


def list_devices(user_id):
    return Device.query.filter_by(user_id=user_id).order_by(Device.created_at).all()
