import logging
from datetime import datetime

from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError

from ..errors import UpstreamFailure, ValidationError
from ..models import User
from ..utils.db import db

logger = logging.getLogger(__name__)


def get_user(user_id):
    return db.session.get(User, user_id)


def _upsert_statement(user_id, email, name):
    values = {'id': user_id, 'email': email, 'name': name}
    changes = {'email': email, 'name': name, 'updated_at': datetime.utcnow()}
    dialect = db.session.get_bind().dialect.name

    if dialect == 'mysql':
        return mysql.insert(User).values(**values).on_duplicate_key_update(**changes)
    if dialect == 'postgresql':
        return postgresql.insert(User).values(**values).on_conflict_do_update(index_elements=[User.id], set_=changes)
    if dialect == 'sqlite':
        return sqlite.insert(User).values(**values).on_conflict_do_update(index_elements=[User.id], set_=changes)
    raise UpstreamFailure(f'Unsupported database dialect: {dialect}')


def register_user(user_id, email, name):
    """Insert the user or overwrite email and name of an existing row.

    Runs as a single INSERT ... ON CONFLICT / ON DUPLICATE KEY statement so
    two first-time registrations of the same id both succeed.
    """
    if not user_id or not email or not name:
        raise ValidationError('User id, email and name are required')

    try:
        db.session.execute(_upsert_statement(user_id, email, name))
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise UpstreamFailure(f'Failed to register user: {exc.__class__.__name__}') from exc

    logger.info('Registered user %s', user_id)
    return db.session.get(User, user_id, populate_existing=True)
