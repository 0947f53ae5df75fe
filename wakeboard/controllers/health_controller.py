import logging

from flask import jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ..utils.db import db

logger = logging.getLogger(__name__)


def health():
    try:
        db.session.execute(text('SELECT 1'))
        database = 'ok'
    except SQLAlchemyError:
        logger.exception('Database health check failed')
        db.session.rollback()
        database = 'error'
    return jsonify({'status': 'ok', 'database': database}), 200
