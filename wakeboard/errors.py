import logging

import pydantic
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None, data=None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.data = data

    def to_dict(self):
        body = {'success': False, 'message': self.message}
        if self.data is not None:
            body['data'] = self.data
        return body


class ValidationError(ApiError):
    status_code = 400
    message = 'Invalid request'


class MissingIdentityError(ApiError):
    status_code = 401
    message = 'Device id and user id are required'


class ForbiddenError(ApiError):
    status_code = 403
    message = 'Forbidden'


class NotFoundOrForbidden(ApiError):
    status_code = 404
    message = 'Device not found or not owned by this user'


class ConflictError(ApiError):
    status_code = 409
    message = 'This MAC address is already registered'


class ConfigurationError(ApiError):
    status_code = 500
    message = 'Relay credentials are not configured'


class UpstreamFailure(ApiError):
    status_code = 500
    message = 'Upstream service failed'


def _first_error_message(exc):
    errors = exc.errors()
    if not errors:
        return ValidationError.message
    err = errors[0]
    field = '.'.join(str(part) for part in err.get('loc', ()) if part != '__root__')
    msg = err.get('msg', ValidationError.message)
    # pydantic prefixes messages raised from validators
    msg = msg.removeprefix('Value error, ')
    return f'{field}: {msg}' if field else msg


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(exc):
        if exc.status_code >= 500:
            logger.warning('%s: %s', type(exc).__name__, exc.message)
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(pydantic.ValidationError)
    def handle_validation_error(exc):
        return jsonify({'success': False, 'message': _first_error_message(exc)}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        if exc.code is None or exc.code < 400:
            return exc
        return jsonify({'success': False, 'message': exc.description}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        logger.exception('Unhandled error')
        return jsonify({'success': False, 'message': 'Internal server error'}), 500
