from flask import current_app, request

from ..errors import ForbiddenError

UNSAFE_METHODS = frozenset({'POST', 'PUT', 'PATCH', 'DELETE'})
FORM_CONTENT_TYPES = frozenset({
    'application/x-www-form-urlencoded',
    'multipart/form-data',
    'text/plain',
})


def _allowed_origins():
    own = request.host_url.rstrip('/')
    return {own, *current_app.config.get('CSRF_TRUSTED_ORIGINS', [])}


def check_request_origin():
    """Reject form-encoded unsafe requests from an untrusted Origin."""
    if request.method not in UNSAFE_METHODS:
        return None
    if request.mimetype not in FORM_CONTENT_TYPES:
        return None
    origin = request.headers.get('Origin')
    if origin not in _allowed_origins():
        raise ForbiddenError('Cross-site request rejected')
    return None


def init_csrf(app):
    app.before_request(check_request_origin)
