from flask import request, jsonify

from ..schemas import RegisterUserRequest
from ..services import user_service


def register_user():
    data = RegisterUserRequest.parse_body(request.get_json(silent=True))
    user_service.register_user(data.user_id, data.email, data.name)
    return jsonify({'success': True, 'message': 'User registered'}), 200
