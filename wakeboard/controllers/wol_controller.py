from flask import current_app, request, jsonify

from ..schemas import WakeRequest
from ..services import wake_service


def send_wake():
    data = WakeRequest.parse_body(request.get_json(silent=True))
    relay_reply = wake_service.send_wake_signal(data.mac_address, current_app.config)
    return jsonify({'success': True, 'message': 'Wake signal sent', 'data': relay_reply}), 200
