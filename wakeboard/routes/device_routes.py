from flask import Blueprint
from ..controllers.device_controller import add_device, update_device, delete_device, select_devices

device_bp = Blueprint('device_bp', __name__)
device_bp.route('/add', methods=['POST'])(add_device)
device_bp.route('/update', methods=['POST'])(update_device)
device_bp.route('/delete', methods=['POST'])(delete_device)
device_bp.route('/select', methods=['POST'])(select_devices)
