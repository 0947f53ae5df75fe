from flask import request, jsonify

from ..errors import MissingIdentityError
from ..schemas import AddDeviceRequest, DeleteDeviceRequest, SelectDevicesRequest, UpdateDeviceRequest
from ..services import device_service


def add_device():
    data = AddDeviceRequest.parse_body(request.get_json(silent=True))
    device = device_service.add_device(
        name=data.name,
        mac_address=data.mac_address,
        user_id=data.user_id,
        description=data.description,
    )
    return jsonify({'success': True, 'message': 'Device added', 'device': device.to_dict()}), 200


def update_device():
    data = UpdateDeviceRequest.parse_body(request.get_json(silent=True))
    if not data.user_id:
        raise MissingIdentityError('User id is required')
    device = device_service.update_device(data.id, data.user_id, data.name, data.mac_address)
    return jsonify({'success': True, 'message': 'Device updated', 'device': device.to_dict()}), 200


def delete_device():
    data = DeleteDeviceRequest.parse_body(request.get_json(silent=True))
    if not data.id or not data.user_id:
        raise MissingIdentityError()
    device_service.delete_device(data.id, data.user_id)
    return jsonify({'success': True, 'message': 'Device deleted'}), 200


def select_devices():
    data = SelectDevicesRequest.parse_body(request.get_json(silent=True))
    devices = device_service.list_devices(data.user_id)
    return jsonify({
        'success': True,
        'message': 'Devices loaded',
        'devices': [d.to_dict() for d in devices],
        'count': len(devices),
    }), 200
