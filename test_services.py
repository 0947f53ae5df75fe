import pytest
from sqlalchemy import delete, insert

from wakeboard.errors import ConflictError, NotFoundOrForbidden, ValidationError
from wakeboard.models import Device, User
from wakeboard.services import device_service, user_service
from wakeboard.utils.db import db
from wakeboard.utils.mac import is_valid_mac, normalize_mac


@pytest.fixture
def owners(app):
    user_service.register_user('u1', 'u1@example.com', 'User One')
    user_service.register_user('u2', 'u2@example.com', 'User Two')


@pytest.mark.parametrize('raw, expected', [
    ('00:11:22:33:44:55', '00:11:22:33:44:55'),
    ('aa:bb:cc:dd:ee:ff', 'AA:BB:CC:DD:EE:FF'),
    ('aA-bB-cC-01-23-45', 'AA:BB:CC:01:23:45'),
    (' 00:11:22:33:44:55 ', '00:11:22:33:44:55'),
])
def test_normalize_mac(raw, expected):
    assert normalize_mac(raw) == expected


@pytest.mark.parametrize('raw', ['', '00:11:22:33:44', '00:11:22:33:44:55:66', '00:11-22:33:44:55', '0011.2233.4455', 'gg:11:22:33:44:55'])
def test_invalid_mac(raw):
    assert not is_valid_mac(raw)
    with pytest.raises(ValidationError):
        normalize_mac(raw)


def test_add_device_canonicalizes_mac(owners):
    device = device_service.add_device('PC1', 'de-ad-be-ef-00-01', 'u1', description='office')
    stored = db.session.get(Device, device.id)
    assert stored.mac_address == 'DE:AD:BE:EF:00:01'
    assert stored.description == 'office'
    assert stored.created_at is not None


def test_duplicate_mac_per_user(owners):
    device_service.add_device('PC1', '00:11:22:33:44:55', 'u1')
    with pytest.raises(ConflictError):
        device_service.add_device('PC1 again', '00-11-22-33-44-55', 'u1')
    device_service.add_device('PC1', '00:11:22:33:44:55', 'u2')
    assert db.session.query(Device).count() == 2


def test_add_device_rejects_empty_fields(owners):
    with pytest.raises(ValidationError):
        device_service.add_device('', '00:11:22:33:44:55', 'u1')
    with pytest.raises(ValidationError):
        device_service.add_device('PC1', '', 'u1')


def test_delete_other_users_device(owners):
    device = device_service.add_device('PC1', '00:11:22:33:44:55', 'u1')
    with pytest.raises(NotFoundOrForbidden):
        device_service.delete_device(device.id, 'u2')
    assert db.session.get(Device, device.id) is not None

    device_service.delete_device(device.id, 'u1')
    assert db.session.get(Device, device.id) is None


def test_update_missing_device(owners):
    with pytest.raises(NotFoundOrForbidden):
        device_service.update_device('does-not-exist', 'u1', 'PC', '00:11:22:33:44:55')


def test_update_to_taken_mac(owners):
    device_service.add_device('PC1', '00:11:22:33:44:55', 'u1')
    second = device_service.add_device('PC2', '00:11:22:33:44:66', 'u1')
    with pytest.raises(ConflictError):
        device_service.update_device(second.id, 'u1', 'PC2', '00:11:22:33:44:55')


def test_list_devices_only_returns_owned(owners):
    device_service.add_device('PC1', '00:11:22:33:44:55', 'u1')
    device_service.add_device('PC2', '00:11:22:33:44:66', 'u2')
    devices = device_service.list_devices('u1')
    assert [d.name for d in devices] == ['PC1']
    assert device_service.list_devices('nobody') == []


def test_register_user_upserts(app):
    user_service.register_user('u1', 'old@example.com', 'Old')
    user_service.register_user('u1', 'new@example.com', 'New')

    assert db.session.query(User).count() == 1
    user = user_service.get_user('u1')
    assert (user.email, user.name) == ('new@example.com', 'New')


def test_register_user_requires_all_fields(app):
    with pytest.raises(ValidationError):
        user_service.register_user('u1', '', 'Name')


def test_register_user_over_existing_row(app):
    # row written by a concurrent first registration
    db.session.execute(insert(User).values(id='u1', email='first@example.com', name='First'))
    db.session.commit()

    user = user_service.register_user('u1', 'second@example.com', 'Second')

    assert db.session.query(User).count() == 1
    assert (user.email, user.name) == ('second@example.com', 'Second')


def test_add_device_for_unknown_owner(app):
    with pytest.raises(NotFoundOrForbidden) as excinfo:
        device_service.add_device('PC1', '00:11:22:33:44:55', 'ghost')
    assert excinfo.value.message == 'User is not registered'
    assert db.session.query(Device).count() == 0


def test_deleting_user_removes_devices(owners):
    device_service.add_device('PC1', '00:11:22:33:44:55', 'u1')
    device_service.add_device('PC2', '00:11:22:33:44:66', 'u1')
    device_service.add_device('PC3', '00:11:22:33:44:77', 'u2')

    db.session.execute(delete(User).where(User.id == 'u1'))
    db.session.commit()

    assert device_service.list_devices('u1') == []
    assert len(device_service.list_devices('u2')) == 1
