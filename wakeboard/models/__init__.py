from ..utils.db import db
from .user import User
from .device import Device

__all__ = ['db', 'User', 'Device']
