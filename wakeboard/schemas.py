"""Request bodies accepted by the JSON endpoints.

Each route parses its body into one of these models before calling a
service, so services only ever see stripped, non-empty values and
canonical MAC addresses.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ValidationError
from .utils.mac import normalize_mac


class RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    @classmethod
    def parse_body(cls, body):
        if not isinstance(body, dict):
            raise ValidationError('Request body must be a JSON object')
        return cls.model_validate(body)


def _mac(value):
    try:
        return normalize_mac(value)
    except ValidationError as exc:
        # surfaced by pydantic as a regular field error
        raise ValueError(exc.message) from exc


class AddDeviceRequest(RequestModel):
    name: str = Field(min_length=1, max_length=128)
    mac_address: str = Field(alias='macAddress')
    description: Optional[str] = None
    user_id: str = Field(alias='userId', min_length=1, max_length=255)

    @field_validator('mac_address')
    @classmethod
    def check_mac(cls, value):
        return _mac(value)


class UpdateDeviceRequest(RequestModel):
    id: str = Field(min_length=1, max_length=32)
    name: str = Field(min_length=1, max_length=128)
    mac_address: str = Field(alias='macAddress')
    user_id: Optional[str] = Field(default=None, alias='userId', max_length=255)

    @field_validator('mac_address')
    @classmethod
    def check_mac(cls, value):
        return _mac(value)


class DeleteDeviceRequest(RequestModel):
    id: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias='userId')


class SelectDevicesRequest(RequestModel):
    user_id: str = Field(alias='userId', min_length=1, max_length=255)


class RegisterUserRequest(RequestModel):
    user_id: str = Field(alias='userId', min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)
    name: str = Field(min_length=1, max_length=255)


class WakeRequest(RequestModel):
    mac_address: str = Field(alias='macAddress')

    @field_validator('mac_address')
    @classmethod
    def check_mac(cls, value):
        return _mac(value)
