import re

from ..errors import ValidationError

# Six hex pairs, one separator style throughout.
MAC_PATTERN = re.compile(r'^[0-9A-Fa-f]{2}([:-])(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}$')


def is_valid_mac(value):
    return isinstance(value, str) and MAC_PATTERN.match(value) is not None


def normalize_mac(value):
    """Return ``value`` in canonical ``XX:XX:XX:XX:XX:XX`` form.

    Hyphen separated input is rewritten with colons so the same device
    always compares equal regardless of how it was typed.
    """
    if not value:
        raise ValidationError('MAC address is required')
    value = value.strip()
    if not is_valid_mac(value):
        raise ValidationError('MAC address format is invalid')
    return value.replace('-', ':').upper()
