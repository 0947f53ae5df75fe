"""Relay a wake request to the Adafruit IO feed watched by the WOL relay.

The relay device subscribed to the feed is the one that actually puts
the magic packet on the LAN; this module only publishes the MAC address
as a feed value. One attempt per request, no retries.
"""
import logging

import httpx

from ..errors import ConfigurationError, UpstreamFailure
from ..utils.mac import normalize_mac

logger = logging.getLogger(__name__)


def relay_url(config):
    base = config['ADAFRUIT_IO_BASE_URL'].rstrip('/')
    return f"{base}/{config['ADAFRUIT_IO_USERNAME']}/feeds/{config['ADAFRUIT_FEED_KEY']}/data"


def _credentials_missing(config):
    return [
        key for key in ('ADAFRUIT_IO_USERNAME', 'ADAFRUIT_IO_KEY', 'ADAFRUIT_FEED_KEY')
        if not config.get(key)
    ]


def _body(response):
    try:
        return response.json()
    except ValueError:
        return response.text


def send_wake_signal(mac_address, config):
    """Publish ``mac_address`` to the relay feed and return the relay's reply.

    Raises ValidationError for an empty or malformed address and
    ConfigurationError when the relay credentials are unset, both before
    any network traffic. A transport error or a non-2xx reply raises
    UpstreamFailure.
    """
    mac_address = normalize_mac(mac_address)

    missing = _credentials_missing(config)
    if missing:
        logger.error('Relay credentials missing: %s', ', '.join(missing))
        raise ConfigurationError()

    url = relay_url(config)
    try:
        response = httpx.post(
            url,
            json={'value': mac_address},
            headers={'X-AIO-Key': config['ADAFRUIT_IO_KEY']},
            timeout=config.get('RELAY_TIMEOUT'),
        )
    except httpx.HTTPError as exc:
        logger.warning('Relay request for %s failed: %s', mac_address, exc)
        raise UpstreamFailure(f'Could not reach the wake relay: {exc.__class__.__name__}') from exc

    body = _body(response)
    if not response.is_success:
        logger.warning('Relay rejected wake for %s: %s %s', mac_address, response.status_code, body)
        raise UpstreamFailure(f'Wake signal failed: {response.text}', data=body)

    logger.info('Wake signal relayed for %s', mac_address)
    return body
