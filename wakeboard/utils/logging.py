import logging
import time

from flask import g, request

logger = logging.getLogger('wakeboard.access')

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def configure_logging(app):
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger('wakeboard').setLevel(level)

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop('request_started', None)
        elapsed = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.info('%s %s %s %.0fms', request.method, request.path, response.status_code, elapsed)
        return response
