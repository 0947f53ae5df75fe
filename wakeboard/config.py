import os
from dotenv import load_dotenv

load_dotenv()


def _split(value):
    return [item.strip() for item in value.split(',') if item.strip()]


def _database_uri():
    url = os.getenv('DATABASE_URL')
    if url:
        return url
    return (
        f"mysql+pymysql://{os.getenv('DB_USER')}:"
        f"{os.getenv('DB_PASS')}@"
        f"{os.getenv('DB_HOST')}/"
        f"{os.getenv('DB_NAME')}"
    )


class Config:
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-key')

    # Adafruit IO feed that the wake relay listens on
    ADAFRUIT_IO_BASE_URL = os.getenv('ADAFRUIT_IO_BASE_URL', 'https://io.adafruit.com/api/v2')
    ADAFRUIT_IO_USERNAME = os.getenv('ADAFRUIT_IO_USERNAME')
    ADAFRUIT_IO_KEY = os.getenv('ADAFRUIT_IO_KEY')
    ADAFRUIT_FEED_KEY = os.getenv('ADAFRUIT_FEED_KEY')
    RELAY_TIMEOUT = float(os.getenv('RELAY_TIMEOUT', '10'))

    CORS_ORIGINS = _split(os.getenv('CORS_ORIGINS', '*'))
    CSRF_TRUSTED_ORIGINS = _split(os.getenv('CSRF_TRUSTED_ORIGINS', ''))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    ADAFRUIT_IO_BASE_URL = 'https://relay.test/api/v2'
    ADAFRUIT_IO_USERNAME = 'tester'
    ADAFRUIT_IO_KEY = 'aio_test_key'
    ADAFRUIT_FEED_KEY = 'wol'
    RELAY_TIMEOUT = 5.0
    CORS_ORIGINS = ['http://frontend.test']
    CSRF_TRUSTED_ORIGINS = ['http://frontend.test']
    LOG_LEVEL = 'DEBUG'
