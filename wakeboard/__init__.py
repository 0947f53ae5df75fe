import click
from flask import Flask
from flask_cors import CORS

from .config import Config
from .errors import register_error_handlers
from .utils.csrf import init_csrf
from .utils.db import db, migrate
from .utils.logging import configure_logging


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app)

    # DB + migrations
    from . import models  # noqa: F401
    db.init_app(app)
    migrate.init_app(app, db)

    CORS(app, origins=app.config['CORS_ORIGINS'])
    init_csrf(app)
    register_error_handlers(app)

    from .routes.device_routes import device_bp
    from .routes.user_routes import user_bp
    from .routes.wol_routes import wol_bp
    from .routes.health_routes import health_bp
    app.register_blueprint(device_bp, url_prefix='/device')
    app.register_blueprint(user_bp, url_prefix='/user')
    app.register_blueprint(wol_bp, url_prefix='/wol')
    app.register_blueprint(health_bp)

    @app.cli.command('init-db')
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo('Initialized the database.')

    return app
