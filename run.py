from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url

from wakeboard import create_app
from wakeboard.config import Config
from wakeboard.utils.db import db

app = create_app()


def create_database_if_not_exists():
    """Create the MySQL schema named in the URI when it does not exist yet."""
    url = make_url(Config.SQLALCHEMY_DATABASE_URI)
    if not url.drivername.startswith('mysql') or not url.database:
        return
    engine = create_engine(url.set(database=None))
    with engine.connect() as conn:
        conn.execute(text(f"CREATE DATABASE IF NOT EXISTS `{url.database}`"))
    engine.dispose()


if __name__ == '__main__':
    create_database_if_not_exists()
    with app.app_context():
        db.create_all()
    app.run(host='0.0.0.0', port=5000)
