"""
Database instance and Flask wiring
"""

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()


def init_db(app):
    """Bind the database to the app; engine options follow the resolved URI"""
    from config import get_engine_options

    uri = app.config['SQLALCHEMY_DATABASE_URI']
    if not uri.startswith('sqlite'):
        app.config.setdefault(
            'SQLALCHEMY_ENGINE_OPTIONS',
            get_engine_options(uri, app.config['DB_TIMEOUT_SECONDS'])
        )

    db.init_app(app)
    migrate.init_app(app, db)
    return db
