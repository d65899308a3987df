#!/usr/bin/env python3
"""
POS Inventory Service API
Flask-based REST API for inventory items and their stock levels.
"""

import os
import logging
from flask import Flask
from flask_cors import CORS

logger = logging.getLogger(__name__)


def create_app(config_name='default', **config_overrides):
    """Application factory pattern for API"""
    app = Flask(__name__)

    # Load configuration
    from config import config, get_database_uri
    app.config.from_object(config[config_name])
    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        app.config['SQLALCHEMY_DATABASE_URI'] = get_database_uri()
    app.config.update(config_overrides)

    # Configure logging
    if not app.testing:
        logging.basicConfig(
            level=getattr(logging, app.config['LOG_LEVEL'].upper(), logging.INFO),
            format='%(asctime)s %(levelname)s %(name)s: %(message)s'
        )

    # Initialize trace context middleware
    from pos_inventory.api.middlewares import TraceContextMiddleware
    TraceContextMiddleware(app)

    # Initialize database
    from pos_inventory.shared.database import init_db
    init_db(app)

    # CORS setup
    CORS(app, origins=app.config.get('CORS_ORIGINS', ['*']))

    # Register blueprints/controllers
    from pos_inventory.api.controllers import inventory_bp, stats_bp, health_bp
    app.register_blueprint(inventory_bp, url_prefix='/api/v1')
    app.register_blueprint(stats_bp)
    app.register_blueprint(health_bp)

    # Register error handlers
    from pos_inventory.utils.error_handlers import register_error_handlers
    register_error_handlers(app)

    return app


def init_database(app):
    """Initialize database tables"""
    from pos_inventory.shared.database import db
    with app.app_context():
        try:
            from sqlalchemy import text
            db.session.execute(text('SELECT 1'))
            db.create_all()
            logger.info("Database tables created successfully")
            return True
        except Exception as e:
            logger.error(f"Failed to create database tables: {e}")
            if app.config.get('ENV_NAME') == 'production':
                raise
            logger.warning("Continuing without database connection in development mode")
            return False


def main():
    """Main application entry point for API"""
    env = os.environ.get('FLASK_ENV', 'production')

    app = create_app(env, ENV_NAME=env)
    init_database(app)

    host = os.environ.get('HOST', '0.0.0.0')
    port = int(os.environ.get('PORT', 5000))
    debug = env == 'development'

    logger.info(f"Starting POS Inventory Service on {host}:{port} (env: {env})")

    app.run(
        host=host,
        port=port,
        debug=debug,
        threaded=True
    )


if __name__ == '__main__':
    main()
