import os


def get_database_uri():
    """
    Resolve the database URI at runtime.
    DATABASE_URL wins; otherwise a MySQL URI is assembled from the MYSQL_* variables.
    """
    database_url = os.environ.get('DATABASE_URL')
    if database_url:
        return database_url

    user = os.environ.get('MYSQL_USER', 'admin')
    password = os.environ.get('MYSQL_PASSWORD', 'admin123')
    host = os.environ.get('DATABASE_HOST', 'localhost')
    port = os.environ.get('DATABASE_PORT', '3306')
    database = os.environ.get('MYSQL_DATABASE', 'pos_inventory_db')
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{database}"


def get_engine_options(database_uri, timeout_seconds):
    """Engine options for the configured driver"""
    options = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }
    if database_uri.startswith('mysql+pymysql'):
        # Bound every round trip so an abandoned request cannot hang on the store
        options['connect_args'] = {
            'connect_timeout': timeout_seconds,
            'read_timeout': timeout_seconds,
            'write_timeout': timeout_seconds,
        }
    return options


class Config:
    """Base configuration"""

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database URI is resolved in create_app()
    SQLALCHEMY_DATABASE_URI = None
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DB_TIMEOUT_SECONDS = int(os.environ.get('DB_TIMEOUT_SECONDS', 10))

    # Flask-RESTX
    RESTX_ERROR_404_HELP = False

    # CORS
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')

    # Pagination
    DEFAULT_PAGE_SIZE = int(os.environ.get('DEFAULT_PAGE_SIZE', 10))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    # In-memory SQLite for tests
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
