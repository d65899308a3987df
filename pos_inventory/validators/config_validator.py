"""
Configuration Validator
Validates environment variables at application startup and fails fast
when any configuration is missing or invalid.

NOTE: This module prints instead of logging, since logging is configured
from the values validated here.
"""

import os
import sys
from urllib.parse import urlparse


def is_valid_database_url(url: str) -> bool:
    """Validates a SQLAlchemy database URL"""
    result = urlparse(url)
    if result.scheme.startswith('sqlite'):
        return True
    return bool(result.scheme and result.netloc)


def is_valid_port(port: str) -> bool:
    """Validates a port number"""
    try:
        port_num = int(port)
        return 0 < port_num <= 65535
    except (ValueError, TypeError):
        return False


def is_positive_int(value: str) -> bool:
    try:
        return int(value) > 0
    except (ValueError, TypeError):
        return False


def is_valid_log_level(level: str) -> bool:
    """Validates log level"""
    return level.upper() in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def is_valid_environment(env: str) -> bool:
    """Validates FLASK_ENV against the known config names"""
    return env.lower() in ['development', 'production', 'testing', 'default']


# Configuration validation rules; every variable here is optional
VALIDATION_RULES = {
    'FLASK_ENV': {
        'validator': is_valid_environment,
        'error_message': 'FLASK_ENV must be one of: development, production, testing, default',
    },
    'DATABASE_URL': {
        'validator': is_valid_database_url,
        'error_message': 'DATABASE_URL must be a valid database URL',
    },
    'DATABASE_PORT': {
        'validator': is_valid_port,
        'error_message': 'DATABASE_PORT must be a valid port number',
    },
    'DB_TIMEOUT_SECONDS': {
        'validator': is_positive_int,
        'error_message': 'DB_TIMEOUT_SECONDS must be a positive integer',
    },
    'DEFAULT_PAGE_SIZE': {
        'validator': is_positive_int,
        'error_message': 'DEFAULT_PAGE_SIZE must be a positive integer',
    },
    'PORT': {
        'validator': is_valid_port,
        'error_message': 'PORT must be a valid port number',
    },
    'LOG_LEVEL': {
        'validator': is_valid_log_level,
        'error_message': 'LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL',
    },
}

# Needed only when DATABASE_URL is not set
MYSQL_VARIABLES = ['MYSQL_USER', 'MYSQL_PASSWORD', 'MYSQL_DATABASE']


def collect_config_errors(environ=None) -> list:
    """Return a list of human-readable configuration problems"""
    environ = os.environ if environ is None else environ
    errors = []

    for key, rule in VALIDATION_RULES.items():
        value = environ.get(key)
        if value and not rule['validator'](value):
            errors.append(f"{key}: {rule['error_message']} (got '{value}')")

    if not environ.get('DATABASE_URL'):
        missing = [key for key in MYSQL_VARIABLES if not environ.get(key)]
        if missing:
            errors.append(
                f"Database: set DATABASE_URL or all of {', '.join(MYSQL_VARIABLES)} "
                f"(missing {', '.join(missing)})"
            )

    return errors


def validate_config(environ=None):
    """Validate configuration and exit the process when it is unusable"""
    print('[CONFIG] Validating environment configuration...')
    errors = collect_config_errors(environ)

    if errors:
        print('[CONFIG] Configuration validation failed:', file=sys.stderr)
        for error in errors:
            print(f'  - {error}', file=sys.stderr)
        sys.exit(1)

    print('[CONFIG] All configuration checks passed')
