"""
Health check endpoints for the inventory service
Used by monitoring systems, load balancers and Kubernetes probes
"""

from flask import Blueprint, jsonify
from datetime import datetime
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import os
import logging

from pos_inventory.shared.database import db

logger = logging.getLogger(__name__)

SERVICE_NAME = 'pos-inventory-service'

# Create blueprint for health endpoints
health_bp = Blueprint('health', __name__)


def _timestamp():
    return datetime.utcnow().isoformat() + 'Z'


@health_bp.route('/health', methods=['GET'])
def health():
    """Main health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'service': SERVICE_NAME,
        'timestamp': _timestamp(),
        'version': os.environ.get('VERSION', '1.0.0'),
        'environment': os.environ.get('FLASK_ENV', 'development'),
    }), 200


@health_bp.route('/health/ready', methods=['GET'])
def readiness():
    """Readiness probe - the database must answer a trivial query"""
    try:
        db.session.execute(text('SELECT 1'))
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Readiness check failed: {e}")
        return jsonify({
            'status': 'not ready',
            'service': SERVICE_NAME,
            'timestamp': _timestamp(),
            'checks': {'database': 'unavailable'},
        }), 503

    return jsonify({
        'status': 'ready',
        'service': SERVICE_NAME,
        'timestamp': _timestamp(),
        'checks': {'database': 'ok'},
    }), 200


@health_bp.route('/health/live', methods=['GET'])
def liveness():
    """Liveness probe - the process is able to answer"""
    return jsonify({
        'status': 'alive',
        'service': SERVICE_NAME,
        'timestamp': _timestamp(),
    }), 200
