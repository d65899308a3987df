from flask import jsonify
from werkzeug.exceptions import HTTPException
import logging

from pos_inventory.api.middlewares.trace_context import get_trace_id
from pos_inventory.utils.exceptions import InventoryServiceError

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    """Register application error handlers"""

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'error': 'Not Found',
            'message': 'The requested resource was not found',
            'status_code': 404
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'error': 'Method Not Allowed',
            'message': 'The method is not allowed for the requested URL',
            'status_code': 405
        }), 405

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"[{get_trace_id()}] Internal server error: {error}")
        return jsonify({
            'error': 'Internal Server Error',
            'message': 'An unexpected error occurred',
            'status_code': 500
        }), 500

    @app.errorhandler(InventoryServiceError)
    def inventory_error(error):
        if error.status_code >= 500:
            logger.error(f"[{get_trace_id()}] Inventory service failure: {error}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def http_exception(error):
        return jsonify({
            'error': error.name,
            'message': error.description,
            'status_code': error.code
        }), error.code


def register_api_error_handlers(api):
    """
    Same error bodies for Flask-RESTX resources, which bypass the app handlers.

    Resources convert schema errors to ItemValidationError themselves: RESTX
    answers with an exception's ``data`` attribute when it has one, and
    marshmallow's ValidationError carries the raw input there.
    """

    @api.errorhandler(InventoryServiceError)
    def inventory_error(error):
        if error.status_code >= 500:
            logger.error(f"[{get_trace_id()}] Inventory service failure: {error}")
        return error.to_dict(), error.status_code
