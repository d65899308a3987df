"""
API package - Flask application factory, controllers and middlewares
"""
