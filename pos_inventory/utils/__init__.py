"""
Utilities package - exceptions, pagination, schemas and error handlers
"""
