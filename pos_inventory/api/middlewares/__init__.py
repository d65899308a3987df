"""
Middlewares package
"""

from .trace_context import TraceContextMiddleware, get_trace_id

__all__ = ['TraceContextMiddleware', 'get_trace_id']
