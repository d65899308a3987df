"""
W3C Trace Context middleware
Every request carries a trace id, taken from an incoming traceparent header
or generated, which is logged and echoed back on the response.
"""
import re
import uuid
import logging
from typing import Optional, Tuple
from flask import Response, g, request

# 00-{trace-id}-{parent-id}-{trace-flags}
TRACEPARENT_PATTERN = re.compile(
    r'^00-([0-9a-f]{32})-([0-9a-f]{16})-[0-9a-f]{2}$'
)

logger = logging.getLogger(__name__)


class TraceContextMiddleware:
    """Flask extension propagating W3C trace context"""

    def __init__(self, app=None):
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.before_request(self.before_request)
        app.after_request(self.after_request)

    def before_request(self):
        trace_context = self.extract_trace_context(request.headers.get('traceparent'))
        if trace_context is None:
            if request.headers.get('traceparent'):
                logger.warning("Invalid traceparent header, generating a new trace id")
            trace_context = self.generate_trace_context()

        g.trace_id, g.span_id = trace_context
        logger.info(f"[{g.trace_id[:16]}] {request.method} {request.path}")

    def after_request(self, response: Response) -> Response:
        trace_id = getattr(g, 'trace_id', None)
        if trace_id is None:
            return response

        response.headers['traceparent'] = f"00-{trace_id}-{g.span_id}-01"
        response.headers['X-Trace-ID'] = trace_id
        logger.info(
            f"[{trace_id[:16]}] {request.method} {request.path} -> {response.status_code}"
        )
        return response

    @staticmethod
    def extract_trace_context(traceparent: Optional[str]) -> Optional[Tuple[str, str]]:
        """
        Parse a traceparent header.

        Example: 00-4bf92f3577b34da6a3ce929d0e0e4736-00f067aa0ba902b7-01

        Returns:
            Tuple of (trace_id, span_id) or None if absent or invalid
        """
        if not traceparent:
            return None

        match = TRACEPARENT_PATTERN.match(traceparent.strip())
        if not match:
            return None

        trace_id, span_id = match.group(1), match.group(2)
        # All-zero ids are invalid
        if trace_id == '0' * 32 or span_id == '0' * 16:
            return None
        return trace_id, span_id

    @staticmethod
    def generate_trace_context() -> Tuple[str, str]:
        """New 128-bit trace id and 64-bit span id as hex strings"""
        return uuid.uuid4().hex, uuid.uuid4().hex[:16]


def get_trace_id() -> Optional[str]:
    """Trace id of the current request, if any"""
    return getattr(g, 'trace_id', None)
