"""Request trace id context.

Set by TraceMiddleware for the duration of a request and read by the
logging adapter and the error handlers, so every log line and problem
detail of one request carries the same trace id.
"""

from contextvars import ContextVar

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the current trace ID, or None outside of a request."""
    return trace_id_context.get()
