"""Logging and tracing for the InPost Air client.

Log events go through structlog as JSON lines on stderr, so they never
mix with the CLI's readings on stdout. Spans use the OpenTelemetry API
and cost nothing until an SDK is installed by the application.
"""

from __future__ import annotations

import functools
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from .config import LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .config import TelemetryConfig

P = ParamSpec("P")
T = TypeVar("T")

INSTRUMENTATION_NAME = "inpost-air"
INSTRUMENTATION_VERSION = "0.1.0"

_tracer: trace.Tracer | None = None
_logger: structlog.BoundLogger | None = None


def get_tracer() -> trace.Tracer:
    """Tracer shared by the client components."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(INSTRUMENTATION_NAME, INSTRUMENTATION_VERSION)
    return _tracer


def get_logger() -> structlog.BoundLogger:
    """Logger shared by the client components."""
    global _logger
    if _logger is None:
        _logger = structlog.get_logger(INSTRUMENTATION_NAME)
    return _logger


def configure_telemetry(config: TelemetryConfig) -> None:
    """Apply ``config`` to the shared logger and tracer.

    With telemetry disabled, spans become no-ops and logging is left as
    structlog's defaults have it.
    """
    global _tracer, _logger

    if not config.enabled:
        _tracer = trace.NoOpTracer()
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVELS[config.log_level]),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )

    _tracer = trace.get_tracer(config.service_name, INSTRUMENTATION_VERSION)
    _logger = structlog.get_logger(config.service_name)


@contextmanager
def trace_operation(
    name: str,
    *,
    attributes: dict[str, str | int] | None = None,
) -> Iterator[trace.Span]:
    """Run the block inside a span named ``name``.

    An exception escaping the block marks the span as failed and is
    re-raised unchanged.
    """
    with get_tracer().start_as_current_span(name, attributes=attributes) as span:
        try:
            yield span
        except Exception as e:
            span.record_exception(e)
            span.set_status(Status(StatusCode.ERROR, type(e).__name__))
            raise


def traced(name: str | None = None) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Wrap a client operation in a span.

    Call arguments are not attached to the span: they include phone
    numbers and SMS codes.
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        span_name = name or func.__name__

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            with trace_operation(span_name):
                return func(*args, **kwargs)

        return wrapper

    return decorator
