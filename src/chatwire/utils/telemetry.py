"""Tracing for the wire layer.

Spans are created through the OpenTelemetry API only, so importing chatwire
never requires the SDK; without a configured provider every span is a no-op.
Applications that already run an SDK need nothing from this module beyond
the ``ATTR_*`` keys. :func:`configure_telemetry` is a convenience for
scripts and tests (``pip install chatwire[otel]``).
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

# Span attribute keys
ATTR_MODEL = "chatwire.model"
ATTR_IMAGE_FORMAT = "chatwire.image_format"
ATTR_MESSAGES_COUNT = "chatwire.messages.count"
ATTR_WIRE_MESSAGES_COUNT = "chatwire.wire_messages.count"
ATTR_TOOLS_COUNT = "chatwire.tools.count"
ATTR_TOOL_ERRORS = "chatwire.tool_errors"
ATTR_TOKENS_INPUT = "chatwire.tokens.input"
ATTR_TOKENS_OUTPUT = "chatwire.tokens.output"
ATTR_TOKENS_TOTAL = "chatwire.tokens.total"
ATTR_CONTEXT_LENGTH_EXCEEDED = "chatwire.context_length_exceeded"

_INSTRUMENTATION_NAME = "chatwire"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for a chatwire module, bound to whatever provider is global."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = _INSTRUMENTATION_NAME,
    exporter: Any | None = None,
    set_global: bool = True,
) -> Any:
    """Build an SDK tracer provider that exports every chatwire span.

    Spans go to ``exporter`` through a synchronous processor, or to stdout
    when no exporter is given.

    Args:
        service_name: Value of the ``service.name`` resource attribute.
        exporter: Any OpenTelemetry ``SpanExporter``.
        set_global: Install the provider as the global tracer provider.
            OpenTelemetry only honours the first global provider of a
            process.

    Returns:
        The SDK ``TracerProvider``.

    Raises:
        ImportError: If ``opentelemetry-sdk`` is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install chatwire[otel]"
        )
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(SimpleSpanProcessor(exporter or ConsoleSpanExporter()))
    if set_global:
        trace.set_tracer_provider(provider)
    return provider
