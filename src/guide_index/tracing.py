"""OpenTelemetry tracing helpers for guide ingestion and queries.

Usage with an OTLP collector:

    from guide_index.tracing import configure_tracing, get_tracer
    from guide_index.tracing import traced_ingest, traced_query

    configure_tracing(endpoint="http://localhost:4318/v1/traces", service_name="guide-index")
    tracer = get_tracer("guide-index.queries")
    ingest = traced_ingest(index.ingest, tracer)
    find_facts = traced_query(index.find_facts, tracer, span_name="guide.find_facts")

Usage without a backend (development / testing):

    configure_tracing()   # uses ConsoleSpanExporter by default
"""
from __future__ import annotations

from typing import Any, Callable

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)

from .schema import DocumentHandle

# ---------------------------------------------------------------------------
# Span attribute names
# ---------------------------------------------------------------------------

ATTR_INPUT_VALUE = "input.value"
ATTR_GUIDE_ID = "guide.id"
ATTR_SECTION_COUNT = "guide.section_count"
ATTR_FACT_COUNT = "guide.fact_count"
ATTR_RESULT_COUNT = "query.result_count"

# ---------------------------------------------------------------------------
# Provider lifecycle helpers
# ---------------------------------------------------------------------------

_provider: TracerProvider | None = None


def configure_tracing(
    endpoint: str | None = None,
    service_name: str = "guide-index",
    exporter: SpanExporter | None = None,
) -> TracerProvider:
    """Create and register a global TracerProvider.

    Args:
        endpoint: OTLP HTTP endpoint URL to send traces to.  When *None* and no
            custom *exporter* is given, spans are printed to stdout.
        service_name: Label identifying this process in the tracing backend.
        exporter: Pre-built exporter, e.g. ``InMemorySpanExporter`` in tests.
            When provided, *endpoint* is ignored.

    Returns:
        The configured provider, also installed as the global OTel provider.
    """
    global _provider

    resource = Resource(attributes={SERVICE_NAME: service_name})
    provider = TracerProvider(resource=resource)

    if exporter is not None:
        chosen_exporter: SpanExporter = exporter
    elif endpoint is not None:
        try:
            from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
                OTLPSpanExporter,
            )
        except ImportError as exc:  # pragma: no cover
            raise ImportError(
                "opentelemetry-exporter-otlp-proto-http is required to export "
                "traces to an OTLP endpoint.  Install it with:\n"
                "  pip install opentelemetry-exporter-otlp-proto-http"
            ) from exc
        chosen_exporter = OTLPSpanExporter(endpoint=endpoint)
    else:
        chosen_exporter = ConsoleSpanExporter()

    provider.add_span_processor(SimpleSpanProcessor(chosen_exporter))
    trace.set_tracer_provider(provider)
    _provider = provider
    return provider


def get_tracer(name: str) -> trace.Tracer:
    """Return a tracer from the most recently configured provider.

    Falls back to the global (possibly no-op) provider when
    :func:`configure_tracing` has not been called.
    """
    if _provider is not None:
        return _provider.get_tracer(name)
    return trace.get_tracer(name)


# ---------------------------------------------------------------------------
# Span-wrapping helpers
# ---------------------------------------------------------------------------


def traced_ingest(
    ingest_fn: Callable[[str, str], DocumentHandle],
    tracer: trace.Tracer,
) -> Callable[[str, str], DocumentHandle]:
    """Wrap an ingest callable so every call is recorded as a ``guide.ingest`` span.

    The span records the guide id and, on success, the section and fact
    counts of the published guide.  Parse failures mark the span ERROR and
    are re-raised unchanged.

    Args:
        ingest_fn: Callable with signature ``(guide_text, guide_id) -> DocumentHandle``,
            typically ``DocumentIndex.ingest``.
        tracer: OTel tracer to use for span creation.

    Returns:
        A wrapped callable with identical behaviour plus tracing.
    """

    def _wrapped(guide_text: str, guide_id: str) -> DocumentHandle:
        with tracer.start_as_current_span("guide.ingest") as span:
            span.set_attribute(ATTR_GUIDE_ID, guide_id)
            try:
                handle = ingest_fn(guide_text, guide_id)
                span.set_attribute(ATTR_SECTION_COUNT, handle.section_count)
                span.set_attribute(ATTR_FACT_COUNT, handle.fact_count)
                span.set_status(trace.StatusCode.OK)
                return handle
            except Exception as exc:
                span.set_status(trace.StatusCode.ERROR, str(exc))
                span.record_exception(exc)
                raise

    return _wrapped


def traced_query(
    query_fn: Callable[..., list[Any]],
    tracer: trace.Tracer,
    span_name: str = "guide.query",
) -> Callable[..., list[Any]]:
    """Wrap a query callable so every call is recorded as an OTel span.

    The span records:

    - ``input.value``: positional arguments joined with ``", "``
    - ``query.result_count``: number of results returned
    - span status: OK on success, ERROR on exception

    Args:
        query_fn: Any list-returning query, e.g. ``DocumentIndex.find_facts``
            or ``DocumentIndex.cross_reference``.
        tracer: OTel tracer to use for span creation.
        span_name: Name given to every span.

    Returns:
        A wrapped callable with identical behaviour plus tracing.
    """

    def _wrapped(*args: Any, **kwargs: Any) -> list[Any]:
        with tracer.start_as_current_span(span_name) as span:
            span.set_attribute(ATTR_INPUT_VALUE, ", ".join(str(arg) for arg in args))
            try:
                results = query_fn(*args, **kwargs)
                span.set_attribute(ATTR_RESULT_COUNT, len(results))
                span.set_status(trace.StatusCode.OK)
                return results
            except Exception as exc:
                span.set_status(trace.StatusCode.ERROR, str(exc))
                span.record_exception(exc)
                raise

    return _wrapped
