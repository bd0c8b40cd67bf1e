"""OpenTelemetry setup helpers for processes that use the gateway client."""

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor


def setup_tracing(service_name: str, endpoint: str | None) -> bool:
    """Create and register a tracer provider with OTLP HTTP exporter.

    Returns False (and leaves the no-op provider in place) when no endpoint is
    configured.
    """

    if not endpoint:
        return False
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=endpoint)
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    return True


def get_tracer() -> trace.Tracer:
    return trace.get_tracer("catpay")
