"""
OpenTelemetry tracing for the seating service.

Inbound requests are traced by the FastAPI instrumentation, use cases open
their own spans, and outbound venue API calls are traced through httpx and
tagged with `peer.service=venue-api`. Export goes to OTLP when an endpoint is
set and to the console when OTEL_CONSOLE_EXPORT is on.
"""

from typing import Any

import httpx
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

from src.platform.config.core_setting import settings


VENUE_API_PEER = 'venue-api'


def venue_api_request_hook(span: Any, request: Any) -> None:
    """Tag spans of calls that go to the configured venue API host"""
    if span is None or not span.is_recording():
        return
    if httpx.URL(str(request.url)).host == httpx.URL(settings.VENUE_API_BASE_URL).host:
        span.set_attribute('peer.service', VENUE_API_PEER)


class TracingConfig:
    """
    Usage:
        tracing = TracingConfig()
        tracing.setup()           # once, in the app lifespan
        tracing.instrument_httpx()
        ...
        tracing.shutdown()
    """

    def __init__(
        self,
        *,
        service_name: str | None = None,
        otlp_endpoint: str | None = None,
        enable_console: bool | None = None,
        sample_ratio: float | None = None,
    ) -> None:
        self.service_name = service_name or settings.SERVICE_NAME
        self.otlp_endpoint = otlp_endpoint or settings.OTEL_EXPORTER_OTLP_ENDPOINT
        self.enable_console = (
            settings.OTEL_CONSOLE_EXPORT if enable_console is None else enable_console
        )
        ratio = settings.TRACE_SAMPLE_RATIO if sample_ratio is None else sample_ratio
        self.sample_ratio = min(max(ratio, 0.0), 1.0)

        self._provider: TracerProvider | None = None

    def build_provider(self) -> TracerProvider:
        resource = Resource(
            attributes={SERVICE_NAME: self.service_name, SERVICE_VERSION: settings.VERSION}
        )
        provider = TracerProvider(
            resource=resource, sampler=ParentBased(root=TraceIdRatioBased(self.sample_ratio))
        )
        if self.otlp_endpoint:
            provider.add_span_processor(
                BatchSpanProcessor(OTLPSpanExporter(endpoint=self.otlp_endpoint))
            )
        if self.enable_console:
            provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        return provider

    def setup(self) -> None:
        self._provider = self.build_provider()
        trace.set_tracer_provider(self._provider)

    def instrument_fastapi(self, *, app: Any, excluded_urls: str = 'health') -> None:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=excluded_urls)

    def instrument_httpx(self) -> None:
        HTTPXClientInstrumentor().instrument(
            request_hook=venue_api_request_hook,
            async_request_hook=self._async_request_hook,
        )

    @staticmethod
    async def _async_request_hook(span: Any, request: Any) -> None:
        venue_api_request_hook(span, request)

    def shutdown(self) -> None:
        if self._provider:
            HTTPXClientInstrumentor().uninstrument()
            self._provider.shutdown()
            self._provider = None
