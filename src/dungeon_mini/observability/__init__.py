"""
observability/__init__.py

PURPOSE: OpenTelemetry tracing for the dispatch loop.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk

ARCHITECTURE NOTES:
Tracing is opt-in. Until init_telemetry() installs an SDK provider,
the OpenTelemetry API hands out non-recording spans.
"""

from dungeon_mini.observability.telemetry import get_tracer, init_telemetry, shutdown_telemetry

__all__ = ["get_tracer", "init_telemetry", "shutdown_telemetry"]
