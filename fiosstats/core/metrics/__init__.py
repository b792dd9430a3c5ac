"""Metric extraction and forwarding."""
from .extractor import extract_network_sample
from .line_protocol import format_line, build_body
from .sink import InfluxSink, DEFAULT_CONTENT_TYPE

__all__ = [
    'extract_network_sample',
    'format_line',
    'build_body',
    'InfluxSink',
    'DEFAULT_CONTENT_TYPE',
]
