"""Public API surface for datauri.io."""
from .sink import OutputSink, SinkWriteError
from .source import SourceReadError, read_source_bytes

__all__ = ["OutputSink", "SinkWriteError", "SourceReadError", "read_source_bytes"]
