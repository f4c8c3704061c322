"""Public API surface for datauri.parsing."""
from .parser import ArgumentError, build_parser

__all__ = ["ArgumentError", "build_parser"]
