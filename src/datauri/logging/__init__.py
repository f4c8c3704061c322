"""
datauri.logging – logger naming and one-shot configuration.
"""
from .factory import DefaultLoggerFactory
from .helpers import JsonLogFormatter, get_logger, setup_base_logger, verbosity_level

__all__ = ["DefaultLoggerFactory", "JsonLogFormatter", "get_logger", "setup_base_logger", "verbosity_level"]
