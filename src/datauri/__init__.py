from __future__ import annotations

from datauri.builder import DataUriBuilder, assemble_data_uri, build_data_uri, encode_base64
from datauri.cli import DataUri, main
from datauri.constants import IMAGE_TYPES, TEXT_TYPES
from datauri.core.models import BuildOptions, Resolution
from datauri.io.sink import OutputSink, SinkWriteError
from datauri.io.source import SourceReadError, read_source_bytes
from datauri.parsing.parser import ArgumentError
from datauri.resolution.charset import CharsetResolver, is_supported_charset
from datauri.resolution.mime import MimeTypeResolver, ResolutionError, file_extension, is_image_file

__version__ = '1.0.0'

__all__ = [
    '__version__',
    'ArgumentError',
    'BuildOptions',
    'CharsetResolver',
    'DataUri',
    'DataUriBuilder',
    'IMAGE_TYPES',
    'MimeTypeResolver',
    'OutputSink',
    'Resolution',
    'ResolutionError',
    'SinkWriteError',
    'SourceReadError',
    'TEXT_TYPES',
    'assemble_data_uri',
    'build_data_uri',
    'encode_base64',
    'file_extension',
    'is_image_file',
    'is_supported_charset',
    'main',
    'read_source_bytes',
]
