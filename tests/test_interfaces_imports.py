import os
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in os.sys.path:
    os.sys.path.insert(0, str(SRC_ROOT))


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import datauri.core.interfaces as I

    assert hasattr(I, "CharsetResolverProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "MimeResolverProtocol")
    assert hasattr(I, "OutputSinkProtocol")
    assert hasattr(I, "SourceReaderProtocol")


def test_core_reexports_models_and_protocols():
    from datauri.core import BuildOptions, Resolution, MimeResolverProtocol

    assert Resolution("text/plain").charset is None
    assert BuildOptions().mime is None
    assert MimeResolverProtocol is not None


def test_default_components_satisfy_protocols():
    import io
    import logging

    from datauri.core.interfaces import (
        CharsetResolverProtocol,
        LoggerFactoryProtocol,
        LoggerLikeProtocol,
        MimeResolverProtocol,
        OutputSinkProtocol,
    )
    from datauri.io.sink import OutputSink
    from datauri.logging.factory import DefaultLoggerFactory
    from datauri.resolution import CharsetResolver, MimeTypeResolver

    assert isinstance(MimeTypeResolver(), MimeResolverProtocol)
    assert isinstance(CharsetResolver(), CharsetResolverProtocol)
    assert isinstance(OutputSink(stream=io.StringIO()), OutputSinkProtocol)
    assert isinstance(io.StringIO(), OutputSinkProtocol)
    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)
    assert isinstance(logging.getLogger("datauri"), LoggerLikeProtocol)


def test_tables_are_read_only():
    import pytest
    from datauri.constants import IMAGE_TYPES, TEXT_TYPES

    with pytest.raises(TypeError):
        IMAGE_TYPES["webp"] = "image/webp"  # type: ignore[index]
    with pytest.raises(TypeError):
        TEXT_TYPES["json"] = "application/json"  # type: ignore[index]
    assert not set(IMAGE_TYPES) & set(TEXT_TYPES)
