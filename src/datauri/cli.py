from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence, TextIO

from datauri.builder import DataUriBuilder
from datauri.io.sink import OutputSink
from datauri.logging.factory import DefaultLoggerFactory
from datauri.logging.helpers import get_logger
from datauri.parsing.parser import ArgumentError, build_parser


logger = get_logger('datauri')


def _configure_logging(*, verbose: bool, json_logs: bool, stream: Optional[TextIO] = None) -> None:
    """Configure process-wide logging for one invocation."""
    factory = DefaultLoggerFactory(verbose=verbose, json_logs=json_logs, stream=stream)
    global logger
    logger = factory.get_logger('datauri')


def _print_usage(stream: TextIO) -> None:
    build_parser().print_help(stream)


class DataUri:
    """Top-level façade for command-style execution."""

    @staticmethod
    def parse(argv: Sequence[str]) -> argparse.Namespace:
        """Parse *argv*, raising `ArgumentError` on bad input."""
        return build_parser().parse_intermixed_args(list(argv))

    @staticmethod
    def run(
            argv: Sequence[str],
            *,
            stdout: Optional[TextIO] = None,
            stderr: Optional[TextIO] = None,
    ) -> str:
        """Run the tool with an argv-like sequence and return the data URI.

        Returns an empty string when only help or version output was requested.
        """
        out_stream = stdout or sys.stdout
        try:
            ns = DataUri.parse(argv)
        except ArgumentError:
            _configure_logging(verbose=False, json_logs='--json-logs' in argv, stream=stderr)
            raise

        _configure_logging(verbose=ns.verbose, json_logs=ns.json_logs, stream=stderr)

        if ns.help:
            _print_usage(out_stream)
            return ''
        if ns.show_version:
            from datauri import __version__
            out_stream.write(f'datauri {__version__}\n')
            return ''

        if not ns.files:
            raise ArgumentError('No files specified.')
        if len(ns.files) > 1:
            logger.warning('⚠  only the first file is converted; ignoring %s', ', '.join(ns.files[1:]))

        builder = DataUriBuilder()
        with OutputSink(Path(ns.output) if ns.output else None, stream=out_stream) as sink:
            return builder.generate(Path(ns.files[0]), sink, mime=ns.mime, charset=ns.charset)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `datauri` console script and `python -m datauri`."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        DataUri.run(args)
        raise SystemExit(0)
    except ArgumentError as exc:
        logger.error('%s', exc)
        _print_usage(sys.stderr)
        raise SystemExit(1)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('%s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
