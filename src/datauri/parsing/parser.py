# datauri/parsing/parser.py
from __future__ import annotations

import argparse
from typing import NoReturn


class ArgumentError(ValueError):
    """Bad command line: unknown option, missing value or no input file."""


class _DataUriArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of calling ``sys.exit(2)``."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - ``-h/--help`` is declared as a plain flag; the CLI prints the help
          text itself so that it goes to stdout with exit status 0 and never
          through argparse's exit path.
        - Only the first positional file is converted; the rest are ignored.
    """
    p = _DataUriArgumentParser(
        prog="datauri",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] FILE",
        add_help=False,
        description=(
            "datauri – convert a file into a data: URI\n"
            "Output format: data:<mime>[;charset=<cs>];base64,<payload>"
        ),
    )

    g_in = p.add_argument_group("Input")
    g_enc = p.add_argument_group("Encoding")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Input
    # -----------------------
    g_in.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help="File to convert. Only the first FILE is used.",
    )

    # -----------------------
    # Encoding
    # -----------------------
    g_enc.add_argument(
        "-m",
        "--mime",
        metavar="TYPE",
        dest="mime",
        help=(
            "MIME type to encode into the data URI, used verbatim. When omitted "
            "it is derived from the file extension (gif, jpg, jpeg, png, htm, "
            "html, xml, xhtml, js, css, txt)."
        ),
    )
    g_enc.add_argument(
        "--charset",
        metavar="CHARSET",
        dest="charset",
        help=(
            "Charset label to add to the data URI. Ignored for images and "
            "for names the codec registry does not know. File bytes are "
            "never re-encoded."
        ),
    )

    # -----------------------
    # Output
    # -----------------------
    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Place the output into FILE. Defaults to stdout.",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Display informational messages and warnings on stderr.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit log lines as JSON objects (also DATAURI_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "--version",
        action="store_true",
        dest="show_version",
        help="Print the program version and exit.",
    )
    g_misc.add_argument(
        "-h",
        "--help",
        action="store_true",
        dest="help",
        help="Display this information and exit.",
    )
    return p
