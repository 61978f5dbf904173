"""Command-line interface for the subpar paragraph filter.

WHY: subpar is used like fmt: text goes in on stdin (or from files), and
reflowed text comes out on stdout, so it can sit in a shell pipeline or
behind an editor's "filter through command".

HOW: Uses argparse for the width, output format, encoding and whitespace
policy. The historical ``-NN`` width syntax (``subpar -60``) is rewritten
to ``--width NN`` before parsing. Options are validated through
config.load_settings(). Every input is read and decoded strictly in
full first; the decoded text is then wrapped paragraph by paragraph and
written through one incremental encoder in the same encoding.

RULES:
- No FILE (or ``-``) means stdin; several files flow together like one input
- All input is decoded before anything is written, so a DecodingError
  never leaves partial output behind
- Errors go to stderr as ``subpar: <message>``
- Exit codes: 0 = success, 1 = bad configuration / unreadable or
  undecodable input, 2 = usage error (argparse)
- Logging is configured here only; the library never adds handlers
"""

from __future__ import annotations

import argparse
import codecs
import logging
import re
import sys
from typing import BinaryIO, Iterator, List, Optional

from pydantic import ValidationError

from subpar import __version__
from subpar.config import ReflowSettings, load_settings, log_level
from subpar.core.reflow import DecodingError, decode_input, iter_reflow_lines
from subpar.core.segmenter import split_lines
from subpar.formatters import FORMATTERS

logger = logging.getLogger(__name__)

_WIDTH_SHORTHAND_RE = re.compile(r"^-(\d+)$")

# Settings field -> CLI flag, for error messages
_FLAG_NAMES = {
    "max_width": "--width",
    "encoding": "--encoding",
    "output_format": "--format",
    "ascii_whitespace": "--ascii-whitespace",
}


def _error(msg: str) -> None:
    """Print an error message to stderr, prefixed with the program name."""
    print("subpar: {}".format(msg), file=sys.stderr, flush=True)


def preprocess_argv(argv: List[str]) -> List[str]:
    """Translate the historical ``-WIDTH`` syntax to ``--width WIDTH``.

    For example, ``-60`` becomes ``["--width", "60"]``. Arguments after
    ``--`` and the value directly after ``-w``/``--width`` are left alone.
    """
    processed: List[str] = []
    rewriting = True
    for i, arg in enumerate(argv):
        if arg == "--":
            rewriting = False
        match = _WIDTH_SHORTHAND_RE.match(arg)
        after_width_flag = i > 0 and argv[i - 1] in ("-w", "--width")
        if rewriting and match and not after_width_flag:
            processed.extend(["--width", match.group(1)])
        else:
            processed.append(arg)
    return processed


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: zero or more input files
    - Width is parsed as a string and validated by ReflowSettings, so a
      bad width is a configuration error (exit 1), not a usage error
    """
    parser = argparse.ArgumentParser(
        prog="subpar",
        description="Reflow paragraphs to a maximum line width, "
                    "measuring width in characters rather than bytes.",
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Files to reformat. Reads stdin if none are given or FILE is '-'.",
    )

    parser.add_argument(
        "-w", "--width",
        default=None,
        help="No output line may be wider than WIDTH characters, newline "
             "excluded, unless it holds a single longer word "
             "(default: $SUBPAR_WIDTH or 79). '-NN' is shorthand for '--width NN'.",
    )

    parser.add_argument(
        "-f", "--format",
        dest="output_format",
        default=None,
        choices=sorted(FORMATTERS.keys()),
        help="Output view (default: $SUBPAR_FORMAT or plain). "
             "'ruler' pads every line to the margin and marks it.",
    )

    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding of input and output (default: $SUBPAR_ENCODING or utf-8).",
    )

    parser.add_argument(
        "--ascii-whitespace",
        action="store_true",
        default=None,
        help="Only treat ASCII whitespace (space, tab, ...) as separating words.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details (paragraph counts, overflowing words) to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = loc[0] if loc else ""
        flag = _FLAG_NAMES.get(str(field), str(field))
        parts.append("{}: {}".format(flag, err.get("msg", "invalid value")))
    return "; ".join(parts)


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else log_level()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _read_sources(files: List[str], stdin: BinaryIO) -> List[bytes]:
    """Read every input source fully, in order."""
    sources: List[bytes] = []
    for name in files or ["-"]:
        if name == "-":
            sources.append(stdin.read())
        else:
            with open(name, "rb") as f:
                sources.append(f.read())
        logger.debug("Read %d bytes from %s", len(sources[-1]), "stdin" if name == "-" else name)
    return sources


def _input_lines(texts: List[str]) -> Iterator[str]:
    for text in texts:
        for line in split_lines(text):
            yield line


def run(settings: ReflowSettings, files: List[str], stdin: BinaryIO, stdout: BinaryIO) -> None:
    """Reflow ``files`` (or stdin) to ``stdout`` according to ``settings``.

    Raises:
        DecodingError: If any input is not valid in settings.encoding.
        OSError: If a file cannot be read.
    """
    raw = _read_sources(files, stdin)
    texts = [decode_input(data, settings.encoding) for data in raw]

    # One encoder for the whole run so a BOM is written at most once
    encoder = codecs.getincrementalencoder(settings.encoding)()
    for line in iter_reflow_lines(
        _input_lines(texts),
        settings.max_width,
        output_format=settings.output_format,
        ascii_only=settings.ascii_whitespace,
    ):
        stdout.write(encoder.encode(line + "\n"))
    stdout.write(encoder.encode("", final=True))
    stdout.flush()


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - stdin/stdout default to the process's binary streams; explicit
      streams are for testing
    - Always ends in sys.exit() with the documented exit code
    """
    if argv is None:
        argv = sys.argv[1:]
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    parser = build_parser()
    args = parser.parse_args(preprocess_argv(list(argv)))
    _configure_logging(args.verbose)

    try:
        settings = load_settings(
            max_width=args.width,
            encoding=args.encoding,
            output_format=args.output_format,
            ascii_whitespace=args.ascii_whitespace,
        )
    except ValidationError as e:
        _error(_format_validation_error(e))
        sys.exit(1)

    logger.debug(
        "Settings: width=%d encoding=%s format=%s ascii_whitespace=%s",
        settings.max_width,
        settings.encoding,
        settings.output_format,
        settings.ascii_whitespace,
    )

    try:
        run(settings, args.files, stdin, stdout)
    except DecodingError as e:
        _error(str(e))
        sys.exit(1)
    except OSError as e:
        if e.filename is None:
            _error(str(e))
        else:
            _error("failed to open '{}': {}".format(e.filename, e.strerror))
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
