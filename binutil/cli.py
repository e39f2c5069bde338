"""Command-line interface for binutil.

WHY: Converting an identifier from one representation to another is a
one-off terminal task ("what is this ULID as a UUID?"). The CLI exposes
pipelines, the codec listing and identifier generation behind a single
command.

HOW: Uses argparse with subcommands. ``convert`` is the default, so
``binutil -d ulid -e b64 01H3W...`` works without naming it. Input comes
from positional arguments, a file (-r) or stdin. Results go to stdout,
diagnostics to stderr through ``logging``.

RULES:
- Subcommands: convert (default), decoders, ulid, uuid, rand
- Positional inputs and --read are mutually exclusive
- --binary feeds file/stdin bytes to bin_to_str instead of str_to_str
- Text read from a file or stdin loses one trailing newline
- Exit codes: 0 success, 1 conversion or input error, 2 usage error
- The ``pretty`` encoder prints a table (rich) instead of one value
"""

from __future__ import annotations

import argparse
import logging
import secrets
import sys
import uuid
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table
from ulid import ULID as ULIDValue

from binutil import config
from binutil.core.multi import MultiPipeline
from binutil.core.pipeline import Pipeline
from binutil.core.registry import codec_names
from binutil.errors import BinutilError
from binutil.release import version

logger = logging.getLogger(__name__)

COMMANDS = ("convert", "decoders", "d", "ulid", "uuid", "rand")

USAGE_EXAMPLES = """\
The encoder and decoder must be registered codec names; to see them:

  binutil decoders

For example, to convert a ULID to base64:

  binutil -d ulid -e b64 01H3W3MX9A4AFNW55R0MNMQR6Y
"""


def _error(msg: str) -> None:
    """Print an error message to stderr."""
    print("Error: {}".format(msg), file=sys.stderr, flush=True)


def _emit(out: str, no_newline: bool = False) -> None:
    print(out, end="" if no_newline else "\n", flush=True)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(config.LOG_LEVEL)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _read_input(path: Optional[str]) -> bytes:
    """Read raw bytes from ``path`` or, when None, from stdin."""
    if path:
        logger.debug("Reading input from %s", path)
        return Path(path).read_bytes()
    logger.debug("Reading input from stdin")
    return sys.stdin.buffer.read()


def _strip_newline(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def _print_table(rows: Sequence[Tuple[str, str]]) -> None:
    """Render label/value rows as a borderless two-column table."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(justify="right", style="bold")
    table.add_column(justify="left")
    for label, value in rows:
        table.add_row(label, value)
    Console(highlight=False, soft_wrap=True).print(table)


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def _cmd_convert(args: argparse.Namespace) -> int:
    """Run the decode -> encode pipeline over every input."""
    if args.inputs and args.read:
        _error("cannot specify input arguments and a path to read from")
        return 1

    if not args.decode or not args.encode:
        _error("encoder and decoder must be specified")
        return 1

    if args.inputs and args.binary:
        _error("binary input must be read from a file or stdin")
        return 1

    pipe = Pipeline(args.decode, args.encode)
    logger.debug("Built %r", pipe)

    if args.inputs:
        for item in args.inputs:
            _emit(pipe.str_to_str(item))
        return 0

    data = _read_input(args.read)
    if args.binary:
        _emit(pipe.bin_to_str(data))
        return 0

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as err:
        _error("input is not valid UTF-8 text, use --binary for raw bytes ({})".format(err))
        return 1
    _emit(pipe.str_to_str(_strip_newline(text)))
    return 0


def _cmd_decoders(args: argparse.Namespace) -> int:
    print("Registered Decoders:\n====================")
    for name in codec_names():
        print("- {}".format(name))
    return 0


def _cmd_ulid(args: argparse.Namespace) -> int:
    value = ULIDValue()
    data = bytes(value)
    logger.debug("Generated ULID %s", value)

    if args.encoder != config.PRETTY:
        _emit(Pipeline(args.encoder).bin_to_str(data), args.no_newline)
        return 0

    multi = MultiPipeline("hex", "b64")
    _print_table([
        ("ULID", str(value)),
        ("Time", value.datetime.isoformat(timespec="milliseconds")),
        ("Hex Bytes", multi.must_bin_to_str("hex", data)),
        ("b64 Bytes", multi.must_bin_to_str("b64", data)),
    ])
    return 0


def _cmd_uuid(args: argparse.Namespace) -> int:
    value = uuid.uuid4()
    data = value.bytes
    logger.debug("Generated UUID %s", value)

    if args.encoder != config.PRETTY:
        _emit(Pipeline(args.encoder).bin_to_str(data), args.no_newline)
        return 0

    multi = MultiPipeline("hex", "b64")
    _print_table([
        ("UUID", str(value)),
        ("Hex Bytes", multi.must_bin_to_str("hex", data)),
        ("b64 Bytes", multi.must_bin_to_str("b64", data)),
    ])
    return 0


def _cmd_rand(args: argparse.Namespace) -> int:
    size = args.size if args.size is not None else config.load_rand_size()
    if size < 0:
        _error("size must not be negative, got {}".format(size))
        return 1

    data = secrets.token_bytes(size)
    logger.debug("Generated %d random bytes", size)
    _emit(Pipeline(args.encoder).bin_to_str(data), args.no_newline)
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running anything.

    RULES:
    - Every subcommand accepts -v/--verbose
    - ulid/uuid default to the pretty table, rand to BINUTIL_RAND_ENCODER
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )

    parser = argparse.ArgumentParser(
        prog="binutil",
        description="Helpers for converting to and from binary and string representations.",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=version())
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    convert = subparsers.add_parser(
        "convert",
        parents=[common],
        help="Convert input from one representation to another (default).",
    )
    convert.add_argument("inputs", nargs="*", metavar="INPUT", help="Values to convert.")
    convert.add_argument("-r", "--read", default=None, metavar="PATH",
                         help="Read data from the specified path on disk.")
    convert.add_argument("-d", "--decode", default=None,
                         help="The format to decode the input from.")
    convert.add_argument("-e", "--encode", default=None,
                         help="The format to encode the input to.")
    convert.add_argument("-b", "--binary", action="store_true",
                         help="The file/stdin input is binary data, not a UTF-8 string.")
    convert.set_defaults(handler=_cmd_convert)

    decoders = subparsers.add_parser(
        "decoders",
        aliases=["d"],
        parents=[common],
        help="Print the list of registered decoders.",
    )
    decoders.set_defaults(handler=_cmd_decoders)

    for name, handler, what in (
        ("ulid", _cmd_ulid, "ulid"),
        ("uuid", _cmd_uuid, "uuid"),
    ):
        gen = subparsers.add_parser(name, parents=[common], help="Generate a new {}.".format(what))
        gen.add_argument("-e", "--encoder", default=config.PRETTY,
                         help="The encoder to display the {} in (default: %(default)s).".format(what))
        gen.add_argument("-n", "--no-newline", action="store_true",
                         help="Omit the trailing newline (ignored for the pretty encoder).")
        gen.set_defaults(handler=handler)

    rand = subparsers.add_parser("rand", parents=[common], help="Generate random bytes.")
    rand.add_argument("-s", "--size", type=int, default=None,
                      help="Number of bytes to generate (default: BINUTIL_RAND_SIZE or {}).".format(
                          config.DEFAULT_RAND_SIZE))
    rand.add_argument("-e", "--encoder", default=config.RAND_ENCODER,
                      help="The encoder to display the bytes in (default: %(default)s).")
    rand.add_argument("-n", "--no-newline", action="store_true",
                      help="Omit the trailing newline.")
    rand.set_defaults(handler=_cmd_rand)

    return parser


def _with_default_command(argv: List[str]) -> List[str]:
    """Prepend ``convert`` unless argv already names a command or asks for help/version."""
    if argv and (argv[0] in COMMANDS or argv[0] in ("-h", "--help", "--version")):
        return argv
    return ["convert"] + argv


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Returns the process exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(_with_default_command(list(argv)))
    _configure_logging(args.verbose)

    try:
        return args.handler(args)
    except BinutilError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        _error(str(e))
        return 1
    except (OSError, ValueError) as e:
        # Unreadable input file, invalid BINUTIL_* configuration
        _error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
