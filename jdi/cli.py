"""Command-line interface for jdi.

WHY: Most users document files from the terminal or from an npm/make
script: ``jdi index.js lib/*.js``. The CLI wires argument parsing, file
validation, and the runner together behind that single command.

HOW: Uses argparse to accept one or more source files plus options for the
fence tag, output directory, stdout mode, worker count, and verbosity.
Validates every path before any output is written, then either streams
documents to stdout or writes them via jdi.runner.run().

RULES:
- Positional arguments: source files (at least one)
- Status messages go to stderr ("wrote N bytes to PATH"), never stdout
- --stdout prints documents to stdout and writes no files
- Missing files, a missing output directory, or any I/O error:
  "Error: ..." on stderr and exit status 1
- Logging is WARNING by default, DEBUG with --verbose
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from jdi import __version__
from jdi.config import DEFAULT_JOBS, OUTPUT_SUFFIX
from jdi.runner import doc, run

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so --stdout can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> NoReturn:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1, got {}".format(value))
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without touching files.
    """
    parser = argparse.ArgumentParser(
        prog="jdi",
        description="Generate literate Markdown documentation from source files: "
                    "// comments become prose, code becomes fenced blocks.",
    )

    parser.add_argument(
        "files",
        nargs="+",
        help="Source files to document. Each FILE is written to FILE{}.".format(OUTPUT_SUFFIX),
    )

    parser.add_argument(
        "--language",
        default=None,
        help="Fence language tag for all files (default: each file's extension).",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: next to each source file).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the documents to stdout instead of writing files.",
    )

    parser.add_argument(
        "--jobs",
        type=_positive_int,
        default=DEFAULT_JOBS,
        help="Number of files processed concurrently (default: %(default)s).",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def _print_docs(files: List[Path], language_tag: Optional[str]) -> None:
    for path in files:
        for line in doc(path, language_tag=language_tag):
            sys.stdout.write(line + "\n")
    sys.stdout.flush()


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``jdi`` command and ``python -m jdi``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    cwd = Path.cwd()
    files = [cwd / f for f in args.files]
    for path in files:
        if not path.is_file():
            _fail("File not found: {}".format(path))

    try:
        if args.stdout:
            _print_docs(files, args.language)
            return

        output_dir = cwd / args.output_dir if args.output_dir else None
        if output_dir is not None and not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))

        results = run(
            cwd,
            args.files,
            output_dir=output_dir,
            language_tag=args.language,
            jobs=args.jobs,
        )
    except (OSError, UnicodeDecodeError) as e:
        _fail(str(e))

    for result in results:
        _status("wrote {} bytes to {}".format(
            result.bytes_written, os.path.relpath(result.output, cwd),
        ))


if __name__ == "__main__":
    main()
