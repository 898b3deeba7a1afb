"""Streaming file layer: read sources, write literate Markdown.

WHY: The core works on line strings. Users work on files. This module is
the thin plumbing between the two. It splits files into lines, builds the
per-file Configuration from the file name, and streams the generated
document to disk without ever holding a whole file in memory.

HOW: read_lines() lazily yields terminator-free lines. doc() chains
read_lines() into jdi.core.stream.transform(). write_doc() streams one
document to ``<file>.md`` and reports the byte count. run() documents many
files concurrently on a thread pool.

RULES:
- Sources are read as UTF-8; "\\n" and "\\r\\n" terminators are removed
- A trailing newline does not produce an extra empty line
- Fence tag: explicit override, else the file extension, else
  DEFAULT_LANGUAGE_TAG (files without an extension are assumed to be JS)
- Output goes next to the source as <file><OUTPUT_SUFFIX> unless an
  output directory is given
- run() overwrites existing output files, but only with complete documents
- I/O errors are not caught here; they propagate to the caller
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Optional, Union

from jdi.config import DEFAULT_JOBS, DEFAULT_LANGUAGE_TAG, OUTPUT_SUFFIX
from jdi.core.state import Configuration
from jdi.core.stream import transform

logger = logging.getLogger(__name__)

# Suffix of the temporary file a document is streamed into before it is
# moved into place.
PARTIAL_SUFFIX = ".part"


@dataclass
class DocResult:
    """Outcome of documenting one source file.

    Attributes:
        source: Path of the processed source file.
        output: Path of the written Markdown file.
        bytes_written: Size of the written document in bytes (UTF-8).
    """

    source: Path
    output: Path
    bytes_written: int


def iter_lines(handle: IO[str]) -> Iterator[str]:
    """Yield the lines of an open text handle without their terminators.

    The handle should be opened with ``newline="\\n"`` so that only "\\n"
    splits lines; a lone "\\r" stays part of the line, and "\\r\\n" reaches
    this function intact and is removed as one terminator.
    """
    for raw in handle:
        if raw.endswith("\r\n"):
            yield raw[:-2]
        elif raw.endswith("\n"):
            yield raw[:-1]
        else:
            yield raw


def read_lines(path: Union[str, Path]) -> Iterator[str]:
    """Lazily yield the lines of a UTF-8 file.

    Raises FileNotFoundError (on first iteration) if the file is missing.
    """
    with Path(path).open("r", encoding="utf-8", newline="\n") as handle:
        yield from iter_lines(handle)


def configuration_for(
    path: Union[str, Path],
    language_tag: Optional[str] = None,
) -> Configuration:
    """Build the per-file Configuration from a source path.

    Args:
        path: Source file path. Only its name is used.
        language_tag: Explicit fence tag overriding the extension.

    Returns:
        Configuration with the resolved tag and the file's base name.
    """
    source = Path(path)
    if language_tag is None:
        language_tag = source.suffix[1:] or DEFAULT_LANGUAGE_TAG
    return Configuration(language_tag=language_tag, display_name=source.name)


def doc(
    path: Union[str, Path],
    language_tag: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Iterator[str]:
    """Lazily generate the document lines for one source file.

    Nothing is read until the iterator is consumed; it has no side effects
    on disk. Use write_doc() or run() to persist the result.
    """
    return transform(read_lines(path), configuration_for(path, language_tag), now=now)


def output_path_for(
    path: Union[str, Path],
    output_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """Resolve where the document for ``path`` is written.

    ``src/index.js`` → ``src/index.js.md``, or ``<output_dir>/index.js.md``.
    """
    source = Path(path)
    name = source.name + OUTPUT_SUFFIX
    if output_dir is not None:
        return Path(output_dir) / name
    return source.with_name(name)


def write_lines(lines: Iterable[str], handle: IO[str]) -> int:
    """Write lines with "\\n" terminators and return the UTF-8 byte count."""
    written = 0
    for line in lines:
        text = line + "\n"
        handle.write(text)
        written += len(text.encode("utf-8"))
    return written


def write_doc(
    path: Union[str, Path],
    output_dir: Optional[Union[str, Path]] = None,
    language_tag: Optional[str] = None,
    now: Optional[datetime] = None,
) -> DocResult:
    """Stream the document for one source file to disk.

    The document is streamed into ``<output>.part`` and moved over the
    destination only once it is complete. A missing or undecodable source
    therefore never leaves a truncated Markdown file behind, and an existing
    document survives a failed run.

    Args:
        path: Source file to document.
        output_dir: Directory for the output file (default: next to source).
        language_tag: Explicit fence tag overriding the extension.
        now: Optional fixed footer timestamp.

    Returns:
        DocResult with the source path, output path, and bytes written.
    """
    source = Path(path)
    destination = output_path_for(source, output_dir)
    config = configuration_for(source, language_tag)
    logger.debug("Documenting %s as %r → %s", source, config.language_tag, destination)

    partial = destination.with_name(destination.name + PARTIAL_SUFFIX)
    with source.open("r", encoding="utf-8", newline="\n") as src:
        try:
            with partial.open("w", encoding="utf-8", newline="\n") as dst:
                written = write_lines(transform(iter_lines(src), config, now=now), dst)
            partial.replace(destination)
        except BaseException:
            partial.unlink(missing_ok=True)
            raise

    return DocResult(source=source, output=destination, bytes_written=written)


def run(
    cwd: Union[str, Path],
    files: Iterable[Union[str, Path]],
    output_dir: Optional[Union[str, Path]] = None,
    language_tag: Optional[str] = None,
    jobs: Optional[int] = None,
) -> List[DocResult]:
    """Document several files, concurrently, and report each one.

    **Warning:** this overwrites existing output files. Use doc() to get the
    document lines without touching the disk.

    Args:
        cwd: Directory that relative file names (and output_dir) resolve against.
        files: Source file names, e.g. ``["index.js", "test.js"]``.
        output_dir: Optional directory for all output files.
        language_tag: Optional fence tag applied to every file.
        jobs: Worker threads (default: DEFAULT_JOBS).

    Returns:
        One DocResult per file, in input order.

    Raises:
        OSError / UnicodeDecodeError: the first failure, in input order.
    """
    base = Path(cwd)
    sources = [base / f for f in files]
    target_dir = base / output_dir if output_dir is not None else None
    workers = max(1, jobs or DEFAULT_JOBS)

    logger.debug("Documenting %d file(s) with %d worker(s)", len(sources), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(write_doc, source, target_dir, language_tag)
            for source in sources
        ]
        results = [future.result() for future in futures]

    for result in results:
        logger.debug(
            "Finished %s (%d bytes)",
            os.path.relpath(result.output, base),
            result.bytes_written,
        )
    return results
