"""
Log file discovery and per-file record extraction.

Two pieces feed the extraction pipeline:

- iter_log_files walks a directory tree and yields regular files. It checks
  the run's cancellation flag before every path it yields and stops as soon
  as the flag is raised.
- process_file reads one file line by line, parses candidate lines, and
  returns the file's records as a set.

Design:
- Any traversal failure raises WalkError; no partial file list is used
- A single malformed candidate line fails the whole file
- A file that fails contributes no records
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, FrozenSet, Iterator, Optional, Set, Union

from actionlog.core.config import PipelineSettings, config
from actionlog.core.exceptions import FileReadError, MalformedLineError, WalkError
from actionlog.data.parsers import KeyValueLineParser, is_candidate_line
from actionlog.data.schema import Record

if TYPE_CHECKING:
    from actionlog.pipeline.state import RunState

logger = logging.getLogger(__name__)


def _raise_walk_error(exc: OSError) -> None:
    raise WalkError(exc.filename or "", exc.strerror or str(exc)) from exc


def iter_log_files(
    root: Union[str, Path],
    state: Optional["RunState"] = None,
) -> Iterator[Path]:
    """
    Yield every regular file under root, depth-first in sorted order.
    
    Args:
        root: Directory to walk (a regular file yields just itself)
        state: Run state whose cancellation flag stops the walk
    
    Yields:
        Paths of regular files
    
    Raises:
        WalkError: If root is missing or any directory cannot be listed
    """
    root = Path(root)

    def cancelled() -> bool:
        return state is not None and state.cancelled

    if root.is_file():
        if not cancelled():
            yield root
        return

    if not root.exists():
        raise WalkError(root, "no such file or directory")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            if cancelled():
                logger.warning(f"Walk of {root} stopped: run cancelled")
                return

            path = Path(dirpath) / name
            # Skips FIFOs, sockets and dangling links
            if path.is_file():
                yield path


def process_file(
    path: Union[str, Path],
    parser: Optional[KeyValueLineParser] = None,
    settings: Optional[PipelineSettings] = None,
) -> FrozenSet[Record]:
    """
    Extract the set of records found in one log file.
    
    Only lines containing the action marker are parsed; all others are
    skipped without reaching the parser.
    
    Args:
        path: Log file to read
        parser: Line parser (default KeyValueLineParser)
        settings: Pipeline settings for decoding and line limits
    
    Returns:
        Records found in the file (duplicates collapsed)
    
    Raises:
        FileReadError: If the file cannot be opened, read or decoded, or a
            line has more than settings.max_line_length characters
        MalformedLineError: On the first candidate line missing a field,
            attributed with path and line number
    """
    path = Path(path)
    parser = parser or KeyValueLineParser()
    settings = settings or config.pipeline
    max_length = settings.max_line_length

    logger.info(f"Processing log file: {path}")

    records: Set[Record] = set()
    try:
        with open(path, "r", encoding=settings.encoding, errors=settings.encoding_errors) as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")

                if max_length and len(line) > max_length:
                    raise FileReadError(
                        path, f"line {line_number} longer than {max_length} characters"
                    )

                if not is_candidate_line(line):
                    continue

                try:
                    records.add(parser.parse(line))
                except MalformedLineError as e:
                    raise MalformedLineError(e.fields, path=path, line_number=line_number) from e

    # LookupError: unknown codec; ValueError: undecodable bytes, or decoded
    # text a Record refuses (e.g. lone surrogates from surrogateescape)
    except (OSError, LookupError, ValueError) as e:
        raise FileReadError(path, str(e)) from e

    logger.debug(f"{path}: {len(records)} unique records")
    return frozenset(records)
