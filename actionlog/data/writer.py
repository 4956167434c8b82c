"""
CSV output for extracted records.

Writes header `action,src,dst,interface,dir,rule` followed by one row per
record. Rows are sorted so identical input always produces an identical
file. The CSV is written to a temporary file beside the target and moved
into place only once complete, so a failed write never leaves a partial
file behind.
"""

import csv
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, Union

from actionlog.core.exceptions import OutputWriteError
from actionlog.data.schema import CSV_HEADER, Record

logger = logging.getLogger(__name__)


def _output_mode(path: Path) -> int:
    """Mode of the file being replaced, else 0o666 minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        pass

    # os.umask can only be read by setting it; runs after all workers exit
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_records_csv(path: Union[str, Path], records: Iterable[Record]) -> int:
    """
    Write records to a CSV file.
    
    Args:
        path: Destination file (replaced if it exists)
        records: Records to write
    
    Returns:
        Number of data rows written
    
    Raises:
        OutputWriteError: If the file cannot be created or written
    """
    path = Path(path)
    rows = sorted(record.as_row() for record in records)

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
    except OSError as e:
        raise OutputWriteError(f"cannot create output file {path}: {e}") from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            writer.writerows(rows)
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        Path(tmp_name).unlink(missing_ok=True)
        raise OutputWriteError(f"cannot write output file {path}: {e}") from e

    logger.info(f"Wrote {len(rows)} records to {path}")
    return len(rows)
