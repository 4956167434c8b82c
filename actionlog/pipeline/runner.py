"""
A full run: extract records from a log tree, then write the CSV.

The output file is written only after every worker has finished and only if
no fatal error was recorded. On failure nothing is written.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from actionlog.core.config import PipelineSettings, config
from actionlog.data.writer import write_records_csv

from .pool import ExtractionPool


@dataclass(frozen=True)
class RunSummary:
    output: Path
    records: int
    files_processed: int


def run(
    root: Union[str, Path],
    output: Union[str, Path],
    workers: Optional[int] = None,
    settings: Optional[PipelineSettings] = None,
) -> RunSummary:
    """
    Extract records under root and write them to output as CSV.

    Args:
        root: Log directory
        output: CSV file to create
        workers: Worker count (defaults to settings.workers)
        settings: Pipeline settings (defaults to the global config)

    Raises:
        ConfigurationError: If workers < 1
        ExtractionError: The run's first fatal error; no file is written
        OutputWriteError: If the CSV cannot be written
    """
    settings = settings or config.pipeline
    if workers is None:
        workers = settings.workers

    pool = ExtractionPool(root, workers, settings)
    records = pool.run()

    output = Path(output)
    rows = write_records_csv(output, records)

    return RunSummary(output=output, records=rows, files_processed=pool.files_processed)
