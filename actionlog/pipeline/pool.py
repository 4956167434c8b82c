"""
Concurrent extraction: one walker, N file workers, one aggregator.

    walker ──paths──▶ worker × N ──record sets──▶ aggregator

Threads talk through two queues and share only a RunState. The walker stops
yielding paths once the run is cancelled and then closes the path queue
with one sentinel per worker. Workers keep draining the path queue until
they see their sentinel, but after cancellation they discard paths instead
of processing them. A file finished before cancellation still reaches the
aggregator. The aggregator's set is read only after every worker has been
joined and the result queue has been closed.
"""

from __future__ import annotations

import logging
import queue
import threading
from pathlib import Path
from typing import FrozenSet, List, Optional, Union

from actionlog.core.config import PipelineSettings, config
from actionlog.core.exceptions import ConfigurationError
from actionlog.data.aggregation import RecordAggregator
from actionlog.data.ingestion import iter_log_files, process_file
from actionlog.data.parsers import KeyValueLineParser
from actionlog.data.schema import Record

from .state import RunState

logger = logging.getLogger(__name__)

# Closes a queue
_DONE = object()


class ExtractionPool:
    """
    Runs one extraction over a log tree.

    Notes:
    - Single use: construct, call run() once.
    - Cancellation is cooperative; a file already being read finishes.
    - The first fatal error wins and is re-raised from run().
    """

    def __init__(
        self,
        root: Union[str, Path],
        workers: int,
        settings: Optional[PipelineSettings] = None,
        parser: Optional[KeyValueLineParser] = None,
    ) -> None:
        if workers < 1:
            raise ConfigurationError(f"worker count must be a positive integer, got {workers}")

        self.root = Path(root)
        self.workers = workers
        self.settings = settings or config.pipeline
        self.parser = parser or KeyValueLineParser()
        self.state = RunState()

        self._paths: queue.Queue = queue.Queue(maxsize=self.settings.path_queue_size)
        self._results: queue.Queue = queue.Queue()
        self.aggregator = RecordAggregator()

        self._counter_lock = threading.Lock()
        self.files_processed = 0
        self.files_skipped = 0

    def run(self) -> FrozenSet[Record]:
        """
        Extract all records under root.

        Returns:
            Deduplicated records from every file

        Raises:
            ExtractionError: The first fatal error of the run
        """
        logger.info(f"Extracting records from {self.root} with {self.workers} workers")

        walker = threading.Thread(target=self._walk, name="actionlog-walk")
        merger = threading.Thread(target=self._aggregate, name="actionlog-aggregate")
        threads: List[threading.Thread] = [
            threading.Thread(target=self._work, args=(i,), name=f"actionlog-worker-{i}")
            for i in range(self.workers)
        ]

        merger.start()
        for t in threads:
            t.start()
        walker.start()

        walker.join()
        for t in threads:
            t.join()

        self._results.put(_DONE)
        merger.join()

        self.state.raise_if_failed()

        records = self.aggregator.records
        logger.info(
            f"Processed {self.files_processed} files, {len(records)} unique records"
        )
        return records

    def _walk(self) -> None:
        try:
            for path in iter_log_files(self.root, self.state):
                self._paths.put(path)
        except Exception as e:
            self.state.record_failure(e)
        finally:
            for _ in range(self.workers):
                self._paths.put(_DONE)

    def _work(self, worker_id: int) -> None:
        while True:
            path = self._paths.get()
            if path is _DONE:
                break

            if self.state.cancelled:
                with self._counter_lock:
                    self.files_skipped += 1
                continue

            try:
                records = process_file(path, self.parser, self.settings)
            except Exception as e:
                logger.debug(f"Worker {worker_id} failed on {path}")
                self.state.record_failure(e)
                continue

            with self._counter_lock:
                self.files_processed += 1
            self._results.put(records)

    def _aggregate(self) -> None:
        while True:
            batch = self._results.get()
            if batch is _DONE:
                break
            self.aggregator.merge(batch)


def extract_records(
    root: Union[str, Path],
    workers: int,
    settings: Optional[PipelineSettings] = None,
) -> FrozenSet[Record]:
    """Run an ExtractionPool over root and return its records."""
    return ExtractionPool(root, workers, settings).run()
