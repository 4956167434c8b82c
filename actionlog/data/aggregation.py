"""
Record aggregation across files.

Merges per-file record sets into one deduplicated set. Set union is
commutative and idempotent, so the order in which files finish has no
effect on the result.

The aggregator is not thread-safe: during a run exactly one thread owns it
and every other thread hands it records through a queue.
"""

import logging
from typing import FrozenSet, Iterable, Set

from actionlog.data.schema import Record

logger = logging.getLogger(__name__)


class RecordAggregator:
    """Accumulates a deduplicated set of Records."""

    def __init__(self) -> None:
        self._records: Set[Record] = set()
        self.batches_merged = 0

    def merge(self, records: Iterable[Record]) -> int:
        """
        Union records into the aggregate set.
        
        Returns:
            Number of records that were not already present
        """
        before = len(self._records)
        self._records.update(records)
        self.batches_merged += 1

        added = len(self._records) - before
        logger.debug(f"Merged batch {self.batches_merged}: {added} new records")
        return added

    @property
    def records(self) -> FrozenSet[Record]:
        """Immutable snapshot of the aggregate set."""
        return frozenset(self._records)

    def __len__(self) -> int:
        return len(self._records)


def merge_record_sets(record_sets: Iterable[Iterable[Record]]) -> FrozenSet[Record]:
    """Union several record sets in one call."""
    aggregator = RecordAggregator()
    for records in record_sets:
        aggregator.merge(records)
    return aggregator.records
