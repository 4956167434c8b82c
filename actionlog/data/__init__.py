"""
Data module: Record schema, parsing, ingestion, aggregation, and CSV output.

Converts a tree of firewall logs into one deduplicated record set:

    Log directory
        ↓
    Discovery (actionlog/data/ingestion.py: iter_log_files)
        ↓
    Per-file extraction (actionlog/data/ingestion.py: process_file)
        ↓
    Line parsing (actionlog/data/parsers.py) → Record
        ↓
    Aggregation (actionlog/data/aggregation.py) → deduplicated set
        ↓
    CSV output (actionlog/data/writer.py)
"""

from actionlog.data.aggregation import RecordAggregator, merge_record_sets
from actionlog.data.ingestion import iter_log_files, process_file
from actionlog.data.parsers import (
    CANDIDATE_MARKER,
    KeyValueLineParser,
    is_candidate_line,
    parse_line,
)
from actionlog.data.schema import CSV_HEADER, FIELD_ORDER, Record
from actionlog.data.writer import write_records_csv

__all__ = [
    # Schema
    "Record",
    "FIELD_ORDER",
    "CSV_HEADER",
    
    # Parsing
    "KeyValueLineParser",
    "CANDIDATE_MARKER",
    "is_candidate_line",
    "parse_line",
    
    # Ingestion
    "iter_log_files",
    "process_file",
    
    # Aggregation
    "RecordAggregator",
    "merge_record_sets",
    
    # Output
    "write_records_csv",
]
