"""
Key-value line parsing for firewall logs.

Converts a raw log line into a Record. Lines are whitespace-separated
tokens; tokens starting with one of the recognized prefixes are captured,
everything else is ignored so unknown fields never break parsing.

Example:
    2024 May 28 14:12:01 : firewall INFO[55555555]: TCP connection initiated.
    src=192.100.1.200 dst=192.100.2.244 proto=tcp interface=bnd1
    dir=inbound action=accept rule=123

Design:
- Prefix match is case-sensitive
- A key appearing twice keeps its last value
- Any of the six fields left empty raises MalformedLineError carrying all
  six captured values in FIELD_ORDER
"""

from typing import Dict, Tuple

from actionlog.core.exceptions import MalformedLineError
from actionlog.data.schema import FIELD_ORDER, Record

# Substring a line must contain to be handed to the parser
CANDIDATE_MARKER = "action="

# Token prefix -> Record field
KEY_PREFIXES: Tuple[Tuple[str, str], ...] = tuple(
    (f"{field}=", field) for field in FIELD_ORDER
)


def is_candidate_line(line: str) -> bool:
    """Cheap pre-filter: only lines mentioning an action are parsed."""
    return CANDIDATE_MARKER in line


class KeyValueLineParser:
    """
    Parses `key=value` firewall log lines into Records.
    
    Recognized keys: src, dst, interface, dir, action, rule.
    """
    
    def __init__(self, prefixes: Tuple[Tuple[str, str], ...] = KEY_PREFIXES):
        self.prefixes = prefixes
    
    def capture(self, line: str) -> Dict[str, str]:
        """
        Collect recognized values from a line.
        
        Args:
            line: Raw log line
        
        Returns:
            Dict keyed by field name in FIELD_ORDER; missing fields are ""
        """
        captured = {field: "" for field in FIELD_ORDER}
        
        for token in line.split():
            for prefix, field in self.prefixes:
                if token.startswith(prefix):
                    captured[field] = token[len(prefix):]
                    break
        
        return captured
    
    def parse(self, line: str) -> Record:
        """
        Parse a line into a Record.
        
        Args:
            line: Raw log line
        
        Returns:
            Fully populated Record
        
        Raises:
            MalformedLineError: If any of the six fields is empty
        """
        captured = self.capture(line)
        
        if not all(captured.values()):
            raise MalformedLineError(captured)
        
        return Record(**captured)


_default_parser = KeyValueLineParser()


def parse_line(line: str) -> Record:
    """
    Parse a single line with the default parser.
    
    Raises:
        MalformedLineError: If any required field is missing or empty
    """
    return _default_parser.parse(line)
