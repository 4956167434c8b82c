"""
Canonical record schema for firewall connection events.

A Record is the six-field representation of one connection event extracted
from a log line. Records are immutable and compare by value, so two lines
with the same six values collapse into one entry in a set regardless of
which file produced them.

Design rationale:
- All six fields are mandatory and non-empty
- Frozen model gives structural equality and a hash over every field
- Field orders for error payloads and CSV rows are fixed module constants
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


# Order used when reporting captured values of a malformed line
FIELD_ORDER: Tuple[str, ...] = ("src", "dst", "interface", "dir", "action", "rule")

# Column order of the CSV output
CSV_HEADER: Tuple[str, ...] = ("action", "src", "dst", "interface", "dir", "rule")


class Record(BaseModel):
    """
    One connection event.
    
    Attributes:
        src: Source address
        dst: Destination address
        interface: Interface name the packet crossed
        dir: Direction (e.g. inbound, outbound)
        action: Firewall decision (e.g. accept, drop, reject)
        rule: Identifier of the matching rule
    
    Notes:
        - Instances are frozen and hashable
        - Equality is over all six fields
    """
    
    model_config = ConfigDict(frozen=True)
    
    src: str = Field(..., min_length=1, description="Source address")
    dst: str = Field(..., min_length=1, description="Destination address")
    interface: str = Field(..., min_length=1, description="Interface name")
    dir: str = Field(..., min_length=1, description="Traffic direction")
    action: str = Field(..., min_length=1, description="Firewall action")
    rule: str = Field(..., min_length=1, description="Rule identifier")
    
    def as_row(self) -> Tuple[str, ...]:
        """Values in CSV_HEADER order."""
        return tuple(getattr(self, column) for column in CSV_HEADER)
