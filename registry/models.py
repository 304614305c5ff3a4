"""
Data types passed between the report stages.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class EntrantStatus(str, Enum):
    STALE = "stale"
    UPCOMING = "upcoming"
    ACTIVE = "active"
    EXPIRED = "expired"


@dataclass(frozen=True)
class EntrantRecord:
    """One roster row. Dates are Unix seconds at UTC midnight."""

    name: str
    tag: str
    valid_from: int
    valid_until: int


@dataclass(frozen=True)
class ReportHeader:
    as_of: int


@dataclass
class Roster:
    header: ReportHeader
    entrants: List[EntrantRecord] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Entrant rows read, including the ones too stale to display."""
        return len(self.entrants)


@dataclass
class ReportResult:
    as_of: int
    total: int
    blocks: List[str]
    published: Tuple[str, ...] = ()
    responses: str = ""
