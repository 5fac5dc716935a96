"""
Core data models for fixseed.

This module defines the small value types shared between the tag engine
and the seeding layer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Enums
# =============================================================================


class Directive(str, Enum):
    """Operations an embedded tag can request."""

    ENV = "ENV"
    REF = "REF"


# =============================================================================
# Tag Models
# =============================================================================


@dataclass(frozen=True)
class TagMatch:
    """One well-formed ``${{ DIRECTIVE(KEY[:-DEFAULT]) }}`` occurrence."""

    directive: str
    key: str
    default: Optional[str]
    start: int  # offset of the leading '$'
    end: int  # offset just past the closing '}}'

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end
