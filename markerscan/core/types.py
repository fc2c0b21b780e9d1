"""Type definitions for MarkerScan."""

from dataclasses import dataclass
from enum import Enum

# Sentinel returned by scans that find no balanced closing marker
NOT_FOUND = -1


class MarkerKind(Enum):
    """How a marker is counted while scanning for nesting."""

    SHORT = "short"  # Two identical characters, counted per character
    LONG = "long"  # Anything else, counted as whole marker strings


@dataclass(frozen=True)
class MarkedRegion:
    """A top-level region delimited by an opening and a matching end marker.

    Attributes:
        start: Index of the opening marker
        end: Index of the matching end marker
        start_marker: The opening marker string
        end_marker: The end marker string
    """

    start: int
    end: int
    start_marker: str
    end_marker: str

    @property
    def content_start(self) -> int:
        """Index of the first character after the opening marker."""
        return self.start + len(self.start_marker)

    @property
    def content_end(self) -> int:
        """Index one past the last content character."""
        return self.end

    @property
    def stop(self) -> int:
        """Index one past the end marker."""
        return self.end + len(self.end_marker)

    def content(self, text: str) -> str:
        """Text between the markers."""
        return text[self.content_start : self.content_end]

    def span(self, text: str) -> str:
        """Text of the whole region, markers included."""
        return text[self.start : self.stop]
