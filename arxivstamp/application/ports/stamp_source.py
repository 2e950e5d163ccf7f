from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class StampSourceError(Exception):
    """Raised when a stamp source cannot be read."""


class StampEntryMissingFieldError(StampSourceError):
    """Raised when a required field is missing in a stamp entry."""

    def __init__(self, line_number: int, entry: dict[str, Any] | str) -> None:
        """Initializes the error with the entry that is missing a field.

        Args:
            line_number: The 1-based line number of the entry in the source.
            entry: The decoded entry, or the raw line when it could not be decoded.
        """
        fields = list(entry.keys()) if isinstance(entry, dict) else entry
        super().__init__(f"Missing required field in entry on line {line_number}: {fields}")
        self.line_number = line_number
        self.entry = entry


@dataclass(frozen=True)
class StampEntryDTO:
    """Data Transfer Object for a raw stamp line read from a source."""

    line_number: int
    """The 1-based line number of the entry in the source."""

    text: str
    """The raw stamp text."""


class AbstractStampSource(ABC):
    """Abstract source of stamp lines."""

    @abstractmethod
    def read_entries(self) -> list[StampEntryDTO]:
        """Reads all stamp entries from the source.

        Raises:
            StampSourceError: If the source cannot be read.
            StampEntryMissingFieldError: If an entry lacks the stamp text.

        Returns:
            A list of `StampEntryDTO` objects in source order.
        """
        raise NotImplementedError
