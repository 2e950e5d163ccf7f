import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from arxivstamp.application.ports.stamp_source import (
    AbstractStampSource,
    StampEntryDTO,
    StampEntryMissingFieldError,
    StampSourceError,
)

logger = logging.getLogger(__name__)


def _read_lines(file_path: Path) -> list[str]:
    """Read the file and split it on "\n" only, so line numbers match what editors show."""
    try:
        with file_path.open(encoding="utf-8") as f:
            return f.read().split("\n")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Failed to read stamps from {file_path}: {e}"
        raise StampSourceError(msg) from e


class TextStampSource(AbstractStampSource):
    """A source that reads one stamp per line from a plain text file."""

    def __init__(self, file_path: str | Path) -> None:
        """Initialize the `TextStampSource`.

        Args:
            file_path: The path of the text file.
        """
        self._file_path = Path(file_path)

    def read_entries(self) -> list[StampEntryDTO]:
        """Reads the non-blank lines of the file.

        Raises:
            StampSourceError: If the file cannot be read.

        Returns:
            A list of `StampEntryDTO` objects, one per non-blank line.
        """
        logger.info("Reading stamps from text file %s", self._file_path)
        return [
            StampEntryDTO(line_number=line_number, text=line.strip())
            for line_number, line in enumerate(_read_lines(self._file_path), start=1)
            if line.strip()
        ]


class JSONStampEntry(BaseModel):
    """A model representing a single JSON stamp entry."""

    stamp: str
    """The stamp line, e.g. 'arXiv:2001.00001 [cs.LG] 1 Jan 2000'."""

    def to_stamp_entry_dto(self, line_number: int) -> StampEntryDTO:
        """Converts the JSON stamp entry to a `StampEntryDTO`.

        Args:
            line_number: The 1-based line number of the entry in the file.

        Returns:
            A `StampEntryDTO` holding the stamp text.
        """
        return StampEntryDTO(line_number=line_number, text=self.stamp.strip())


class JSONStampSource(AbstractStampSource):
    """A source that reads stamps from a JSON lines file."""

    def __init__(self, file_path: str | Path, field: str = "stamp") -> None:
        """Initialize the `JSONStampSource`.

        Args:
            file_path: The path of the JSON lines file.
            field: The key holding the stamp text in each entry.
        """
        self._file_path = Path(file_path)
        self._field = field

    def read_entries(self) -> list[StampEntryDTO]:
        """Reads the JSON entries of the file, skipping blank lines.

        Raises:
            StampSourceError: If the file cannot be read, or a line is not a JSON object.
            StampEntryMissingFieldError: If an entry lacks the stamp field or it is not a string.

        Returns:
            A list of `StampEntryDTO` objects in file order.
        """
        logger.info("Reading stamps from JSON file %s (field %r)", self._file_path, self._field)
        entries: list[StampEntryDTO] = []
        for line_number, line in enumerate(_read_lines(self._file_path), start=1):
            if not line.strip():
                continue

            try:
                raw: Any = json.loads(line)
            except json.JSONDecodeError as e:
                msg = f"Invalid JSON on line {line_number} of {self._file_path}: {e}"
                raise StampSourceError(msg) from e
            if not isinstance(raw, dict):
                msg = f"Expected a JSON object on line {line_number} of {self._file_path}, got {type(raw).__name__}"
                raise StampSourceError(msg)

            try:
                entry = JSONStampEntry(stamp=raw.get(self._field))
            except ValidationError as e:
                raise StampEntryMissingFieldError(line_number, raw) from e
            entries.append(entry.to_stamp_entry_dto(line_number))

        return entries
