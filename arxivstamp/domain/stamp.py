import copy
import datetime
import re

from arxivstamp.domain.category import CategoryId, InvalidCategoryError
from arxivstamp.domain.identifier import ArxivId, ArxivIdError

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "June", "July", "Aug", "Sept", "Oct", "Nov", "Dec",
)  # fmt: skip
"""Month abbreviations as printed on arXiv stamps, indexed by month - 1."""

_MONTHS_BY_ABBREVIATION: dict[str, int] = {
    **{abbreviation: month for month, abbreviation in enumerate(MONTH_ABBREVIATIONS, start=1)},
    "Jun": 6,
    "Jul": 7,
    "Sep": 9,
}

_DAY_PATTERN = re.compile(r"[1-9][0-9]?")
_YEAR_PATTERN = re.compile(r"[0-9]{4}")


class StampDateError(ValueError):
    """Raised when a stamp date does not follow the "D Mon YYYY" layout."""

    def __init__(self, date_string: str, component: str | None, reason: str) -> None:
        """Initialize the error.

        Args:
            date_string: The date string that failed to parse.
            component: The failing component ("day", "month" or "year"), or None when the
                layout itself is wrong.
            reason: A short description of the failure.
        """
        where = f"invalid {component}" if component else "invalid layout"
        super().__init__(f"Cannot parse date {date_string!r}: {where}, {reason}")
        self.date_string = date_string
        self.component = component
        self.reason = reason


def parse_stamp_date(date_string: str) -> datetime.date:
    """Parse a date in the form "1 Jan 2000".

    The day has no zero padding, the month is one of the stamp abbreviations (the three-letter
    forms "Jun", "Jul" and "Sep" are accepted as well) and the year has four digits.

    Args:
        date_string: The date string.

    Raises:
        StampDateError: If the string is not a valid date in the stamp layout.

    Returns:
        The parsed date.
    """
    tokens = date_string.split(" ")
    if len(tokens) != 3:
        raise StampDateError(date_string, None, "expected 'D Mon YYYY'")

    day_token, month_token, year_token = tokens
    if not _DAY_PATTERN.fullmatch(day_token):
        raise StampDateError(date_string, "day", "expected an unpadded day number")
    if month_token not in _MONTHS_BY_ABBREVIATION:
        raise StampDateError(date_string, "month", f"unknown month abbreviation {month_token!r}")
    if not _YEAR_PATTERN.fullmatch(year_token) or int(year_token) < datetime.MINYEAR:
        raise StampDateError(date_string, "year", "expected a four-digit year")

    try:
        return datetime.date(int(year_token), _MONTHS_BY_ABBREVIATION[month_token], int(day_token))
    except ValueError as e:
        raise StampDateError(date_string, "day", str(e)) from e


def format_stamp_date(date: datetime.date) -> str:
    """Format a date in the stamp layout (e.g., "1 Jan 2000")."""
    return f"{date.day} {MONTH_ABBREVIATIONS[date.month - 1]} {date.year:04d}"


class ArxivStampError(Exception):
    """Base class for errors raised when parsing arXiv stamps."""


class InvalidArxivIdError(ArxivStampError):
    """Raised when the identifier of a stamp is invalid."""

    def __init__(self, cause: ArxivIdError) -> None:
        """Initialize the error with the underlying identifier error.

        Args:
            cause: The error raised while parsing the identifier.
        """
        super().__init__(f"Invalid arXiv ID: {cause}")
        self.cause = cause


class InvalidDateError(ArxivStampError):
    """Raised when the submission date of a stamp is invalid."""

    def __init__(self, cause: StampDateError) -> None:
        """Initialize the error with the underlying date error.

        Args:
            cause: The error raised while parsing the date.
        """
        super().__init__(f"Invalid date: {cause}")
        self.cause = cause


class InvalidStampCategoryError(ArxivStampError):
    """Raised when the bracketed category of a stamp is malformed or invalid."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid category: {token!r}")
        self.token = token


class NotEnoughComponentsError(ArxivStampError):
    """Raised when a stamp lacks an identifier or a date."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Not enough components in stamp: {value!r}")
        self.value = value


def _strip_brackets(token: str) -> str:
    """Return the text between straight brackets; parentheses and braces are not accepted.

    Raises:
        InvalidStampCategoryError: If the token is not enclosed in "[" and "]".
    """
    if len(token) < 2 or not token.startswith("[") or not token.endswith("]"):
        raise InvalidStampCategoryError(token)
    return token[1:-1]


class ArxivStamp:
    """Domain object for the stamp added onto the side of arXiv PDF articles.

    The stamp owns a private copy of its identifier, so it is immutable and hashable even
    though `ArxivId` itself has version setters.
    """

    TOKEN_SPACE = " "

    def __init__(self, arxiv_id: ArxivId, category: CategoryId | None, submitted: datetime.date) -> None:
        """Initialize the stamp.

        Args:
            arxiv_id: The identifier of the article. The stamp keeps its own copy.
            category: The primary category of the article, if printed.
            submitted: The submission date of the article.
        """
        self._arxiv_id = copy.copy(arxiv_id)
        self._category = category
        self._submitted = submitted

    @property
    def arxiv_id(self) -> ArxivId:
        """Return a copy of the identifier of the article.

        Returns:
            The identifier. Changing its version does not affect the stamp.
        """
        return copy.copy(self._arxiv_id)

    @property
    def category(self) -> CategoryId | None:
        """Return the primary category of the article, if printed.

        Returns:
            The category, or None when the stamp has no category block.
        """
        return self._category

    @property
    def submitted(self) -> datetime.date:
        """Return the submission date of the article.

        Returns:
            The submission date.
        """
        return self._submitted

    @staticmethod
    def from_string(stamp_string: str) -> "ArxivStamp":
        """Parse a stamp such as "arXiv:2001.00001 [cs.LG] 1 Jan 2000".

        The identifier is parsed first, so identifier errors take precedence over category and
        date errors.

        Args:
            stamp_string: The stamp line.

        Raises:
            NotEnoughComponentsError: If the identifier or the date is missing.
            InvalidArxivIdError: If the identifier is invalid.
            InvalidStampCategoryError: If the bracketed category is malformed or invalid.
            InvalidDateError: If the date is invalid.

        Returns:
            The `ArxivStamp` domain object.
        """
        parts = stamp_string.split(ArxivStamp.TOKEN_SPACE, 1)
        if len(parts) != 2:
            raise NotEnoughComponentsError(stamp_string)
        id_token, rest = parts

        try:
            arxiv_id = ArxivId.from_string(id_token)
        except ArxivIdError as e:
            raise InvalidArxivIdError(e) from e

        category = None
        date_token = rest
        if rest.startswith("["):
            category_parts = rest.split(ArxivStamp.TOKEN_SPACE, 1)
            category_token = category_parts[0]
            try:
                category = CategoryId.from_string(_strip_brackets(category_token))
            except InvalidCategoryError as e:
                raise InvalidStampCategoryError(category_token) from e
            if len(category_parts) != 2:
                raise NotEnoughComponentsError(stamp_string)
            date_token = category_parts[1]

        try:
            submitted = parse_stamp_date(date_token)
        except StampDateError as e:
            raise InvalidDateError(e) from e

        return ArxivStamp(arxiv_id, category, submitted)

    def __str__(self) -> str:
        """Return the stamp line, omitting the category block when there is no category."""
        category = f" [{self._category}]" if self._category is not None else ""
        return f"{self._arxiv_id}{category} {format_stamp_date(self._submitted)}"

    def __repr__(self) -> str:
        """Return the developer representation of the stamp.

        Returns:
            A string such as "ArxivStamp('arXiv:2001.00001 [cs.LG] 1 Jan 2000')".
        """
        return f"{type(self).__name__}({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        """Compare two stamps field by field.

        Args:
            other: The object to compare with.

        Returns:
            True if identifier, category and submission date are all equal.
        """
        if not isinstance(other, ArxivStamp):
            return NotImplemented
        return (self._arxiv_id, self._category, self._submitted) == (
            other._arxiv_id,
            other._category,
            other._submitted,
        )

    def __hash__(self) -> int:
        """Hash the stamp from its formatted identifier, category and submission date.

        Returns:
            The hash value.
        """
        return hash((str(self._arxiv_id), self._category, self._submitted))
