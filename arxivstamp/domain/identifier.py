from enum import Enum


class ArxivIdError(Exception):
    """Base class for errors raised when parsing and validating arXiv identifiers."""


class ArxivIdSyntaxError(ArxivIdError):
    """Raised when an identifier does not follow the `arXiv:YYMM.number{vV}` schema."""

    def __init__(self, value: str) -> None:
        """Initialize the error with the malformed identifier.

        Args:
            value: The string that failed to parse.
        """
        super().__init__(
            f"Invalid identifier syntax: {value!r}; an arXiv identifier must conform to arXiv:YYMM.number{{vV}}"
        )
        self.value = value


class InvalidYearError(ArxivIdError):
    """Raised when the year lies outside of the inclusive [2007, 2099] interval."""

    def __init__(self, year: int) -> None:
        super().__init__(f"Invalid year {year}; a valid year must be between 2007 and 2099")
        self.year = year


class InvalidMonthError(ArxivIdError):
    """Raised when the month lies outside of the inclusive [1, 12] interval."""

    def __init__(self, month: int) -> None:
        super().__init__(f"Invalid month {month}; a valid month must be between 1 and 12")
        self.month = month


class InvalidIdError(ArxivIdError):
    """Raised when the number is not a string of 4 or 5 digits."""

    def __init__(self, number: str) -> None:
        super().__init__(f"Invalid number {number!r}; a valid number must have 4 or 5 digits")
        self.number = number


class ArxivIdScheme(Enum):
    """The versioned grammar that defines an arXiv identifier."""

    OLD = "old"
    """Identifier scheme up to March 2007 (`archive.subject/YYMMNNN`); not parsed by this package."""

    NEW = "new"
    """Identifier scheme since 1 April 2007 (`YYMM.NNNNN`)."""


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


class ArxivId:
    """A unique identifier for articles published on arXiv.org.

    The year, month and number are read-only once constructed; the version may be changed
    with `set_version` and `set_latest`. An identifier without a version refers to the latest
    version of the article.

    See https://info.arxiv.org/help/arxiv_identifier.html for the identifier scheme.
    """

    MIN_YEAR = 2007
    MAX_YEAR = 2099
    MIN_MONTH = 1
    MAX_MONTH = 12
    NUMBER_LENGTHS = (4, 5)
    PREFIX = "arXiv"
    TOKEN_COLON = ":"
    TOKEN_DOT = "."
    TOKEN_VERSION = "v"

    def __init__(self, year: int, month: int, number: str, version: int | None = None) -> None:
        """Create an identifier from its components without any validation.

        Only use this if the components are already known to be valid; see `try_new` for the
        checked constructor.

        Args:
            year: The four-digit year (e.g., 2015).
            month: The month, from 1 to 12.
            number: The zero-padded sequence number, as a string of 4 or 5 digits.
            version: The version of the article, or None for the latest version.
        """
        self._year = year
        self._month = month
        self._number = number
        self._version = version

    @classmethod
    def latest(cls, year: int, month: int, number: str) -> "ArxivId":
        """Create an identifier for the latest version without any validation."""
        return cls(year, month, number, None)

    @classmethod
    def try_new(cls, year: int, month: int, number: str, version: int | None = None) -> "ArxivId":
        """Create an identifier from its components, validating each of them.

        The year is checked first, then the month, then the number; the first failing check
        determines the error.

        Args:
            year: The four-digit year, between 2007 and 2099.
            month: The month, between 1 and 12.
            number: The sequence number, as a string of 4 or 5 digits.
            version: The version of the article, or None for the latest version.

        Raises:
            InvalidYearError: If the year is out of range.
            InvalidMonthError: If the month is out of range.
            InvalidIdError: If the number is not a string of 4 or 5 digits.
            ValueError: If the version is not a positive integer.

        Returns:
            The validated `ArxivId`.
        """
        if not cls.MIN_YEAR <= year <= cls.MAX_YEAR:
            raise InvalidYearError(year)
        if not cls.MIN_MONTH <= month <= cls.MAX_MONTH:
            raise InvalidMonthError(month)
        if len(number) not in cls.NUMBER_LENGTHS or not _is_digits(number):
            raise InvalidIdError(number)
        if version is not None and version < 1:
            msg = f"Version must be a positive integer, got {version}"
            raise ValueError(msg)
        return cls(year, month, number, version)

    @classmethod
    def try_latest(cls, year: int, month: int, number: str) -> "ArxivId":
        """Create an identifier for the latest version, validating each component.

        Raises:
            ArxivIdError: If any component is invalid.
        """
        return cls.try_new(year, month, number, None)

    @classmethod
    def from_string(cls, value: str) -> "ArxivId":
        """Parse an identifier in the form "arXiv:YYMM.number" or "arXiv:YYMM.numbervV".

        A version suffix that is not a positive integer is ignored, and the identifier is
        treated as referring to the latest version.

        Args:
            value: The identifier string.

        Raises:
            ArxivIdSyntaxError: If the string does not follow the identifier grammar.
            InvalidYearError: If the year is out of range.
            InvalidMonthError: If the month is out of range.
            InvalidIdError: If the number is not a string of 4 or 5 digits.

        Returns:
            The parsed `ArxivId`.
        """
        parts = value.split(cls.TOKEN_COLON)
        if len(parts) != 2 or parts[0] != cls.PREFIX:
            raise ArxivIdSyntaxError(value)

        inner_parts = parts[1].split(cls.TOKEN_DOT)
        if len(inner_parts) != 2:
            raise ArxivIdSyntaxError(value)

        year_month, number_version = inner_parts
        year_suffix, month = year_month[:2], year_month[2:]
        if len(year_month) != 4 or not _is_digits(year_suffix) or not _is_digits(month):
            raise ArxivIdSyntaxError(value)

        number, version = _parse_number_version(number_version)
        return cls.try_new(2000 + int(year_suffix), int(month), number, version)

    @property
    def year(self) -> int:
        """Return the four-digit year of the submission.

        Returns:
            The year, e.g. 2015.
        """
        return self._year

    @property
    def month(self) -> int:
        """Return the month of the submission.

        Returns:
            The month, from 1 to 12.
        """
        return self._month

    @property
    def number(self) -> str:
        """Return the sequence number within the month.

        Returns:
            The number as stored, with its zero padding.
        """
        return self._number

    @property
    def version(self) -> int | None:
        """Return the version of the article.

        Returns:
            The version, or None when the identifier refers to the latest version.
        """
        return self._version

    @property
    def scheme(self) -> ArxivIdScheme:
        """The identifier scheme; always `ArxivIdScheme.NEW`."""
        return ArxivIdScheme.NEW

    @property
    def incremental_part(self) -> int:
        """The sequence number as an integer."""
        return int(self._number)

    def is_latest(self) -> bool:
        """Whether the identifier refers to the most recent version of the article."""
        return self._version is None

    def set_version(self, version: int) -> None:
        """Set the version of the article.

        Args:
            version: The version, a positive integer.

        Raises:
            ValueError: If the version is not a positive integer.
        """
        if version < 1:
            msg = f"Version must be a positive integer, got {version}"
            raise ValueError(msg)
        self._version = version

    def set_latest(self) -> None:
        """Make the identifier refer to the latest version of the article."""
        self._version = None

    def __str__(self) -> str:
        """Return the identifier in the form "arXiv:YYMM.number{vV}".

        The number keeps the width it was stored with, so "0001" and "00001" render differently.
        """
        identifier = f"{self.PREFIX}:{self._year % 100:02d}{self._month:02d}.{self._number}"
        if self._version is not None:
            identifier += f"{self.TOKEN_VERSION}{self._version}"
        return identifier

    def __repr__(self) -> str:
        """Return the developer representation of the identifier.

        Returns:
            A string listing the year, month, number and version.
        """
        return (
            f"ArxivId(year={self._year!r}, month={self._month!r}, number={self._number!r}, version={self._version!r})"
        )

    def __eq__(self, other: object) -> bool:
        """Compare two identifiers field by field.

        Args:
            other: The object to compare with.

        Returns:
            True if year, month, number and version are all equal.
        """
        if not isinstance(other, ArxivId):
            return NotImplemented
        return (self._year, self._month, self._number, self._version) == (
            other._year,
            other._month,
            other._number,
            other._version,
        )


def _parse_number_version(value: str) -> tuple[str, int | None]:
    """Split a "number{vV}" token into the number and the optional version.

    The token is split on the first "v". A suffix that is not a positive integer yields no version.

    Args:
        value: The token following the "." of an identifier.

    Returns:
        A tuple of the number string and the version, or None when absent.
    """
    number, separator, suffix = value.partition(ArxivId.TOKEN_VERSION)
    if not separator or not _is_digits(suffix):
        return number, None

    version = int(suffix)
    return number, version if version >= 1 else None
