import bisect
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from arxivstamp.domain.subject_tables import COMPSCI_TABLE, MATH_TABLE, PHYSICS_TABLE


class InvalidCategoryError(Exception):
    """Custom exception for invalid category strings."""

    def __init__(self, category_string: str) -> None:
        """Initialize the exception with a category string.

        Args:
            category_string: The invalid category string that caused the error.
        """
        super().__init__(f"Invalid category string: {category_string}")
        self.category_string = category_string


class Group(Enum):
    """A coarse classification of arXiv publications."""

    CS = "cs"
    ECON = "econ"
    EESS = "eess"
    MATH = "math"
    PHYSICS = "physics"
    Q_BIO = "q-bio"
    Q_FIN = "q-fin"
    STAT = "stat"

    def __str__(self) -> str:
        return self.value


class Archive(Enum):
    """A collection of publications that relate under the same field of study.

    Valid archives are listed on the arXiv category taxonomy page
    (https://arxiv.org/category_taxonomy). The value of each member is its canonical name.
    """

    ASTRO_PH = "astro-ph"
    COND_MAT = "cond-mat"
    CS = "cs"
    ECON = "econ"
    EESS = "eess"
    GR_QC = "gr-qc"
    HEP_EX = "hep-ex"
    HEP_LAT = "hep-lat"
    HEP_PH = "hep-ph"
    HEP_TH = "hep-th"
    MATH_PH = "math-ph"
    MATH = "math"
    NLIN = "nlin"
    NUCL_EX = "nucl-ex"
    NUCL_TH = "nucl-th"
    PHYSICS = "physics"
    Q_BIO = "q-bio"
    Q_FIN = "q-fin"
    QUANT_PH = "quant-ph"
    STAT = "stat"

    @staticmethod
    def from_string(archive_string: str) -> "Archive":
        """Look up an archive by its canonical name.

        Args:
            archive_string: The archive name (e.g., "astro-ph").

        Raises:
            InvalidCategoryError: If the name is not a known archive.

        Returns:
            The matching `Archive` member.
        """
        try:
            return Archive(archive_string)
        except ValueError as e:
            raise InvalidCategoryError(archive_string) from e

    @property
    def group(self) -> Group:
        """The group the archive belongs to."""
        return _ARCHIVE_GROUPS[self]

    def __str__(self) -> str:
        return self.value


_ARCHIVE_GROUPS: dict[Archive, Group] = {
    Archive.CS: Group.CS,
    Archive.ECON: Group.ECON,
    Archive.EESS: Group.EESS,
    Archive.MATH: Group.MATH,
    Archive.ASTRO_PH: Group.PHYSICS,
    Archive.COND_MAT: Group.PHYSICS,
    Archive.GR_QC: Group.PHYSICS,
    Archive.HEP_EX: Group.PHYSICS,
    Archive.HEP_LAT: Group.PHYSICS,
    Archive.HEP_PH: Group.PHYSICS,
    Archive.HEP_TH: Group.PHYSICS,
    Archive.MATH_PH: Group.PHYSICS,
    Archive.NLIN: Group.PHYSICS,
    Archive.NUCL_EX: Group.PHYSICS,
    Archive.NUCL_TH: Group.PHYSICS,
    Archive.PHYSICS: Group.PHYSICS,
    Archive.QUANT_PH: Group.PHYSICS,
    Archive.Q_BIO: Group.Q_BIO,
    Archive.Q_FIN: Group.Q_FIN,
    Archive.STAT: Group.STAT,
}


def _one_of(*subjects: str) -> Callable[[str], bool]:
    allowed = frozenset(subjects)
    return lambda subject: subject in allowed


def _in_table(table: tuple[str, ...]) -> Callable[[str], bool]:
    def check(subject: str) -> bool:
        index = bisect.bisect_left(table, subject)
        return index < len(table) and table[index] == subject

    return check


def _empty(subject: str) -> bool:
    return not subject


_SUBJECT_RULES: dict[Archive, Callable[[str], bool]] = {
    Archive.ASTRO_PH: _one_of("CO", "EP", "GA", "HE", "IM", "SR"),
    Archive.COND_MAT: _one_of(
        "dis-nn", "mes-hall", "mtrl-sci", "other", "quant-gas", "soft", "stat-mech", "str-el", "supr-con"
    ),
    Archive.CS: _in_table(COMPSCI_TABLE),
    Archive.ECON: _one_of("EM", "GN", "TH"),
    Archive.EESS: _one_of("AS", "IV", "SP", "SY"),
    Archive.GR_QC: _empty,
    Archive.HEP_EX: _empty,
    Archive.HEP_LAT: _empty,
    Archive.HEP_PH: _empty,
    Archive.HEP_TH: _empty,
    Archive.MATH_PH: _empty,
    Archive.MATH: _in_table(MATH_TABLE),
    Archive.NLIN: _one_of("AO", "CD", "CG", "PS", "SI"),
    Archive.NUCL_EX: _empty,
    Archive.NUCL_TH: _empty,
    Archive.PHYSICS: _in_table(PHYSICS_TABLE),
    Archive.Q_BIO: _one_of("BM", "CB", "GN", "MN", "NC", "OT", "PE", "QM", "SC", "TO"),
    Archive.Q_FIN: _one_of("CP", "EC", "GN", "MF", "PM", "PR", "RM", "ST", "SR"),
    Archive.QUANT_PH: _empty,
    Archive.STAT: _one_of("AP", "CO", "ME", "ML", "OT", "TH"),
}


def is_valid_subject(archive: Archive, subject: str) -> bool:
    """Check whether a subject class is valid within the given archive.

    Args:
        archive: The archive the subject belongs to.
        subject: The subject class (e.g., "LG" for "cs.LG"). Archives without
            sub-classification only accept an empty subject.

    Returns:
        True if the subject is valid for the archive, False otherwise.
    """
    return _SUBJECT_RULES[archive](subject)


@dataclass(frozen=True)
class CategoryId:
    """Domain object for a validated arXiv category identifier."""

    TOKEN_DELIM = "."

    archive: Archive
    """The archive to which the category belongs (e.g., `Archive.ASTRO_PH`)."""

    subject: str = ""
    """The subject class of the category (e.g., "SR" for "astro-ph.SR")."""

    def __post_init__(self) -> None:
        """Validate the subject against the archive.

        Raises:
            InvalidCategoryError: If the subject is not valid for the archive.
        """
        if (
            not isinstance(self.archive, Archive)
            or not isinstance(self.subject, str)
            or not is_valid_subject(self.archive, self.subject)
        ):
            raise InvalidCategoryError(f"{self.archive}{self.TOKEN_DELIM}{self.subject}")

    @property
    def group(self) -> Group:
        """The group of the category, derived from its archive."""
        return self.archive.group

    @staticmethod
    def from_string(category_string: str) -> "CategoryId":
        """Create a `CategoryId` domain object from a string.

        Args:
            category_string: The category string in the format "archive.subject".

        Raises:
            InvalidCategoryError: If the category string is invalid.

        Returns:
            The `CategoryId` domain object.
        """
        parts = category_string.split(CategoryId.TOKEN_DELIM)
        if len(parts) != 2:
            raise InvalidCategoryError(category_string)

        archive_string, subject = parts
        try:
            return CategoryId(Archive.from_string(archive_string), subject)
        except InvalidCategoryError as e:
            raise InvalidCategoryError(category_string) from e

    def __str__(self) -> str:
        """Return the string representation of the `CategoryId` domain object.

        Returns:
            The category in the format "archive.subject".
        """
        return f"{self.archive}{self.TOKEN_DELIM}{self.subject}"

    def __repr__(self) -> str:
        """Return the developer representation of the category.

        Returns:
            A string such as "CategoryId('cs.LG')".
        """
        return f"CategoryId({str(self)!r})"
