import logging
from dataclasses import dataclass

from arxivstamp.application.ports.stamp_source import AbstractStampSource
from arxivstamp.domain.category import CategoryId
from arxivstamp.domain.identifier import ArxivId
from arxivstamp.domain.stamp import ArxivStamp, ArxivStampError

logger = logging.getLogger(__name__)

LEGACY_TO_CANONICAL_CATEGORIES = {
    "chem-ph": "physics.chem-ph",
    "alg-geom": "math.AG",
    "cmp-lg": "cs.CL",
    "acc-phys": "physics.acc-ph",
    "adap-org": "nlin.AO",
    "chao-dyn": "nlin.CD",
    "ao-sci": "physics.ao-ph",
    "plasm-ph": "physics.plasm-ph",
    "supr-con": "cond-mat.supr-con",
    "funct-an": "math.FA",
    "dg-ga": "math.DG",
    "patt-sol": "nlin.PS",
    "q-alg": "math.QA",
    "bayes-an": "physics.data-an",
    "mtrl-th": "cond-mat.mtrl-sci",
    "comp-gas": "nlin.CG",
    "solv-int": "nlin.SI",
    "atom-ph": "physics.atom-ph",
}


@dataclass(frozen=True)
class StampCheckResult:
    """The outcome of checking a single stamp entry."""

    line_number: int
    """The 1-based line number of the entry in its source."""

    text: str
    """The raw stamp text."""

    stamp: ArxivStamp | None = None
    """The parsed stamp, if the entry is valid."""

    error: str | None = None
    """The error message, if the entry is invalid."""

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON serializable representation of the result.

        Returns:
            A dictionary with the line number, the raw text, the validity, and either the
            parsed components or the error message.
        """
        result: dict[str, object] = {"line": self.line_number, "text": self.text, "valid": self.is_valid}
        if self.stamp is not None:
            result |= {
                "id": str(self.stamp.arxiv_id),
                "category": str(self.stamp.category) if self.stamp.category is not None else None,
                "submitted": self.stamp.submitted.isoformat(),
            }
        if self.error is not None:
            result["error"] = self.error
        return result


@dataclass(frozen=True)
class StampCheckSummary:
    """Counts of valid and invalid entries."""

    total: int
    valid: int
    invalid: int


def parse_identifier(value: str) -> ArxivId:
    """Parses an arXiv identifier, ignoring surrounding whitespace.

    Args:
        value: The identifier string (e.g., "arXiv:2001.00001v2").

    Raises:
        ArxivIdError: If the identifier is invalid.

    Returns:
        The `ArxivId` domain object.
    """
    logger.debug("Parsing identifier %r", value)
    return ArxivId.from_string(value.strip())


def parse_category(value: str) -> CategoryId:
    """Parses a category, ignoring surrounding whitespace.

    Args:
        value: The category string (e.g., "cs.LG").

    Raises:
        InvalidCategoryError: If the category is invalid.

    Returns:
        The `CategoryId` domain object.
    """
    logger.debug("Parsing category %r", value)
    return CategoryId.from_string(value.strip())


def resolve_category(value: str) -> CategoryId:
    """Parses a category, converting legacy archive names to their canonical category first.

    Some older articles carry archive names that were later merged into other archives
    (e.g., "alg-geom" is now "math.AG").

    Args:
        value: The category string, either canonical or legacy.

    Raises:
        InvalidCategoryError: If the category is invalid once resolved.

    Returns:
        The `CategoryId` domain object.
    """
    category_string = value.strip()
    canonical = LEGACY_TO_CANONICAL_CATEGORIES.get(category_string)
    if canonical is not None:
        logger.debug("Resolved legacy category %r to %r", category_string, canonical)
        category_string = canonical
    return parse_category(category_string)


def parse_stamp(value: str) -> ArxivStamp:
    """Parses a stamp line, ignoring surrounding whitespace.

    Args:
        value: The stamp line (e.g., "arXiv:2001.00001 [cs.LG] 1 Jan 2000").

    Raises:
        ArxivStampError: If the stamp is invalid.

    Returns:
        The `ArxivStamp` domain object.
    """
    logger.debug("Parsing stamp %r", value)
    return ArxivStamp.from_string(value.strip())


def check_stamps(source: AbstractStampSource) -> list[StampCheckResult]:
    """Checks every stamp entry of a source.

    Invalid stamps are reported in the results rather than raised.

    Args:
        source: The source to read stamp entries from.

    Raises:
        StampSourceError: If the source cannot be read.

    Returns:
        A list of `StampCheckResult` objects, one per entry, in source order.
    """
    results: list[StampCheckResult] = []
    for entry in source.read_entries():
        try:
            stamp = parse_stamp(entry.text)
        except ArxivStampError as e:
            logger.warning("Invalid stamp on line %d: %s", entry.line_number, e)
            results.append(StampCheckResult(line_number=entry.line_number, text=entry.text, error=str(e)))
            continue
        results.append(StampCheckResult(line_number=entry.line_number, text=entry.text, stamp=stamp))

    return results


def summarize(results: list[StampCheckResult]) -> StampCheckSummary:
    """Counts the valid and invalid results."""
    valid = sum(1 for result in results if result.is_valid)
    return StampCheckSummary(total=len(results), valid=valid, invalid=len(results) - valid)
