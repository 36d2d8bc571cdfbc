"""
Accuracy evaluation against tagged address corpora.

Corpora are XML files of ``<AddressString>`` elements whose children are
named after the label of the token they contain::

    <AddressCollection>
      <AddressString><AddressNumber>123</AddressNumber> <StreetName>Main</StreetName></AddressString>
    </AddressCollection>
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

from usaddr.pipeline import AddressParser

logger = logging.getLogger(__name__)


@dataclass
class EvaluationReport:
    """Mismatch counts from one evaluation run."""

    n_addresses: int = 0
    n_tags: int = 0
    errors: list[str] = field(default_factory=list)
    failed_addresses: set[int] = field(default_factory=set)

    @property
    def n_mistagged(self) -> int:
        return sum(1 for error in self.errors if "Mismatched tag" in error)

    @property
    def tag_error_rate(self) -> float:
        return self.n_mistagged / self.n_tags if self.n_tags else 0.0

    @property
    def address_error_rate(self) -> float:
        return len(self.failed_addresses) / self.n_addresses if self.n_addresses else 0.0

    def summary(self) -> str:
        return (
            f"There were {self.n_mistagged} mistagged address components of {self.n_tags} "
            f"({self.tag_error_rate:.1%}). {len(self.failed_addresses)} partially failed "
            f"addresses of {self.n_addresses} ({self.address_error_rate:.1%})"
        )


def read_tagged_addresses(file_path: str | Path) -> tuple[list[str], list[list[str]]]:
    """
    Read a tagged address corpus.

    Args:
        file_path: Path to the XML corpus

    Returns:
        (addresses, labels) where each address is its tokens joined by spaces
    """
    root = ET.parse(file_path).getroot()

    addresses = []
    labels = []
    for element in root.iter("AddressString"):
        addresses.append(" ".join(child.text or "" for child in element))
        labels.append([child.tag for child in element])

    logger.info("Read %d tagged addresses from %s", len(addresses), file_path)
    return addresses, labels


def fuzzy_labels(labels: list[str]) -> list[str]:
    """Collapse label variants that older corpora do not distinguish."""
    collapsed = []
    for label in labels:
        if label.startswith("StreetName"):
            collapsed.append("StreetName")
        elif label.startswith("AddressNumber"):
            collapsed.append("AddressNumber")
        elif label == "Null":
            collapsed.append("NotAddress")
        else:
            collapsed.append(label)
    return collapsed


def evaluate(parser: AddressParser, file_path: str | Path, fuzzy: bool = False) -> EvaluationReport:
    """
    Tag every address of a corpus and compare with the gold labels.

    Args:
        parser: Parser to evaluate
        file_path: Path to the XML corpus
        fuzzy: Compare with collapsed label variants

    Returns:
        EvaluationReport

    Raises:
        TaggingError: The tagger failed on a corpus address
    """
    addresses, gold = read_tagged_addresses(file_path)
    report = EvaluationReport(n_addresses=len(addresses))

    for i, (address, expected) in enumerate(zip(addresses, gold)):
        predicted = [tagged.label for tagged in parser.tag(address)]
        if fuzzy:
            predicted = fuzzy_labels(predicted)
            expected = fuzzy_labels(expected)

        if len(predicted) != len(expected):
            report.errors.append(f"{i}. Mismatched length: {len(predicted)} != {len(expected)}")
            report.failed_addresses.add(i)

        report.n_tags += len(expected)
        for predicted_label, expected_label in zip(predicted, expected):
            if predicted_label != expected_label:
                report.errors.append(f"{i}. Mismatched tag: {predicted_label} != {expected_label}")
                report.failed_addresses.add(i)

    logger.info(report.summary())
    return report
