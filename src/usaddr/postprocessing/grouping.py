"""Pairing tokens with labels and merging same-label runs."""

import logging
from typing import NamedTuple

logger = logging.getLogger(__name__)


class TaggedToken(NamedTuple):
    """A token and the address component label assigned to it."""

    text: str
    label: str


def assemble(tokens: list[str], labels: list[str]) -> list[TaggedToken]:
    """
    Pair tokens with labels positionally.

    Stops at the shorter input; callers that care about a length mismatch
    can compare the lengths themselves.
    """
    if len(tokens) != len(labels):
        logger.warning("Token/label length mismatch: %d tokens, %d labels", len(tokens), len(labels))

    return [TaggedToken(token, label) for token, label in zip(tokens, labels)]


def group_by_tag(tagged: list[TaggedToken]) -> list[TaggedToken]:
    """
    Merge consecutive tokens that share a label.

    Example:
        >>> group_by_tag([("123", "AddressNumber"), ("Main", "StreetName"), ("Street", "StreetName")])
        [TaggedToken(text='123', label='AddressNumber'), TaggedToken(text='Main Street', label='StreetName')]
    """
    result: list[TaggedToken] = []

    for text, label in tagged:
        if result and result[-1].label == label:
            result[-1] = TaggedToken(f"{result[-1].text} {text}", label)
        else:
            result.append(TaggedToken(text, label))

    return result
