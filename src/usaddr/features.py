"""
Token feature extraction for the address tagger.

Feature names and weights must match what the CRF model was trained on
exactly. A mismatch never raises; it silently degrades tagging accuracy.
"""

import logging
import string
from typing import NamedTuple

from usaddr.lexicon import AddressLexicon

logger = logging.getLogger(__name__)

VOWELS = frozenset("aeiou")
ASCII_PUNCTUATION = frozenset(string.punctuation)


class Feature(NamedTuple):
    """A named real-valued signal. Duplicate names are summed by the tagger."""

    name: str
    weight: float


FeatureSet = list[Feature]


def _flag(condition: bool) -> float:
    return 1.0 if condition else 0.0


def _prefixed(features: FeatureSet, prefix: str) -> FeatureSet:
    """Copy a feature set, renaming every feature to ``<prefix>_<name>``."""
    return [Feature(f"{prefix}_{feature.name}", feature.weight) for feature in features]


class FeatureExtractor:
    """
    Computes per-token feature sets and adds sequence context.

    Example:
        >>> extractor = FeatureExtractor()
        >>> xseq = extractor.address_features(["123", "Main", "St."])
        >>> xseq[0][0]
        Feature(name='digits=all_digits', weight=1.0)
    """

    def __init__(self, lexicon: AddressLexicon | None = None):
        self.lexicon = lexicon or AddressLexicon()

    def token_features(self, token: str) -> FeatureSet:
        """
        Compute the base feature set of a single token.

        The ``digits=<class>`` weight is 1 whenever the token has any numeric
        character, whichever class is emitted.

        Args:
            token: Token text

        Returns:
            Nine features in a fixed order
        """
        n_chars = len(token)
        numeric_digits = sum(1 for char in token if char.isnumeric())
        has_vowels = any(char.lower() in VOWELS for char in token)
        token_clean = "".join(char for char in token if char.isalnum())

        last_char = token[-1] if token else ""
        endsinpunc = last_char in ASCII_PUNCTUATION
        ends_in_period = last_char == "."
        trailing_zeros = last_char == "0"

        if numeric_digits == n_chars:
            digits = "all_digits"
        elif numeric_digits > 0:
            digits = "some_digits"
        else:
            digits = "no_digits"

        return [
            Feature(f"digits={digits}", _flag(numeric_digits > 0)),
            Feature(f"word={token_clean}", _flag(any(char.isalpha() for char in token))),
            Feature(f"length={'d' if digits == 'all_digits' else 'w'}:{numeric_digits}", 1.0),
            Feature("endsinpunc", _flag(endsinpunc)),
            Feature("abbrev", _flag(ends_in_period)),
            Feature("trailing.zeros", _flag(trailing_zeros)),
            Feature("street_name", _flag(self.lexicon.is_street_name(token))),
            Feature("directional", _flag(self.lexicon.is_directional(token))),
            Feature("has.vowels", _flag(has_vowels)),
        ]

    def add_feature_context(self, features: list[FeatureSet]) -> list[FeatureSet]:
        """
        Add sequence-boundary markers and neighbor features, in place.

        Neighbor features are read from a snapshot taken after the boundary
        markers are added, so no token sees features another token gained
        in this pass. Positions 1 and n-2 only get a single boundary marker
        instead of a full neighbor copy; the model was trained that way.

        Args:
            features: Base feature sets, one per token

        Returns:
            The same list, with every feature set extended
        """
        n_features = len(features)

        if n_features > 0:
            features[0].append(Feature("address.start", 1.0))
            features[-1].append(Feature("address.end", 1.0))

        if n_features <= 1:
            return features

        snapshot = [list(feature_set) for feature_set in features]
        new_features = []

        for idx in range(n_features):
            if idx == 0:
                current = _prefixed(snapshot[idx + 1], "next")
            elif idx == 1:
                current = [Feature("previous_address.start", 1.0)]
            elif idx == n_features - 2:
                current = [Feature("next_address.end", 1.0)]
            elif idx == n_features - 1:
                current = _prefixed(snapshot[idx - 1], "previous")
            else:
                current = _prefixed(snapshot[idx + 1], "next") + _prefixed(snapshot[idx - 1], "previous")
            new_features.append(current)

        for feature_set, additions in zip(features, new_features):
            feature_set.extend(additions)

        return features

    def address_features(self, tokens: list[str]) -> list[FeatureSet]:
        """Build the full feature sequence for a tokenized address."""
        xseq = [self.token_features(token) for token in tokens]
        logger.debug("Extracted base features for %d tokens", len(xseq))
        return self.add_feature_context(xseq)
