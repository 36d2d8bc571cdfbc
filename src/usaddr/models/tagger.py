"""Sequence tagger backends."""

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import pycrfsuite

from usaddr.exceptions import InitializationError
from usaddr.features import FeatureSet

logger = logging.getLogger(__name__)


@runtime_checkable
class SequenceTagger(Protocol):
    """Anything that maps a feature-set sequence to one label per item."""

    def tag(self, xseq: list[FeatureSet]) -> list[str]:
        ...


class CRFSuiteTagger:
    """
    CRFsuite-backed tagger for a pretrained ``.crfsuite`` model.

    The model file is opened once; tagging is read-only afterwards.
    """

    def __init__(self, tagger: pycrfsuite.Tagger, model_path: Path | None = None):
        self._tagger = tagger
        self.model_path = model_path

    @classmethod
    def from_pretrained(cls, model_path: str | Path) -> "CRFSuiteTagger":
        """
        Load a CRFsuite model file.

        Args:
            model_path: Path to the ``.crfsuite`` model

        Returns:
            Initialized CRFSuiteTagger

        Raises:
            InitializationError: The file is missing or not a valid model
        """
        model_path = Path(model_path)
        if not model_path.is_file():
            raise InitializationError(f"CRFsuite model not found at {model_path}")

        tagger = pycrfsuite.Tagger()
        try:
            tagger.open(str(model_path))
        except (OSError, ValueError) as e:
            raise InitializationError(f"Could not load CRFsuite model {model_path}: {e}") from e

        logger.info("Loaded CRFsuite model from %s", model_path)
        return cls(tagger, model_path=model_path)

    @property
    def labels(self) -> list[str]:
        """Labels known to the loaded model."""
        return list(self._tagger.labels())

    def tag(self, xseq: list[FeatureSet]) -> list[str]:
        """Tag a feature sequence with the loaded model."""
        return self._tagger.tag([self._to_item(features) for features in xseq])

    @staticmethod
    def _to_item(features: FeatureSet) -> dict[str, float]:
        """Convert a feature set to a CRFsuite item, summing duplicate names."""
        item: dict[str, float] = {}
        for name, weight in features:
            item[name] = item.get(name, 0.0) + weight
        return item
