"""Sequence tagging models for address parsing."""

from usaddr.models.config import LABELS, MarshalFormat, TaggerConfig
from usaddr.models.crf import LinearChainCRF
from usaddr.models.tagger import CRFSuiteTagger, SequenceTagger

__all__ = [
    "CRFSuiteTagger",
    "LABELS",
    "LinearChainCRF",
    "MarshalFormat",
    "SequenceTagger",
    "TaggerConfig",
]
