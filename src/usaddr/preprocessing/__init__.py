"""Preprocessing module for address normalization and tokenization."""

from usaddr.preprocessing.normalizer import AddressNormalizer

__all__ = ["AddressNormalizer"]
