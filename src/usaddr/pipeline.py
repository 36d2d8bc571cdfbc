"""
Main address parsing pipeline.

Orchestrates normalization, tokenization, feature extraction and sequence
tagging to label the components of U.S. addresses.
"""

import logging
import threading
from pathlib import Path

from usaddr.exceptions import TaggingError
from usaddr.features import FeatureExtractor, FeatureSet
from usaddr.lexicon import AddressLexicon
from usaddr.models.config import TaggerConfig
from usaddr.models.tagger import CRFSuiteTagger, SequenceTagger
from usaddr.postprocessing import TaggedToken, assemble, group_by_tag
from usaddr.preprocessing import AddressNormalizer
from usaddr.schemas import BatchParseResult, ParseResult

logger = logging.getLogger(__name__)


class AddressParser:
    """
    Main address parsing pipeline.

    Combines:
    - Unicode normalization and tokenization
    - Lexical and contextual token features
    - A linear-chain CRF sequence tagger

    Example:
        >>> parser = AddressParser.from_pretrained("./usaddr.crfsuite")
        >>> parser.tag("123 Main St., Springfield, IL 62704")[0]
        TaggedToken(text='123', label='AddressNumber')
    """

    def __init__(
        self,
        tagger: SequenceTagger,
        config: TaggerConfig | None = None,
        lexicon: AddressLexicon | None = None,
    ):
        """
        Initialize parser.

        Args:
            tagger: Sequence tagger that labels feature sequences
            config: Pipeline configuration
            lexicon: Directional/street-suffix lexicon
        """
        self.tagger = tagger
        self.config = config or TaggerConfig()

        self.normalizer = AddressNormalizer()
        self.extractor = FeatureExtractor(lexicon)

    @classmethod
    def from_pretrained(
        cls,
        model_path: str | Path | None = None,
        config: TaggerConfig | None = None,
    ) -> "AddressParser":
        """
        Load parser from a CRFsuite model file.

        Args:
            model_path: Path to the ``.crfsuite`` model (defaults to the bundled model)
            config: Pipeline configuration

        Returns:
            Initialized AddressParser

        Raises:
            InitializationError: The model could not be loaded
        """
        config = config or TaggerConfig()
        if model_path is not None:
            config.model_path = Path(model_path)

        tagger = CRFSuiteTagger.from_pretrained(config.model_path)
        return cls(tagger=tagger, config=config)

    def tokenize(self, address: str) -> list[str]:
        """Normalize and tokenize a raw address."""
        return self.normalizer.tokenize(self.normalizer.normalize(address))

    def features(self, tokens: list[str]) -> list[FeatureSet]:
        """Build the tagger input for a token sequence."""
        return self.extractor.address_features(tokens)

    def tag(self, address: str, group: bool | None = None) -> list[TaggedToken]:
        """
        Label every token of an address.

        Args:
            address: Raw address string
            group: Merge adjacent same-label tokens (defaults to config)

        Returns:
            Tagged tokens in input order; empty for blank input

        Raises:
            TaggingError: The tagger failed on this address
        """
        tokens = self.tokenize(address)
        if not tokens:
            return []

        labels = self._tag_sequence(self.features(tokens))
        tagged = assemble(tokens, labels)

        if group is None:
            group = self.config.group_tokens
        if group:
            tagged = group_by_tag(tagged)

        return tagged

    def parse(self, address: str, group: bool | None = None) -> ParseResult:
        """
        Parse a single address.

        Args:
            address: Raw address string
            group: Merge adjacent same-label tokens (defaults to config)

        Returns:
            ParseResult carrying either ``data`` or ``error``
        """
        try:
            return ParseResult(data=self.tag(address, group=group))
        except TaggingError as e:
            logger.warning("Failed to tag %r: %s", address, e)
            return ParseResult(error=str(e))

    def parse_addresses(self, addresses: list[str], group: bool | None = None) -> list[list[TaggedToken]]:
        """
        Tag several addresses in input order.

        Raises:
            TaggingError: On the first address that fails; no partial results
        """
        return [self.tag(address, group=group) for address in addresses]

    def parse_batch(self, addresses: list[str], group: bool | None = None) -> BatchParseResult:
        """
        Parse multiple addresses as one result.

        Args:
            addresses: List of raw address strings
            group: Merge adjacent same-label tokens (defaults to config)

        Returns:
            BatchParseResult with all tagged addresses, or the first error
        """
        try:
            return BatchParseResult(data=self.parse_addresses(addresses, group=group))
        except TaggingError as e:
            logger.warning("Batch of %d addresses aborted: %s", len(addresses), e)
            return BatchParseResult(error=str(e))

    def _tag_sequence(self, xseq: list[FeatureSet]) -> list[str]:
        """Run the tagger, wrapping engine failures in TaggingError."""
        try:
            labels = self.tagger.tag(xseq)
        except TaggingError:
            raise
        except Exception as e:
            raise TaggingError(str(e)) from e

        logger.debug("Tagged %d items", len(labels))
        return list(labels)


_default_parser: AddressParser | None = None
_default_lock = threading.Lock()


def get_parser() -> AddressParser:
    """
    Return the process-wide parser backed by the bundled model.

    Loaded once on first use; later calls reuse it. A failed load is not
    cached, so the InitializationError is raised again on the next call.
    """
    global _default_parser

    if _default_parser is None:
        with _default_lock:
            if _default_parser is None:
                _default_parser = AddressParser.from_pretrained()
    return _default_parser


# Convenience functions for quick parsing
def parse(address: str, group: bool = False) -> ParseResult:
    """Parse an address with the bundled model."""
    return get_parser().parse(address, group=group)


def parse_addresses(addresses: list[str], group: bool = False) -> list[list[TaggedToken]]:
    """Tag several addresses with the bundled model, aborting on the first failure."""
    return get_parser().parse_addresses(addresses, group=group)
