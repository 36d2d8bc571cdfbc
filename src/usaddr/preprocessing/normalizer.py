"""Address normalization and tokenization."""

import logging
import re
import unicodedata

logger = logging.getLogger(__name__)


class AddressNormalizer:
    """
    Normalizes and tokenizes U.S. addresses for feature extraction.

    Normalization is deliberately narrow: surrounding whitespace is trimmed
    and the text is NFKD-decomposed. Case, punctuation and non-ASCII
    characters are left alone because the tagging model was trained on
    text in that form.
    """

    # Characters that always become standalone tokens
    ISOLATED_CHARS = ("&", "#")

    # Token delimiters
    SPLIT_PATTERN = re.compile(r"[ ,;)\n]")

    # Punctuation kept by remove_insignificant_punctuation between two digits
    SIGNIFICANT_PUNCTUATION = frozenset("-./")

    def normalize(self, address: str) -> str:
        """
        Normalize an address string.

        Args:
            address: Raw address string

        Returns:
            Trimmed, NFKD-decomposed address
        """
        if not address:
            return ""

        return unicodedata.normalize("NFKD", address.strip())

    def normalize_batch(self, addresses: list[str]) -> list[str]:
        """Normalize several addresses, preserving input order."""
        return [self.normalize(address) for address in addresses]

    def tokenize(self, text: str) -> list[str]:
        """
        Split normalized address text into tokens.

        ``&`` and ``#`` are padded with spaces first so they always come out
        as their own tokens, e.g. ``"A&B"`` -> ``["A", "&", "B"]``.

        Args:
            text: Normalized address text

        Returns:
            Non-empty tokens in left-to-right order
        """
        for char in self.ISOLATED_CHARS:
            text = text.replace(char, f" {char} ")

        tokens = [token for token in self.SPLIT_PATTERN.split(text) if token]
        logger.debug("Tokenized %r into %d tokens", text, len(tokens))
        return tokens

    def remove_insignificant_punctuation(self, address: str) -> str:
        """
        Strip punctuation that carries no address meaning.

        Alphanumerics and whitespace are kept. Hyphens, periods and slashes
        are kept only between two numeric characters (``12-14``, ``1/2``).
        Everything else is dropped. Not part of the parse pipeline.
        """
        output = []
        last = len(address) - 1

        for i, char in enumerate(address):
            if char.isalnum() or char.isspace():
                output.append(char)
                continue

            if 0 < i < last and char in self.SIGNIFICANT_PUNCTUATION:
                if address[i - 1].isnumeric() and address[i + 1].isnumeric():
                    output.append(char)

        return "".join(output)
