"""Errors raised by the address parsing pipeline."""


class AddressParserError(Exception):
    """Base class for all parser errors."""


class InitializationError(AddressParserError):
    """The tagging model or lexicon data could not be loaded.

    Raised once while building a parser. A parser that failed to initialize
    must not be used to serve parse calls.
    """


class TaggingError(AddressParserError):
    """The sequence tagger rejected a feature sequence or failed internally.

    The message is the tagging engine's own message and is surfaced verbatim
    as the ``error`` payload of a parse result.
    """
