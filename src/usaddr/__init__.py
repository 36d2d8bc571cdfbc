"""
usaddr - Statistical U.S. address parser.

Splits unstructured U.S. postal addresses into labeled components
(AddressNumber, StreetName, PlaceName, ZipCode, ...) with a linear-chain
CRF over hand-crafted token features.
"""

__version__ = "0.1.0"

from usaddr.exceptions import AddressParserError, InitializationError, TaggingError
from usaddr.marshal import ResultMarshaler
from usaddr.pipeline import AddressParser, get_parser, parse, parse_addresses
from usaddr.postprocessing import TaggedToken, group_by_tag
from usaddr.schemas import BatchParseResult, ParseResult

__all__ = [
    "AddressParser",
    "AddressParserError",
    "BatchParseResult",
    "InitializationError",
    "ParseResult",
    "ResultMarshaler",
    "TaggedToken",
    "TaggingError",
    "get_parser",
    "group_by_tag",
    "parse",
    "parse_addresses",
    "__version__",
]
