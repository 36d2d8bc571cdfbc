"""Marshaling of parse results for consumers outside the library."""

from typing import Any

from pydantic import TypeAdapter

from usaddr.models.config import MarshalFormat
from usaddr.schemas import BatchParseResult, ParseResult

_RESULT_LIST = TypeAdapter(list[ParseResult])


class ResultMarshaler:
    """
    Converts parse results to their cross-boundary form.

    Both formats carry the same ``data``/``error`` contract:

    - ``RAW_JSON``: a compact JSON string, ``{"data":[["123","AddressNumber"]]}``
    - ``NATIVE_STRUCT``: a plain dict with ``(token, label)`` tuples
    """

    def __init__(self, fmt: MarshalFormat = MarshalFormat.NATIVE_STRUCT):
        self.format = MarshalFormat(fmt)

    def marshal(self, result: ParseResult | BatchParseResult) -> str | dict[str, Any]:
        """Marshal a single or batch result."""
        if self.format is MarshalFormat.RAW_JSON:
            return result.model_dump_json(exclude_none=True)
        return result.model_dump(exclude_none=True)

    def marshal_many(self, results: list[ParseResult]) -> str | list[dict[str, Any]]:
        """Marshal a list of results as one JSON array or a list of dicts."""
        if self.format is MarshalFormat.RAW_JSON:
            return _RESULT_LIST.dump_json(results, exclude_none=True).decode()
        return [self.marshal(result) for result in results]
