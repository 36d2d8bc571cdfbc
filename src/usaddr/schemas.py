"""Pydantic v2 schemas for address parsing I/O."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _DataOrError(BaseModel):
    """Exactly one of ``data`` and ``error`` is set."""

    @model_validator(mode="after")
    def _check_one_variant(self):
        if (self.data is None) == (self.error is None):
            raise ValueError("Exactly one of 'data' or 'error' must be set")
        return self

    @property
    def is_success(self) -> bool:
        return self.error is None


class ParseResult(_DataOrError):
    """Outcome of parsing one address: tagged tokens or an error message."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "data": [
                    ["123", "AddressNumber"],
                    ["Main", "StreetName"],
                    ["St.", "StreetNamePostType"],
                ],
            }
        },
    )

    data: list[tuple[str, str]] | None = Field(None, description="(token, label) pairs in input order")
    error: str | None = Field(None, description="Tagging error message")


class BatchParseResult(_DataOrError):
    """Outcome of parsing a batch. A single failure fails the whole batch."""

    model_config = ConfigDict(frozen=True)

    data: list[list[tuple[str, str]]] | None = Field(None, description="Per-address (token, label) pairs")
    error: str | None = Field(None, description="First tagging error message")


class ParseRequest(BaseModel):
    """Request schema for parsing an address."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "address": "123 Main St., Springfield, IL 62704",
                "group": False,
            }
        },
    )

    address: str = Field(..., max_length=500, description="Address to parse")
    group: bool = Field(default=False, description="Merge adjacent tokens with the same label")


class BatchParseRequest(BaseModel):
    """Request schema for batch parsing."""

    addresses: list[str] = Field(..., min_length=1, max_length=100, description="List of addresses")
    group: bool = Field(default=False, description="Merge adjacent tokens with the same label")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy")
    model_loaded: bool = Field(default=False)
    version: str = Field(default="0.1.0")
