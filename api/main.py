"""
FastAPI service for the U.S. address parser.

REST API with:
- Single and batch parsing endpoints
- Swagger documentation
- Health checks
- CORS support
"""

import logging
import os
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from usaddr import (
    AddressParser,
    BatchParseResult,
    InitializationError,
    ParseResult,
    __version__,
    get_parser,
)
from usaddr.schemas import BatchParseRequest, HealthResponse, ParseRequest

logger = logging.getLogger(__name__)

# Global parser instance
parser: AddressParser | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the bundled model on startup."""
    global parser

    try:
        parser = get_parser()
        logger.info("Model loaded successfully")
    except InitializationError as e:
        logger.error("Model could not be loaded: %s", e)
        parser = None

    yield

    parser = None


app = FastAPI(
    title="U.S. Address Parser API",
    description="""
    Splits unstructured U.S. addresses into labeled components with a
    linear-chain CRF.

    Results carry either `data` (a list of `[token, label]` pairs) or
    `error` (the tagging engine's message).

    ## Example
    ```json
    POST /parse
    {"address": "123 Main St., Springfield, IL 62704"}
    ```
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request timing middleware
@app.middleware("http")
async def add_timing_header(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Response-Time-Ms"] = f"{duration_ms:.2f}"
    return response


def _require_parser() -> AddressParser:
    if parser is None:
        raise HTTPException(status_code=503, detail="Parser not initialized")
    return parser


@app.get("/", response_model=HealthResponse, tags=["Health"])
@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Service status and model availability."""
    return HealthResponse(
        status="healthy",
        model_loaded=parser is not None,
        version=__version__,
    )


@app.post("/parse", response_model=ParseResult, response_model_exclude_none=True, tags=["Parsing"])
async def parse_address(request: ParseRequest):
    """
    Parse a single address.

    **Example Response:**
    ```json
    {"data": [["123", "AddressNumber"], ["Main", "StreetName"], ["St.", "StreetNamePostType"]]}
    ```
    """
    return _require_parser().parse(request.address, group=request.group)


@app.post("/parse/batch", response_model=BatchParseResult, response_model_exclude_none=True, tags=["Parsing"])
async def parse_batch(request: BatchParseRequest):
    """
    Parse up to 100 addresses. The first tagging failure fails the batch.
    """
    return _require_parser().parse_batch(request.addresses, group=request.group)


@app.get("/parse/{address:path}", response_model=ParseResult, response_model_exclude_none=True, tags=["Parsing"])
async def parse_address_get(address: str, group: bool = False):
    """
    Parse address via GET request (for testing).

    Note: Use POST /parse for production - this endpoint is for quick testing only.
    """
    return _require_parser().parse(address, group=group)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": f"Internal server error: {str(exc)}"}
    )


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    port = int(os.getenv("PORT", "8080"))
    uvicorn.run(app, host="0.0.0.0", port=port)
