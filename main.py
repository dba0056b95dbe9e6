"""FastAPI application for rendering CSS selectors.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Load .env from the project directory so SELECTOR_KIT_LOG_LEVEL is set
load_dotenv(Path(__file__).resolve().parent / ".env")

from css.assemble import assemble
from css.errors import SelectorError
from models.render import RenderRequest, RenderResponse


# ---------------------------------------------------------------------------
# Structured JSON logging
# ---------------------------------------------------------------------------

class StructuredFormatter(logging.Formatter):
    """JSON-lines formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Include optional extra fields when present
        for key in ("selector_type", "selector", "error"):
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def resolve_log_level(name: str | None) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    level = logging.getLevelName((name or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


_handler = logging.StreamHandler()
_handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("selector_kit")
logger.addHandler(_handler)
logger.setLevel(resolve_log_level(os.getenv("SELECTOR_KIT_LOG_LEVEL")))
# Prevent propagation to root logger to avoid duplicate output
logger.propagate = False


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="CSS Selector Kit")


@app.exception_handler(SelectorError)
async def selector_error_handler(request: Request, exc: SelectorError) -> JSONResponse:
    """Report ordering and duplicate-slot violations as 422 responses."""
    logger.warning(
        "selector rejected",
        extra={"error": type(exc).__name__},
    )
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy"}


@app.post("/selectors/render", response_model=RenderResponse)
async def render(request: RenderRequest) -> RenderResponse:
    """Render a declarative selector description to its CSS string."""
    logger.info(
        "render request",
        extra={"selector_type": request.selector.type},
    )

    selector = assemble(request.selector).stringify()

    logger.info(
        "render response",
        extra={"selector": selector},
    )

    return RenderResponse(selector=selector)
