"""FastAPI application for the quote service."""

import os

import uvicorn
from fastapi import FastAPI

from curve_quoter import __version__
from curve_quoter.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("CURVE_QUOTER_HOST", "0.0.0.0")
PORT = int(os.environ.get("CURVE_QUOTER_PORT", "8000"))
DEBUG = os.environ.get("CURVE_QUOTER_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Curve Quoter",
    description="Swap quotes for piecewise bonding-curve pools",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the quote API server.

    Configuration via environment variables:
    - CURVE_QUOTER_HOST: Host to bind to (default: 0.0.0.0)
    - CURVE_QUOTER_PORT: Port to bind to (default: 8000)
    - CURVE_QUOTER_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "curve_quoter.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
