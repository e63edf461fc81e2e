"""
Phone Buy-Back API - Main Application.

FastAPI application hosting the two functions used by the evaluation page:
the price table fetcher and the lead sink.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api import __version__
from api.cors import CORS_HEADERS
from repositories.config import get_log_level

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI application
app = FastAPI(
    title="Phone Buy-Back API",
    description="Price table and lead capture functions for the iPhone buy-back evaluation",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """422 with the CORS headers, so browsers can read the validation errors."""
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())},
        headers=CORS_HEADERS,
    )


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "phone-buyback-api"
    }


# Import and include routers
from api.routers import leads, prices  # noqa: E402

app.include_router(prices.router, prefix="/api/v1", tags=["Prices"])
app.include_router(leads.router, prefix="/api/v1", tags=["Leads"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host="0.0.0.0", port=8000)
