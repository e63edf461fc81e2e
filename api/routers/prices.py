"""
Prices API Endpoints.

Serves the buy-back price table read from the price spreadsheet.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

from api.cors import CORS_HEADERS, preflight_response
from api.models import ErrorResponse, PricesResponse
from services import price_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.options("/prices", include_in_schema=False)
def prices_preflight() -> Response:
    """Answer CORS preflight without touching the pipeline."""
    return preflight_response()


@router.api_route(
    "/prices",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
    response_model=PricesResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Get Price Table",
    description="Authenticate as the service account, read the price sheet and return model -> storage -> price."
)
def get_prices():
    """
    Fetch the current price table.

    The verb is not significant; every method except OPTIONS runs the full
    pipeline (token exchange, then sheet read).

    **Success response:**
    ```json
    {
      "prices": {"iPhone 15": {"128GB": 30000}},
      "dropped_rows": 0
    }
    ```

    **Failure response (HTTP 500):**
    ```json
    {"error": "GOOGLE_SERVICE_ACCOUNT_KEY not configured"}
    ```
    """
    try:
        result = price_service.fetch_price_table()
    except Exception as e:
        logger.exception("Error fetching prices")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=str(e) or e.__class__.__name__).model_dump(),
            headers=CORS_HEADERS,
        )

    body = PricesResponse(prices=result.prices, dropped_rows=result.dropped_rows)
    return JSONResponse(status_code=200, content=body.model_dump(), headers=CORS_HEADERS)
