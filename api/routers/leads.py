"""
Leads API Endpoints.

The lead sink: stores one flat lead record per completed evaluation.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

from api.cors import CORS_HEADERS, preflight_response
from api.models import ErrorResponse, LeadRequest, LeadResponse
from repositories import lead_repository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.options("/leads", include_in_schema=False)
def leads_preflight() -> Response:
    return preflight_response()


@router.post(
    "/leads",
    response_model=LeadResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Save Lead",
    description="Persist a completed evaluation to the leads table."
)
def save_lead(request: LeadRequest):
    """
    Save a lead.

    **Example request:**
    ```json
    {
      "model": "iPhone 15 Pro",
      "storage": "256GB",
      "battery": "91%",
      "scratches": "Нет",
      "defects": "Нет",
      "sim": "SIM + eSIM",
      "estimated_price": 52000,
      "sale_timeline": null
    }
    ```
    """
    try:
        lead = request.to_domain()
        lead_repository.insert_lead(lead)
    except Exception as e:
        logger.exception("Error saving lead")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=str(e) or e.__class__.__name__).model_dump(),
            headers=CORS_HEADERS,
        )

    logger.info("Saved lead for %s %s", lead.model, lead.storage)
    return JSONResponse(
        status_code=200,
        content=LeadResponse(success=True).model_dump(),
        headers=CORS_HEADERS,
    )
