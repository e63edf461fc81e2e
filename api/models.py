"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field

from domain.lead import LeadRecord


# ============================================================================
# Price Models
# ============================================================================

class PricesResponse(BaseModel):
    """Normalized price table: model -> storage -> price."""
    prices: Dict[str, Dict[str, int]]
    dropped_rows: int = Field(
        0,
        ge=0,
        description="Sheet rows skipped because model, storage or price did not normalize"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "prices": {
                    "iPhone 15": {"128GB": 30000, "256GB": 34000},
                    "iPhone 16 Pro Max": {"256GB": 78000}
                },
                "dropped_rows": 2
            }
        }


# ============================================================================
# Lead Models
# ============================================================================

class LeadRequest(BaseModel):
    """Flat lead record posted by the evaluation flow."""
    model: str = Field(..., min_length=1, description="Phone model, e.g. 'iPhone 15 Pro'")
    storage: str = Field(..., min_length=1, description="Storage label, e.g. '256GB'")
    battery: Optional[str] = None
    scratches: Optional[str] = None
    defects: Optional[str] = None
    sim: Optional[str] = None
    accessories: Optional[str] = None
    estimated_price: Optional[int] = Field(0, ge=0)
    sale_timeline: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "model": "iPhone 15 Pro",
                "storage": "256GB",
                "battery": "91%",
                "scratches": "Нет",
                "defects": "Нет",
                "sim": "SIM + eSIM",
                "accessories": None,
                "estimated_price": 52000,
                "sale_timeline": "Сегодня/завтра"
            }
        }

    def to_domain(self) -> LeadRecord:
        return LeadRecord.from_payload(self.model_dump())


class LeadResponse(BaseModel):
    """Lead sink acknowledgement."""
    success: bool


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Error body shared by every function endpoint."""
    error: str

    class Config:
        json_schema_extra = {
            "example": {
                "error": "GOOGLE_SERVICE_ACCOUNT_KEY not configured"
            }
        }
