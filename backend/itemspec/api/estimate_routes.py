"""Estimate API routes — text inference, density check, feel-based weight."""
import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from itemspec.config import MAX_TEXT_LENGTH
from itemspec.models.spec_schema import (
    CategoryDefault,
    FeelBucket,
    ItemSpecification,
    ReferenceItem,
    WeightValidation,
)
from itemspec.services.category_defaults import get_category_weight_range, get_reference_items
from itemspec.services.inference_engine import infer_item_specification
from itemspec.services.physics_engine import (
    estimate_weight_from_feel,
    validate_weight_against_dimensions,
    volume_liters,
)

router = APIRouter(prefix="/api/estimate", tags=["Estimate"])
logger = logging.getLogger("itemspec.api.estimate")


# ─── Pydantic schemas ────────────────────────────────────────────────────────

class InferRequest(BaseModel):
    title: str = Field("", max_length=MAX_TEXT_LENGTH)
    description: str = Field("", max_length=MAX_TEXT_LENGTH)
    category: Optional[str] = None


class InferResponse(BaseModel):
    specification: Optional[ItemSpecification] = None


class ValidateRequest(BaseModel):
    # Any field may be missing while the user is still typing
    weight: Optional[float] = None
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None


class FeelRequest(BaseModel):
    length: float = Field(..., gt=0)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    feel: FeelBucket


class FeelResponse(BaseModel):
    weight: float
    volume_liters: float
    feel: FeelBucket


# ─── Routes ──────────────────────────────────────────────────────────────────

@router.post("/infer", response_model=InferResponse)
async def infer(body: InferRequest):
    """Estimate weight, dimensions and category from listing text."""
    specification = infer_item_specification(body.title, body.description, body.category)
    if specification is None:
        logger.info("no estimate for listing text", extra={"attributes": {"category": body.category}})
    return InferResponse(specification=specification)


@router.post("/validate", response_model=WeightValidation)
async def validate(body: ValidateRequest):
    return validate_weight_against_dimensions(body.weight, body.length, body.width, body.height)


@router.post("/feel", response_model=FeelResponse)
async def feel(body: FeelRequest):
    weight = estimate_weight_from_feel(body.length, body.width, body.height, body.feel)
    return FeelResponse(
        weight=weight,
        volume_liters=round(volume_liters(body.length, body.width, body.height), 2),
        feel=body.feel,
    )


@router.get("/categories/{category}/range", response_model=CategoryDefault)
async def category_range(category: str):
    band = get_category_weight_range(category)
    if band is None:
        raise HTTPException(status_code=404, detail=f"Unknown category: {category}")
    return band


@router.get("/reference-items", response_model=List[ReferenceItem])
async def reference_items(category: Optional[str] = Query(None)):
    return get_reference_items(category)
