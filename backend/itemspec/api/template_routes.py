"""Item template routes — browse, search and pre-estimate quick-pick templates."""
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query

from itemspec.api.estimate_routes import InferResponse
from itemspec.models.spec_schema import ItemTemplate
from itemspec.services.item_templates import (
    get_template,
    get_template_categories,
    get_templates_by_category,
    infer_from_template,
    search_templates,
)

router = APIRouter(prefix="/api/templates", tags=["Templates"])


@router.get("", response_model=List[ItemTemplate])
async def list_templates(category: Optional[str] = Query(None)):
    return get_templates_by_category(category)


@router.get("/search", response_model=List[ItemTemplate])
async def search(q: str = Query(..., min_length=1)):
    return search_templates(q)


@router.get("/categories", response_model=List[str])
async def categories():
    return get_template_categories()


@router.get("/{template_id}", response_model=ItemTemplate)
async def template_detail(template_id: str):
    template = get_template(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return template


@router.get("/{template_id}/estimate", response_model=InferResponse)
async def template_estimate(template_id: str):
    if get_template(template_id) is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return InferResponse(specification=infer_from_template(template_id))
