# countries_api/routes/regions.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from countries_api.services.country_store import get_store

router = APIRouter(tags=["regions"])


@router.get("/regions", operation_id="regions_list", summary="Distinct regions", response_model=List[str])
def get_regions() -> JSONResponse:
    # dataset (first-seen) order
    return JSONResponse(content=list(get_store().regions()))
