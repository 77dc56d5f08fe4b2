# countries_api/routes/countries.py — /countries listing, lookup and region filter
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Path
from fastapi.responses import JSONResponse

from countries_api.schemas import CountryOut, ErrorOut
from countries_api.services.country_store import get_store
from countries_api.utils.country_codes import normalize_code

router = APIRouter(tags=["countries"])


@router.get(
    "/countries",
    operation_id="countries_list",
    summary="All countries",
    response_model=List[CountryOut],
)
def all_countries() -> JSONResponse:
    return JSONResponse(content=[c.to_dict() for c in get_store().all()])


@router.get(
    "/countries/region/{region}",
    operation_id="countries_by_region",
    summary="Countries in a region",
    response_model=List[CountryOut],
)
def countries_by_region(
    region: str = Path(..., description="Region name, exact match (e.g. Europe)"),
) -> JSONResponse:
    """Unknown regions give an empty list, not a 404."""
    return JSONResponse(content=[c.to_dict() for c in get_store().by_region(region)])


@router.get(
    "/countries/{code}",
    operation_id="country_by_code",
    summary="Country by code",
    response_model=CountryOut,
    responses={404: {"model": ErrorOut, "description": "Unknown country code"}},
)
def country_by_code(
    code: str = Path(..., description="ISO 3166-1 alpha-2 code, any case (e.g. US)"),
) -> JSONResponse:
    """
    The code is normalized to the stored upper-case format and then matched
    exactly. CountryNotFound bubbles up to the app-level handler (404).
    """
    country = get_store().get_by_code(normalize_code(code))
    return JSONResponse(content=country.to_dict())
