# countries_api/schemas.py — response shapes for the OpenAPI docs
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CountryOut(BaseModel):
    # descriptive fields vary per dataset and are passed through untouched
    model_config = ConfigDict(extra="allow")

    code: str = Field(..., description="ISO 3166-1 alpha-2 code", examples=["US"])
    name: str = Field(..., examples=["United States"])
    region: str = Field(..., examples=["North America"])
    capital: Optional[str] = None
    currency: Optional[str] = Field(None, description="ISO 4217 currency code")
    iso_alpha_3: Optional[str] = None
    iso_numeric: Optional[str] = None


class ErrorOut(BaseModel):
    error: str = Field(..., examples=["Country with code ZZ not found"])
