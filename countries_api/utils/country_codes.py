# countries_api/utils/country_codes.py
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Dict, Optional

import pycountry

logger = logging.getLogger("countries-api")


def normalize_code(code: str) -> str:
    """
    Bring a country code into the stored format: surrounding whitespace
    (including zero-width spaces) stripped, upper-case. Used both when
    loading the dataset and for incoming path values.
    """
    return re.sub(r"^[\u200b\s]+|[\u200b\s]+$", "", code or "").upper()


@lru_cache(maxsize=512)
def iso_codes(alpha_2: str) -> Dict[str, Optional[str]]:
    """
    Return {"iso_alpha_3", "iso_numeric"} for an ISO 3166-1 alpha-2 code.
    Never raises; unknown codes give None values.
    """
    m = pycountry.countries.get(alpha_2=normalize_code(alpha_2)) if alpha_2 else None
    if m is None:
        logger.debug("pycountry has no entry for %r", alpha_2)
        return {"iso_alpha_3": None, "iso_numeric": None}
    return {
        "iso_alpha_3": getattr(m, "alpha_3", None),
        "iso_numeric": getattr(m, "numeric", None),
    }
