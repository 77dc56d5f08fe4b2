# countries_api/services/country_store.py — immutable in-memory country table
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
import copy
import json
import logging
import os

from countries_api.utils.country_codes import iso_codes, normalize_code

logger = logging.getLogger("countries-api")

DEFAULT_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "countries.json"

_REQUIRED = ("code", "name", "region")


class DatasetError(ValueError):
    """The country dataset could not be loaded; the service must not start."""


class CountryNotFound(LookupError):
    def __init__(self, code: str):
        super().__init__(f"Country with code {code} not found")
        self.code = code


@dataclass(frozen=True)
class Country:
    code: str
    name: str
    region: str
    # descriptive pass-through fields (capital, currency, ...), kept as pairs so the record stays immutable
    extra: Tuple[Tuple[str, Any], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Fresh JSON-ready dict; mutating it never touches the store."""
        out: Dict[str, Any] = {"code": self.code, "name": self.name, "region": self.region}
        out.update(copy.deepcopy(self.extra))
        return out


def _parse_record(raw: Any, index: int) -> Country:
    if not isinstance(raw, Mapping):
        raise DatasetError(f"record #{index} is not an object")
    for field in _REQUIRED:
        val = raw.get(field)
        if not isinstance(val, str) or not val.strip():
            raise DatasetError(f"record #{index} has missing or empty {field!r}")

    code = normalize_code(raw["code"])
    extra = {k: v for k, v in raw.items() if k not in _REQUIRED}
    # enrich with ISO metadata unless the dataset already carries it
    for k, v in iso_codes(code).items():
        if v is not None:
            extra.setdefault(k, v)

    return Country(
        code=code,
        name=raw["name"].strip(),
        region=raw["region"].strip(),
        extra=tuple(extra.items()),
    )


class CountryStore:
    """
    Read-only lookup table over Country records.

    Listing keeps dataset order. Code lookup is an exact match on the stored
    (normalized, upper-case) code; region matching is exact and case-sensitive.
    """

    def __init__(self, countries: Iterable[Country]):
        items = tuple(countries)
        by_code: Dict[str, Country] = {}
        for c in items:
            if c.code in by_code:
                raise DatasetError(f"duplicate country code {c.code!r}")
            by_code[c.code] = c
        self._countries = items
        self._by_code = by_code
        self._regions = tuple(dict.fromkeys(c.region for c in items))

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "CountryStore":
        return cls(_parse_record(r, i) for i, r in enumerate(records))

    def __len__(self) -> int:
        return len(self._countries)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._by_code

    def all(self) -> Tuple[Country, ...]:
        return self._countries

    def get_by_code(self, code: str) -> Country:
        try:
            return self._by_code[code]
        except KeyError:
            raise CountryNotFound(code) from None

    def regions(self) -> Tuple[str, ...]:
        return self._regions

    def by_region(self, region: str) -> Tuple[Country, ...]:
        return tuple(c for c in self._countries if c.region == region)


def load_countries(path: Optional[os.PathLike] = None) -> CountryStore:
    """Read a JSON array of country objects and build the store. Raises DatasetError."""
    src = Path(path or DEFAULT_DATA_PATH)
    try:
        raw = json.loads(src.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise DatasetError(f"country dataset not found: {src}") from None
    except (OSError, ValueError) as e:
        raise DatasetError(f"country dataset unreadable: {src}: {e}") from e

    if not isinstance(raw, list):
        raise DatasetError(f"country dataset must be a JSON array: {src}")

    store = CountryStore.from_records(raw)
    logger.info("[init] loaded %d countries (%d regions) from %s", len(store), len(store.regions()), src)
    return store


@lru_cache(maxsize=1)
def get_store() -> CountryStore:
    """Process-wide store; built once, from COUNTRIES_DATA_PATH when set."""
    return load_countries(os.getenv("COUNTRIES_DATA_PATH") or None)
