# countries_api/main.py
from __future__ import annotations

import importlib
import logging
import os
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from countries_api.services.country_store import CountryNotFound, get_store

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PUBLIC_URL = os.getenv("PUBLIC_URL", "").strip()
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

logger = logging.getLogger("countries-api")
logging.basicConfig(level=LOG_LEVEL)

ROUTERS = (
    ("countries", "countries_api.routes.countries"),
    ("regions", "countries_api.routes.regions"),
)


# --- keep operation_id stable (avoid FastAPI auto-dedupe renaming) ----------
def _fixed_unique_id(route: APIRoute) -> str:
    return route.operation_id or f"{route.name}_{route.path}".strip("/").replace("/", "_")


app = FastAPI(
    title="World Countries API",
    description="Read-only reference data about countries and regions",
    version="1.0.0",
    generate_unique_id_function=_fixed_unique_id,
)


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    if PUBLIC_URL:
        # exactly one public URL when deployed behind a proxy
        schema["servers"] = [{"url": PUBLIC_URL}]
    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi  # override

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------
# Errors: every error body is {"error": "<message>"}
# ---------------------------------------------------------------------
@app.exception_handler(CountryNotFound)
async def _country_not_found(request: Request, exc: CountryNotFound) -> JSONResponse:
    logger.info("404 %s: unknown country code %r", request.url.path, exc.code)
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def _include(prefix: str, module_path: str) -> None:
    """Import a router module and include its `router`. Failures are fatal."""
    mod = importlib.import_module(module_path)
    router = getattr(mod, "router", None)
    if router is None:
        raise RuntimeError(f"module {module_path} has no `router`")
    app.include_router(router)
    logger.info("[init] %s router mounted from: %s", prefix, module_path)


# ---------------------------------------------------------------------
# STARTUP: load the dataset before anything is served; a bad dataset
# raises DatasetError here and the process never starts listening.
# ---------------------------------------------------------------------
get_store()

for _prefix, _module in ROUTERS:
    _include(_prefix, _module)


@app.get("/", include_in_schema=False)
def root():
    return {
        "ok": True,
        "service": app.title,
        "version": app.version,
        "routes": ["/countries", "/countries/{code}", "/countries/region/{region}", "/regions"],
        "docs": "/docs",
    }


@app.get("/healthz", operation_id="healthz", summary="Liveness")
def healthz():
    # keep this super fast
    return {"status": "ok", "countries": len(get_store())}
