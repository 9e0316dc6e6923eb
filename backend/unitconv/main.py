"""Unit Converter: FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unitconv import __version__
from unitconv.config import settings
from unitconv.core.registry import build_registry
from unitconv.api.routes_convert import router as convert_router
from unitconv.api.routes_units import router as units_router

app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Convert scalar measurements between units of the same family.",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Built once, read by every request.
app.state.registry = build_registry()

app.include_router(convert_router, prefix="/api")
app.include_router(units_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": __version__}
