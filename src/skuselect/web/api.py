"""FastAPI app exposing selection queries to a UI."""

from __future__ import annotations

import os
from functools import lru_cache

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError, model_validator

from skuselect.config import ConfigLoadError
from skuselect.data import DataValidationError
from skuselect.engine import CatalogConfigError, InvalidSelectionError

from .service import SelectionService

OptionScalar = str | int | float


class SelectionRequest(BaseModel):
    """Current selection plus an optional value to toggle."""

    selected: list[OptionScalar | None] | None = None
    toggle: OptionScalar | None = None
    group: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _group_requires_toggle(self) -> SelectionRequest:
        if self.group is not None and self.toggle is None:
            raise ValueError("group is only meaningful together with toggle.")
        return self


class OptionState(BaseModel):
    value: OptionScalar
    selected: bool
    disabled: bool


class GroupState(BaseModel):
    group: int
    name: str | None = None
    options: list[OptionState]


class SelectionResponse(BaseModel):
    """Selection after the toggle, with per-value state for rendering."""

    selected: list[OptionScalar | None]
    code: int
    variant: OptionScalar | None = None
    complete: bool
    groups: list[GroupState]


class CatalogGroup(BaseModel):
    group: int
    name: str | None = None
    values: list[OptionScalar]


class CatalogResponse(BaseModel):
    groups: list[CatalogGroup]
    variants: list[OptionScalar]


app = FastAPI(title="skuselect", version="0.1.0")


def get_cors_origins() -> list[str]:
    """Resolve allowed CORS origins from env."""

    raw = os.getenv("CORS_ALLOW_ORIGINS", "*").strip()
    if raw == "*":
        return ["*"]
    return [item.strip() for item in raw.split(",") if item.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_service() -> SelectionService:
    """Return singleton selection service built from env-configured files."""

    catalog_path = os.getenv("SKUSELECT_CATALOG", "catalog.yaml")
    config_path = os.getenv("SKUSELECT_CONFIG", "").strip() or None
    return SelectionService.from_files(catalog_path, config_path)


def _load_service() -> SelectionService:
    try:
        return get_service()
    except FileNotFoundError as exc:
        raise HTTPException(status_code=500, detail=f"Catalog file not found: {exc}") from exc
    except (CatalogConfigError, ConfigLoadError, DataValidationError, ValidationError) as exc:
        raise HTTPException(status_code=500, detail=f"Catalog could not be loaded: {exc}") from exc


@app.get("/api/catalog", response_model=CatalogResponse)
def catalog() -> CatalogResponse:
    """List option groups and variant ids."""

    return CatalogResponse.model_validate(_load_service().describe_catalog())


@app.post("/api/selection", response_model=SelectionResponse)
def selection(payload: SelectionRequest) -> SelectionResponse:
    """Toggle a value and report which values remain reachable."""

    service = _load_service()
    try:
        result = service.select(selected=payload.selected, toggle=payload.toggle, group=payload.group)
    except InvalidSelectionError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return SelectionResponse.model_validate(result)
