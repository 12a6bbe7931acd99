"""
Route definitions for the storefront catalogue API.

Endpoints under /api/catalog:
- GET    /wines            : full catalogue in catalogue order
- GET    /wines/{wine_id}  : one wine (quick view)
- GET    /categories       : category tabs and sort entries offered by the UI
- GET    /view             : current product grid
- PUT    /view/category    : select a category tab
- PUT    /view/sort        : select a sort entry
- DELETE /view             : back to "todos" / "featured"
- GET    /storefront       : static tables around the grid
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from ..config import Settings, get_settings
from .engine import ALL_CATEGORIES, CatalogViewEngine
from .schemas import (
    SORT_KEYS,
    CatalogControls,
    CatalogView,
    CategoryRequest,
    FilterOption,
    SortRequest,
    Storefront,
    WineProduct,
)
from .store import find_product, get_catalog, get_storefront

logger = logging.getLogger(__name__)

# Labels shown on the category tabs, keyed by category value.
CATEGORY_LABELS = {
    ALL_CATEGORIES: "Todos",
    "tinto": "Tintos",
    "blanco": "Blancos",
    "rosado": "Rosados",
    "espumoso": "Espumosos",
}

SORT_LABELS = {
    "featured": "Destacados",
    "price-asc": "Precio: menor a mayor",
    "price-desc": "Precio: mayor a menor",
    "rating": "Mejor valorados",
}

SORT_OPTIONS = [FilterOption(value=key, label=SORT_LABELS[key]) for key in SORT_KEYS]

router = APIRouter(prefix="/api/catalog", tags=["catalog"])

# ---------------------------------------------------------------------------
# Session view state
#
# The storefront is a single page with one grid, so the process holds a
# single ``CatalogViewEngine``.  It is created on first use from the
# loaded catalogue.  Sync endpoints run on a thread pool, so every
# read-modify-read of the engine goes through ``_engine_lock``.

_engine: Optional[CatalogViewEngine] = None
_engine_lock = threading.Lock()


def get_engine() -> CatalogViewEngine:
    global _engine
    with _engine_lock:
        if _engine is None:
            _engine = CatalogViewEngine(get_catalog())
        return _engine


def _render(engine: CatalogViewEngine, limit: int) -> CatalogView:
    visible = engine.get_visible_products()
    return CatalogView(
        category=engine.active_category,
        sort=engine.sort_key,
        total=len(visible),
        limit=limit,
        items=list(engine.page(limit)),
    )


@router.get("/wines", response_model=List[WineProduct])
def list_wines(engine: CatalogViewEngine = Depends(get_engine)) -> List[WineProduct]:
    return list(engine.catalog)


@router.get("/wines/{wine_id}", response_model=WineProduct)
def get_wine(wine_id: int, engine: CatalogViewEngine = Depends(get_engine)) -> WineProduct:
    wine = find_product(engine.catalog, wine_id)
    if wine is None:
        raise HTTPException(status_code=404, detail="Wine not found")
    return wine


@router.get("/categories", response_model=CatalogControls)
def list_controls(engine: CatalogViewEngine = Depends(get_engine)) -> CatalogControls:
    categories = [
        FilterOption(value=value, label=CATEGORY_LABELS.get(value, value.capitalize()))
        for value in engine.categories()
    ]
    return CatalogControls(categories=categories, sorts=SORT_OPTIONS)


@router.get("/view", response_model=CatalogView)
def get_view(
    engine: CatalogViewEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> CatalogView:
    with _engine_lock:
        return _render(engine, settings.VISIBLE_LIMIT)


@router.put("/view/category", response_model=CatalogView)
def select_category(
    req: CategoryRequest,
    engine: CatalogViewEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> CatalogView:
    with _engine_lock:
        engine.set_category(req.category)
        view = _render(engine, settings.VISIBLE_LIMIT)
    logger.info("Category set to %r: %d wines visible", view.category, view.total)
    return view


@router.put("/view/sort", response_model=CatalogView)
def select_sort(
    req: SortRequest,
    engine: CatalogViewEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> CatalogView:
    with _engine_lock:
        engine.set_sort(req.sort)
        view = _render(engine, settings.VISIBLE_LIMIT)
    logger.info("Sort set to %r", view.sort)
    return view


@router.delete("/view", response_model=CatalogView)
def reset_view(
    engine: CatalogViewEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> CatalogView:
    with _engine_lock:
        engine.reset()
        return _render(engine, settings.VISIBLE_LIMIT)


@router.get("/storefront", response_model=Storefront)
def storefront() -> Storefront:
    return get_storefront()
