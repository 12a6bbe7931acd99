"""
Static data store for the wine catalogue.

The catalogue and the storefront tables (regions, pairings,
experiences, social links) are shipped as JSON files inside the
package and read once per process. Unlike a fallback dataset, this data
is the whole catalogue: if a file is missing or any entry fails
validation the store raises ``CatalogDataError`` instead of serving a
partial or misordered grid.
"""

from __future__ import annotations

from functools import lru_cache
import json
import logging
from pathlib import Path
from typing import Optional, Set, Tuple, Union

from pydantic import ValidationError

from ..config import get_settings
from .schemas import Storefront, WineProduct

logger = logging.getLogger(__name__)


class CatalogDataError(ValueError):
    """The embedded storefront data is unreadable or invalid."""


def _read_json(path: Union[str, Path]):
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot read %s: %s", path, exc)
        raise CatalogDataError(f"cannot read {path}: {exc}") from exc


def load_catalog(path: Union[str, Path]) -> Tuple[WineProduct, ...]:
    """Load and validate the wine catalogue from ``path``.

    Parameters
    ----------
    path : Union[str, Path]
        A JSON file holding a list of product objects.

    Returns
    -------
    Tuple[WineProduct, ...]
        The products in file order.

    Raises
    ------
    CatalogDataError
        If the file cannot be read, is not a list, an entry fails
        validation (e.g. a malformed price) or two entries share an id.
    """
    raw = _read_json(path)
    if not isinstance(raw, list):
        raise CatalogDataError(f"{path}: expected a list of products")

    products = []
    seen_ids: Set[int] = set()
    for index, entry in enumerate(raw):
        try:
            product = WineProduct.model_validate(entry)
        except ValidationError as exc:
            logger.error("Invalid product at index %d in %s: %s", index, path, exc)
            raise CatalogDataError(f"{path}: invalid product at index {index}: {exc}") from exc
        if product.id in seen_ids:
            raise CatalogDataError(f"{path}: duplicate product id {product.id}")
        seen_ids.add(product.id)
        products.append(product)

    logger.info("Loaded %d products from %s", len(products), path)
    return tuple(products)


def load_storefront(path: Union[str, Path]) -> Storefront:
    """Load the presentational tables shown around the product grid."""
    raw = _read_json(path)
    try:
        return Storefront.model_validate(raw)
    except ValidationError as exc:
        logger.error("Invalid storefront data in %s: %s", path, exc)
        raise CatalogDataError(f"{path}: invalid storefront data: {exc}") from exc


@lru_cache(maxsize=1)
def get_catalog() -> Tuple[WineProduct, ...]:
    return load_catalog(get_settings().CATALOG_FILE)


@lru_cache(maxsize=1)
def get_storefront() -> Storefront:
    return load_storefront(get_settings().STOREFRONT_FILE)


def find_product(catalog: Tuple[WineProduct, ...], product_id: int) -> Optional[WineProduct]:
    return next((p for p in catalog if p.id == product_id), None)
