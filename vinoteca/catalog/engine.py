"""
View-state engine for the product grid.

``CatalogViewEngine`` keeps the two user selections (category tab and
sort entry) and republishes the derived list of visible wines after
each change. The derivation itself is the pure function
``derive_view()``; the engine only stores its inputs and its last
result, so ``get_visible_products()`` is always equal to
``derive_view(catalog, active_category, sort_key)``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .schemas import SORT_KEYS, WINE_TYPES, WineProduct

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "todos"
DEFAULT_SORT = "featured"


def _normalize(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def derive_view(
    catalog: Iterable[WineProduct],
    category: str = ALL_CATEGORIES,
    sort_key: str = DEFAULT_SORT,
) -> Tuple[WineProduct, ...]:
    """Filter and order ``catalog`` for display.

    Parameters
    ----------
    catalog : Iterable[WineProduct]
        The full catalogue in its original order.
    category : str
        ``"todos"`` keeps every wine; any other value keeps the wines
        whose ``type`` matches it case-insensitively. A category with no
        wines gives an empty tuple.
    sort_key : str
        One of ``"featured"``, ``"price-asc"``, ``"price-desc"`` or
        ``"rating"``. Any other key leaves the catalogue order untouched.

    Returns
    -------
    Tuple[WineProduct, ...]
        The visible wines. Sorting is stable, so wines with equal keys
        keep their catalogue order.
    """
    items: List[WineProduct] = list(catalog)

    ncat = _normalize(category)
    if ncat != ALL_CATEGORIES:
        items = [p for p in items if _normalize(p.type) == ncat]

    if sort_key == "price-asc":
        items.sort(key=lambda p: p.price_value)
    elif sort_key == "price-desc":
        items.sort(key=lambda p: p.price_value, reverse=True)
    elif sort_key == "rating":
        items.sort(key=lambda p: p.rating, reverse=True)
    # 'featured' and unknown keys keep catalogue order

    return tuple(items)


class CatalogViewEngine:
    """Holds the active category and sort key for one storefront session.

    The catalogue given at construction is copied into a tuple and never
    changes. Every setter recomputes the visible list in full and
    synchronously; there is no incremental update and no caching beyond
    the last result.
    """

    def __init__(
        self,
        catalog: Sequence[WineProduct],
        category: str = ALL_CATEGORIES,
        sort_key: str = DEFAULT_SORT,
    ) -> None:
        self._catalog: Tuple[WineProduct, ...] = tuple(catalog)
        self._category = _normalize(category)
        self._sort_key = sort_key
        self._visible: Tuple[WineProduct, ...] = ()
        self._recompute()

    @property
    def catalog(self) -> Tuple[WineProduct, ...]:
        return self._catalog

    @property
    def active_category(self) -> str:
        return self._category

    @property
    def sort_key(self) -> str:
        return self._sort_key

    def categories(self) -> List[str]:
        """Category keys the grid offers, in tab order.

        Every wine type has a tab even when the catalogue holds none of
        it; selecting such a tab gives an empty grid.
        """
        return [ALL_CATEGORIES] + [t.lower() for t in WINE_TYPES]

    def set_category(self, category: str) -> Tuple[WineProduct, ...]:
        self._category = _normalize(category)
        return self._recompute()

    def set_sort(self, sort_key: str) -> Tuple[WineProduct, ...]:
        if sort_key not in SORT_KEYS:
            logger.debug("Unknown sort key %r, keeping catalogue order", sort_key)
        self._sort_key = sort_key
        return self._recompute()

    def reset(self) -> Tuple[WineProduct, ...]:
        self._category = ALL_CATEGORIES
        self._sort_key = DEFAULT_SORT
        return self._recompute()

    def get_visible_products(self) -> Tuple[WineProduct, ...]:
        return self._visible

    def page(self, limit: int) -> Tuple[WineProduct, ...]:
        """First ``limit`` visible wines, the slice the product grid shows."""
        return self._visible[: max(0, limit)]

    def _recompute(self) -> Tuple[WineProduct, ...]:
        self._visible = derive_view(self._catalog, self._category, self._sort_key)
        logger.debug(
            "View recomputed: category=%s sort=%s visible=%d",
            self._category,
            self._sort_key,
            len(self._visible),
        )
        return self._visible
