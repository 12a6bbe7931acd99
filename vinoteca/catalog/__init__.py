"""
Catalog package for the wine storefront.

This package holds the fixed wine catalogue, the view-state engine that
filters it by wine type and orders it for the product grid, and the
route definitions through which the storefront page selects a category
tab or a sort entry and reads back the cards to render. The catalogue
is static data embedded in the package; nothing here creates, updates
or deletes products.
"""

from .router import router as catalog_router  # noqa: F401
