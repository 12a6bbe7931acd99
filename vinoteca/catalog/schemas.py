"""
Pydantic schema definitions for the wine catalogue.

The ``WineProduct`` model captures everything needed to render a
product card and its quick view in the storefront. Products are frozen:
once the catalogue is loaded nothing mutates them, only the derived
view changes. Field names follow the camelCase keys of the embedded
data file (``grapeVariety``, ``oldPrice``...) through aliases, while
Python code uses snake_case attributes.

Prices are kept as written in the Spanish locale ("29,99") because that
is how the front‑end prints them. ``parse_price`` turns them into a
``Decimal`` for sorting and is also what validates them at load time,
so a malformed price can never reach the sort.
"""

from decimal import Decimal
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Literal, get_args

WineType = Literal["Tinto", "Blanco", "Rosado", "Espumoso"]
SortKey = Literal["featured", "price-asc", "price-desc", "rating"]

# Category tabs of the grid, in the order the page shows them.
WINE_TYPES = get_args(WineType)
SORT_KEYS = get_args(SortKey)

_PRICE_RE = re.compile(r"^\d+(,\d+)?$")


def parse_price(value: str) -> Decimal:
    """Convert a comma-decimal price such as ``"29,99"`` to ``Decimal``.

    Raises
    ------
    ValueError
        If ``value`` is not a non-negative amount with an optional comma
        separated fractional part.
    """
    text = (value or "").strip()
    if not _PRICE_RE.match(text):
        raise ValueError(f"malformed price {value!r}")
    return Decimal(text.replace(",", "."))


class WineProduct(BaseModel):
    """A single wine of the catalogue.

    ``type`` is the category key used by the filter tabs. ``price`` and
    ``rating`` drive the sort orders; the badges (``tag``, ``isNew``,
    ``isBestseller``) and ``oldPrice`` are purely presentational.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(gt=0)
    name: str
    type: WineType
    region: str
    grape_variety: str = Field(alias="grapeVariety")
    description: str = ""
    price: str
    old_price: Optional[str] = Field(default=None, alias="oldPrice")
    rating: float = Field(ge=0, le=5)
    reviews: int = Field(default=0, ge=0)
    tag: Optional[str] = None
    is_new: bool = Field(default=False, alias="isNew")
    is_bestseller: bool = Field(default=False, alias="isBestseller")

    # Quick-view details, not used by any ordering.
    image: str = ""
    year: Optional[str] = None
    alcohol: Optional[str] = None
    food_pairing: List[str] = Field(default_factory=list, alias="foodPairing")
    awards: List[str] = Field(default_factory=list)

    @field_validator("price")
    @classmethod
    def check_price(cls, v: str) -> str:
        parse_price(v)
        return v

    @field_validator("old_price")
    @classmethod
    def check_old_price(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            parse_price(v)
        return v

    @property
    def price_value(self) -> Decimal:
        return parse_price(self.price)


class WineRegion(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    description: str
    image: str = ""


class WinePairing(BaseModel):
    model_config = ConfigDict(frozen=True)

    wine: str
    pairing: str
    description: str
    image: str = ""


class WineExperience(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    image: str = ""


class SocialLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    href: str


class Storefront(BaseModel):
    """Static presentational tables shown around the product grid.

    ``cartCount`` is the decorative counter of the header; there is no
    cart behind it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    description: str = ""
    regions: List[WineRegion] = Field(default_factory=list)
    pairings: List[WinePairing] = Field(default_factory=list)
    experiences: List[WineExperience] = Field(default_factory=list)
    social_links: List[SocialLink] = Field(default_factory=list, alias="socialLinks")
    cart_count: int = Field(default=0, ge=0, alias="cartCount")


class FilterOption(BaseModel):
    """A selectable control (category tab or sort entry)."""

    value: str
    label: str


class CatalogControls(BaseModel):
    categories: List[FilterOption]
    sorts: List[FilterOption]


class CategoryRequest(BaseModel):
    category: str


class SortRequest(BaseModel):
    sort: str


class CatalogView(BaseModel):
    """The rendered product grid returned after every view change.

    ``total`` counts every product matching the active category while
    ``items`` holds at most ``limit`` of them, in display order.
    """

    category: str
    sort: str
    total: int
    limit: int
    items: List[WineProduct]
