"""
Pydantic schema definitions for the shop catalogue views.

An ``ItemCard`` is what the front-end needs to render one book in the
grid: the listing itself, the resolved cover URL and whether the
"Add to Cart" button should be enabled for the current visitor. The
``PaginatedItems`` model bundles one page of cards with pagination
metadata so that clients know whether to draw page controls.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import Item


class ItemCard(BaseModel):
    """A single book card.

    ``owned_by_viewer`` drives the "Your book" badge. When it is set,
    ``can_add_to_cart`` is ``False`` and the button is drawn disabled;
    anonymous visitors still get an enabled button so that clicking it
    leads them to the login page.
    """

    item: Item
    image_url: str = ""
    owned_by_viewer: bool = False
    can_add_to_cart: bool = True


class PaginatedItems(BaseModel):
    """A wrapper for paginated results returned from ``/books`` endpoint."""

    page: int
    page_size: int
    total: int
    total_pages: int
    show_pagination: bool
    items: List[ItemCard]
    # Set when the catalogue could not be loaded, so an empty page can be
    # told apart from a shop with no books.
    load_error: Optional[str] = None
    empty_message: Optional[str] = None


class AddToCartRequest(BaseModel):
    book_id: str


class CartContents(BaseModel):
    user_id: str
    items: List[Item] = Field(default_factory=list)


class Categories(BaseModel):
    categories: List[str]
    selected: str
