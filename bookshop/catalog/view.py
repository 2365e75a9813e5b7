"""
Controller behind the shop page.

One ``ShopView`` lives for one activation of the page. It loads the
catalogue once, keeps the page the visitor is on and the selected
category, builds the cards for the visible page and runs the
add-to-cart handler. Everything runs on the caller's thread except the
catalogue fetch, which is pushed to a worker thread by ``mount()``.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Callable, List, Optional

from ..models import Identity, Item
from ..services import Cart, Navigator, Notifier
from .eligibility import Eligibility, check_eligibility, is_self_owned
from .errors import FetchError
from .images import ImageResolver
from .pagination import DEFAULT_PAGE_SIZE, Paginator
from .schemas import ItemCard
from .store import CatalogSource, FetchResult


logger = logging.getLogger(__name__)

CATEGORIES = [
    "All Products",
    "Blankets",
    "Toys",
    "Accessories",
    "Home Decor",
    "Baby Items",
]

LOADING_MESSAGE = "Loading books..."
EMPTY_MESSAGE = "No books found."

LOGIN_PATH = "/login"
CART_PATH = "/cart"


class ViewState(str, Enum):
    LOADING = "LOADING"
    READY = "READY"


class ShopView:
    def __init__(
        self,
        source: CatalogSource,
        cart: Cart,
        notifier: Notifier,
        navigator: Navigator,
        identity_provider: Callable[[], Optional[Identity]],
        image_resolver: ImageResolver,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.source = source
        self.cart = cart
        self.notifier = notifier
        self.navigator = navigator
        self.identity_provider = identity_provider
        self.image_resolver = image_resolver
        self.page_size = page_size

        self.state = ViewState.LOADING
        self.load_error: Optional[str] = None
        self.selected_category = CATEGORIES[0]
        self.paginator: Paginator[Item] = Paginator([], page_size=page_size)
        self._mount_task: Optional[asyncio.Future] = None

    def ensure_mounted(self) -> asyncio.Future:
        """Start the catalogue load once; every caller awaits the same load."""
        if self._mount_task is None:
            self._mount_task = asyncio.ensure_future(self.mount())
        return self._mount_task

    async def mount(self) -> FetchResult:
        """Load the catalogue and switch to ``READY``.

        A failed load still ends in ``READY`` with no items; the reason is
        kept in ``load_error``.
        """
        self.state = ViewState.LOADING
        try:
            result = await asyncio.to_thread(self.source.fetch_catalog)
        except FetchError as exc:
            result = FetchResult.failure(exc.reason)
        except Exception as exc:
            logger.exception("Catalogue source raised while loading")
            result = FetchResult.failure(f"unexpected error: {exc}")
        if not result.ok:
            logger.warning("Shop catalogue unavailable: %s", result.error)
        self.load_error = result.error
        self.paginator = Paginator(result.items, page_size=self.page_size)
        self.state = ViewState.READY
        return result

    @property
    def items(self) -> List[Item]:
        return list(self.paginator.items)

    @property
    def categories(self) -> List[str]:
        return list(CATEGORIES)

    def select_category(self, name: str) -> None:
        # Selection only; the catalogue is not filtered by category.
        if name not in CATEGORIES:
            raise ValueError(f"unknown category: {name}")
        self.selected_category = name

    @property
    def empty_message(self) -> Optional[str]:
        if self.state is ViewState.LOADING:
            return LOADING_MESSAGE
        if not self.paginator.items:
            return EMPTY_MESSAGE
        return None

    @property
    def show_pagination(self) -> bool:
        return self.state is ViewState.READY and self.paginator.show_controls

    def change_page(self, page: int) -> bool:
        accepted = self.paginator.go_to(page)
        if accepted:
            self.navigator.scroll_to_top()
        return accepted

    def cards(self) -> List[ItemCard]:
        """Cards for the visible page; empty while loading."""
        if self.state is ViewState.LOADING:
            return []
        identity = self.identity_provider()
        cards = []
        for item in self.paginator.current_items:
            own = is_self_owned(item, identity)
            cards.append(
                ItemCard(
                    item=item,
                    image_url=self.image_resolver.resolve_image_url(item.image_ref),
                    owned_by_viewer=own,
                    can_add_to_cart=not own,
                )
            )
        return cards

    def add_to_cart(self, item: Item) -> Eligibility:
        """Handle a click on "Add to Cart" for ``item``.

        The eligibility check runs again here even though the card of a
        self-owned book is drawn with a disabled button.
        """
        identity = self.identity_provider()
        outcome = check_eligibility(item, identity)
        if outcome is Eligibility.UNAUTHENTICATED:
            self.notifier.info("Please login or signup to add items to your cart.")
            self.navigator.navigate(LOGIN_PATH)
        elif outcome is Eligibility.SELF_OWNED:
            self.notifier.warning("You cannot purchase your own book!")
        else:
            self.cart.add_item(identity.user_id, item)
            self.notifier.success("Book added to cart!")
            self.navigator.navigate(CART_PATH)
        return outcome

    def find_item(self, item_id: str) -> Optional[Item]:
        return next((i for i in self.paginator.items if i.id == item_id), None)
