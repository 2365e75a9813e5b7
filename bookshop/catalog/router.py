"""
Route definitions for the shop API.

Endpoints under /api/shop:
- GET  /books        : one page of book cards for the current visitor
- GET  /categories   : category list and current selection
- PUT  /categories   : change the selected category (no filtering)
- POST /cart         : add a book to the visitor's cart
- GET  /cart         : list the visitor's cart

The visitor is identified by the ``X-User-Id`` header; without it the
sign-in record kept by ``IdentityStore`` is used, and when there is none
the visitor is anonymous. Each visitor gets its own ``ShopView`` which loads
the catalogue once and remembers the page it is on, so a rejected page
request leaves the visitor where they were.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from fastapi import APIRouter, Body, Header, HTTPException, Query

from ..config import get_settings
from ..models import Identity
from ..services import RecordingNavigator, RecordingNotifier
from ..session import IdentityStore
from ..storage import CartService, list_items
from .eligibility import Eligibility
from .images import ImageResolver
from .schemas import AddToCartRequest, CartContents, Categories, PaginatedItems
from .store import source_from_settings
from .view import ShopView


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/shop", tags=["shop"])

ANONYMOUS = "__anonymous__"

_views: Dict[str, ShopView] = {}
_views_lock = threading.Lock()


def _identity(user_id: Optional[str]) -> Optional[Identity]:
    """Identity from the header, else the locally persisted sign-in record."""
    user_id = (user_id or "").strip()
    if user_id:
        return Identity(user_id=user_id)
    return IdentityStore(get_settings().identity_file).load()


async def get_view(identity: Optional[Identity]) -> ShopView:
    """Return the visitor's view once its catalogue has loaded.

    Concurrent first requests share one view and wait for the same load.
    """
    key = identity.user_id if identity else ANONYMOUS
    with _views_lock:
        view = _views.get(key)
        if view is None:
            settings = get_settings()
            view = ShopView(
                source=source_from_settings(settings),
                cart=CartService(),
                notifier=RecordingNotifier(),
                navigator=RecordingNavigator(),
                identity_provider=lambda: identity,
                image_resolver=ImageResolver(
                    settings.image_base_url, settings.image_placeholder
                ),
                page_size=settings.page_size,
            )
            _views[key] = view
        mounting = view.ensure_mounted()
    await mounting
    return view


def reset_views() -> None:
    with _views_lock:
        _views.clear()


def _page_response(view: ShopView) -> PaginatedItems:
    paginator = view.paginator
    return PaginatedItems(
        page=paginator.current_page,
        page_size=paginator.page_size,
        total=len(paginator.items),
        total_pages=paginator.total_pages,
        show_pagination=view.show_pagination,
        items=view.cards(),
        load_error=view.load_error,
        empty_message=view.empty_message,
    )


@router.get("/books", response_model=PaginatedItems)
async def list_books(
    page: Optional[int] = Query(default=None, description="Page to move to (1-indexed)"),
    x_user_id: Optional[str] = Header(default=None),
) -> PaginatedItems:
    """
    Returns the visitor's current page of books.

    Passing ``page`` asks to move to that page first. Pages outside
    ``[1, total_pages]`` are ignored and the current page is returned.
    """
    view = await get_view(_identity(x_user_id))
    if page is not None and not view.change_page(page):
        logger.debug("Ignored request for page %s of %s", page, view.paginator.total_pages)
    return _page_response(view)


@router.get("/categories", response_model=Categories)
async def get_categories(x_user_id: Optional[str] = Header(default=None)) -> Categories:
    view = await get_view(_identity(x_user_id))
    return Categories(categories=view.categories, selected=view.selected_category)


@router.put("/categories", response_model=Categories)
async def select_category(
    name: str = Body(..., embed=True),
    x_user_id: Optional[str] = Header(default=None),
) -> Categories:
    view = await get_view(_identity(x_user_id))
    try:
        view.select_category(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return Categories(categories=view.categories, selected=view.selected_category)


@router.post("/cart", response_model=CartContents)
async def add_to_cart(
    req: AddToCartRequest,
    x_user_id: Optional[str] = Header(default=None),
) -> CartContents:
    identity = _identity(x_user_id)
    view = await get_view(identity)
    item = view.find_item(req.book_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Book not found")

    outcome = view.add_to_cart(item)
    if outcome is Eligibility.UNAUTHENTICATED:
        raise HTTPException(
            status_code=401,
            detail={
                "outcome": outcome.value,
                "message": view.notifier.last[1],
                "redirect": view.navigator.current,
            },
        )
    if outcome is Eligibility.SELF_OWNED:
        raise HTTPException(
            status_code=403,
            detail={"outcome": outcome.value, "message": view.notifier.last[1]},
        )
    return CartContents(user_id=identity.user_id, items=list_items(identity.user_id))


@router.get("/cart", response_model=CartContents)
def get_cart(x_user_id: Optional[str] = Header(default=None)) -> CartContents:
    identity = _identity(x_user_id)
    if identity is None:
        raise HTTPException(status_code=401, detail="Login required")
    return CartContents(user_id=identity.user_id, items=list_items(identity.user_id))
