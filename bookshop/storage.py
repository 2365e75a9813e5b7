# bookshop/storage.py
"""In-memory carts, one per user id."""

import logging
import threading
from typing import Dict, List

from .models import Item


logger = logging.getLogger(__name__)

CARTS: Dict[str, List[Item]] = {}
_carts_lock = threading.Lock()


def add_item(user_id: str, item: Item) -> List[Item]:
    """Add ``item`` to the cart of ``user_id`` and return the cart.

    A book is a single second-hand copy, so adding it twice keeps one line.
    """
    with _carts_lock:
        cart = CARTS.setdefault(user_id, [])
        if all(existing.id != item.id for existing in cart):
            cart.append(item)
            logger.info("User %s added book %s to cart", user_id, item.id)
        return list(cart)


def list_items(user_id: str) -> List[Item]:
    with _carts_lock:
        return list(CARTS.get(user_id, []))


def clear_cart(user_id: str) -> None:
    with _carts_lock:
        CARTS.pop(user_id, None)


class CartService:
    """Adapter exposing the module-level carts to the shop view."""

    def add_item(self, user_id: str, item: Item) -> None:
        add_item(user_id, item)

    def list_items(self, user_id: str) -> List[Item]:
        return list_items(user_id)
