"""
Purchase eligibility for the "add to cart" action.

Two gates are evaluated in order: the visitor must be signed in, and
must not be the one who listed the book. The check is a pure function
of the item and the identity, so it is run once when rendering a card
(to disable the button) and again in the add-to-cart handler.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..models import Identity, Item


class Eligibility(str, Enum):
    ELIGIBLE = "ELIGIBLE"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    SELF_OWNED = "SELF_OWNED"


def is_self_owned(item: Item, identity: Optional[Identity]) -> bool:
    """True when ``identity`` is the user who listed ``item``."""
    if identity is None:
        return False
    return identity.user_id in item.owner_ids


def check_eligibility(item: Item, identity: Optional[Identity]) -> Eligibility:
    """Decide whether ``identity`` may add ``item`` to a cart.

    Parameters
    ----------
    item : Item
        The listing the visitor wants to buy.
    identity : Optional[Identity]
        The signed-in visitor, or ``None`` when nobody is signed in.

    Returns
    -------
    Eligibility
        ``UNAUTHENTICATED`` when nobody is signed in (ownership is not
        looked at), ``SELF_OWNED`` when the visitor listed the item,
        ``ELIGIBLE`` otherwise.
    """
    if identity is None:
        return Eligibility.UNAUTHENTICATED
    if is_self_owned(item, identity):
        return Eligibility.SELF_OWNED
    return Eligibility.ELIGIBLE
