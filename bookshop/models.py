# bookshop/models.py
from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Item(BaseModel):
    """A listed book as the shop backend returns it, after normalization.

    ``owner_id`` is the identifier of the user who listed the book, or
    ``None`` when the listing carries no owner. ``owner_ids`` holds every
    owner identifier the record carried; it always includes ``owner_id``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    author: str = ""
    price: float = Field(default=0.0, ge=0)
    image_ref: str = ""
    owner_id: Optional[str] = None
    owner_ids: FrozenSet[str] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _include_owner_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("owner_id") is not None:
            ids = set(data.get("owner_ids") or ())
            ids.add(str(data["owner_id"]))
            data = {**data, "owner_ids": frozenset(ids)}
        return data


class Identity(BaseModel):
    """The signed-in visitor."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    username: Optional[str] = None
    email: Optional[str] = None


class PageState(BaseModel):
    current_page: int = Field(default=1, ge=1)
    page_size: int = Field(default=12, ge=1)


def _as_id(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def resolve_owner_ids(record: Dict[str, Any]) -> FrozenSet[str]:
    """Return every owner id found on a raw listing record.

    The backend sends the owner either nested (``{"user": {"id": 7}}``) or
    flat (``{"userId": 7}``), sometimes both. Both are kept so that a
    visitor matching either one is recognised as the seller.
    """
    user = record.get("user")
    nested = _as_id(user.get("id")) if isinstance(user, dict) else None
    flat = _as_id(record.get("userId"))
    return frozenset(i for i in (nested, flat) if i is not None)


def resolve_owner_id(record: Dict[str, Any]) -> Optional[str]:
    """Return the owner id to display, preferring the nested ``user.id``."""
    user = record.get("user")
    nested = _as_id(user.get("id")) if isinstance(user, dict) else None
    return nested if nested is not None else _as_id(record.get("userId"))


def item_from_record(record: Dict[str, Any]) -> Item:
    """Build an ``Item`` from a raw backend record.

    Raises ``ValueError`` (pydantic's ``ValidationError`` is a subclass) when
    the record has no id, or a price that is negative or not a number.
    """
    item_id = _as_id(record.get("id"))
    if item_id is None:
        raise ValueError("record has no id")
    price = record.get("price")
    try:
        price_value = float(price) if price not in (None, "") else 0.0
    except TypeError as exc:
        raise ValueError(f"price is not a number: {price!r}") from exc
    return Item(
        id=item_id,
        title=str(record.get("title") or ""),
        author=str(record.get("author") or ""),
        price=price_value,
        image_ref=str(record.get("bookImage") or record.get("image_ref") or ""),
        owner_id=resolve_owner_id(record),
        owner_ids=resolve_owner_ids(record),
    )
