"""Shared test configuration."""

import os
import tempfile

import pytest

# Tests always read the bundled sample catalogue, never a live backend,
# and start with nobody signed in.
os.environ.pop("BOOKSHOP_CATALOG_URL", None)
os.environ["BOOKSHOP_IDENTITY_FILE"] = os.path.join(tempfile.mkdtemp(), "user.json")

from bookshop import storage  # noqa: E402
from bookshop.catalog import router as shop_router_module  # noqa: E402
from bookshop.models import Item  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_state():
    shop_router_module.reset_views()
    storage.CARTS.clear()
    yield
    shop_router_module.reset_views()
    storage.CARTS.clear()


@pytest.fixture
def make_items():
    def _make(count, owner_id=None):
        return [
            Item(id=str(i), title=f"Book {i}", author="Author", price=100 + i, owner_id=owner_id)
            for i in range(count)
        ]

    return _make
