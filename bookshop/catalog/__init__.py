"""
Catalog package for the second-hand book shop.

This package holds the logic behind the shop page: client-side
pagination of the full catalogue, the purchase eligibility check that
stops sellers from buying their own listings, the catalogue sources and
the view controller tying them together. ``router`` exposes it over
HTTP for the front-end.
"""

from .router import router as shop_router  # noqa: F401
