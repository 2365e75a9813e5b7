"""Turn a book's stored image reference into a URL the front-end can load."""

from __future__ import annotations


class ImageResolver:
    def __init__(self, base_url: str, placeholder: str = ""):
        self.base_url = base_url.rstrip("/")
        self.placeholder = placeholder

    def resolve_image_url(self, image_ref: str) -> str:
        ref = (image_ref or "").strip()
        if not ref:
            return self.placeholder
        if ref.startswith(("http://", "https://")):
            return ref
        return f"{self.base_url}/{ref.lstrip('/')}"
