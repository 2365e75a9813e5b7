"""Exceptions raised while loading the catalogue."""


class FetchError(Exception):
    """The catalogue could not be loaded (transport, status or payload)."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
