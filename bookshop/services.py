# bookshop/services.py
"""
Fire-and-forget collaborators of the shop view: the notifier that shows
short messages to the visitor and the navigator that requests a view
change. The default implementations log and remember what was asked so
that the HTTP layer can hand it back to the client.
"""

import logging
from typing import List, Optional, Protocol, Tuple

from .models import Item


logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...


class Navigator(Protocol):
    def navigate(self, path: str) -> None: ...

    def scroll_to_top(self) -> None: ...


class Cart(Protocol):
    def add_item(self, user_id: str, item: Item) -> None: ...


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: List[Tuple[str, str]] = []

    def _emit(self, level: str, message: str) -> None:
        self.messages.append((level, message))
        logger.info("notify[%s] %s", level, message)

    def info(self, message: str) -> None:
        self._emit("info", message)

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    def success(self, message: str) -> None:
        self._emit("success", message)

    @property
    def last(self) -> Optional[Tuple[str, str]]:
        return self.messages[-1] if self.messages else None


class RecordingNavigator:
    def __init__(self) -> None:
        self.history: List[str] = []
        self.scrolls = 0

    def navigate(self, path: str) -> None:
        self.history.append(path)
        logger.debug("navigate to %s", path)

    def scroll_to_top(self) -> None:
        self.scrolls += 1

    @property
    def current(self) -> Optional[str]:
        return self.history[-1] if self.history else None
