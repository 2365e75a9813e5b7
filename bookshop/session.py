# bookshop/session.py
"""
Persisted identity of the signed-in visitor.

The login flow stores the user record as a small JSON file (the same
record a browser front-end keeps under its ``user`` storage key). This
module only reads it to find out who is browsing; ``save()`` and
``clear()`` exist for the login and logout flows. A record that cannot
be parsed is treated as "nobody signed in".
"""

import json
import logging
import threading
from pathlib import Path
from typing import Optional

from .models import Identity


logger = logging.getLogger(__name__)


class IdentityStore:
    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def load(self) -> Optional[Identity]:
        """Return the signed-in identity, or ``None``.

        Missing files, unparseable JSON, non-object payloads and records
        without a ``userId`` all mean unauthenticated.
        """
        with self._lock:
            if not self.path.exists():
                return None
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as exc:
                logger.warning("Ignoring unreadable identity record %s: %s", self.path, exc)
                return None
        return identity_from_record(data)

    def save(self, identity: Identity) -> None:
        record = {"userId": identity.user_id}
        if identity.username is not None:
            record["username"] = identity.username
        if identity.email is not None:
            record["email"] = identity.email
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(record, f, ensure_ascii=False, indent=2)

    def clear(self) -> None:
        with self._lock:
            self.path.unlink(missing_ok=True)


def identity_from_record(data) -> Optional[Identity]:
    """Build an ``Identity`` from a persisted record, ``None`` when malformed."""
    if not isinstance(data, dict):
        logger.warning("Ignoring identity record that is not an object")
        return None
    user_id = data.get("userId")
    if user_id is None or user_id == "":
        logger.warning("Ignoring identity record without userId")
        return None
    username = data.get("username")
    email = data.get("email")
    return Identity(
        user_id=str(user_id),
        username=username if isinstance(username, str) else None,
        email=email if isinstance(email, str) else None,
    )
