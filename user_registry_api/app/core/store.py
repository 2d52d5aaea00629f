"""
In‑memory record store.

``UserStore`` holds the authoritative collection of user records for
the lifetime of the process.  Records are kept in insertion order in a
dict keyed by identifier.  A store is created by ``create_app`` and
attached to ``app.state``; nothing in the package keeps a module‑level
store, so every application (and every test) owns an independent one.

The store performs no validation.  Callers are expected to pass
``UserInput`` instances that have already been checked by
``services.validation``.  There is no locking: handlers run on a
single event loop and never await while mutating the store.
"""

import uuid
from typing import Dict, List, Optional

from ..schemas.user import UserInput, UserRead


class UserStore:
    """Ordered collection of ``UserRead`` records keyed by ``id``."""

    def __init__(self) -> None:
        self._records: Dict[str, UserRead] = {}

    def __len__(self) -> int:
        return len(self._records)

    def insert(self, record: UserInput) -> UserRead:
        """Store ``record`` under a freshly generated identifier."""
        user_id = str(uuid.uuid4())
        while user_id in self._records:
            user_id = str(uuid.uuid4())
        stored = UserRead(id=user_id, **record.model_dump())
        self._records[user_id] = stored
        return stored

    def list(self) -> List[UserRead]:
        return list(self._records.values())

    def find_by_id(self, user_id: str) -> Optional[UserRead]:
        return self._records.get(user_id)

    def email_in_use(self, email: str, excluding_id: Optional[str] = None) -> bool:
        """Return whether a record other than ``excluding_id`` uses ``email``."""
        return any(
            record.email == email and record.id != excluding_id
            for record in self._records.values()
        )

    def replace(self, user_id: str, new_fields: UserInput) -> Optional[UserRead]:
        """Overwrite every field but ``id``.  Returns ``None`` if missing."""
        if user_id not in self._records:
            return None
        # Assigning to an existing key keeps the record's position.
        updated = UserRead(id=user_id, **new_fields.model_dump())
        self._records[user_id] = updated
        return updated

    def remove(self, user_id: str) -> bool:
        return self._records.pop(user_id, None) is not None

    def clear(self) -> None:
        self._records.clear()
