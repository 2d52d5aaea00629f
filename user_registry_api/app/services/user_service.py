"""
Business logic for users.

``UserService`` implements the five user operations over a
``UserStore`` it is given at construction time.  Each operation
short‑circuits on the first failing step and returns either the
resulting record or a ``Failure``; it never raises for an expected
outcome and never builds an HTTP response.
"""

import logging
from typing import Any, List, Optional, Union

from ..core.errors import Failure, conflict_error, not_found_error, validation_error
from ..core.store import UserStore
from ..schemas.user import UserRead
from .validation import InvalidPayload, validate_user_payload

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found."
EMAIL_IN_USE = "Email is already in use."
EMAIL_IN_USE_BY_OTHER = "Email is already in use by another user."

UserResult = Union[UserRead, Failure]


class UserService:
    """Operations on user records.

    The service does not own any state of its own; all records live in
    the ``UserStore`` passed in, which lets tests and applications run
    with independent stores.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    async def create_user(self, payload: Any) -> UserResult:
        """Validate ``payload``, enforce email uniqueness and store it."""
        if isinstance(payload, Failure):
            return payload
        result = validate_user_payload(payload)
        if isinstance(result, InvalidPayload):
            return validation_error(result.report)
        record = result.record
        if self.store.email_in_use(record.email):
            return conflict_error(EMAIL_IN_USE)
        user = self.store.insert(record)
        logger.info("Registered user %s <%s>", user.id, user.email)
        return user

    async def list_users(self) -> List[UserRead]:
        """Return all users in insertion order."""
        return self.store.list()

    async def get_user(self, user_id: str) -> UserResult:
        user = self.store.find_by_id(user_id)
        if user is None:
            return not_found_error(USER_NOT_FOUND)
        return user

    async def replace_user(self, user_id: str, payload: Any) -> UserResult:
        """Replace every field of an existing user.

        The existence check runs before validation: an unknown
        ``user_id`` reports not‑found even when ``payload`` is invalid.
        ``payload`` may already be a ``Failure`` (e.g. unparsable body),
        which is returned once the user is known to exist.
        """
        if self.store.find_by_id(user_id) is None:
            return not_found_error(USER_NOT_FOUND)
        if isinstance(payload, Failure):
            return payload
        result = validate_user_payload(payload)
        if isinstance(result, InvalidPayload):
            return validation_error(result.report)
        record = result.record
        if self.store.email_in_use(record.email, excluding_id=user_id):
            return conflict_error(EMAIL_IN_USE_BY_OTHER)
        updated = self.store.replace(user_id, record)
        if updated is None:
            return not_found_error(USER_NOT_FOUND)
        logger.info("Replaced user %s", user_id)
        return updated

    async def delete_user(self, user_id: str) -> Optional[Failure]:
        """Remove a user.  Returns ``None`` on success."""
        if not self.store.remove(user_id):
            return not_found_error(USER_NOT_FOUND)
        logger.info("Deleted user %s", user_id)
        return None
