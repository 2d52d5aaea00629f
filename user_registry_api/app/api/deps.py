"""
Dependencies shared by the API routers.

The record store is owned by the application (``app.state.user_store``)
rather than by a module global; these helpers resolve it for the
current request so endpoints can declare ``Depends(get_user_service)``.
Request bodies are read here as well, turning malformed JSON into a
``Failure`` instead of an exception.
"""

import json
from typing import Any, Union

from fastapi import Depends, Request

from ..core.errors import Failure, validation_error
from ..core.store import UserStore
from ..services.user_service import UserService
from ..services.validation import MALFORMED_JSON


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_user_service(store: UserStore = Depends(get_user_store)) -> UserService:
    return UserService(store)


async def read_json_payload(request: Request) -> Union[Any, Failure]:
    """Return the decoded JSON body, ``{}`` when empty, or a ``Failure``."""
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except (ValueError, RecursionError):
        # Deeply nested arrays or objects exhaust the decoder's recursion limit.
        return validation_error(MALFORMED_JSON)
