"""
User endpoints for API v1.

CRUD over the in‑memory user collection.  Request bodies are read
inside the handlers (rather than declared as Pydantic parameters) so
that every validation rule is reported at once and so that ``PUT``
can answer 404 for an unknown user before looking at the body.  Any
``Failure`` returned by the service is rendered by
``failure_response``; handlers never build error bodies themselves.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from user_registry_api.app.api.deps import get_user_service, read_json_payload
from user_registry_api.app.core.errors import Failure, failure_response
from user_registry_api.app.schemas.user import ErrorMessage, UserInput, UserRead
from user_registry_api.app.services.user_service import UserService


router = APIRouter()

# The body is parsed by hand, so describe it for the OpenAPI document.
USER_INPUT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UserInput.model_json_schema()}},
    }
}

VALIDATION_RESPONSE = {400: {"model": ErrorMessage, "description": "Invalid user data"}}
NOT_FOUND_RESPONSE = {404: {"model": ErrorMessage, "description": "User not found"}}
CONFLICT_RESPONSE = {409: {"model": ErrorMessage, "description": "Email already in use"}}


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={**VALIDATION_RESPONSE, **CONFLICT_RESPONSE},
    openapi_extra=USER_INPUT_BODY,
    summary="Create a user",
)
@router.post("/", include_in_schema=False, response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> Union[UserRead, JSONResponse]:
    """Register a new user.

    Returns 400 listing every violated field rule, or 409 if the email
    is already used by another user.
    """
    payload = await read_json_payload(request)
    result = await service.create_user(payload)
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.get("", response_model=List[UserRead], summary="List users")
@router.get("/", include_in_schema=False, response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every user in creation order."""
    return await service.list_users()


@router.get(
    "/{user_id}",
    response_model=UserRead,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a user",
)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Union[UserRead, JSONResponse]:
    result = await service.get_user(user_id)
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.put(
    "/{user_id}",
    response_model=UserRead,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE, **CONFLICT_RESPONSE},
    openapi_extra=USER_INPUT_BODY,
    summary="Replace a user",
)
async def replace_user(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> Union[UserRead, JSONResponse]:
    """Replace all fields of an existing user.

    The user must exist before the body is even read: an unknown id
    answers 404 whatever the payload.
    """
    existing = await service.get_user(user_id)
    if isinstance(existing, Failure):
        return failure_response(existing)
    payload = await read_json_payload(request)
    result = await service.replace_user(user_id, payload)
    if isinstance(result, Failure):
        return failure_response(result)
    return result


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a user",
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Response:
    failure = await service.delete_user(user_id)
    if failure is not None:
        return failure_response(failure)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
