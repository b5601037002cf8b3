"""
API v1 routes.

Defines REST endpoints for the account registration API.
"""

from typing import Any, Union

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from src.api.dependencies import get_registration_service
from src.api.errors import error_response
from src.api.models import DataResponse, ErrorResponse, RegisterUserRequest, UserResponse
from src.domain.exceptions import RegistrationError
from src.domain.registration import RegistrationService

router = APIRouter(tags=["v1"])


@router.post(
    "/users",
    response_model=DataResponse[UserResponse],
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        409: {"model": ErrorResponse, "description": "Username or email already taken"},
        500: {"model": ErrorResponse, "description": "Account store failure"},
    },
    summary="Register a new user",
    description="Create an account from name, email, username and a confirmed password.",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": RegisterUserRequest.model_json_schema()}},
            "required": True,
        }
    },
)
async def register(
    payload: Any = Body(...),
    service: RegistrationService = Depends(get_registration_service),
) -> Union[DataResponse[UserResponse], JSONResponse]:
    """
    Register a new user account.

    - **name**: 3-100 characters
    - **email**: Valid email address, at most 100 characters
    - **username**: 3-100 characters, unique
    - **password** / **confirmPassword**: 8-150 characters, must match

    Returns the public view of the account (never the password).
    """
    # bcrypt and blocking SQL run off the event loop
    try:
        user = await run_in_threadpool(service.register, payload)
    except RegistrationError as exc:
        return error_response(exc)
    return DataResponse[UserResponse](data=UserResponse.from_domain(user))
