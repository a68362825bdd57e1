"""
Authentication router: login with registration on first use.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from kvgate.core.exceptions import PasswordHashError, StoreError
from kvgate.dependencies.services import get_auth_service
from kvgate.models.credential import LoginOutcome
from kvgate.schemas.auth import LoginRequest, LoginResponse
from kvgate.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

CREATED_MESSAGE = "User created successfully. Please login."
SUCCESS_MESSAGE = "Login successful"


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    responses={
        201: {"model": LoginResponse, "description": "User created"},
        401: {"description": "Password mismatch"},
    },
    summary="Log in, registering unknown identifiers",
)
async def login(
    body: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Log in with a login identifier and password.

    - Unknown identifier: the password is hashed and stored for 10 minutes,
      responds **201**. Log in again to authenticate.
    - Known identifier: responds **200** on a password match, **401** otherwise.
    """
    logger.info("Received a login request")

    try:
        outcome = await auth_service.login(body)
    except PasswordHashError as e:
        logger.error("Error hashing password: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="error hashing password",
        )
    except StoreError as e:
        if e.operation == "set":
            logger.error("Error storing new user: %s", e)
            detail = "error storing new user"
        else:
            logger.error("Error retrieving user: %s", e)
            detail = "error retrieving user"
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )

    if outcome == LoginOutcome.REJECTED:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="login error",
        )

    if outcome == LoginOutcome.CREATED:
        response.status_code = status.HTTP_201_CREATED
        return LoginResponse(message=CREATED_MESSAGE)

    return LoginResponse(message=SUCCESS_MESSAGE)
