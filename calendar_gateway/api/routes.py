"""
FastAPI routes for the calendar gateway.
"""

from __future__ import annotations

import logging
import sqlite3
from http import HTTPStatus
from http.client import HTTPException as HTTPClientError
from typing import Annotated, Any, Awaitable, Callable

import httplib2
import httpx
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from googleapiclient.errors import Error as GoogleApiClientError

from calendar_gateway.clients.google_auth import (
    OAuthTokenExchangeError,
    OAuthTokenNotFoundError,
)
from calendar_gateway.dependencies import (
    get_calendar_auth_service,
    get_calendar_client,
    get_google_token_service,
)
from calendar_gateway.schemas import (
    CreateEventRequest,
    DeleteEventRequest,
    DeleteEventResponse,
    UpdateEventRequest,
)

router = APIRouter()
logger = logging.getLogger(__name__)

# Unreadable or malformed token records. ``ValueError`` covers JSON decoding
# and pydantic validation failures.
_STORAGE_ERRORS = (OSError, ValueError, sqlite3.Error)
_EXCHANGE_ERRORS = (OAuthTokenExchangeError, httpx.HTTPError) + _STORAGE_ERRORS
# httplib2 lets ``http.client`` errors such as ``IncompleteRead`` escape.
_PROVIDER_ERRORS = (
    GoogleApiClientError,
    GoogleAuthError,
    httplib2.HttpLib2Error,
    HTTPClientError,
) + _STORAGE_ERRORS

_TOKEN_MISSING_DETAIL = "Token not found. Please authenticate first."


def _stored_credentials(action: str) -> Callable[..., Awaitable[Credentials]]:
    """Build a dependency that loads stored credentials for an event route.

    Dependencies resolve before the request body is validated, so a missing
    token answers 401 whatever the body holds.
    """

    async def _load(
        token_service: Annotated[Any, Depends(get_google_token_service)],
    ) -> Credentials:
        try:
            return await token_service.get_credentials()
        except OAuthTokenNotFoundError as exc:
            raise HTTPException(
                status_code=HTTPStatus.UNAUTHORIZED,
                detail=_TOKEN_MISSING_DETAIL,
            ) from exc
        except _STORAGE_ERRORS as exc:
            logger.exception("Failed to load stored OAuth token")
            raise HTTPException(
                status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                detail=f"Error {action}: {exc}",
            ) from exc

    return _load


_credentials_for_create = _stored_credentials("creating event")
_credentials_for_update = _stored_credentials("updating event")
_credentials_for_delete = _stored_credentials("deleting event")


@router.get("/health", status_code=HTTPStatus.OK, include_in_schema=False)
async def healthcheck() -> dict:
    """Simple health endpoint for monitoring."""
    return {"status": "ok"}


@router.get(
    "/initialize",
    status_code=HTTPStatus.OK,
    summary="Get authentication URL",
    responses={200: {"description": "URL to authenticate user."}},
)
async def initialize(
    auth_service: Annotated[Any, Depends(get_calendar_auth_service)],
) -> str:
    """Return the Google consent URL requesting offline calendar access."""
    return auth_service.get_authorization_url()


@router.get(
    "/oauth2callback",
    status_code=HTTPStatus.OK,
    summary="Handle OAuth2 callback",
    response_class=PlainTextResponse,
    responses={200: {"description": "Token saved successfully."}},
)
async def oauth2_callback(
    auth_service: Annotated[Any, Depends(get_calendar_auth_service)],
    token_service: Annotated[Any, Depends(get_google_token_service)],
    code: str | None = Query(
        default=None, description="Authorization code from Google."
    ),
) -> str:
    """Exchange the authorization code and persist the resulting token."""
    if not code:
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail="Authorization code is required",
        )

    try:
        await auth_service.exchange_code(code)
        await token_service.save(auth_service.credentials)
    except _EXCHANGE_ERRORS as exc:
        logger.exception("OAuth callback failed")
        raise HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Error saving token: {exc}",
        ) from exc

    return "Token saved successfully."


@router.post(
    "/createEvent",
    status_code=HTTPStatus.OK,
    summary="Create a new event",
    responses={
        200: {"description": "Event created successfully."},
        401: {"description": "Token not found."},
    },
)
async def create_event(
    credentials: Annotated[Credentials, Depends(_credentials_for_create)],
    payload: CreateEventRequest,
    calendar_client: Annotated[Any, Depends(get_calendar_client)],
) -> dict[str, Any]:
    try:
        return await calendar_client.create_event(
            credentials=credentials,
            calendar_id=payload.calendar_id,
            event_details=payload.event_details,
        )
    except _PROVIDER_ERRORS as exc:
        logger.exception("Failed to create event on calendar %s", payload.calendar_id)
        raise HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Error creating event: {exc}",
        ) from exc


@router.put(
    "/updateEvent",
    status_code=HTTPStatus.OK,
    summary="Update an event",
    responses={
        200: {"description": "Event updated successfully."},
        401: {"description": "Token not found."},
    },
)
async def update_event(
    credentials: Annotated[Credentials, Depends(_credentials_for_update)],
    payload: UpdateEventRequest,
    calendar_client: Annotated[Any, Depends(get_calendar_client)],
) -> dict[str, Any]:
    try:
        return await calendar_client.update_event(
            credentials=credentials,
            calendar_id=payload.calendar_id,
            event_id=payload.event_id,
            event_details=payload.event_details,
        )
    except _PROVIDER_ERRORS as exc:
        logger.exception("Failed to update event %s", payload.event_id)
        raise HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Error updating event: {exc}",
        ) from exc


@router.delete(
    "/deleteEvent",
    status_code=HTTPStatus.OK,
    summary="Delete an event",
    response_model=DeleteEventResponse,
    responses={
        200: {"description": "Event deleted successfully."},
        401: {"description": "Token not found."},
    },
)
async def delete_event(
    credentials: Annotated[Credentials, Depends(_credentials_for_delete)],
    payload: DeleteEventRequest,
    calendar_client: Annotated[Any, Depends(get_calendar_client)],
) -> dict[str, str]:
    try:
        return await calendar_client.delete_event(
            credentials=credentials,
            calendar_id=payload.calendar_id,
            event_id=payload.event_id,
        )
    except _PROVIDER_ERRORS as exc:
        logger.exception("Failed to delete event %s", payload.event_id)
        raise HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Error deleting event: {exc}",
        ) from exc
