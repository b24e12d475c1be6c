"""Google Calendar client wrapper for event mutations."""

from __future__ import annotations

import asyncio
from typing import Any, Dict

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

DELETE_CONFIRMATION = {"message": "Event deleted successfully."}


class GoogleCalendarClient:
    """Insert, replace and delete events on a named calendar.

    Each call receives the credentials it should act with, so concurrent
    requests never share a mutable provider client.
    """

    @staticmethod
    def _service(credentials: Credentials):
        return build("calendar", "v3", credentials=credentials, cache_discovery=False)

    async def create_event(
        self,
        *,
        credentials: Credentials,
        calendar_id: str,
        event_details: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Insert an event and return Google's representation of it."""

        def _execute_insert() -> Dict[str, Any]:
            service = self._service(credentials)
            return (
                service.events()
                .insert(calendarId=calendar_id, body=event_details)
                .execute()
            )

        return await asyncio.to_thread(_execute_insert)

    async def update_event(
        self,
        *,
        credentials: Credentials,
        calendar_id: str,
        event_id: str,
        event_details: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Replace an existing event with ``event_details``."""

        def _execute_update() -> Dict[str, Any]:
            service = self._service(credentials)
            return (
                service.events()
                .update(calendarId=calendar_id, eventId=event_id, body=event_details)
                .execute()
            )

        return await asyncio.to_thread(_execute_update)

    async def delete_event(
        self,
        *,
        credentials: Credentials,
        calendar_id: str,
        event_id: str,
    ) -> Dict[str, str]:
        def _execute_delete() -> None:
            service = self._service(credentials)
            service.events().delete(calendarId=calendar_id, eventId=event_id).execute()

        await asyncio.to_thread(_execute_delete)
        return dict(DELETE_CONFIRMATION)


__all__ = ["DELETE_CONFIRMATION", "GoogleCalendarClient"]
