"""Request and response schemas for the event endpoints."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

_EXAMPLE_EVENT: Dict[str, Any] = {
    "summary": "Team Meeting",
    "location": "1234 Main St, Anytown, USA",
    "description": "Discuss project updates and roadblocks.",
    "start": {"dateTime": "2024-12-21T10:00:00-07:00", "timeZone": "America/Denver"},
    "end": {"dateTime": "2024-12-21T11:00:00-07:00", "timeZone": "America/Denver"},
    "attendees": [{"email": "johndoe@example.com"}],
    "reminders": {"useDefault": False, "overrides": [{"method": "email", "minutes": 1440}]},
}


class _EventRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    calendar_id: str = Field(
        ...,
        alias="calendarId",
        description="Target calendar identifier, e.g. 'primary'.",
        examples=["primary"],
    )


class CreateEventRequest(_EventRequest):
    """Payload for inserting a new event."""

    event_details: Any = Field(
        ...,
        alias="eventDetails",
        description="Event resource forwarded to Google Calendar unchanged.",
        examples=[_EXAMPLE_EVENT],
    )


class UpdateEventRequest(_EventRequest):
    """Payload for replacing an existing event."""

    event_id: str = Field(..., alias="eventId")
    event_details: Any = Field(
        ...,
        alias="eventDetails",
        description="Full replacement event resource.",
        examples=[_EXAMPLE_EVENT],
    )


class DeleteEventRequest(_EventRequest):
    """Payload identifying the event to delete."""

    event_id: str = Field(..., alias="eventId")


class DeleteEventResponse(BaseModel):
    message: str


__all__ = [
    "CreateEventRequest",
    "DeleteEventRequest",
    "DeleteEventResponse",
    "UpdateEventRequest",
]
