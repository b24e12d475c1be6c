"""Public schema exports."""

from .events import (
    CreateEventRequest,
    DeleteEventRequest,
    DeleteEventResponse,
    UpdateEventRequest,
)

__all__ = [
    "CreateEventRequest",
    "DeleteEventRequest",
    "DeleteEventResponse",
    "UpdateEventRequest",
]
