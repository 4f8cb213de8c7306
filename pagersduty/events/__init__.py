"""PagerDuty Events API: event payloads, submission and outcomes.

Example:
    >>> from pagersduty.events import EventsApi, TriggerEvent
    >>> outcome = EventsApi().submit(
    ...     TriggerEvent(service_key="...", description="disk full on db-1")
    ... )
"""

from pagersduty.events.client import (
    EventsApi,
    EventsApiCallContext,
    classify_response,
    send,
)
from pagersduty.events.models import (
    AcknowledgeEvent,
    Context,
    Event,
    EventOutcome,
    EventProcessed,
    ImageContext,
    InvalidEvent,
    LinkContext,
    RateLimited,
    ResolveEvent,
    TriggerEvent,
    Unexpected,
)

__all__ = [
    "AcknowledgeEvent",
    "Context",
    "Event",
    "EventOutcome",
    "EventProcessed",
    "EventsApi",
    "EventsApiCallContext",
    "ImageContext",
    "InvalidEvent",
    "LinkContext",
    "RateLimited",
    "ResolveEvent",
    "TriggerEvent",
    "Unexpected",
    "classify_response",
    "send",
]
