"""Pydantic models for the PagerDuty Events API.

- Event payloads: TriggerEvent, AcknowledgeEvent, ResolveEvent
- Contexts attached to trigger events: LinkContext, ImageContext
- Submission outcomes: EventProcessed, InvalidEvent, RateLimited, Unexpected

All models are immutable with frozen=True. TriggerEvent's optional fields are
set through with_* methods returning a new event.
"""

from collections.abc import Iterable
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from pagersduty.json_utils import json_dumps


class LinkContext(BaseModel):
    """A hyperlink attached to an incident.

    Attributes:
        href: The link being attached
        text: Plain text describing the link, used as the link's text
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["link"] = "link"
    href: str
    text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class ImageContext(BaseModel):
    """An image attached to an incident. Images must be served via HTTPS.

    Attributes:
        src: The source of the image
        href: Optional link for the image
        alt: Optional alternative text for the image
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["image"] = "image"
    src: str
    href: str | None = None
    alt: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


Context = Annotated[LinkContext | ImageContext, Field(discriminator="type")]


class Event(BaseModel):
    """Fields shared by every event.

    Attributes:
        service_key: Integration key of a "Generic API" service
        event_type: trigger, acknowledge or resolve
    """

    model_config = ConfigDict(frozen=True)

    service_key: str
    event_type: str

    def to_dict(self) -> dict[str, Any]:
        """Encode to the JSON body posted to the Events API.

        Fields are emitted in declaration order; unset optional fields are omitted.
        """
        data: dict[str, Any] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            if name == "contexts":
                value = [context.to_dict() for context in value]
            data[name] = value
        return data

    def to_json(self) -> str:
        return json_dumps(self.to_dict(), compact=True)


class TriggerEvent(Event):
    """Report a new or ongoing problem.

    Example:
        >>> event = (
        ...     TriggerEvent(service_key="...", description="disk full on db-1")
        ...     .with_incident_key("db-1/disk")
        ...     .with_client("nagios")
        ... )
    """

    event_type: Literal["trigger"] = "trigger"
    description: str
    incident_key: str | None = None
    details: Any = None
    client: str | None = None
    client_url: str | None = None
    contexts: tuple[Context, ...] | None = None

    def _updated(self, **update: Any) -> "TriggerEvent":
        # model_copy() skips validation
        return self.model_validate({**dict(self), **update})

    def with_incident_key(self, incident_key: str) -> "TriggerEvent":
        return self._updated(incident_key=incident_key)

    def with_details(self, details: Any) -> "TriggerEvent":
        """Attach arbitrary JSON data shown in the incident log."""
        return self._updated(details=details)

    def with_client(self, client: str) -> "TriggerEvent":
        return self._updated(client=client)

    def with_client_url(self, client_url: str) -> "TriggerEvent":
        return self._updated(client_url=client_url)

    def with_contexts(
        self, contexts: Iterable[LinkContext | ImageContext | dict[str, Any]]
    ) -> "TriggerEvent":
        return self._updated(contexts=tuple(contexts))


class AcknowledgeEvent(Event):
    """Put the referenced incident into the acknowledged state.

    An acknowledged incident generates no further notifications, even if it
    receives new trigger events.
    """

    event_type: Literal["acknowledge"] = "acknowledge"
    incident_key: str


class ResolveEvent(Event):
    """Put the referenced incident into the resolved state.

    New trigger events with the incident key of a resolved incident open a
    new incident instead of re-opening it.
    """

    event_type: Literal["resolve"] = "resolve"
    incident_key: str


# Outcomes


class EventProcessed(BaseModel):
    """The event was accepted (HTTP 200)."""

    model_config = ConfigDict(frozen=True)

    status: str
    message: str
    incident_key: str


class InvalidEvent(BaseModel):
    """The event was rejected as improperly formatted (HTTP 400)."""

    model_config = ConfigDict(frozen=True)

    status: str
    message: str
    errors: tuple[str, ...]


class RateLimited(BaseModel):
    """The service received too many events (HTTP 403).

    Nothing is retried here; callers that must deliver every event retry
    themselves, preferably with a back off.
    """

    model_config = ConfigDict(frozen=True)


class Unexpected(BaseModel):
    """Any other response, or a failure to talk to the service at all.

    Attributes:
        body: Raw response body, or a description of the failure
    """

    model_config = ConfigDict(frozen=True)

    body: str


EventOutcome = EventProcessed | InvalidEvent | RateLimited | Unexpected
