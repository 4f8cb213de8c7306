"""PagerDuty Events API client.

Submits one event per call and classifies the response into the closed set
of outcomes (EventProcessed, InvalidEvent, RateLimited, Unexpected). Nothing
is raised for HTTP statuses or transport failures: a client that cannot be
built, a payload that cannot be serialized, a network error or an unreadable
body all become Unexpected with a description of the failure.
"""

import contextvars
import time
from dataclasses import dataclass

import httpx
import structlog
from pydantic import ValidationError

from pagersduty.config import EVENTS_URL, TIMEOUT, Settings
from pagersduty.events.models import (
    AcknowledgeEvent,
    EventOutcome,
    EventProcessed,
    InvalidEvent,
    RateLimited,
    ResolveEvent,
    TriggerEvent,
    Unexpected,
)
from pagersduty.hooks import Hooks, invoke_with_hooks, with_hooks
from pagersduty.metrics import events_outcome, events_request, events_request_duration

logger = structlog.get_logger(__name__)

# Local storage for latency tracking (tuple stack to support nested calls)
_latency_tracker: contextvars.ContextVar[tuple[float, ...]] = contextvars.ContextVar(
    f"{__name__}.latency_tracker", default=()
)


@dataclass(frozen=True)
class EventsApiCallContext:
    """Context information passed to API call hooks.

    Attributes:
        method: API method name (e.g., "events.submit")
        verb: HTTP verb (e.g., "POST")
        id: Events endpoint URL
    """

    method: str
    verb: str
    id: str


def _metrics_hook(context: EventsApiCallContext) -> None:
    """Built-in Prometheus metrics hook."""
    events_request.labels(context.method, context.verb).inc()


def _latency_start_hook(_context: EventsApiCallContext) -> None:
    """Built-in hook to start latency measurement."""
    _latency_tracker.set((*_latency_tracker.get(), time.perf_counter()))


def _latency_end_hook(context: EventsApiCallContext) -> None:
    """Built-in hook to record latency measurement."""
    stack = _latency_tracker.get()
    start_time = stack[-1]
    _latency_tracker.set(stack[:-1])
    duration = time.perf_counter() - start_time
    events_request_duration.labels(context.method, context.verb).observe(duration)


def _request_log_hook(context: EventsApiCallContext) -> None:
    """Built-in hook for logging API requests."""
    logger.debug("API request", method=context.method, verb=context.verb, id=context.id)


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


def classify_response(status_code: int, body: str) -> EventOutcome:
    """Translate an Events API response into an outcome.

    403 always means rate limited, whatever the body. 200 and 400 bodies are
    decoded; a body that does not decode is Unexpected, as is any other status.

    Args:
        status_code: HTTP status code
        body: Response body text

    Returns:
        The classified outcome
    """
    if status_code == httpx.codes.FORBIDDEN:
        return RateLimited()
    try:
        if status_code == httpx.codes.OK:
            return EventProcessed.model_validate_json(body)
        if status_code == httpx.codes.BAD_REQUEST:
            return InvalidEvent.model_validate_json(body)
    except ValidationError as e:
        return Unexpected(body=_describe(e))
    return Unexpected(body=body)


@with_hooks(
    hooks=Hooks(
        pre_hooks=[
            _metrics_hook,
            _request_log_hook,
            _latency_start_hook,
        ],
        post_hooks=[_latency_end_hook],
    )
)
class EventsApi:
    """Stateless PagerDuty Events API client with hook system.

    Every submit() builds its own httpx client and closes it before returning,
    so instances hold configuration only and can be shared between threads.

    Example:
        >>> api = EventsApi()
        >>> outcome = api.submit(ResolveEvent(service_key="...", incident_key="db-1/disk"))
        >>> match outcome:
        ...     case EventProcessed(): ...
        ...     case RateLimited(): ...  # retry later
    """

    # Set by @with_hooks decorator
    _hooks: Hooks

    def __init__(
        self,
        url: str = EVENTS_URL,
        timeout: int = TIMEOUT,
        *,
        transport: httpx.BaseTransport | None = None,
        hooks: Hooks | None = None,  # noqa: ARG002 - Handled by @with_hooks decorator
    ) -> None:
        """Initialize Events API client.

        Args:
            url: Events API endpoint
            timeout: Request timeout in seconds (default: 30)
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
            hooks: Optional custom hooks to merge with built-in hooks.
        """
        self.url = url
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, *, hooks: Hooks | None = None
    ) -> "EventsApi":
        return cls(url=settings.events_url, timeout=settings.timeout, hooks=hooks)

    def _post(self, body: str) -> EventOutcome:
        with (
            httpx.Client(timeout=self._timeout, transport=self._transport) as client,
            client.stream(
                "POST",
                self.url,
                content=body,
                headers={"Content-Type": "application/json"},
            ) as response,
        ):
            # the body of a 403 is irrelevant, don't even read it
            if response.status_code == httpx.codes.FORBIDDEN:
                return RateLimited()
            response.read()
            return classify_response(response.status_code, response.text)

    @invoke_with_hooks(
        lambda self: EventsApiCallContext(method="events.submit", verb="POST", id=self.url)
    )
    def submit(
        self, event: TriggerEvent | AcknowledgeEvent | ResolveEvent
    ) -> EventOutcome:
        """Send one event and classify the response.

        Exactly one request is made; RateLimited is returned as is and
        retrying is up to the caller.

        Args:
            event: Event to send

        Returns:
            EventProcessed, InvalidEvent, RateLimited or Unexpected
        """
        try:
            outcome = self._post(event.to_json())
        except (httpx.HTTPError, httpx.InvalidURL, OSError, TypeError, ValueError) as e:
            logger.warning(
                "Event submission failed",
                event_type=event.event_type,
                error=_describe(e),
            )
            outcome = Unexpected(body=_describe(e))

        events_outcome.labels(type(outcome).__name__).inc()
        logger.info(
            "Event submitted",
            event_type=event.event_type,
            outcome=type(outcome).__name__,
        )
        return outcome


def send(event: TriggerEvent | AcknowledgeEvent | ResolveEvent) -> EventOutcome:
    """Submit an event to the default Events API endpoint."""
    return EventsApi().submit(event)
