"""PagerDuty REST API v2 client with hook system.

Authenticated GET requests against the REST API, with response bodies
decoded through the resource codecs of pagersduty.types. Single requests
only: no pagination, retries or caching.
"""

import contextvars
import time
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from pagersduty.config import API_MEDIA_TYPE, API_URL, TIMEOUT, Settings
from pagersduty.errors import MalformedResourceError
from pagersduty.hooks import Hooks, invoke_with_hooks, with_hooks
from pagersduty.json_utils import json_loads
from pagersduty.metrics import rest_request, rest_request_duration
from pagersduty.types import (
    ContactMethodVariant,
    NotificationRuleVariant,
    TeamVariant,
    UserVariant,
    contact_method_codec,
    notification_rule_codec,
    team_codec,
    user_codec,
)

logger = structlog.get_logger(__name__)

# Local storage for latency tracking (tuple stack to support nested calls)
_latency_tracker: contextvars.ContextVar[tuple[float, ...]] = contextvars.ContextVar(
    f"{__name__}.latency_tracker", default=()
)


@dataclass(frozen=True)
class RestApiCallContext:
    """Context information passed to API call hooks.

    Attributes:
        method: API method name (e.g., "users.get")
        verb: HTTP verb (e.g., "GET")
        id: REST API base URL
    """

    method: str
    verb: str
    id: str


def _metrics_hook(context: RestApiCallContext) -> None:
    """Built-in Prometheus metrics hook."""
    rest_request.labels(context.method, context.verb).inc()


def _latency_start_hook(_context: RestApiCallContext) -> None:
    """Built-in hook to start latency measurement."""
    _latency_tracker.set((*_latency_tracker.get(), time.perf_counter()))


def _latency_end_hook(context: RestApiCallContext) -> None:
    """Built-in hook to record latency measurement."""
    stack = _latency_tracker.get()
    start_time = stack[-1]
    _latency_tracker.set(stack[:-1])
    duration = time.perf_counter() - start_time
    rest_request_duration.labels(context.method, context.verb).observe(duration)


def _request_log_hook(context: RestApiCallContext) -> None:
    """Built-in hook for logging API requests."""
    logger.debug("API request", method=context.method, verb=context.verb, id=context.id)


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
class RestApi:
    """PagerDuty REST API v2 client with hook system.

    Example:
        >>> with RestApi(token="...") as api:
        ...     user = api.user("PXPGF42")
        ...     print([cm.type for cm in user.contact_methods])
        ['email_contact_method_reference', 'sms_contact_method']
    """

    # Set by @with_hooks decorator
    _hooks: Hooks

    def __init__(
        self,
        token: str,
        api_url: str = API_URL,
        media_type: str = API_MEDIA_TYPE,
        timeout: int = TIMEOUT,
        *,
        transport: httpx.BaseTransport | None = None,
        hooks: Hooks | None = None,  # noqa: ARG002 - Handled by @with_hooks decorator
    ) -> None:
        """Initialize REST API client.

        Args:
            token: REST API auth token
            api_url: API base URL (default: https://api.pagerduty.com)
            media_type: Versioned media type for the Accept header
            timeout: API request timeout in seconds (default: 30)
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
            hooks: Optional custom hooks to merge with built-in hooks.
        """
        self.api_url = api_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.api_url,
            headers={
                "Accept": media_type,
                "Authorization": f"Token token={token}",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, token: str | None = None, hooks: Hooks | None = None
    ) -> "RestApi":
        return cls(
            token=token or settings.api_token,
            api_url=settings.api_url,
            media_type=settings.api_media_type,
            timeout=settings.timeout,
            hooks=hooks,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "RestApi":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, path: str, key: str) -> Any:
        """GET a path and return the value under the body's top-level key.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response
            MalformedResourceError: If the body is not JSON or lacks the key
        """
        response = self._client.get(path)
        response.raise_for_status()
        body = json_loads(response.content)
        if not isinstance(body, dict) or key not in body:
            raise MalformedResourceError(f"response of {path} has no `{key}` key")
        return body[key]

    @invoke_with_hooks(
        lambda self: RestApiCallContext(method="users.get", verb="GET", id=self.api_url)
    )
    def user(self, user_id: str) -> UserVariant:
        return user_codec.decode(self._get(f"/users/{user_id}", "user"))

    @invoke_with_hooks(
        lambda self: RestApiCallContext(method="teams.get", verb="GET", id=self.api_url)
    )
    def team(self, team_id: str) -> TeamVariant:
        return team_codec.decode(self._get(f"/teams/{team_id}", "team"))

    @invoke_with_hooks(
        lambda self: RestApiCallContext(
            method="contact_methods.list", verb="GET", id=self.api_url
        )
    )
    def contact_methods(self, user_id: str) -> list[ContactMethodVariant]:
        return contact_method_codec.decode_many(
            self._get(f"/users/{user_id}/contact_methods", "contact_methods")
        )

    @invoke_with_hooks(
        lambda self: RestApiCallContext(
            method="notification_rules.list", verb="GET", id=self.api_url
        )
    )
    def notification_rules(self, user_id: str) -> list[NotificationRuleVariant]:
        return notification_rule_codec.decode_many(
            self._get(f"/users/{user_id}/notification_rules", "notification_rules")
        )

    @invoke_with_hooks(
        lambda self: RestApiCallContext(method="abilities.list", verb="GET", id=self.api_url)
    )
    def abilities(self) -> list[str]:
        """List the abilities (features) of the account, e.g. `teams` or `urgencies`."""
        abilities = self._get("/abilities", "abilities")
        if not isinstance(abilities, list) or not all(
            isinstance(a, str) for a in abilities
        ):
            raise MalformedResourceError("abilities must be a list of strings")
        return abilities
