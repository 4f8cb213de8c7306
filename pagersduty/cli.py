import sys
from collections.abc import Callable
from typing import Any

import click
import httpx

from pagersduty.config import Settings
from pagersduty.errors import DecodeError
from pagersduty.events import (
    AcknowledgeEvent,
    EventOutcome,
    EventProcessed,
    EventsApi,
    ImageContext,
    LinkContext,
    RateLimited,
    ResolveEvent,
    TriggerEvent,
)
from pagersduty.json_utils import json_dumps, json_loads
from pagersduty.logger import setup_logging
from pagersduty.rest import RestApi

EXIT_RATE_LIMITED = 2


def parse_link(
    ctx: click.Context | None, param: click.Parameter | None, value: tuple[str, ...]
) -> list[LinkContext]:
    """Parse --link options of the form HREF or HREF|TEXT."""
    links = []
    for item in value:
        href, _, text = item.partition("|")
        if not href:
            raise click.BadParameter(f"missing href in {item!r}", ctx, param)
        links.append(LinkContext(href=href, text=text or None))
    return links


def parse_details(
    ctx: click.Context | None, param: click.Parameter | None, value: str | None
) -> Any:
    if value is None:
        return None
    try:
        return json_loads(value)
    except ValueError as e:
        raise click.BadParameter(str(e), ctx, param) from e


def report(outcome: EventOutcome) -> None:
    click.echo(
        json_dumps({"outcome": type(outcome).__name__, **outcome.model_dump(mode="json")})
    )
    if isinstance(outcome, EventProcessed):
        return
    sys.exit(EXIT_RATE_LIMITED if isinstance(outcome, RateLimited) else 1)


@click.group()
@click.option(
    "--log-level",
    help="log-level of the command. Defaults to the PAGERSDUTY_LOG_LEVEL setting.",
    default=None,
)
@click.pass_context
def root(ctx: click.Context, log_level: str | None) -> None:
    settings = Settings()
    setup_logging(
        log_level or settings.log_level, json_format=settings.log_format_json
    )
    ctx.obj = settings


@root.command()
@click.argument("service_key")
@click.argument("description")
@click.option("--incident-key", default=None, help="De-duplication key of the incident.")
@click.option("--client", default=None, help="Name of the monitoring client.")
@click.option("--client-url", default=None, help="URL of the monitoring client.")
@click.option(
    "--details",
    default=None,
    callback=parse_details,
    help="Arbitrary JSON included in the incident log.",
)
@click.option(
    "--link",
    "links",
    multiple=True,
    callback=parse_link,
    help="Link context, HREF or HREF|TEXT. Can be repeated.",
)
@click.option(
    "--image", "images", multiple=True, help="Image context source URL. Can be repeated."
)
@click.pass_obj
def trigger(
    settings: Settings,
    service_key: str,
    description: str,
    incident_key: str | None,
    client: str | None,
    client_url: str | None,
    details: Any,
    links: list[LinkContext],
    images: tuple[str, ...],
) -> None:
    """Trigger an incident."""
    event = TriggerEvent(service_key=service_key, description=description)
    if incident_key:
        event = event.with_incident_key(incident_key)
    if client:
        event = event.with_client(client)
    if client_url:
        event = event.with_client_url(client_url)
    if details is not None:
        event = event.with_details(details)
    contexts = [*links, *(ImageContext(src=src) for src in images)]
    if contexts:
        event = event.with_contexts(contexts)
    report(EventsApi.from_settings(settings).submit(event))


@root.command()
@click.argument("service_key")
@click.argument("incident_key")
@click.pass_obj
def acknowledge(settings: Settings, service_key: str, incident_key: str) -> None:
    """Acknowledge an incident."""
    event = AcknowledgeEvent(service_key=service_key, incident_key=incident_key)
    report(EventsApi.from_settings(settings).submit(event))


@root.command()
@click.argument("service_key")
@click.argument("incident_key")
@click.pass_obj
def resolve(settings: Settings, service_key: str, incident_key: str) -> None:
    """Resolve an incident."""
    event = ResolveEvent(service_key=service_key, incident_key=incident_key)
    report(EventsApi.from_settings(settings).submit(event))


@root.group()
@click.option(
    "--token", default=None, help="REST API token. Defaults to PAGERSDUTY_API_TOKEN."
)
@click.pass_context
def get(ctx: click.Context, token: str | None) -> None:
    """Fetch REST API resources and print them as JSON."""
    settings: Settings = ctx.obj
    if not (token or settings.api_token):
        raise click.UsageError("a REST API token is required (--token)")
    ctx.obj = ctx.with_resource(RestApi.from_settings(settings, token=token))


def _print(fetch: Callable[[], Any]) -> None:
    try:
        result = fetch()
    except (httpx.HTTPError, DecodeError) as e:
        raise click.ClickException(str(e)) from e
    if isinstance(result, list):
        data = [r if isinstance(r, str) else r.to_dict() for r in result]
    else:
        data = result.to_dict()
    click.echo(json_dumps(data, indent=2))


@get.command()
@click.argument("user_id")
@click.pass_obj
def user(api: RestApi, user_id: str) -> None:
    _print(lambda: api.user(user_id))


@get.command()
@click.argument("team_id")
@click.pass_obj
def team(api: RestApi, team_id: str) -> None:
    _print(lambda: api.team(team_id))


@get.command("contact-methods")
@click.argument("user_id")
@click.pass_obj
def contact_methods(api: RestApi, user_id: str) -> None:
    _print(lambda: api.contact_methods(user_id))


@get.command("notification-rules")
@click.argument("user_id")
@click.pass_obj
def notification_rules(api: RestApi, user_id: str) -> None:
    _print(lambda: api.notification_rules(user_id))


@get.command()
@click.pass_obj
def abilities(api: RestApi) -> None:
    _print(api.abilities)
