import json
from typing import Any

import click
import httpx
import pytest
from click.testing import CliRunner
from pytest_mock import MockerFixture

from pagersduty import cli
from pagersduty.errors import UnexpectedResourceTypeError
from pagersduty.events import (
    EventProcessed,
    ImageContext,
    InvalidEvent,
    LinkContext,
    RateLimited,
    TriggerEvent,
    Unexpected,
)
from pagersduty.types import team_codec, user_codec
from tests.fixtures import Fixtures


@pytest.fixture(autouse=True)
def env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PAGERSDUTY_API_TOKEN", raising=False)
    monkeypatch.setenv("PAGERSDUTY_EVENTS_URL", "https://events.example.com/e")


@pytest.fixture(autouse=True)
def mock_setup_logging(mocker: MockerFixture) -> Any:
    return mocker.patch("pagersduty.cli.setup_logging", autospec=True)


@pytest.fixture
def mock_events_api(mocker: MockerFixture) -> Any:
    return mocker.patch("pagersduty.cli.EventsApi")


@pytest.fixture
def mock_rest_api(mocker: MockerFixture) -> Any:
    return mocker.patch("pagersduty.cli.RestApi")


def submitted_event(mock_events_api: Any) -> Any:
    [call] = mock_events_api.from_settings.return_value.submit.call_args_list
    return call.args[0]


def test_trigger(mock_events_api: Any) -> None:
    mock_events_api.from_settings.return_value.submit.return_value = EventProcessed(
        status="success", message="Event processed", incident_key="srv01/HTTP"
    )

    result = CliRunner().invoke(
        cli.root,
        [
            "trigger",
            "Some key",
            "some description",
            "--incident-key",
            "srv01/HTTP",
            "--client",
            "nagios",
            "--details",
            '{"disk": "97%"}',
            "--link",
            "https://example.com|runbook",
            "--image",
            "https://example.com/graph.png",
        ],
    )

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "outcome": "EventProcessed",
        "status": "success",
        "message": "Event processed",
        "incident_key": "srv01/HTTP",
    }
    settings = mock_events_api.from_settings.call_args.args[0]
    assert settings.events_url == "https://events.example.com/e"
    assert submitted_event(mock_events_api) == TriggerEvent(
        service_key="Some key",
        description="some description",
        incident_key="srv01/HTTP",
        client="nagios",
        details={"disk": "97%"},
        contexts=(
            LinkContext(href="https://example.com", text="runbook"),
            ImageContext(src="https://example.com/graph.png"),
        ),
    )


def test_trigger_invalid_details(mock_events_api: Any) -> None:
    result = CliRunner().invoke(
        cli.root, ["trigger", "Some key", "desc", "--details", "{nope"]
    )

    assert result.exit_code == 2
    assert "invalid JSON" in result.output
    mock_events_api.from_settings.assert_not_called()


def test_trigger_invalid_event(mock_events_api: Any) -> None:
    mock_events_api.from_settings.return_value.submit.return_value = InvalidEvent(
        status="invalid event",
        message="Event object is invalid",
        errors=("description missing",),
    )

    result = CliRunner().invoke(cli.root, ["trigger", "Some key", ""])

    assert result.exit_code == 1
    assert json.loads(result.output)["errors"] == ["description missing"]


@pytest.mark.parametrize("command", ["acknowledge", "resolve"])
def test_incident_commands_rate_limited(mock_events_api: Any, command: str) -> None:
    mock_events_api.from_settings.return_value.submit.return_value = RateLimited()

    result = CliRunner().invoke(cli.root, [command, "Some key", "srv01/HTTP"])

    assert result.exit_code == cli.EXIT_RATE_LIMITED
    assert json.loads(result.output) == {"outcome": "RateLimited"}
    event = submitted_event(mock_events_api)
    assert event.event_type == command
    assert event.incident_key == "srv01/HTTP"


def test_unexpected_outcome(mock_events_api: Any) -> None:
    mock_events_api.from_settings.return_value.submit.return_value = Unexpected(
        body="ConnectError: connection refused"
    )

    result = CliRunner().invoke(cli.root, ["resolve", "Some key", "srv01/HTTP"])

    assert result.exit_code == 1
    assert json.loads(result.output)["body"] == "ConnectError: connection refused"


def test_log_level_option(mock_events_api: Any, mock_setup_logging: Any) -> None:
    mock_events_api.from_settings.return_value.submit.return_value = RateLimited()

    CliRunner().invoke(cli.root, ["--log-level", "DEBUG", "resolve", "k", "i"])

    mock_setup_logging.assert_called_once_with("DEBUG", json_format=True)


def test_get_requires_token(mock_rest_api: Any) -> None:
    result = CliRunner().invoke(cli.root, ["get", "abilities"])

    assert result.exit_code == 2
    assert "token" in result.output
    mock_rest_api.from_settings.assert_not_called()


def test_get_user(mock_rest_api: Any, types_fixtures: Fixtures) -> None:
    data = types_fixtures.get_json("users.json")[2]
    api = mock_rest_api.from_settings.return_value.__enter__.return_value
    api.user.return_value = user_codec.decode(data)

    result = CliRunner().invoke(cli.root, ["get", "--token", "abc", "user", "PXPGF42"])

    assert result.exit_code == 0
    assert json.loads(result.output) == data
    assert mock_rest_api.from_settings.call_args.kwargs["token"] == "abc"
    api.user.assert_called_once_with("PXPGF42")
    mock_rest_api.from_settings.return_value.__exit__.assert_called_once()


def test_get_team_token_from_env(
    mock_rest_api: Any, types_fixtures: Fixtures, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PAGERSDUTY_API_TOKEN", "from-env")
    data = types_fixtures.get_json("teams.json")[1]
    api = mock_rest_api.from_settings.return_value.__enter__.return_value
    api.team.return_value = team_codec.decode(data)

    result = CliRunner().invoke(cli.root, ["get", "team", "P7W0ZIU"])

    assert result.exit_code == 0
    assert json.loads(result.output) == data
    settings = mock_rest_api.from_settings.call_args.args[0]
    assert settings.api_token == "from-env"


def test_get_abilities(mock_rest_api: Any) -> None:
    api = mock_rest_api.from_settings.return_value.__enter__.return_value
    api.abilities.return_value = ["teams", "urgencies"]

    result = CliRunner().invoke(cli.root, ["get", "--token", "abc", "abilities"])

    assert result.exit_code == 0
    assert json.loads(result.output) == ["teams", "urgencies"]


def test_parse_link() -> None:
    assert cli.parse_link(None, None, ("https://a", "https://b|B")) == [
        LinkContext(href="https://a"),
        LinkContext(href="https://b", text="B"),
    ]


def test_parse_link_missing_href() -> None:
    with pytest.raises(click.BadParameter):
        cli.parse_link(None, None, ("|text",))


def test_get_unexpected_resource_type(mock_rest_api: Any) -> None:
    api = mock_rest_api.from_settings.return_value.__enter__.return_value
    api.team.side_effect = UnexpectedResourceTypeError("squad", "team")

    result = CliRunner().invoke(cli.root, ["get", "--token", "abc", "team", "PQ9K7I8"])

    assert result.exit_code == 1
    assert result.output == "Error: unexpected resource type: `squad`\n"


def test_get_not_found(mock_rest_api: Any) -> None:
    request = httpx.Request("GET", "https://api.pagerduty.com/users/PNOPE00")
    response = httpx.Response(404, request=request)
    api = mock_rest_api.from_settings.return_value.__enter__.return_value
    api.user.side_effect = httpx.HTTPStatusError(
        "404 Not Found", request=request, response=response
    )

    result = CliRunner().invoke(cli.root, ["get", "--token", "abc", "user", "PNOPE00"])

    assert result.exit_code == 1
    assert result.output == "Error: 404 Not Found\n"
    assert not isinstance(result.exception, httpx.HTTPStatusError)
