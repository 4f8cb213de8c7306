"""Tests for pagersduty.types.teams."""

import pytest

from pagersduty.errors import MissingFieldError
from pagersduty.types import Reference, Team, TeamReference, team_codec
from tests.fixtures import Fixtures


def test_decode_team_reference() -> None:
    team = team_codec.decode({
        "id": "PRJ4D5C",
        "summary": "ops",
        "type": "team_reference",
        "self": "https://api.pagerduty.com/teams/PRJ4D5C",
        "html_url": "https://webdemo.pagerduty.com/teams/PRJ4D5C",
    })

    assert team == TeamReference(
        reference=Reference(
            id="PRJ4D5C",
            summary="ops",
            type="team_reference",
            self_link="https://api.pagerduty.com/teams/PRJ4D5C",
            html_link="https://webdemo.pagerduty.com/teams/PRJ4D5C",
        )
    )
    assert not hasattr(team, "name")
    assert not hasattr(team, "description")


def test_decode_team_reference_discards_full_fields() -> None:
    team = team_codec.decode({
        "id": "PRJ4D5C",
        "summary": "ops",
        "type": "team_reference",
        "self": "https://api.pagerduty.com/teams/PRJ4D5C",
        "name": "ops",
    })
    assert isinstance(team, TeamReference)
    assert "name" not in team.to_dict()


def test_serde(types_fixtures: Fixtures) -> None:
    data = types_fixtures.get_json("teams.json")

    teams = team_codec.decode_many(data)

    assert [type(t) for t in teams] == [TeamReference, Team, Team]
    assert isinstance(teams[1], Team)
    assert teams[1].name == "Monitoring Tools Team"
    assert teams[1].description is None
    assert isinstance(teams[2], Team)
    assert teams[2].description == "All engineering"
    assert [team_codec.encode(t) for t in teams] == data


def test_decode_team_missing_name() -> None:
    with pytest.raises(MissingFieldError) as e:
        team_codec.decode({
            "id": "P7W0ZIU",
            "summary": "Monitoring Tools Team",
            "type": "team",
            "self": "https://api.pagerduty.com/teams/P7W0ZIU",
            "description": "no name",
        })
    assert e.value.field == "name"


def test_encode_team_omits_absent_description() -> None:
    team = Team(
        reference=Reference(
            id="P7W0ZIU",
            summary="Monitoring Tools Team",
            type="team",
            self_link="https://api.pagerduty.com/teams/P7W0ZIU",
        ),
        name="Monitoring Tools Team",
    )
    assert team_codec.encode(team) == {
        "id": "P7W0ZIU",
        "summary": "Monitoring Tools Team",
        "type": "team",
        "self": "https://api.pagerduty.com/teams/P7W0ZIU",
        "name": "Monitoring Tools Team",
    }


def test_encode_then_decode_is_identity() -> None:
    team = Team(
        reference=Reference(
            id="PQ9K7I8",
            summary="Engineering",
            type="team",
            self_link="https://api.pagerduty.com/teams/PQ9K7I8",
            html_link="https://webdemo.pagerduty.com/teams/PQ9K7I8",
        ),
        name="Engineering",
        description="All engineering",
    )
    assert team_codec.decode(team_codec.encode(team)) == team
