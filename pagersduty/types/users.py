"""User resources.

A full user embeds its teams, contact methods and notification rules, each
of which is itself a reference or a full object and is decoded by its own
family codec.
"""

from typing import Any, ClassVar, Self

from pagersduty.types.contact_methods import ContactMethodVariant, contact_method_codec
from pagersduty.types.notification_rules import (
    NotificationRuleVariant,
    notification_rule_codec,
)
from pagersduty.types.reference import ResourceCodec, ResourceUnion, ResourceVariant
from pagersduty.types.teams import TeamVariant, team_codec


class UserUnion(ResourceUnion):
    avatar_url: str | None = None
    color: str | None = None
    contact_methods: list[Any] | None = None
    description: str | None = None
    email: str | None = None
    invitation_sent: bool | None = None
    job_title: str | None = None
    name: str | None = None
    notification_rules: list[Any] | None = None
    role: str | None = None
    teams: list[Any] | None = None
    time_zone: str | None = None


class UserReference(ResourceVariant):
    wire_types: ClassVar[frozenset[str]] = frozenset({"user_reference"})


class User(ResourceVariant):
    """A fully populated user.

    Attributes:
        avatar_url: The URL of the user's avatar
        color: The schedule color
        contact_methods: The user's contact methods
        description: The user's bio
        email: The user's email address
        invitation_sent: The user has an outstanding invitation
        job_title: The user's title
        name: The name of the user
        notification_rules: The user's notification rules
        role: `admin`, `limited_user`, `owner`, `read_only_user` or `user`
        teams: Teams the user belongs to
        time_zone: The preferred time zone name
    """

    wire_types: ClassVar[frozenset[str]] = frozenset({"user"})

    avatar_url: str
    color: str
    contact_methods: tuple[ContactMethodVariant, ...]
    description: str | None = None
    email: str
    invitation_sent: bool
    job_title: str | None = None
    name: str
    notification_rules: tuple[NotificationRuleVariant, ...]
    role: str
    teams: tuple[TeamVariant, ...]
    time_zone: str

    @property
    def username(self) -> str:
        """Username part of the email (e.g. "jsmith" from "jsmith@example.com")."""
        return self.email.split("@", maxsplit=1)[0]

    @classmethod
    def from_union(cls, union: UserUnion) -> Self:  # type: ignore[override]
        return cls(
            reference=union.reference,
            avatar_url=union.require("avatar_url"),
            color=union.require("color"),
            contact_methods=tuple(
                contact_method_codec.decode_many(union.require("contact_methods"))
            ),
            description=union.description,
            email=union.require("email"),
            invitation_sent=union.require("invitation_sent"),
            job_title=union.job_title,
            name=union.require("name"),
            notification_rules=tuple(
                notification_rule_codec.decode_many(
                    union.require("notification_rules")
                )
            ),
            role=union.require("role"),
            teams=tuple(team_codec.decode_many(union.require("teams"))),
            time_zone=union.require("time_zone"),
        )


UserVariant = UserReference | User

user_codec = ResourceCodec[UserVariant](
    family="user",
    union=UserUnion,
    variants=[UserReference, User],
)
