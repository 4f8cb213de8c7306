"""PagerDuty REST resource types.

Every resource family comes as a reference variant (envelope only) and one or
more full variants, discriminated by the `type` field, with a codec object
converting to and from wire JSON.

Example:
    >>> from pagersduty.types import team_codec
    >>> team = team_codec.decode(data)
    >>> team_codec.encode(team) == data
    True
"""

from pagersduty.types.contact_methods import (
    ContactMethodReference,
    ContactMethodVariant,
    EmailContactMethod,
    PhoneContactMethod,
    PushContactMethodSound,
    PushNotificationContactMethod,
    SmsContactMethod,
    contact_method_codec,
)
from pagersduty.types.notification_rules import (
    NotificationRule,
    NotificationRuleReference,
    NotificationRuleVariant,
    notification_rule_codec,
)
from pagersduty.types.reference import (
    Reference,
    ResourceCodec,
    ResourceUnion,
    ResourceVariant,
)
from pagersduty.types.teams import Team, TeamReference, TeamVariant, team_codec
from pagersduty.types.users import User, UserReference, UserVariant, user_codec

__all__ = [
    "ContactMethodReference",
    "ContactMethodVariant",
    "EmailContactMethod",
    "NotificationRule",
    "NotificationRuleReference",
    "NotificationRuleVariant",
    "PhoneContactMethod",
    "PushContactMethodSound",
    "PushNotificationContactMethod",
    "Reference",
    "ResourceCodec",
    "ResourceUnion",
    "ResourceVariant",
    "SmsContactMethod",
    "Team",
    "TeamReference",
    "TeamVariant",
    "User",
    "UserReference",
    "UserVariant",
    "contact_method_codec",
    "notification_rule_codec",
    "team_codec",
    "user_codec",
]
