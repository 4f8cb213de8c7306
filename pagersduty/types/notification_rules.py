"""Notification rule resources."""

from typing import Any, ClassVar, Self

from pagersduty.types.contact_methods import ContactMethodVariant, contact_method_codec
from pagersduty.types.reference import ResourceCodec, ResourceUnion, ResourceVariant


class NotificationRuleUnion(ResourceUnion):
    start_delay_in_minutes: int | None = None
    contact_method: Any = None
    urgency: str | None = None


class NotificationRuleReference(ResourceVariant):
    wire_types: ClassVar[frozenset[str]] = frozenset({
        "assignment_notification_rule_reference"
    })


class NotificationRule(ResourceVariant):
    """A rule notifying a user through a contact method.

    Attributes:
        start_delay_in_minutes: The delay before firing the rule, in minutes
        contact_method: The contact method invoked by the rule
        urgency: Incident urgency the rule applies to, `high` or `low`
    """

    wire_types: ClassVar[frozenset[str]] = frozenset({"assignment_notification_rule"})

    start_delay_in_minutes: int
    contact_method: ContactMethodVariant
    urgency: str

    @classmethod
    def from_union(cls, union: NotificationRuleUnion) -> Self:  # type: ignore[override]
        return cls(
            reference=union.reference,
            start_delay_in_minutes=union.require("start_delay_in_minutes"),
            contact_method=contact_method_codec.decode(union.require("contact_method")),
            urgency=union.require("urgency"),
        )


NotificationRuleVariant = NotificationRuleReference | NotificationRule

notification_rule_codec = ResourceCodec[NotificationRuleVariant](
    family="notification rule",
    union=NotificationRuleUnion,
    variants=[NotificationRuleReference, NotificationRule],
)
