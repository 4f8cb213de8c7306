"""Contact method resources.

A contact method is a channel (email, phone, SMS, push notification) a user
is reached through. Each channel has its own full variant; all the reference
flavours collapse into ContactMethodReference, whose envelope keeps the exact
`type` string.
"""

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, StrictStr

from pagersduty.types.reference import ResourceCodec, ResourceUnion, ResourceVariant


class PushContactMethodSound(BaseModel):
    """A sound played by a push notification contact method.

    Attributes:
        file: The sound file name
        type: The type of sound, e.g. `alert_high_urgency` or `alert_low_urgency`
    """

    model_config = ConfigDict(frozen=True)

    file: StrictStr
    type: StrictStr


class ContactMethodUnion(ResourceUnion):
    address: str | None = None
    label: str | None = None
    send_short_email: bool | None = None
    send_html_email: bool | None = None
    blacklisted: bool | None = None
    country_code: int | None = None
    enabled: bool | None = None
    created_at: str | None = None
    device_type: str | None = None
    sounds: list[dict[str, Any]] | None = None


class ContactMethodReference(ResourceVariant):
    wire_types: ClassVar[frozenset[str]] = frozenset({
        "contact_method_reference",
        "email_contact_method_reference",
        "phone_contact_method_reference",
        "sms_contact_method_reference",
        "push_notification_contact_method_reference",
    })


class EmailContactMethod(ResourceVariant):
    """Email contact method.

    Attributes:
        address: The email address
        label: The label (e.g. "Work")
        send_short_email: Send an abbreviated message, for email-to-SMS gateways and pagers
        send_html_email: Send HTML emails
    """

    wire_types: ClassVar[frozenset[str]] = frozenset({"email_contact_method"})

    address: str
    label: str
    send_short_email: bool
    send_html_email: bool

    @classmethod
    def from_union(cls, union: ContactMethodUnion) -> Self:  # type: ignore[override]
        return cls(
            reference=union.reference,
            address=union.require("address"),
            label=union.require("label"),
            send_short_email=union.require("send_short_email"),
            send_html_email=union.require("send_html_email"),
        )


class PhoneContactMethod(ResourceVariant):
    """Phone contact method.

    Attributes:
        address: The phone number, without country code
        label: The label (e.g. "Mobile")
        country_code: The 1-to-3 digit country calling code
        blacklisted: PagerDuty blacklisted the number and sends nothing to it
    """

    wire_types: ClassVar[frozenset[str]] = frozenset({"phone_contact_method"})

    address: str
    label: str
    country_code: int
    blacklisted: bool

    @classmethod
    def from_union(cls, union: ContactMethodUnion) -> Self:  # type: ignore[override]
        return cls(
            reference=union.reference,
            address=union.require("address"),
            label=union.require("label"),
            country_code=union.require("country_code"),
            blacklisted=union.require("blacklisted"),
        )


class SmsContactMethod(ResourceVariant):
    """SMS contact method.

    Attributes:
        address: The phone number, without country code
        label: The label (e.g. "Mobile")
        country_code: The 1-to-3 digit country calling code
        blacklisted: PagerDuty blacklisted the number and sends nothing to it
        enabled: The phone can receive SMS messages
    """

    wire_types: ClassVar[frozenset[str]] = frozenset({"sms_contact_method"})

    address: str
    label: str
    country_code: int
    blacklisted: bool
    enabled: bool

    @classmethod
    def from_union(cls, union: ContactMethodUnion) -> Self:  # type: ignore[override]
        return cls(
            reference=union.reference,
            address=union.require("address"),
            label=union.require("label"),
            country_code=union.require("country_code"),
            blacklisted=union.require("blacklisted"),
            enabled=union.require("enabled"),
        )


class PushNotificationContactMethod(ResourceVariant):
    """Push notification contact method.

    Attributes:
        address: The device token
        label: The label (e.g. "Alex's iPhone")
        device_type: `ios` or `android`
        sounds: Sounds played per urgency
        blacklisted: PagerDuty blacklisted the device and sends nothing to it
        created_at: Time the contact method was created
    """

    wire_types: ClassVar[frozenset[str]] = frozenset({
        "push_notification_contact_method"
    })

    address: str
    label: str
    device_type: str
    sounds: tuple[PushContactMethodSound, ...]
    blacklisted: bool
    # TODO: parse as datetime once re-encoding can keep the original UTC offset format
    created_at: str

    @classmethod
    def from_union(cls, union: ContactMethodUnion) -> Self:  # type: ignore[override]
        return cls(
            reference=union.reference,
            address=union.require("address"),
            label=union.require("label"),
            device_type=union.require("device_type"),
            sounds=tuple(union.require("sounds")),
            blacklisted=union.require("blacklisted"),
            created_at=union.require("created_at"),
        )


ContactMethodVariant = (
    ContactMethodReference
    | EmailContactMethod
    | PhoneContactMethod
    | SmsContactMethod
    | PushNotificationContactMethod
)

contact_method_codec = ResourceCodec[ContactMethodVariant](
    family="contact method",
    union=ContactMethodUnion,
    variants=[
        ContactMethodReference,
        EmailContactMethod,
        PhoneContactMethod,
        SmsContactMethod,
        PushNotificationContactMethod,
    ],
)
