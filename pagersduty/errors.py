"""Exceptions raised by pagersduty."""


class PagersDutyError(Exception):
    """Base exception for pagersduty errors."""


class DecodeError(PagersDutyError, ValueError):
    """A wire representation could not be turned into a resource variant."""


class MalformedResourceError(DecodeError):
    """Input is not valid JSON, not an object, or carries ill-typed fields."""


class UnexpectedResourceTypeError(DecodeError):
    """The `type` discriminator is not part of the family's vocabulary."""

    def __init__(self, resource_type: str, family: str) -> None:
        self.resource_type = resource_type
        self.family = family
        super().__init__(f"unexpected resource type: `{resource_type}`")


class MissingFieldError(DecodeError):
    """A field required by the selected variant is absent."""

    def __init__(self, field: str, resource_type: str | None = None) -> None:
        self.field = field
        self.resource_type = resource_type
        message = f"missing field `{field}`"
        if resource_type:
            message += f" for resource type `{resource_type}`"
        super().__init__(message)
