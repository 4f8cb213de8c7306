"""Reference envelope and the two-phase resource codec.

Many resources returned by the PagerDuty REST API embed other resources,
either inlined in full or summarized as a reference. Both shapes share the
same five envelope fields (id, summary, type, self, html_url); the `type`
string tells which shape, and which family, follows.

Decoding happens in two phases:

1. The JSON object is validated into a permissive union record holding the
   envelope plus every field of every full variant of the family, all optional.
2. The `type` string selects the variant, which picks the fields it needs from
   the union record and rejects the record if a required one is absent.

See https://developer.pagerduty.com/docs/rest-api-v2/references/
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from pagersduty.errors import (
    MalformedResourceError,
    MissingFieldError,
    UnexpectedResourceTypeError,
)
from pagersduty.json_utils import json_dumps, json_loads


class Reference(BaseModel):
    """Envelope fields common to every resource representation.

    Attributes:
        id: Identifier assigned by PagerDuty
        summary: Short server-generated label, not guaranteed unique
        type: Discriminator naming the concrete shape (e.g. "team_reference")
        self_link: API URL the object is accessible at (wire name `self`)
        html_link: Web app URL of the object, absent for some kinds (wire name `html_url`)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    summary: str
    type: str
    self_link: str = Field(..., alias="self")
    html_link: str | None = Field(None, alias="html_url")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "summary": self.summary,
            "type": self.type,
            "self": self.self_link,
        }
        if self.html_link is not None:
            data["html_url"] = self.html_link
        return data


class ResourceUnion(Reference):
    """First-phase record: envelope plus optional family fields.

    Families subclass this and declare every field of every full variant as
    optional (default None). Unknown keys are ignored, but known ones must
    carry their JSON type as is (no coercion) under their wire name.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        strict=True,
        validate_by_alias=True,
        validate_by_name=False,
    )

    @property
    def reference(self) -> Reference:
        return Reference(
            id=self.id,
            summary=self.summary,
            type=self.type,
            self_link=self.self_link,
            html_link=self.html_link,
        )

    def require(self, field: str) -> Any:
        """Return a field the selected variant cannot do without.

        Raises:
            MissingFieldError: If the field is absent (or null) in the record
        """
        value = getattr(self, field)
        if value is None:
            raise MissingFieldError(field, self.type)
        return value


def _encode_value(value: Any) -> Any:
    if isinstance(value, ResourceVariant):
        return value.to_dict()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list | tuple):
        return [_encode_value(v) for v in value]
    return value


class ResourceVariant(BaseModel):
    """Base of every reference/full variant.

    The envelope is composed in as `reference`; subclasses add their own
    fields and list the `type` strings they materialize in `wire_types`.
    Reference variants need nothing else; full variants override from_union().
    """

    model_config = ConfigDict(frozen=True)

    wire_types: ClassVar[frozenset[str]] = frozenset()

    reference: Reference

    @model_validator(mode="after")
    def validate_wire_type(self) -> Self:
        if self.reference.type not in self.wire_types:
            raise ValueError(
                f"{type(self).__name__} cannot carry resource type `{self.reference.type}`"
            )
        return self

    @property
    def id(self) -> str:
        return self.reference.id

    @property
    def type(self) -> str:
        return self.reference.type

    @classmethod
    def from_union(cls, union: ResourceUnion) -> Self:
        return cls(reference=union.reference)

    def to_dict(self) -> dict[str, Any]:
        """Encode to a wire JSON object.

        Envelope fields come first, then the variant's own fields in
        declaration order. Absent optional fields are omitted, never null.
        """
        data = self.reference.to_dict()
        for name in type(self).model_fields:
            if name == "reference":
                continue
            value = getattr(self, name)
            if value is None:
                continue
            data[name] = _encode_value(value)
        return data


V = TypeVar("V", bound=ResourceVariant)


class ResourceCodec(Generic[V]):
    """Decoder/encoder for one resource family.

    Example:
        >>> team_codec.decode({"id": "PRJ4D5C", "summary": "ops",
        ...     "type": "team_reference", "self": "https://api.pagerduty.com/teams/PRJ4D5C"})
        TeamReference(reference=Reference(id='PRJ4D5C', ...))
    """

    def __init__(
        self,
        family: str,
        union: type[ResourceUnion],
        variants: Sequence[type[V]],
    ) -> None:
        self.family = family
        self._union = union
        self._dispatch: dict[str, type[V]] = {}
        for variant in variants:
            for wire_type in variant.wire_types:
                if wire_type in self._dispatch:
                    raise ValueError(f"duplicate {family} resource type `{wire_type}`")
                self._dispatch[wire_type] = variant

    @property
    def wire_types(self) -> frozenset[str]:
        return frozenset(self._dispatch)

    def _union_record(self, data: Any) -> ResourceUnion:
        if not isinstance(data, Mapping):
            raise MalformedResourceError(
                f"{self.family} must be a JSON object, got {type(data).__name__}"
            )
        try:
            return self._union.model_validate(data)
        except ValidationError as e:
            for error in e.errors():
                # explicit nulls count as absent
                if len(error["loc"]) == 1 and (
                    error["type"] == "missing" or error.get("input", ...) is None
                ):
                    raise MissingFieldError(
                        str(error["loc"][0]), data.get("type")
                    ) from e
            raise MalformedResourceError(f"invalid {self.family}: {e}") from e

    def decode(self, data: Any) -> V:
        """Decode a wire JSON object into the variant its `type` selects.

        Raises:
            MalformedResourceError: Input is not an object or fields are ill-typed
            MissingFieldError: A field required by the selected variant is absent
            UnexpectedResourceTypeError: `type` is not known to this family
        """
        union = self._union_record(data)
        variant = self._dispatch.get(union.type)
        if variant is None:
            raise UnexpectedResourceTypeError(union.type, self.family)
        try:
            return variant.from_union(union)
        except ValidationError as e:
            raise MalformedResourceError(f"invalid {union.type}: {e}") from e

    def decode_many(self, items: Iterable[Any]) -> list[V]:
        if not isinstance(items, Iterable) or isinstance(items, str | bytes | Mapping):
            raise MalformedResourceError(f"expected a list of {self.family} objects")
        return [self.decode(item) for item in items]

    def loads(self, text: str | bytes) -> V:
        return self.decode(json_loads(text))

    @staticmethod
    def encode(variant: V) -> dict[str, Any]:
        return variant.to_dict()

    def dumps(self, variant: V, *, indent: int | None = None) -> str:
        return json_dumps(self.encode(variant), indent=indent)
