"""Team resources."""

from typing import ClassVar, Self

from pagersduty.types.reference import ResourceCodec, ResourceUnion, ResourceVariant


class TeamUnion(ResourceUnion):
    name: str | None = None
    description: str | None = None


class TeamReference(ResourceVariant):
    """A team summarized as a reference."""

    wire_types: ClassVar[frozenset[str]] = frozenset({"team_reference"})


class Team(ResourceVariant):
    """A fully populated team.

    Attributes:
        name: The name of the team
        description: The description of the team
    """

    wire_types: ClassVar[frozenset[str]] = frozenset({"team"})

    name: str
    description: str | None = None

    @classmethod
    def from_union(cls, union: TeamUnion) -> Self:  # type: ignore[override]
        return cls(
            reference=union.reference,
            name=union.require("name"),
            description=union.description,
        )


TeamVariant = TeamReference | Team

team_codec = ResourceCodec[TeamVariant](
    family="team",
    union=TeamUnion,
    variants=[TeamReference, Team],
)
