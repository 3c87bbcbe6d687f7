from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Artifact(BaseModel):
    """A single generative-art piece tracked by the registry."""

    id: int = Field(..., ge=1, frozen=True, description="Sequential artifact id")
    generation: int = Field(
        default=0, ge=0, frozen=True, description="Generation number"
    )
    birth_tick: int = Field(
        default=0, ge=0, frozen=True, description="Scheduler tick at creation"
    )
    genome: int = Field(..., ge=0, frozen=True, description="DNA value")
    interaction_count: int = Field(
        default=0, ge=0, description="Number of recorded interactions"
    )
    parent_a: int = Field(default=0, ge=0, frozen=True, description="First parent id")
    parent_b: int = Field(default=0, ge=0, frozen=True, description="Second parent id")
    is_genesis: bool = Field(
        default=False, frozen=True, description="Created during genesis seeding"
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        frozen=True,
        description="When the artifact was created",
    )

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        validate_default=True,
    )

    @model_validator(mode="after")
    def check_lineage(self) -> "Artifact":
        has_a, has_b = self.parent_a != 0, self.parent_b != 0
        if has_a != has_b:
            raise ValueError("parent_a and parent_b must both be set or both be 0")
        if self.is_genesis:
            if has_a or self.generation != 0:
                raise ValueError("Genesis artifacts have no parents and generation 0")
        else:
            if not has_a or self.generation == 0:
                raise ValueError("Bred artifacts need two parents and generation >= 1")
            if self.id in (self.parent_a, self.parent_b):
                raise ValueError("An artifact cannot be its own parent")
        return self

    @property
    def parents(self) -> tuple[int, int]:
        """Parent ids, ``(0, 0)`` for genesis artifacts."""
        return (self.parent_a, self.parent_b)

    @property
    def is_root(self) -> bool:
        return not self.parent_a

    def to_dict(self) -> dict[str, Any]:
        """Convert the artifact to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Artifact":
        return cls.model_validate(data)

    @classmethod
    def create_genesis(cls, artifact_id: int, genome: int, tick: int) -> "Artifact":
        return cls(
            id=artifact_id,
            generation=0,
            birth_tick=tick,
            genome=genome,
            is_genesis=True,
        )

    @classmethod
    def create_child(
        cls,
        artifact_id: int,
        parents: tuple["Artifact", "Artifact"],
        genome: int,
        generation: int,
        tick: int,
    ) -> "Artifact":
        """Create a bred artifact from two parent artifacts."""
        parent_a, parent_b = parents
        return cls(
            id=artifact_id,
            generation=generation,
            birth_tick=tick,
            genome=genome,
            parent_a=parent_a.id,
            parent_b=parent_b.id,
        )

    def copy_view(self) -> "Artifact":
        """Detached copy handed out to callers."""
        return self.model_copy()

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Artifact) and self.id == other.id
