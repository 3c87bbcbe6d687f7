from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class SchedulerMetrics(BaseModel):
    """Counters describing scheduler activity."""

    interactions: int = Field(default=0, description="Total recorded interactions")
    evolutions: int = Field(default=0, description="Total successful evolutions")
    auto_evolutions: int = Field(
        default=0, description="Evolutions triggered from inside interact()"
    )
    mutations_applied: int = Field(
        default=0, description="Evolutions whose genome was mutated"
    )
    cadence_rejections: int = Field(
        default=0, description="evolve() calls refused because the cadence was not reached"
    )
    last_evolution_time: datetime | None = Field(
        default=None, description="Wall-clock time of the last evolution"
    )

    def to_dict(self) -> dict[str, int | str | None]:
        return {
            "interactions": self.interactions,
            "evolutions": self.evolutions,
            "auto_evolutions": self.auto_evolutions,
            "mutations_applied": self.mutations_applied,
            "cadence_rejections": self.cadence_rejections,
            "last_evolution_time": (
                self.last_evolution_time.isoformat()
                if self.last_evolution_time
                else None
            ),
        }
