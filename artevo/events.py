"""Notifications emitted by the evolution core."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Literal, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field


class _Event(BaseModel):
    tick: int = Field(..., ge=0, description="Scheduler tick when the event fired")

    model_config = ConfigDict(frozen=True, extra="forbid")


class ArtifactCreated(_Event):
    kind: Literal["artifact_created"] = "artifact_created"
    artifact_id: int
    generation: int
    genome: int
    parent_a: int = 0
    parent_b: int = 0


class EvolutionTriggered(_Event):
    kind: Literal["evolution_triggered"] = "evolution_triggered"
    artifact_id: int
    generation: int


class Interaction(_Event):
    kind: Literal["interaction"] = "interaction"
    artifact_id: int
    interaction_count: int


Event = Union[ArtifactCreated, EvolutionTriggered, Interaction]


class EventSink(ABC):
    """Receiver of core notifications."""

    @abstractmethod
    def publish(self, event: Event) -> None: ...


class LoggingEventSink(EventSink):
    def __init__(self, level: str = "INFO") -> None:
        self.level = level

    def publish(self, event: Event) -> None:
        logger.log(self.level, "[Event] {} {}", event.kind, event.model_dump(exclude={"kind"}))


class CollectingEventSink(EventSink):
    """Keeps every event in memory, in publication order."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def publish(self, event: Event) -> None:
        self.events.append(event)

    def of_kind(self, kind: str) -> list[Event]:
        return [e for e in self.events if e.kind == kind]

    def clear(self) -> None:
        self.events.clear()


class FanOutEventSink(EventSink):
    def __init__(self, sinks: Iterable[EventSink]) -> None:
        self.sinks = list(sinks)

    def publish(self, event: Event) -> None:
        for sink in self.sinks:
            sink.publish(event)
