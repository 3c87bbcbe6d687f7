from enum import Enum


class SchedulerState(str, Enum):
    """Cadence state of the evolution scheduler."""

    # Interval since the last evolution has not elapsed yet
    DORMANT = "dormant"

    # Interval elapsed; the next evolve() (or interaction) breeds a new artifact
    DUE = "due"


def state_for(current_tick: int, last_evolution_tick: int, interval: int) -> SchedulerState:
    """Derive the scheduler state from the clock and the last evolution tick."""
    if current_tick >= last_evolution_tick + interval:
        return SchedulerState.DUE
    return SchedulerState.DORMANT
