from __future__ import annotations

from artevo.evolution.scheduler.config import SchedulerConfig
from artevo.evolution.scheduler.core import EvolutionScheduler
from artevo.evolution.scheduler.metrics import SchedulerMetrics
from artevo.evolution.scheduler.state import SchedulerState
