import random
import time

import hydra
from hydra.utils import instantiate
from loguru import logger
from omegaconf import DictConfig

from artevo.config.resolvers import register_resolvers
from artevo.entropy import EntropyProvider, ManualClock
from artevo.events import CollectingEventSink, FanOutEventSink, LoggingEventSink
from artevo.evolution.scheduler import EvolutionScheduler, SchedulerConfig
from artevo.registry import ArtifactRegistry
from artevo.utils.logger_setup import setup_logger


def run_simulation(cfg: DictConfig) -> dict[str, object]:
    start_time = time.time()

    logger.info("=" * 80)
    logger.info("ArtEvo Simulation")
    logger.info("=" * 80)

    logger.info("Step 1/3: Initializing components...")
    clock: ManualClock = instantiate(cfg.clock)
    # Entropy must read the same clock instance the scheduler advances.
    entropy: EntropyProvider = instantiate(cfg.entropy, clock=clock)
    scheduler_config: SchedulerConfig = instantiate(cfg.scheduler, _recursive_=True)

    collector = CollectingEventSink()
    sinks = [collector]
    if cfg.simulation.log_events:
        sinks.append(LoggingEventSink())
    scheduler = EvolutionScheduler(
        registry=ArtifactRegistry(),
        entropy=entropy,
        clock=clock,
        config=scheduler_config,
        event_sink=FanOutEventSink(sinks),
    )
    logger.info("Step 1/3: Complete")

    logger.info("Step 2/3: Seeding genesis...")
    genesis = scheduler.seed_genesis(cfg.simulation.genesis_count)
    logger.info(f"Step 2/3: Seeded {len(genesis)} genesis artifacts")

    logger.info("Step 3/3: Simulating interactions...")
    rng = random.Random(cfg.seed)
    for _ in range(cfg.simulation.ticks):
        tick = clock.advance()
        if tick % cfg.simulation.progress_interval == 0:
            logger.info(
                "  tick={} generation={} supply={}",
                tick,
                scheduler.current_generation,
                scheduler.registry.total_supply,
            )
        supply = scheduler.registry.total_supply
        for _ in range(rng.randint(0, cfg.simulation.max_interactions_per_tick)):
            scheduler.interact(rng.randint(1, supply))

    status = scheduler.get_status()
    top = scheduler.fitness.ranking()[:5]
    logger.info(f"Step 3/3: Done in {time.time() - start_time:.2f}s")
    logger.info(
        "Generations={}, supply={}, events={}",
        status["current_generation"],
        status["total_supply"],
        len(collector.events),
    )
    for artifact_id in top:
        artifact = scheduler.get_artifact(artifact_id)
        props = scheduler.get_properties(artifact_id)
        logger.info(
            "  #{} gen={} interactions={} hue={} pattern={} complexity={} size={}",
            artifact.id,
            artifact.generation,
            artifact.interaction_count,
            props.color_hue,
            props.pattern,
            props.complexity,
            props.size_multiplier,
        )
    return status


register_resolvers()


@hydra.main(config_path="config", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    setup_logger(log_dir=cfg.logging.dir, level=cfg.logging.level)
    try:
        run_simulation(cfg)
    except KeyboardInterrupt:
        logger.info("Simulation interrupted by user")
    except Exception as e:  # pylint: disable=broad-except
        logger.exception(f"Simulation failed: {e}")
        raise


if __name__ == "__main__":
    main()
