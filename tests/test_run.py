import sys
from pathlib import Path

from hydra import compose, initialize_config_dir
from hydra.utils import instantiate

from artevo.evolution import BreedingEngine, PopularityParentSelector
from artevo.evolution.scheduler import SchedulerConfig
import run

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


def load_config(*overrides: str):
    with initialize_config_dir(config_dir=str(CONFIG_DIR), version_base=None):
        return compose(config_name="config", overrides=list(overrides))


def test_scheduler_config_instantiates():
    cfg = load_config("scheduler.evolution_interval=25")
    config = instantiate(cfg.scheduler)
    assert isinstance(config, SchedulerConfig)
    assert config.evolution_interval == 25
    assert config.max_genesis == 10
    assert isinstance(config.breeding_engine, BreedingEngine)
    assert isinstance(config.parent_selector, PopularityParentSelector)


def test_simulation_breeds_generations():
    cfg = load_config(
        "simulation.ticks=250",
        "scheduler.evolution_interval=50",
    )
    status = run.run_simulation(cfg)
    assert status["current_generation"] >= 1
    assert status["total_supply"] == 10 + status["current_generation"]
    assert status["tick"] == 250


def test_simulation_is_reproducible():
    cfg = load_config("simulation.ticks=120", "scheduler.evolution_interval=30")
    assert run.run_simulation(cfg)["interactions"] == run.run_simulation(cfg)["interactions"]


def test_progress_interval_resolves():
    cfg = load_config("simulation.ticks=35")
    assert cfg.simulation.progress_interval == 3
    assert load_config("simulation.ticks=5").simulation.progress_interval == 1


def test_setup_logger_writes_to_log_dir(tmp_path):
    from loguru import logger

    from artevo.utils.logger_setup import setup_logger

    log_file = setup_logger(log_dir=str(tmp_path / "logs"), level="DEBUG")
    logger.debug("[Test] hello")
    logger.remove()
    logger.add(sys.stderr)

    path = Path(log_file)
    assert path.parent == tmp_path / "logs"
    assert "[Test] hello" in path.read_text(encoding="utf-8")
