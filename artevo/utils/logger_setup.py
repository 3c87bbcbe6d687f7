"""loguru sinks for simulation runs: console plus a rotating log file."""

from datetime import datetime, timezone
import os
import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"
COLOR_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<yellow>{line}</yellow> | <level>{message}</level>"
)


def setup_logger(
    log_dir: str = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
) -> str:
    """Replace loguru's default sink with console and file sinks.

    The console is colored only when attached to a terminal.

    Returns:
        Path to the log file
    """
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"artevo_{timestamp}.log")

    logger.remove()
    tty = sys.stdout.isatty()
    logger.add(
        sys.stdout,
        level=level,
        format=COLOR_FORMAT if tty else LOG_FORMAT,
        colorize=tty,
    )
    logger.add(
        log_file,
        level=level,
        format=LOG_FORMAT,
        rotation=rotation,
        retention=retention,
        compression="zip",
        encoding="utf-8",
    )

    logger.info("Logging to console and {}", log_file)
    return log_file
