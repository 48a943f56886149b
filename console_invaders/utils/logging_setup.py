"""
Logging setup.

Game events go to a log file rather than the terminal, where they would
tear the frame being drawn.
"""

import logging
from pathlib import Path

from .config_loader import LoggingConfig


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure the root logger from a LoggingConfig.

    An empty log_file disables file output (messages at WARNING and above
    still reach stderr).
    """
    level = getattr(logging, config.level.upper(), logging.INFO)

    if not config.log_file:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
        return

    log_path = Path(config.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        filename=str(log_path),
        filemode="a",
    )
