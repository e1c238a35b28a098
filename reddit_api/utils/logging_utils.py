import logging
import logging.config
from pathlib import Path
from typing import Optional

import yaml

from ..config.settings import settings


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None) -> None:
    """
    Set up logging configuration from a YAML file.

    Falls back to ``logging.basicConfig`` when the file is missing or cannot be
    applied, so the service always starts with usable logging.

    Args:
        config_path (Path): Path to the logging configuration YAML file.
        level (str): Optional override for the ``reddit_api`` logger level.
    """
    config_path = Path(config_path or settings.LOGGING_CONFIG_PATH)
    level = (level or settings.LOG_LEVEL).upper()

    if config_path.exists():
        try:
            with open(config_path, 'rt') as f:
                log_config = yaml.safe_load(f.read())
            logging.config.dictConfig(log_config)
            logging.getLogger("reddit_api").setLevel(level)
            logging.getLogger(__name__).info(f"Logging configured successfully from {config_path}")
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logging.basicConfig(level=level)
            logging.error(f"Error loading logging configuration from {config_path}: {e}. Using basicConfig.")
    else:
        logging.basicConfig(level=level)
        logging.warning(f"Logging configuration file not found at {config_path}. Using basicConfig.")
