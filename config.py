import logging
import os

import yaml

from exceptions import ConfigError
from scoring_schema import ScoringConfig, validate_config

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "scoring.yaml")

logger = logging.getLogger(__name__)


class ScoringConfigLoader:
    """Load the scoring configuration from a YAML file.

    The loader validates the whole document up front so that a missing or
    malformed option is reported once, at load time, instead of surfacing
    in the middle of a scoring call.
    """

    def __init__(self, path: str = DEFAULT_CONFIG_PATH) -> None:
        self.path = path

    def read(self) -> dict:
        if not os.path.exists(self.path):
            raise ConfigError(f"configuration file not found: {self.path}")
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"invalid YAML in {self.path}: {e}") from e
        return data or {}

    def load(self) -> ScoringConfig:
        data = self.read()
        try:
            config = validate_config(data)
        except ConfigError:
            logger.error("Rejected scoring configuration %s", self.path)
            raise
        logger.info("Loaded scoring configuration %s (version %s)", self.path, config.version)
        return config
