import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables from .env file (if it exists)
load_dotenv()

# Allow for user to set the environment variable prefix if they desire
ENV_VAR_PREFIX = "QUERYGEN_"

# Default configuration values
DEFAULT_INDEX = "federated:rh_jira"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Config:
    """Configuration class for the query generator."""

    def __init__(self) -> None:
        """Load configuration values from environment"""
        self.env_var_prefix = os.environ.get(
            f"{ENV_VAR_PREFIX}ENV_VAR_PREFIX", ENV_VAR_PREFIX
        )

        self.index = os.environ.get(f"{self.env_var_prefix}INDEX", DEFAULT_INDEX)
        # None sends log output to stderr
        self.log_file = os.environ.get(f"{self.env_var_prefix}LOG_FILE") or None
        self.log_level = os.environ.get(
            f"{self.env_var_prefix}LOG_LEVEL", DEFAULT_LOG_LEVEL
        ).upper()
        self.log_format = os.environ.get(
            f"{self.env_var_prefix}LOG_FORMAT", DEFAULT_LOG_FORMAT
        )

        logging.basicConfig(
            format=self.log_format,
            filename=self.log_file,
            level=self.log_level,
        )
        self.logger = logging.getLogger(__name__)
        self.logger.setLevel(self.log_level)

        if self.log_level == "DEBUG":
            self.logger.debug("Configuration loaded:")
            for attr in dir(self):
                if not attr.startswith("_") and not callable(getattr(self, attr)):
                    self.logger.debug(f"  {attr}: {getattr(self, attr)}")
        else:
            self.logger.info("Configuration loaded.")


@lru_cache(maxsize=1)
def get_config() -> Config:
    return Config()
