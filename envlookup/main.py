"""Example entry point: bind a small configuration from the environment."""

import logging
import sys
from dataclasses import dataclass, field

from dotenv import load_dotenv

from envlookup.core.errors import EnvLookupError
from envlookup.core.schema import env_field
from envlookup.core.validators import add_validator
from envlookup.core.walker import lookup
from envlookup.utils.rich_logging import configure_logging, render_errors

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogLevelValidator:
    """Accepts an unset value or a standard logging level name, in any case."""

    def validate(self, env_name: str, value: str) -> str | None:
        if value == "" or value.upper() in LOG_LEVELS:
            return None
        return f"{env_name} is not a log level: {value}"


@dataclass
class LogConfig:
    level: str = env_field("LOG_LEVEL,logLevel", default="INFO")


@dataclass
class DemoConfig:
    name: str = env_field("name,required", default="")
    email: str = env_field("email,required", default="")
    gender: str = env_field("gender,expectedValues=male female", default="")
    enabled: bool = env_field("enabled", default=False)
    log: LogConfig = field(default_factory=LogConfig)


def main() -> None:
    """Load .env, bind DemoConfig and report the result."""
    load_dotenv()
    configure_logging()
    add_validator("logLevel", lambda _args: LogLevelValidator())

    try:
        cfg = lookup(DemoConfig())
    except EnvLookupError as exc:
        render_errors(exc.errors)
        logger.error("Configuration has %d error(s)", len(exc.errors))
        sys.exit(1)

    logging.getLogger().setLevel(cfg.log.level.upper())
    logger.info("Configuration loaded: %s", cfg)


if __name__ == "__main__":
    main()
