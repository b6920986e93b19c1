import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_OUTPUT_DIR = "rmi"
DEFAULT_EXTENSION = "js"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


@dataclass
class StubGenConfig:
    """
    Settings for one run. Environment variables give the defaults, command
    line options override them.
    """
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    extension: str = DEFAULT_EXTENSION
    encoding: str = DEFAULT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StubGenConfig":
        env = os.environ if environ is None else environ
        return cls(
            output_dir=Path(env.get("RMI_STUBGEN_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)),
            extension=env.get("RMI_STUBGEN_EXTENSION", DEFAULT_EXTENSION).lstrip("."),
            encoding=env.get("RMI_STUBGEN_ENCODING", DEFAULT_ENCODING),
            log_level=parse_log_level(env.get("RMI_STUBGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        )


def parse_log_level(value: str) -> str:
    """Normalized level name; unknown names fall back to INFO."""
    level = value.strip().upper()
    # getLevelName maps a registered name to its number, anything else to "Level <name>"
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown log level %r, using %s", value, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level
