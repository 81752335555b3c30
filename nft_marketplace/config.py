"""
Runtime settings for the deployment runner.

Values come from the process environment, after loading a ``.env`` file
from the working directory when one exists.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .artifacts.loader import get_artifacts_dir

DEFAULT_RPC_URL = "http://127.0.0.1:8545"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    rpc_url: str
    artifacts_dir: Path
    log_level: str


def load_settings() -> Settings:
    """
    Build the settings for a deployment run.

    Returns:
        Settings with the RPC endpoint, artifacts directory and log level
    """
    load_dotenv()

    return Settings(
        rpc_url=os.getenv("RPC_URL", DEFAULT_RPC_URL),
        artifacts_dir=get_artifacts_dir(),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
